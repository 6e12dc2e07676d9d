"""JSON-RPC 2.0 request building and response decoding for the Zabbix API.

The Zabbix API distinguishes between keyed (object) parameters, e.g.
``host.get {"output": "extend"}``, and positional (array) parameters, e.g.
``host.delete ["10084", "10085"]``. normalize_params() preserves that
distinction while merging session-wide default parameters into object-style
calls only.
"""

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from zabbix_api.core.constants import JSONRPC_VERSION
from zabbix_api.core.errors import ApplicationError, DecodeError
from zabbix_api.rpc.types import NO_AUTH, Request, Response

logger = logging.getLogger(__name__)

# Code reported when an error object carries none
APPLICATION_ERROR = -32500

_SCALAR_TYPES = (str, int, float, bool)


def normalize_params(
    params: Any,
    default_params: Mapping[str, Any] | None = None,
) -> dict[str, Any] | list[Any]:
    """Convert caller-supplied params into a JSON-RPC params value.

    Rules:
    - None, or an empty collection, becomes an empty object
    - a scalar becomes a one-element array
    - a mapping is kept, lists and tuples become lists
    - anything else is treated as empty

    Default params are merged underneath mappings and empty collections
    (caller keys win). Non-empty arrays pass through untouched, since
    methods like ``host.delete`` expect a bare array of IDs.

    Normalizing an already normalized value returns an equal value.

    Args:
        params: Raw params as given by the caller.
        default_params: Session-wide defaults.

    Returns:
        A new dict or list; the caller's object is never mutated.
    """
    normalized: dict[str, Any] | list[Any]
    if isinstance(params, _SCALAR_TYPES):
        normalized = [params]
    elif isinstance(params, Mapping):
        normalized = dict(params)
    elif isinstance(params, (list, tuple)):
        normalized = list(params)
    else:
        normalized = {}

    if isinstance(normalized, list) and normalized:
        return normalized

    merged: dict[str, Any] = dict(default_params or {})
    if isinstance(normalized, dict):
        merged.update(normalized)
    return merged


class RequestIdGenerator:
    """Timestamp-derived request ids, strictly increasing per instance.

    Ids are the current time with four decimal places and the dot removed
    (e.g. ``"17290000001234"``). Clocks coarser than 100us could hand out
    the same value twice in a row, so a repeated value is bumped by one.
    """

    def __init__(self) -> None:
        self._last = 0

    def next_id(self) -> str:
        candidate = int(f"{time.time():.4f}".replace(".", ""))
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


def build_request(
    method: str,
    params: dict[str, Any] | list[Any],
    request_id: str,
    auth: bool,
    token: str = "",
) -> Request:
    """Build a request envelope.

    ``auth`` controls whether the envelope carries an ``auth`` field at all;
    when it does, the value is the token or None if no token is set yet.
    """
    return Request(
        jsonrpc=JSONRPC_VERSION,
        method=method,
        params=params,
        id=request_id,
        auth=(token or None) if auth else NO_AUTH,
    )


def request_to_dict(request: Request) -> dict[str, Any]:
    """Convert a Request into the JSON-serializable wire structure."""
    data: dict[str, Any] = {
        "jsonrpc": request.jsonrpc,
        "method": request.method,
        "params": request.params,
        "id": request.id,
    }
    if request.has_auth:
        data["auth"] = request.auth
    return data


def decode_body(body: str) -> Any:
    """Decode a response body, requiring a JSON object or array.

    Raises:
        DecodeError: If the body is not JSON, or is a JSON scalar.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Response body could not be parsed since the JSON structure "
            f"could not be decoded: {body[:500]}",
            body,
        ) from e

    if not isinstance(data, (dict, list)):
        raise DecodeError(
            f"Response must be a JSON object or array, got: {type(data).__name__}",
            body,
        )
    return data


def parse_response(body: str) -> Response:
    """Parse a response body into a Response envelope.

    Raises:
        DecodeError: If the body is not JSON, or the envelope does not carry
            exactly one of ``result`` and ``error``.
    """
    data = decode_body(body)

    if not isinstance(data, dict):
        raise DecodeError("Batch responses are not supported, expected a JSON object", body)

    has_result = "result" in data
    has_error = "error" in data
    if has_result and has_error:
        raise DecodeError("Response cannot have both 'result' and 'error'", body)
    if not has_result and not has_error:
        raise DecodeError("Response must have either 'result' or 'error'", body)

    error = data.get("error")
    if has_error and not isinstance(error, dict):
        raise DecodeError(f"error must be an object, got: {type(error).__name__}", body)

    return Response(
        jsonrpc=data.get("jsonrpc"),
        id=data.get("id"),
        result=data.get("result"),
        error=error,
    )


def check_response(response: Response) -> Any:
    """Return the result of a response, raising on a remote error.

    Raises:
        ApplicationError: If the response carries an ``error`` object.
    """
    if response.error is not None:
        error = response.error
        raise ApplicationError(
            error.get("code", APPLICATION_ERROR),
            str(error.get("message", "") or ""),
            str(error.get("data", "") or ""),
        )
    return response.result


def rekey_result(result: Any, key_field: str | None) -> Any:
    """Re-index a list of objects by one of their fields.

    ``[{"hostid": "1", ...}, {"hostid": "2", ...}]`` keyed on ``hostid``
    becomes ``{"1": {...}, "2": {...}}``. Anything else is returned
    unchanged: a missing key field, a result that is not a list, an empty
    list, or a list with any element that is not an object carrying the
    field.

    Every element is checked, not just the first one, so a mixed list is
    never half re-keyed or failed with a KeyError partway through.
    """
    if not key_field or not isinstance(result, list) or not result:
        return result

    if not all(isinstance(item, dict) and key_field in item for item in result):
        logger.debug("Result not re-keyed: not every element has field %r", key_field)
        return result

    return {item[key_field]: item for item in result}
