"""JSON-RPC 2.0 envelope types for the Zabbix API."""

from dataclasses import dataclass, field
from typing import Any

# Marker for "no auth field in the envelope", distinct from an explicit null
NO_AUTH = object()


@dataclass
class Request:
    """JSON-RPC 2.0 request envelope.

    Attributes:
        jsonrpc: Protocol version, always "2.0".
        method: Remote procedure name, e.g. "host.get".
        params: Keyed (object) or positional (array) parameters.
        id: Request identifier, a string of digits.
        auth: Session token, None for an explicit null, or NO_AUTH when the
            method is anonymous and the field must be omitted.
    """

    jsonrpc: str
    method: str
    params: dict[str, Any] | list[Any] = field(default_factory=dict)
    id: str | None = None
    auth: Any = NO_AUTH

    @property
    def has_auth(self) -> bool:
        return self.auth is not NO_AUTH


@dataclass
class Response:
    """JSON-RPC 2.0 response envelope.

    Attributes:
        jsonrpc: Protocol version as reported by the server.
        id: Request identifier echoed back.
        result: Result of the method call (mutually exclusive with error).
        error: Error object if the call failed (mutually exclusive with result).
    """

    jsonrpc: str | None
    id: str | int | None
    result: Any | None = None
    error: dict[str, Any] | None = None
