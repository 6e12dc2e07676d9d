"""Typed exception hierarchy for the Zabbix API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zabbix_api.rpc.transport import TransportResponse


class ZabbixApiError(Exception):
    """Base class for all zabbix_api errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(ZabbixApiError):
    """Raised for conflicting construction arguments or invalid config files."""


class TransportError(ZabbixApiError):
    """Raised when the HTTP exchange could not be completed.

    Carries the HTTP response when the transport received one (e.g. a 5xx
    status), so callers can inspect the status code and body.
    """

    def __init__(self, message: str, response: TransportResponse | None = None) -> None:
        self.response = response
        super().__init__(message)

    @property
    def status_code(self) -> int | None:
        return self.response.status if self.response is not None else None


class DecodeError(ZabbixApiError):
    """Raised when a response body is not a well-formed JSON-RPC envelope."""

    def __init__(self, message: str, body: str = "") -> None:
        self.body = body
        super().__init__(message)


class ApplicationError(ZabbixApiError):
    """Raised when the API returns a JSON-RPC ``error`` object.

    This is the normal way remote-side validation failures surface, e.g.
    ``API error -32602: Invalid params.``.
    """

    def __init__(self, code: Any, message: str = "", data: str = "") -> None:
        self.code = code
        self.remote_message = message
        self.data = data
        super().__init__(f"API error {code}: {data or message}")


class AuthCacheError(ZabbixApiError):
    """Raised when the on-disk token cache cannot be read, written or removed.

    Login treats this as non-fatal: it is logged and the flow continues.
    """
