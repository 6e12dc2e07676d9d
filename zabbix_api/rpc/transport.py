"""HTTP transport for JSON-RPC calls.

The client talks to the network only through the Transport protocol, so
tests and embedding applications can substitute their own implementation.
HttpxTransport is the default, built on a synchronous httpx.Client.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx

from zabbix_api.core.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """A completed HTTP exchange, independent of the HTTP library used."""

    status: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"HTTP {self.status}\n{self.text}"


@runtime_checkable
class Transport(Protocol):
    """Capability required from an HTTP collaborator."""

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        json_body: Any,
        auth: tuple[str, str] | None = None,
    ) -> TransportResponse:
        """Send one request and return the response.

        Raises:
            TransportError: If the exchange fails. When a response was
                received (e.g. HTTP 500), it is attached to the error.
        """
        ...

    def close(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by httpx.Client.

    Usage:
        transport = HttpxTransport(options={"timeout": 10.0, "verify": False})

        # Or wrap an existing, caller-owned client:
        transport = HttpxTransport(client=httpx.Client(...))
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        options: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Existing client to use. It is not closed by close().
            options: Keyword arguments for a new httpx.Client, ignored when
                ``client`` is given.
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(**(options or {}))

    @property
    def client(self) -> httpx.Client:
        return self._client

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        json_body: Any,
        auth: tuple[str, str] | None = None,
    ) -> TransportResponse:
        extra: dict[str, Any] = {}
        if auth is not None:
            extra["auth"] = auth
        try:
            response = self._client.request(
                method,
                url,
                content=json.dumps(json_body, separators=(",", ":")),
                headers=headers,
                **extra,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            failed = _to_transport_response(e.response)
            logger.warning("HTTP %d from %s", failed.status, url)
            raise TransportError(f"{e}: {failed.text}", failed) from e
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out: %s", url, e)
            raise TransportError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(f"Request failed: {e}") from e

        return _to_transport_response(response)

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()


def _to_transport_response(response: httpx.Response) -> TransportResponse:
    return TransportResponse(
        status=response.status_code,
        text=response.text,
        headers=dict(response.headers),
    )
