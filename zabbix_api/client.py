"""Synchronous client for the Zabbix JSON-RPC API."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Any

import httpx

from zabbix_api.api.constants import ApiConstants
from zabbix_api.api.methods import (
    LOGIN_METHOD,
    LOGOUT_METHOD,
    METHOD_TABLE,
    PROBE_METHOD,
    PROBE_PARAMS,
    python_method_name,
)
from zabbix_api.core.constants import JSONRPC_CONTENT_TYPE, get_default_cache_dir
from zabbix_api.core.errors import (
    AuthCacheError,
    ConfigError,
    TransportError,
    ZabbixApiError,
)
from zabbix_api.core.redaction import redact_payload, redact_response, redact_secrets
from zabbix_api.rpc.auth import TokenCache
from zabbix_api.rpc.protocol import (
    RequestIdGenerator,
    build_request,
    check_response,
    normalize_params,
    parse_response,
    rekey_result,
    request_to_dict,
)
from zabbix_api.rpc.transport import HttpxTransport, Transport, TransportResponse

if TYPE_CHECKING:
    from zabbix_api.config.schema import ClientConfig

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Mutable per-client state shared by every API method.

    Not safe for concurrent use from several threads; give each thread its
    own ZabbixApi instance.

    Attributes:
        api_url: URL of api_jsonrpc.php.
        auth_token: Current token, empty when unauthenticated.
        default_params: Merged under every object-style params value.
        request_id: Id of the most recent request.
        basic_auth: HTTP basic auth credentials sent with every request.
        print_communication: Log full request/response payloads.
    """

    api_url: str = ""
    auth_token: str = ""
    default_params: dict[str, Any] = field(default_factory=dict)
    request_id: str = ""
    basic_auth: tuple[str, str] | None = None
    print_communication: bool = False

    @property
    def authenticated(self) -> bool:
        return bool(self.auth_token)


class ZabbixApi(ApiConstants):
    """Client for the Zabbix API.

    Every remote method ``resource.action`` is available as a method named
    ``resource_action`` taking ``(params=None, result_key=None)``.

    Usage:
        with ZabbixApi("https://zabbix.example.com/api_jsonrpc.php",
                       user="Admin", password="zabbix") as api:
            hosts = api.host_get({"output": ["host"]}, result_key="hostid")

        # Anonymous call, no login needed:
        version = ZabbixApi("https://zabbix.example.com/api_jsonrpc.php").apiinfo_version()
    """

    def __init__(
        self,
        api_url: str = "",
        user: str = "",
        password: str = "",
        http_user: str = "",
        http_password: str = "",
        auth_token: str = "",
        client: httpx.Client | Transport | None = None,
        client_options: dict[str, Any] | None = None,
        token_cache_dir: str | Path | None = None,
        default_params: Mapping[str, Any] | None = None,
        print_communication: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: API URL, e.g. http://FQDN/zabbix/api_jsonrpc.php.
            user: API username. Together with ``password`` triggers login.
            password: API password.
            http_user: Username for HTTP basic authorization.
            http_password: Password for HTTP basic authorization.
            auth_token: Already issued auth token, skips login.
            client: An httpx.Client or any Transport implementation. It is
                not closed by close().
            client_options: Keyword arguments for the httpx.Client created
                when ``client`` is not given (timeout, verify, ...).
            token_cache_dir: Where login caches the token. None uses the
                system temp dir, an empty string disables caching.
            default_params: Params merged into every object-style call.
            print_communication: Log request/response payloads.

        Raises:
            ConfigError: If both ``client`` and ``client_options`` are given,
                or ``client`` is not a usable transport.
            ZabbixApiError: If the login triggered by user/password fails.
        """
        if client is not None and client_options:
            raise ConfigError(
                "Pass either an HTTP client or client options, not both"
            )

        self._session = Session(
            api_url=api_url,
            print_communication=print_communication,
        )
        self._ids = RequestIdGenerator()
        self._transport, self._owns_transport = _make_transport(client, client_options)
        self.last_response: TransportResponse | None = None

        if default_params is not None:
            self.default_params = default_params
        if http_user and http_password:
            self.set_basic_authorization(http_user, http_password)

        logger.debug("ZabbixApi initialized: url=%s", api_url)

        if auth_token:
            self.set_auth_token(auth_token)
        elif user and password:
            try:
                self.login({"user": user, "password": password}, token_cache_dir=token_cache_dir)
            except BaseException:
                # The caller never gets an instance to close
                self.close()
                raise

    @classmethod
    def from_config(cls, config: ClientConfig) -> ZabbixApi:
        """Create a client from a validated ClientConfig."""
        return cls(
            api_url=config.api_url,
            user=config.user,
            password=config.password,
            http_user=config.http_user,
            http_password=config.http_password,
            auth_token=config.auth_token,
            client_options={"timeout": config.timeout, "verify": config.verify_tls},
            token_cache_dir=config.token_cache_dir,
            default_params=config.default_params,
            print_communication=config.print_communication,
        )

    def __enter__(self) -> ZabbixApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client if this instance created it."""
        if self._owns_transport:
            self._transport.close()

    # === Session accessors ===

    @property
    def session(self) -> Session:
        return self._session

    @property
    def api_url(self) -> str:
        return self._session.api_url

    @api_url.setter
    def api_url(self, api_url: str) -> None:
        self._session.api_url = api_url

    @property
    def auth_token(self) -> str:
        return self._session.auth_token

    def set_auth_token(self, auth_token: str) -> ZabbixApi:
        """Use an already issued token, bypassing login."""
        self._session.auth_token = auth_token
        return self

    @property
    def default_params(self) -> dict[str, Any]:
        return dict(self._session.default_params)

    @default_params.setter
    def default_params(self, default_params: Mapping[str, Any]) -> None:
        if not isinstance(default_params, Mapping):
            raise ConfigError(
                f"default_params must be a mapping, got: {type(default_params).__name__}"
            )
        self._session.default_params = dict(default_params)

    def set_basic_authorization(self, user: str, password: str) -> ZabbixApi:
        """Send HTTP basic auth credentials with every request.

        Has no effect unless both values are non-empty.
        """
        if user and password:
            self._session.basic_auth = (user, password)
        return self

    def print_communication(self, enabled: bool = True) -> ZabbixApi:
        """Toggle logging of full (redacted) request/response payloads."""
        self._session.print_communication = bool(enabled)
        return self

    # === Request pipeline ===

    def call(
        self,
        method: str,
        params: Any = None,
        result_key: str | None = None,
        auth: bool = True,
    ) -> Any:
        """Call a remote API method and return its decoded result.

        Args:
            method: Remote method name, e.g. "host.get".
            params: Mapping, list, scalar or None; see normalize_params().
            result_key: If set and the result is a list of objects, return
                a dict keyed by this field of each object instead.
            auth: Attach the session token to the request.

        Returns:
            The ``result`` member of the response, possibly re-keyed.

        Raises:
            TransportError: If the HTTP exchange fails.
            DecodeError: If the response is not a valid JSON-RPC envelope.
            ApplicationError: If the API reports an error.
        """
        if not method:
            raise ValueError("method must be a non-empty string")

        session = self._session
        normalized = normalize_params(params, session.default_params)
        session.request_id = self._ids.next_id()
        request = build_request(method, normalized, session.request_id, auth, session.auth_token)
        payload = request_to_dict(request)

        headers = {"Content-Type": JSONRPC_CONTENT_TYPE}
        logger.debug("RPC call: method=%s, id=%s", method, request.id)
        if session.print_communication:
            logger.info("Request: %s", redact_payload(payload))

        try:
            self.last_response = self._transport.send(
                "POST", session.api_url, headers, payload, session.basic_auth
            )
        except TransportError as e:
            self.last_response = e.response
            if session.print_communication and e.response is not None:
                logger.info("Response: %s", redact_secrets(str(e.response)))
            raise

        response = parse_response(self.last_response.text)
        if session.print_communication:
            logger.info(
                "Response: %s",
                redact_response(method, {"id": response.id, "result": response.result,
                                          "error": response.error}),
            )

        try:
            result = check_response(response)
        except ZabbixApiError as e:
            logger.warning("RPC error for method=%s: %s", method, e)
            raise
        return rekey_result(result, result_key)

    # === Authentication ===

    def login(
        self,
        params: Mapping[str, Any] | None = None,
        result_key: str | None = None,
        token_cache_dir: str | Path | None = None,
    ) -> str:
        """Log in and return the auth token.

        When ``params`` names a user and ``token_cache_dir`` is usable, the
        token is cached on disk. A later login for the same user (and OS
        user) first tries the cached token with a cheap ``user.get`` call
        and only calls ``user.login`` if that fails.

        Args:
            params: Login params, e.g. {"user": "Admin", "password": "zabbix"}.
                Zabbix 5.4+ spells the user key "username"; both are accepted
                for caching.
            result_key: Passed through to call().
            token_cache_dir: Cache directory. None uses the system temp
                dir, an empty string disables caching.

        Returns:
            The auth token now used by the session.

        Raises:
            ZabbixApiError: If ``user.login`` fails. The session stays
                unauthenticated.
        """
        params = dict(params or {})
        if token_cache_dir is None:
            token_cache_dir = get_default_cache_dir()

        self._session.auth_token = ""

        cache: TokenCache | None = None
        username = params.get("user", params.get("username"))
        if username is not None:
            cache = TokenCache.for_user(token_cache_dir, str(username))

        if cache is not None:
            cached = cache.read()
            if cached:
                self._session.auth_token = cached
                try:
                    self.call(PROBE_METHOD, PROBE_PARAMS)
                except ZabbixApiError as e:
                    logger.info("Cached auth token rejected, logging in again: %s", e)
                    self._session.auth_token = ""
                    self._forget_cached_token(cache)
                else:
                    logger.info("Reusing cached auth token for user %s", username)
                    return self._session.auth_token

        token = self.call(
            LOGIN_METHOD,
            normalize_params(params, self._session.default_params),
            result_key,
            auth=False,
        )
        self._session.auth_token = token
        logger.info("Logged in as %s", username if username is not None else "<unknown>")

        if cache is not None:
            try:
                cache.write(str(token))
            except AuthCacheError as e:
                logger.warning("%s", e)

        return self._session.auth_token

    def logout(
        self,
        params: Mapping[str, Any] | None = None,
        result_key: str | None = None,
    ) -> Any:
        """Log out and reset the session token.

        The token is cleared only once ``user.logout`` returned; if the call
        raises, the session keeps its token.
        """
        result = self.call(
            LOGOUT_METHOD,
            normalize_params(params, self._session.default_params),
            result_key,
        )
        self._session.auth_token = ""
        return result

    def _forget_cached_token(self, cache: TokenCache) -> None:
        try:
            cache.delete()
        except AuthCacheError as e:
            logger.warning("%s", e)


def _make_transport(
    client: httpx.Client | Transport | None,
    client_options: dict[str, Any] | None,
) -> tuple[Transport, bool]:
    """Return (transport, owned) for the given constructor arguments."""
    if client is None:
        return HttpxTransport(options=client_options), True
    if isinstance(client, httpx.Client):
        return HttpxTransport(client=client), False
    if isinstance(client, Transport):
        return client, False
    raise ConfigError(
        f"client must be an httpx.Client or a Transport, got: {type(client).__name__}"
    )


def _make_api_method(method: str, auth: bool) -> Callable[..., Any]:
    def api_method(
        self: ZabbixApi,
        params: Any = None,
        result_key: str | None = None,
    ) -> Any:
        return self.call(method, params, result_key, auth)

    api_method.__name__ = python_method_name(method)
    api_method.__qualname__ = f"ZabbixApi.{api_method.__name__}"
    api_method.__doc__ = f"Call the ``{method}`` API method."
    return api_method


for _method, _auth in METHOD_TABLE.items():
    setattr(ZabbixApi, python_method_name(_method), _make_api_method(_method, _auth))
del _method, _auth
