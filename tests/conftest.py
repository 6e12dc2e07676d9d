"""Shared pytest fixtures and configuration."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from zabbix_api.client import ZabbixApi


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_unix = pytest.mark.skip(reason="Unix-only test")
    for item in items:
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


API_URL = "http://zabbix.test/api_jsonrpc.php"


class FakeZabbixServer:
    """In-memory Zabbix API behind an httpx.MockTransport.

    Knows user.login / user.logout / user.get with real token checks;
    any other method answers from ``results`` (default: empty list).
    Every decoded request body is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.users = {"Admin": "zabbix"}
        self.valid_tokens: set[str] = set()
        self.results: dict[str, Any] = {}
        self.handlers: dict[str, Callable[[dict[str, Any]], httpx.Response]] = {}
        self._issued = 0

    def methods_called(self) -> list[str]:
        return [body["method"] for body in self.requests]

    def issue_token(self) -> str:
        self._issued += 1
        token = f"token-{self._issued:04d}"
        self.valid_tokens.add(token)
        return token

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        method = body["method"]

        if method in self.handlers:
            return self.handlers[method](body)

        if method == "user.login":
            params = body["params"]
            user = params.get("user", params.get("username"))
            if self.users.get(user) != params.get("password"):
                return self._error(body, -32500, "Login name or password is incorrect.")
            return self._result(body, self.issue_token())

        if body.get("auth") is not None or method in ("user.get", "user.logout"):
            if body.get("auth") not in self.valid_tokens:
                return self._error(body, -32602, "Session terminated, re-login, please.")

        if method == "user.logout":
            self.valid_tokens.discard(body["auth"])
            return self._result(body, True)
        if method == "user.get":
            return self._result(body, "1")

        return self._result(body, self.results.get(method, []))

    @staticmethod
    def _result(body: dict[str, Any], result: Any) -> httpx.Response:
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    @staticmethod
    def _error(body: dict[str, Any], code: int, data: str) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "error": {"code": code, "message": "Application error.", "data": data},
            },
        )

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handle))

    def api(self, **kwargs: Any) -> ZabbixApi:
        """Build a ZabbixApi talking to this server."""
        kwargs.setdefault("api_url", API_URL)
        kwargs.setdefault("token_cache_dir", "")
        return ZabbixApi(client=self.http_client(), **kwargs)


@pytest.fixture
def zabbix_server() -> FakeZabbixServer:
    return FakeZabbixServer()


@pytest.fixture(autouse=True)
def isolated_default_cache_dir(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Keep the default token cache out of the real temp dir."""
    cache_dir = tmp_path_factory.mktemp("default-token-cache")
    monkeypatch.setattr("zabbix_api.client.get_default_cache_dir", lambda: cache_dir)
    return cache_dir
