"""Unit tests for zabbix_api.rpc.transport."""

import base64
import json

import httpx
import pytest

from zabbix_api.core.errors import TransportError
from zabbix_api.rpc.transport import HttpxTransport, Transport, TransportResponse

URL = "http://zabbix.test/api_jsonrpc.php"


def make_transport(handler) -> HttpxTransport:
    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpxTransport:
    """Tests for HttpxTransport.send."""

    def test_is_a_transport(self):
        assert isinstance(make_transport(lambda r: httpx.Response(200)), Transport)

    def test_posts_json_body_with_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, text='{"result": 1}')

        transport = make_transport(handler)
        response = transport.send(
            "POST", URL, {"Content-Type": "application/json-rpc"}, {"method": "host.get"}
        )

        assert seen == {
            "method": "POST",
            "content_type": "application/json-rpc",
            "body": {"method": "host.get"},
        }
        assert response.status == 200
        assert response.text == '{"result": 1}'

    def test_basic_auth_header(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["authorization"] = request.headers.get("authorization")
            return httpx.Response(200, text="{}")

        make_transport(handler).send("POST", URL, {}, {}, auth=("web", "secret"))

        expected = base64.b64encode(b"web:secret").decode()
        assert seen["authorization"] == f"Basic {expected}"

    def test_no_auth_header_by_default(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["authorization"] = request.headers.get("authorization")
            return httpx.Response(200, text="{}")

        make_transport(handler).send("POST", URL, {}, {})
        assert seen["authorization"] is None

    def test_http_error_carries_response(self):
        """A 5xx answer is raised with status and body attached."""
        transport = make_transport(lambda r: httpx.Response(500, text="Internal Server Error"))

        with pytest.raises(TransportError) as exc_info:
            transport.send("POST", URL, {}, {})

        error = exc_info.value
        assert error.status_code == 500
        assert error.response is not None
        assert error.response.text == "Internal Server Error"
        assert "Internal Server Error" in str(error)

    def test_connection_error_has_no_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        with pytest.raises(TransportError) as exc_info:
            make_transport(handler).send("POST", URL, {}, {})

        assert exc_info.value.response is None
        assert exc_info.value.status_code is None
        assert "Connection refused" in str(exc_info.value)

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out")

        with pytest.raises(TransportError, match="timed out"):
            make_transport(handler).send("POST", URL, {}, {})


class TestHttpxTransportLifecycle:
    """Tests for client ownership."""

    def test_close_keeps_borrowed_client_open(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        HttpxTransport(client=client).close()
        assert not client.is_closed

    def test_close_closes_own_client(self):
        transport = HttpxTransport(options={"timeout": 5.0})
        transport.close()
        assert transport.client.is_closed


class TestTransportResponse:
    def test_str(self):
        assert str(TransportResponse(status=502, text="Bad Gateway")) == "HTTP 502\nBad Gateway"
