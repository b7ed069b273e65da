"""Unit tests for the HTTP request core (biapi.api)."""

import json

import httpx
import pytest

from biapi.api import build_query, http_delete, http_get, http_post, http_put, request
from biapi.errors import ApiError, ConfigurationError, NetworkError


class TestCredentialsCheck:
    def test_missing_token_fails_before_any_request(self, store, transport):
        with pytest.raises(ConfigurationError):
            http_get("/users/me")

        assert transport.requests == []

    def test_missing_token_with_explicit_client(self, store):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        with pytest.raises(ConfigurationError):
            http_post("/auth/init", {}, client=client)

        assert calls == []


class TestRequestBuilding:
    def test_get_query_string(self, token, transport):
        transport.responder = lambda request: httpx.Response(200, json={"banks": []})

        http_get("/banks", {"limit": 10, "offset": 0, "expand": "fields"})

        sent = transport.requests[0]
        assert sent.method == "GET"
        assert sent.url.path == "/2.0/banks"
        assert dict(sent.url.params) == {"limit": "10", "offset": "0", "expand": "fields"}

    def test_unset_params_are_omitted(self, token, transport):
        http_get("/banks", {"limit": 10, "offset": 0, "expand": None})

        query = transport.requests[0].url.query.decode()
        assert "expand" not in query
        assert "None" not in query
        assert dict(transport.requests[0].url.params) == {"limit": "10", "offset": "0"}

    def test_headers(self, token, transport):
        http_get("/users/me")

        headers = transport.requests[0].headers
        assert headers["Authorization"] == f"Bearer {token}"
        assert headers["Accept"] == "application/json"

    def test_post_sends_json_body(self, token, transport):
        http_post("/auth/jwt", {"client_id": "abc", "expire": True})

        sent = transport.requests[0]
        assert sent.method == "POST"
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.content) == {"client_id": "abc", "expire": True}

    def test_put_without_body_sends_empty_object(self, token, transport):
        http_put("/users/me/connections/7")

        sent = transport.requests[0]
        assert sent.method == "PUT"
        assert json.loads(sent.content) == {}

    def test_base_url_trailing_slash(self, store, token, transport):
        store.set("baseUrl", "https://api.example.com/2.0/")

        http_get("/users/me")

        assert str(transport.requests[0].url) == "https://api.example.com/2.0/users/me"

    def test_build_query_booleans(self):
        assert build_query({"all": True, "deleted": False, "skip": None}) == {
            "all": "true",
            "deleted": "false",
        }
        assert build_query(None) == {}


class TestResponses:
    def test_returns_parsed_json(self, token, transport):
        payload = {"accounts": [{"id": 1}, {"id": 2}]}
        transport.responder = lambda request: httpx.Response(200, json=payload)

        assert http_get("/users/me/accounts") == payload

    def test_delete_with_empty_body_returns_none(self, token, transport):
        transport.responder = lambda request: httpx.Response(204)

        assert http_delete("/users/me/transfers/3") is None
        assert transport.requests[0].method == "DELETE"

    def test_non_json_success_returns_text(self, token, transport):
        transport.responder = lambda request: httpx.Response(200, text="OK")

        assert request("GET", "/ping") == "OK"


class TestErrors:
    def test_not_found(self, token, transport):
        transport.responder = lambda request: httpx.Response(404, json={"code": "not_found"})

        with pytest.raises(ApiError) as exc_info:
            http_get("/users/me/accounts/999")

        error = exc_info.value
        assert error.status_code == 404
        assert error.body == {"code": "not_found"}
        assert error.kind == "api"
        assert "404" in str(error)
        assert "not_found" in str(error)

    def test_message_includes_description(self, token, transport):
        transport.responder = lambda request: httpx.Response(
            400, json={"code": "wrongpass", "description": "Wrong password"}
        )

        with pytest.raises(ApiError) as exc_info:
            http_put("/users/me/transfers/1", {"validated": True})

        assert str(exc_info.value) == "HTTP 400: Wrong password (wrongpass)"

    def test_non_json_error_body_kept_as_text(self, token, transport):
        transport.responder = lambda request: httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ApiError) as exc_info:
            http_get("/users/me")

        assert exc_info.value.body == "Bad Gateway"
        assert str(exc_info.value) == "HTTP 502: Bad Gateway"

    def test_failed_request_is_not_retried(self, token, transport):
        transport.responder = lambda request: httpx.Response(500, json={"message": "boom"})

        with pytest.raises(ApiError):
            http_post("/users/me/accounts/1/recipients/2/transfers", {"amount": 5.0})

        assert len(transport.requests) == 1

    def test_connection_failure_is_network_error(self, token, transport):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        transport.responder = refuse

        with pytest.raises(NetworkError) as exc_info:
            http_get("/users/me")

        assert not isinstance(exc_info.value, ApiError)
        assert exc_info.value.kind == "network"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_undecodable_body_is_network_error(self, token, transport):
        transport.responder = lambda request: httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all"
        )

        with pytest.raises(NetworkError) as exc_info:
            http_get("/users/me")

        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    def test_timeout_is_network_error(self, token, transport):
        def too_slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        transport.responder = too_slow

        with pytest.raises(NetworkError):
            http_delete("/auth/token")
