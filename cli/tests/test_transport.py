from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from aicp_client import AicpClient, ClientConfig
from aicp_client.token_store import static_token

BASE_URL = "http://api.test/api/v1"


def _client(handler, token_provider=None) -> AicpClient:
    cfg = ClientConfig(base_url=BASE_URL, token_provider=token_provider)
    return AicpClient(cfg, http_transport=httpx.MockTransport(handler))


def _run(client: AicpClient, call):
    async def _go():
        try:
            return await call(client)
        finally:
            await client.aclose()

    return asyncio.run(_go())


def test_request_carries_bearer_token_when_present() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = _client(handler, static_token("abc"))
    _run(client, lambda c: c.trends.get_industry_trends("retail"))

    assert seen[0].headers["Authorization"] == "Bearer abc"


def test_request_without_token_has_no_authorization_header() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    _run(_client(handler), lambda c: c.trends.get_industry_trends("retail"))
    _run(_client(handler, static_token(None)), lambda c: c.trends.get_industry_trends("retail"))
    _run(_client(handler, static_token("")), lambda c: c.trends.get_industry_trends("retail"))

    assert len(seen) == 3
    assert all("Authorization" not in r.headers for r in seen)


def test_token_is_read_at_send_time_for_every_request() -> None:
    tokens = iter(["first", None, "third"])
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={})

    client = _client(handler, lambda: next(tokens))

    async def _calls(c: AicpClient):
        await c.trends.get_regional_trends("EU")
        await c.trends.get_regional_trends("EU")
        await c.trends.get_regional_trends("EU")

    _run(client, _calls)

    assert seen == ["Bearer first", None, "Bearer third"]


def test_token_does_not_leak_into_default_headers() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    client = _client(handler, static_token("abc"))
    _run(client, lambda c: c.trends.get_regional_trends("EU"))

    assert "Authorization" not in client._t._client.headers


def test_default_headers_include_json_content_type() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    cfg = ClientConfig(base_url=BASE_URL, client_version="1.2.3")
    client = AicpClient(cfg, http_transport=httpx.MockTransport(handler))
    _run(client, lambda c: c.strategy.generate_strategy("retail"))

    assert seen[0].headers["Content-Type"] == "application/json"
    assert seen[0].headers["X-Client-Version"] == "1.2.3"


def test_relative_paths_are_joined_under_base_url_path() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    _run(_client(handler), lambda c: c.trends.get_industry_trends("retail"))

    assert str(seen[0].url) == "http://api.test/api/v1/trends/industry/retail"


def test_response_is_returned_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"trends": ["ai"]})

    response = _run(_client(handler), lambda c: c.trends.get_industry_trends("retail"))

    assert isinstance(response, httpx.Response)
    assert response.status_code == 200
    assert response.json() == {"trends": ["ai"]}


def test_non_2xx_status_propagates_as_http_status_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "boom"})

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        _run(_client(handler), lambda c: c.trends.get_industry_trends("retail"))

    assert exc_info.value.response.status_code == 500
    assert json.loads(exc_info.value.response.content) == {"message": "boom"}


def test_network_error_propagates_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError, match="connection refused"):
        _run(_client(handler), lambda c: c.trends.get_industry_trends("retail"))


def test_independent_calls_can_run_concurrently() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"path": request.url.path})

    client = _client(handler)

    async def _both(c: AicpClient):
        return await asyncio.gather(
            c.trends.get_industry_trends("retail"),
            c.trends.get_regional_trends("EU"),
        )

    first, second = _run(client, _both)

    assert first.json() == {"path": "/api/v1/trends/industry/retail"}
    assert second.json() == {"path": "/api/v1/trends/region/EU"}
