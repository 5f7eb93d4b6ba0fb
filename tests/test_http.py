"""Tests for the HTTP transport layer."""

from __future__ import annotations

import httpx
import pytest
import respx

from snowday._http import DEFAULT_USER_AGENT, AsyncTransport, SyncTransport
from snowday.exceptions import APIError, NetworkError, RequestTimeoutError

BASE_URL = "https://api.example.test"


class TestSyncTransport:
    @respx.mock
    def test_get_success(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=[{"lat": "1.0"}])
        )
        transport = SyncTransport(BASE_URL)
        result = transport.get("/search", [("q", "90210")])
        assert result == [{"lat": "1.0"}]
        transport.close()

    @respx.mock
    def test_get_dict_body(self) -> None:
        respx.get(f"{BASE_URL}/v1/forecast").mock(
            return_value=httpx.Response(200, json={"current": {}})
        )
        transport = SyncTransport(BASE_URL)
        assert transport.get("/v1/forecast", []) == {"current": {}}
        transport.close()

    @respx.mock
    def test_sends_params_and_user_agent(self) -> None:
        route = respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=[])
        )
        transport = SyncTransport(BASE_URL, user_agent="tests/1.0")
        transport.get("/search", [("q", "90210"), ("limit", "1")])
        request = route.calls.last.request
        assert request.url.params["q"] == "90210"
        assert request.url.params["limit"] == "1"
        assert request.headers["User-Agent"] == "tests/1.0"
        transport.close()

    @respx.mock
    def test_default_user_agent(self) -> None:
        route = respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=[])
        )
        transport = SyncTransport(BASE_URL)
        transport.get("/search", [])
        assert route.calls.last.request.headers["User-Agent"] == DEFAULT_USER_AGENT
        transport.close()

    @respx.mock
    def test_get_404(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        transport = SyncTransport(BASE_URL)
        with pytest.raises(APIError) as exc_info:
            transport.get("/search", [])
        assert exc_info.value.status_code == 404
        transport.close()

    @respx.mock
    def test_get_500_is_network_error(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        transport = SyncTransport(BASE_URL)
        with pytest.raises(NetworkError):
            transport.get("/search", [])
        transport.close()

    @respx.mock
    def test_unparsable_body(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, text="<html>busy</html>")
        )
        transport = SyncTransport(BASE_URL)
        with pytest.raises(NetworkError, match="Unparsable"):
            transport.get("/search", [])
        transport.close()

    @respx.mock
    def test_undecodable_body(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, content=b"\xff\xfe\xfa{}")
        )
        transport = SyncTransport(BASE_URL)
        with pytest.raises(NetworkError, match="Unparsable"):
            transport.get("/search", [])
        transport.close()

    @respx.mock
    def test_connection_error(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(side_effect=httpx.ConnectError("fail"))
        transport = SyncTransport(BASE_URL)
        with pytest.raises(NetworkError):
            transport.get("/search", [])
        transport.close()

    @respx.mock
    def test_timeout_error(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = SyncTransport(BASE_URL)
        with pytest.raises(RequestTimeoutError):
            transport.get("/search", [])
        transport.close()


class TestAsyncTransport:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_success(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, json=[{"lat": "1.0"}])
        )
        transport = AsyncTransport(BASE_URL)
        result = await transport.get("/search", [("q", "90210")])
        assert result == [{"lat": "1.0"}]
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_404(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        transport = AsyncTransport(BASE_URL)
        with pytest.raises(APIError) as exc_info:
            await transport.get("/search", [])
        assert exc_info.value.status_code == 404
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_unparsable_body(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(
            return_value=httpx.Response(200, text="not json")
        )
        transport = AsyncTransport(BASE_URL)
        with pytest.raises(NetworkError):
            await transport.get("/search", [])
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(side_effect=httpx.ConnectError("fail"))
        transport = AsyncTransport(BASE_URL)
        with pytest.raises(NetworkError):
            await transport.get("/search", [])
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_timeout_error(self) -> None:
        respx.get(f"{BASE_URL}/search").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = AsyncTransport(BASE_URL)
        with pytest.raises(RequestTimeoutError):
            await transport.get("/search", [])
        await transport.close()
