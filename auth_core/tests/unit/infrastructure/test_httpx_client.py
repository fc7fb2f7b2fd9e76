"""HttpxHttpClient 테스트 (httpx.MockTransport)."""

import json

import httpx
import pytest

from auth_core.application.auth.ports import HttpRequest
from auth_core.infrastructure.http import HttpxHttpClient


class TestHttpxHttpClient:
    """HttpxHttpClient 테스트."""

    @pytest.mark.asyncio
    async def test_json_request(self) -> None:
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"success": True, "message": "ok", "data": 1})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as raw:
            client = HttpxHttpClient(raw)

            # Act
            response = await client.request(
                HttpRequest(
                    url="https://api.example.com/api/auth/login",
                    method="POST",
                    headers={"X-Client-Platform": "web"},
                    body={"email": "a@b.c"},
                    timeout=2.0,
                )
            )

            # Assert
            assert response.ok
            assert response.status == 200
            assert await response.json() == {"success": True, "message": "ok", "data": 1}

        sent = captured[0]
        assert sent.method == "POST"
        assert sent.headers["X-Client-Platform"] == "web"
        assert json.loads(sent.content) == {"email": "a@b.c"}

    @pytest.mark.asyncio
    async def test_request_without_body(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(204)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as raw:
            response = await HttpxHttpClient(raw).request(
                HttpRequest(url="https://api.example.com/api/auth/refresh", method="POST")
            )

        assert response.ok
        assert captured[0].content == b""

    @pytest.mark.asyncio
    async def test_error_status_and_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as raw:
            response = await HttpxHttpClient(raw).request(
                HttpRequest(url="https://api.example.com/api/health")
            )

            assert not response.ok
            assert response.status_text == "Bad Gateway"
            with pytest.raises(ValueError):
                await response.json()
            assert "Bad Gateway" in await response.text()

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self) -> None:
        raw = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

        async with HttpxHttpClient(raw):
            pass

        assert not raw.is_closed
        await raw.aclose()
