"""httpx 기반 HttpClient 구현체."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from auth_core.application.auth.ports import HttpRequest

logger = logging.getLogger(__name__)


class HttpxResponse:
    """httpx.Response 를 HttpResponse 포트에 맞춘 래퍼."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    async def json(self) -> Any:
        return self._response.json()

    async def text(self) -> str:
        return self._response.text


class HttpxHttpClient:
    """httpx.AsyncClient 어댑터.

    web 플랫폼의 refresh token 쿠키는 클라이언트 쿠키 저장소가 유지합니다.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def request(self, request: HttpRequest) -> HttpxResponse:
        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.body is not None:
            kwargs["json"] = request.body
        if request.timeout is not None:
            kwargs["timeout"] = request.timeout

        response = await self._client.request(request.method, request.url, **kwargs)
        logger.debug(
            "HTTP request completed",
            extra={"method": request.method, "url": request.url, "status": response.status_code},
        )
        return HttpxResponse(response)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
