"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock

import pytest

from auth_core.application.auth.ports import HttpRequest
from auth_core.setup.config import ApiConfig, get_settings
from auth_core.setup.config.settings import EndpointSettings

API_BASE_URL = "https://api.example.com"


# ============================================================
# Environment
# ============================================================


@pytest.fixture(autouse=True)
def _isolated_env() -> Generator[None, None, None]:
    """AUTH_CORE_ 환경변수를 테스트마다 격리합니다."""
    original = os.environ.copy()
    for key in list(os.environ):
        if key.upper().startswith("AUTH_CORE_"):
            del os.environ[key]
    get_settings.cache_clear()
    yield
    os.environ.clear()
    os.environ.update(original)
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """setup_logging 이 바꾼 root 로거 상태를 되돌립니다."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================
# Transport Stubs
# ============================================================


class StubResponse:
    """HttpResponse 스텁."""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        json_error: bool = False,
        status_text: str = "",
    ) -> None:
        self.status = status
        self.status_text = status_text
        self.headers: dict[str, str] = {"content-type": "application/json"}
        self._body = body
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def json(self) -> Any:
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body

    async def text(self) -> str:
        return "" if self._body is None else str(self._body)


class StubHttpClient:
    """요청을 기록하는 HttpClient 스텁.

    queue 의 항목을 순서대로 반환하고, 비어 있으면 default 를 반환합니다.
    예외 인스턴스는 그대로 raise 합니다.
    """

    def __init__(self, default: StubResponse | BaseException | None = None) -> None:
        self.requests: list[HttpRequest] = []
        self.queue: list[StubResponse | BaseException] = []
        self.default = default if default is not None else StubResponse(
            200, {"success": True, "message": "ok", "data": None}
        )

    def enqueue(self, *items: StubResponse | BaseException) -> None:
        self.queue.extend(items)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]

    async def request(self, request: HttpRequest) -> StubResponse:
        self.requests.append(request)
        item = self.queue.pop(0) if self.queue else self.default
        if isinstance(item, BaseException):
            raise item
        return item


def envelope(data: Any = None, message: str = "ok") -> StubResponse:
    """성공 envelope 응답."""
    return StubResponse(200, {"success": True, "message": message, "data": data})


@pytest.fixture
def stub_http_client() -> StubHttpClient:
    return StubHttpClient()


@pytest.fixture
def api_config() -> ApiConfig:
    """기본 경로 전체가 설정된 ApiConfig (재시도 1회)."""
    return ApiConfig(
        api_base_url=API_BASE_URL,
        endpoints=EndpointSettings().to_api_endpoints(),
        timeout=5.0,
        retry_count=1,
    )


@pytest.fixture
def no_sleep() -> AsyncMock:
    """백오프 대기를 기록만 하는 sleep."""
    return AsyncMock(return_value=None)
