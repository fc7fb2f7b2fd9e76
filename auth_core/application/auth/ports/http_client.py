"""HttpClient Port.

코어는 소켓을 직접 만들지 않고 이 인터페이스에 맞춰 요청만 구성합니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """전송 요청.

    body 는 JSON 직렬화 대상이며 None 이면 본문 없이 전송합니다.
    timeout 은 초 단위입니다.
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: float | None = None


class HttpResponse(Protocol):
    """전송 응답."""

    @property
    def ok(self) -> bool: ...

    @property
    def status(self) -> int: ...

    @property
    def status_text(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def json(self) -> Any:
        """본문을 JSON 으로 파싱. 실패 시 ValueError."""
        ...

    async def text(self) -> str: ...


class HttpClient(Protocol):
    """HTTP 전송 인터페이스.

    구현체:
        - HttpxHttpClient (infrastructure/http/)
    """

    async def request(self, request: HttpRequest) -> HttpResponse: ...
