"""NativeBridge Port.

react-native 호스트가 실제 토큰을 소유하고 인증 호출을 대행합니다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from auth_core.domain.enums import AuthStatus


@dataclass(frozen=True, slots=True)
class UserProfile:
    """네이티브 세션 사용자 프로필."""

    id: str
    email: str | None = None
    name: str | None = None
    provider: str | None = None


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """네이티브 세션 상태."""

    is_logged_in: bool
    user_profile: UserProfile | None = None


@dataclass(frozen=True, slots=True)
class AuthenticatedRequest:
    """브리지 경유 인증 API 호출 요청."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass(frozen=True, slots=True)
class AuthenticatedResponse:
    """브리지 경유 인증 API 호출 응답."""

    status: int
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True, slots=True)
class AuthStatusEvent:
    """비동기 인증 상태 알림."""

    status: AuthStatus
    provider: str | None = None
    error: str | None = None
    user_profile: UserProfile | None = None


AuthStatusListener = Callable[[AuthStatusEvent], None]


class NativeBridge(Protocol):
    """네이티브 브리지 인터페이스.

    구현체:
        - MockNativeBridge (infrastructure/native/)
    """

    async def start_oauth(self, provider: str) -> bool: ...

    async def get_session(self) -> SessionInfo: ...

    async def sign_out(self) -> bool: ...

    async def call_with_auth(self, request: AuthenticatedRequest) -> AuthenticatedResponse: ...

    def add_auth_status_listener(self, listener: AuthStatusListener) -> None: ...

    def remove_auth_status_listener(self, listener: AuthStatusListener) -> None: ...
