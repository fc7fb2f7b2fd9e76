"""Mock Native Bridge.

네이티브 모듈 없이 개발/테스트할 때 사용하는 브리지입니다.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from auth_core.application.auth.ports import (
    AuthenticatedRequest,
    AuthenticatedResponse,
    AuthStatusEvent,
    AuthStatusListener,
    SessionInfo,
    UserProfile,
)
from auth_core.domain.enums import AuthStatus

logger = logging.getLogger(__name__)


class NativeBridgeUnavailableError(ConnectionError):
    """브리지에 연결할 수 없음."""


class MockNativeBridge:
    """NativeBridge 인메모리 구현체."""

    def __init__(self, oauth_delay_seconds: float = 0.0) -> None:
        self._oauth_delay_seconds = oauth_delay_seconds
        self._profile: UserProfile | None = None
        self._listeners: list[AuthStatusListener] = []
        self._reachable = True

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def set_reachable(self, reachable: bool) -> None:
        self._reachable = reachable

    async def start_oauth(self, provider: str) -> bool:
        self._ensure_reachable()
        self._notify(AuthStatusEvent(status=AuthStatus.STARTED, provider=provider))
        if self._oauth_delay_seconds:
            await asyncio.sleep(self._oauth_delay_seconds)
        self._notify(AuthStatusEvent(status=AuthStatus.CALLBACK_RECEIVED, provider=provider))

        self._profile = UserProfile(
            id=f"mock_user_{provider}",
            email=f"user@{provider}.com",
            name=f"{provider} user",
            provider=provider,
        )
        self._notify(
            AuthStatusEvent(
                status=AuthStatus.SUCCESS, provider=provider, user_profile=self._profile
            )
        )
        return True

    async def get_session(self) -> SessionInfo:
        self._ensure_reachable()
        return SessionInfo(is_logged_in=self._profile is not None, user_profile=self._profile)

    async def sign_out(self) -> bool:
        self._ensure_reachable()
        self._profile = None
        self._notify(AuthStatusEvent(status=AuthStatus.SIGNED_OUT))
        return True

    async def call_with_auth(self, request: AuthenticatedRequest) -> AuthenticatedResponse:
        self._ensure_reachable()
        if self._profile is None:
            return AuthenticatedResponse(status=401, data={"error": "Not authenticated."})
        return AuthenticatedResponse(
            status=200,
            headers={"content-type": "application/json"},
            data={
                "message": "Protected API call succeeded.",
                "method": request.method,
                "url": request.url,
                "user": self._profile.id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    def add_auth_status_listener(self, listener: AuthStatusListener) -> None:
        self._listeners.append(listener)

    def remove_auth_status_listener(self, listener: AuthStatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def simulate_token_refresh(self) -> None:
        self._notify(AuthStatusEvent(status=AuthStatus.TOKEN_REFRESHED))

    def simulate_token_expiry(self) -> None:
        self._notify(AuthStatusEvent(status=AuthStatus.ERROR, error="token_expired"))

    def _ensure_reachable(self) -> None:
        if not self._reachable:
            raise NativeBridgeUnavailableError("native bridge is not reachable")

    def _notify(self, event: AuthStatusEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Auth status listener failed", extra={"status": event.status.value}
                )
