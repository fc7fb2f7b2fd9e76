"""Auth Event Handler.

브리지 인증 상태 이벤트를 상태별 콜백으로 분배합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from auth_core.domain.enums import AuthStatus

if TYPE_CHECKING:
    from auth_core.application.auth.ports import AuthStatusEvent, NativeBridge

logger = logging.getLogger(__name__)

EventCallback = Callable[["AuthStatusEvent"], None]


@dataclass(frozen=True, slots=True)
class AuthEventHandlers:
    """상태별 콜백 (모두 선택)."""

    on_auth_started: EventCallback | None = None
    on_callback_received: EventCallback | None = None
    on_auth_success: EventCallback | None = None
    on_auth_error: EventCallback | None = None
    on_token_refreshed: EventCallback | None = None
    on_signed_out: EventCallback | None = None

    def for_status(self, status: AuthStatus) -> EventCallback | None:
        return {
            AuthStatus.STARTED: self.on_auth_started,
            AuthStatus.CALLBACK_RECEIVED: self.on_callback_received,
            AuthStatus.SUCCESS: self.on_auth_success,
            AuthStatus.ERROR: self.on_auth_error,
            AuthStatus.TOKEN_REFRESHED: self.on_token_refreshed,
            AuthStatus.SIGNED_OUT: self.on_signed_out,
        }.get(status)


class AuthEventHandler:
    """브리지 리스너 등록/해제를 캡슐화합니다.

    사용 후 destroy() 로 리스너를 해제해야 합니다.
    """

    def __init__(self, bridge: NativeBridge, handlers: AuthEventHandlers) -> None:
        self._bridge = bridge
        self._handlers = handlers
        self._bridge.add_auth_status_listener(self._handle)

    def update_handlers(self, **changes: EventCallback | None) -> None:
        self._handlers = replace(self._handlers, **changes)

    def destroy(self) -> None:
        self._bridge.remove_auth_status_listener(self._handle)

    def _handle(self, event: AuthStatusEvent) -> None:
        callback = self._handlers.for_status(event.status)
        if callback is None:
            return
        try:
            callback(event)
        except Exception:
            logger.exception("Auth event callback failed", extra={"status": event.status.value})
