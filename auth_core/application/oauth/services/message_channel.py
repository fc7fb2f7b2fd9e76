"""OAuthMessageChannel - 창 간 OAuth 메시지 수신 채널.

origin 이 앱 자신의 origin 과 같고, 페이로드가 스키마를 통과한 메시지만
리스너에게 전달합니다. 위반은 기록 후 무시합니다.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Optional
from urllib.parse import urlparse

from pydantic import ValidationError

from auth_core.application.oauth.dto import OAUTH_MESSAGE_ADAPTER, OAuthMessage

logger = logging.getLogger(__name__)

# 기본 포트 (생략 가능)
_DEFAULT_PORTS = {"https": 443, "http": 80}

MessageListener = Callable[[OAuthMessage], Optional[Awaitable[None]]]


def normalize_origin(value: str | None) -> str | None:
    """scheme://host[:port] 형태로 정규화. 기본 포트는 생략합니다."""
    if not value:
        return None
    try:
        parsed = urlparse(value.strip())
        port = parsed.port
    except ValueError:
        return None
    if not parsed.scheme or not parsed.hostname:
        return None

    scheme = parsed.scheme.lower()
    host = parsed.hostname.lower()
    if port is None or _DEFAULT_PORTS.get(scheme) == port:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


class OAuthMessageChannel:
    """명시적 구독 기반 OAuth 메시지 채널."""

    def __init__(self, app_origin: str) -> None:
        normalized = normalize_origin(app_origin)
        if normalized is None:
            raise ValueError(f"Invalid app origin: {app_origin!r}")
        self._app_origin = normalized
        self._listeners: list[MessageListener] = []

    @property
    def app_origin(self) -> str:
        return self._app_origin

    def add_listener(self, listener: MessageListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MessageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def deliver(self, origin: str | None, payload: object) -> bool:
        """메시지를 검증 후 전달합니다.

        Returns:
            리스너에게 전달되었으면 True
        """
        if normalize_origin(origin) != self._app_origin:
            logger.warning(
                "OAuth message from unexpected origin ignored",
                extra={"origin": origin, "expected_origin": self._app_origin},
            )
            return False

        try:
            message = OAUTH_MESSAGE_ADAPTER.validate_python(payload)
        except ValidationError as e:
            logger.warning(
                "Malformed OAuth message ignored",
                extra={"origin": origin, "error_count": e.error_count()},
            )
            return False

        for listener in list(self._listeners):
            try:
                outcome = listener(message)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.exception("OAuth message listener failed", extra={"type": message.type})
        return True
