"""In-memory OAuth State Store."""

from __future__ import annotations

import time
from collections.abc import Callable

from auth_core.application.oauth.ports import PkceState


class InMemoryOAuthStateStore:
    """메모리 기반 OAuth 상태 저장소 (단일 창/프로세스용).

    저장할 때마다 만료된 항목을 정리하므로 중단된 플로우가 쌓이지 않습니다.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._entries: dict[str, tuple[PkceState, float]] = {}
        self._clock = clock

    async def save(self, data: PkceState, ttl_seconds: int = 600) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._entries[data.state] = (data, now + ttl_seconds)

    async def consume(self, state: str) -> PkceState | None:
        entry = self._entries.pop(state, None)
        if entry is None:
            return None
        data, expires_at = entry
        if self._clock() > expires_at:
            return None
        return data

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self._entries.items() if now > expires_at]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
