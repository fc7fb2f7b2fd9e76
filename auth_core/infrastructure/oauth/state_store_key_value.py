"""Key-value OAuth State Store.

OAuthStateStore 포트의 구현체입니다. 리다이렉트로 페이지가 다시 로드되어도
상태가 유지되도록 KeyValueStorage (session storage 등) 에 JSON 으로 저장합니다.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from auth_core.application.oauth.ports import PkceState

if TYPE_CHECKING:
    from auth_core.application.auth.ports import KeyValueStorage

logger = logging.getLogger(__name__)

STATE_KEY_PREFIX = "oauth:state:"


class KeyValueOAuthStateStore:
    """KeyValueStorage 기반 OAuth 상태 저장소."""

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._clock = clock

    async def save(self, data: PkceState, ttl_seconds: int = 600) -> None:
        """상태 저장."""
        key = f"{STATE_KEY_PREFIX}{data.state}"
        value = json.dumps(
            {
                "state": data.state,
                "provider": data.provider,
                "created_at": data.created_at,
                "code_verifier": data.code_verifier,
                "redirect_uri": data.redirect_uri,
                "expires_at": self._clock() + ttl_seconds,
            }
        )
        await self._storage.set(key, value)

    async def consume(self, state: str) -> PkceState | None:
        """상태 조회 및 삭제. 손상된 항목은 폐기하고 None 을 반환합니다."""
        key = f"{STATE_KEY_PREFIX}{state}"
        value = await self._storage.get(key)
        if not value:
            return None

        await self._storage.remove(key)
        try:
            data = json.loads(value)
            if not isinstance(data, dict):
                raise TypeError(f"expected an object, got {type(data).__name__}")
            expires_at = float(data.get("expires_at", 0))
            state_data = PkceState(
                state=data["state"],
                provider=data["provider"],
                created_at=data["created_at"],
                code_verifier=data.get("code_verifier"),
                redirect_uri=data.get("redirect_uri"),
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Corrupted OAuth state entry discarded",
                extra={"state": state[:8], "error": str(e)},
            )
            return None
        if self._clock() > expires_at:
            return None
        return state_data
