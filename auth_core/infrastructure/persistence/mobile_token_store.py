"""Mobile Token Store.

토큰 전체를 하나의 JSON 값으로 secure storage 에 저장합니다.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from auth_core.application.common.result import (
    ErrorResult,
    SuccessResult,
    storage_clear_error,
    success,
    token_delete_error,
    token_read_error,
    token_save_error,
)
from auth_core.domain.value_objects import Token

if TYPE_CHECKING:
    from auth_core.application.auth.ports import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "auth_core_tokens"


class MobileTokenStore:
    """모바일 secure storage 토큰 저장소."""

    def __init__(self, storage: KeyValueStorage, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._storage_key = storage_key

    async def save_token(self, token: Token) -> SuccessResult[None] | ErrorResult:
        try:
            await self._storage.set(self._storage_key, json.dumps(token.to_payload()))
        except Exception as e:
            logger.error("Token save failed", extra={"store": "mobile", "error": str(e)})
            return token_save_error(str(e))
        return success("Token saved.")

    async def get_token(self) -> SuccessResult[Token | None] | ErrorResult:
        try:
            raw = await self._storage.get(self._storage_key)
            if not raw:
                return success("No stored token.", None)
            token = Token.from_payload(json.loads(raw))
        except Exception as e:
            logger.error("Token read failed", extra={"store": "mobile", "error": str(e)})
            return token_read_error(str(e))
        return success("Token loaded.", token)

    async def remove_token(self) -> SuccessResult[None] | ErrorResult:
        try:
            await self._storage.remove(self._storage_key)
        except Exception as e:
            logger.error("Token delete failed", extra={"store": "mobile", "error": str(e)})
            return token_delete_error(str(e))
        return success("Token removed.")

    async def has_token(self) -> SuccessResult[bool] | ErrorResult:
        result = await self.get_token()
        if isinstance(result, ErrorResult):
            return result
        return success("Token presence checked.", result.data is not None)

    async def is_token_expired(self) -> SuccessResult[bool] | ErrorResult:
        result = await self.get_token()
        if isinstance(result, ErrorResult):
            return result
        token = result.data
        return success("Token expiry checked.", token is not None and token.is_expired())

    async def clear(self) -> SuccessResult[None] | ErrorResult:
        try:
            await self._storage.remove(self._storage_key)
        except Exception as e:
            logger.error("Storage clear failed", extra={"store": "mobile", "error": str(e)})
            return storage_clear_error(str(e))
        return success("Storage cleared.")
