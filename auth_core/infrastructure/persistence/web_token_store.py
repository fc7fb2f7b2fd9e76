"""Web Token Store.

토큰 필드를 개별 키로 저장합니다. clear 는 사용자 관련 보조 키까지 지웁니다.
"""

from __future__ import annotations

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

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"
EXPIRES_AT_KEY = "expiresAt"
AUXILIARY_KEYS = ("userId", "userInfo", "lastLoginTime", "authProvider")


class WebTokenStore:
    """브라우저 storage 류 키-값 매체에 토큰을 저장합니다."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    async def save_token(self, token: Token) -> SuccessResult[None] | ErrorResult:
        try:
            await self._storage.set(ACCESS_TOKEN_KEY, token.access_token)
            if token.refresh_token is not None:
                await self._storage.set(REFRESH_TOKEN_KEY, token.refresh_token)
            else:
                await self._storage.remove(REFRESH_TOKEN_KEY)
            if token.expires_at is not None:
                await self._storage.set(EXPIRES_AT_KEY, str(token.expires_at))
            else:
                await self._storage.remove(EXPIRES_AT_KEY)
        except Exception as e:
            logger.error("Token save failed", extra={"store": "web", "error": str(e)})
            return token_save_error(str(e))
        return success("Token saved.")

    async def get_token(self) -> SuccessResult[Token | None] | ErrorResult:
        try:
            access_token = await self._storage.get(ACCESS_TOKEN_KEY)
            if not access_token:
                return success("No stored token.", None)
            refresh_token = await self._storage.get(REFRESH_TOKEN_KEY)
            raw_expires_at = await self._storage.get(EXPIRES_AT_KEY)
            expires_at = float(raw_expires_at) if raw_expires_at else None
            token = Token(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_at=expires_at,
            )
        except Exception as e:
            logger.error("Token read failed", extra={"store": "web", "error": str(e)})
            return token_read_error(str(e))
        return success("Token loaded.", token)

    async def remove_token(self) -> SuccessResult[None] | ErrorResult:
        try:
            for key in (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, EXPIRES_AT_KEY):
                await self._storage.remove(key)
        except Exception as e:
            logger.error("Token delete failed", extra={"store": "web", "error": str(e)})
            return token_delete_error(str(e))
        return success("Token removed.")

    async def has_token(self) -> SuccessResult[bool] | ErrorResult:
        try:
            access_token = await self._storage.get(ACCESS_TOKEN_KEY)
        except Exception as e:
            return token_read_error(str(e))
        return success("Token presence checked.", bool(access_token))

    async def is_token_expired(self) -> SuccessResult[bool] | ErrorResult:
        result = await self.get_token()
        if isinstance(result, ErrorResult):
            return result
        token = result.data
        return success("Token expiry checked.", token is not None and token.is_expired())

    async def clear(self) -> SuccessResult[None] | ErrorResult:
        try:
            for key in (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, EXPIRES_AT_KEY, *AUXILIARY_KEYS):
                await self._storage.remove(key)
        except Exception as e:
            logger.error("Storage clear failed", extra={"store": "web", "error": str(e)})
            return storage_clear_error(str(e))
        return success("Storage cleared.")
