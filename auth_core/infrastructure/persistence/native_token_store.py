"""Native Bridge Token Store.

실제 토큰은 네이티브 브리지가 소유합니다. 이 저장소는 토큰을 보관하지 않고
브리지 세션 상태를 TokenStore 인터페이스로 번역합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from auth_core.application.common.result import (
    ErrorCode,
    ErrorResult,
    SuccessResult,
    error,
    storage_clear_error,
    success,
    token_delete_error,
    token_read_error,
)
from auth_core.domain.value_objects import Token

if TYPE_CHECKING:
    from auth_core.application.auth.ports import NativeBridge

logger = logging.getLogger(__name__)

NATIVE_MANAGED_TOKEN = "managed_by_native"


class NativeBridgeTokenStore:
    """react-native 브리지 위임 토큰 저장소."""

    def __init__(self, bridge: NativeBridge) -> None:
        self._bridge = bridge

    async def save_token(self, token: Token) -> SuccessResult[None]:
        # 토큰은 네이티브 측이 저장
        return success("Token is managed by the native bridge.")

    async def get_token(self) -> SuccessResult[Token | None] | ErrorResult:
        try:
            session = await self._bridge.get_session()
        except Exception as e:
            logger.error("Native session lookup failed", extra={"error": str(e)})
            return token_read_error(str(e))
        if not session.is_logged_in:
            return success("No native session.", None)
        return success("Native session is active.", Token(access_token=NATIVE_MANAGED_TOKEN))

    async def remove_token(self) -> SuccessResult[None] | ErrorResult:
        return await self._sign_out(token_delete_error)

    async def has_token(self) -> SuccessResult[bool] | ErrorResult:
        try:
            session = await self._bridge.get_session()
        except Exception as e:
            logger.error("Native session lookup failed", extra={"error": str(e)})
            return token_read_error(str(e))
        return success("Token presence checked.", session.is_logged_in)

    async def is_token_expired(self) -> SuccessResult[bool]:
        try:
            session = await self._bridge.get_session()
        except Exception as e:
            logger.warning(
                "Native session lookup failed, treating as expired",
                extra={"error": str(e)},
            )
            return success("Native session is unreachable.", True)
        return success("Token expiry checked.", not session.is_logged_in)

    async def clear(self) -> SuccessResult[None] | ErrorResult:
        return await self._sign_out(storage_clear_error)

    async def _sign_out(self, on_error) -> SuccessResult[None] | ErrorResult:
        try:
            signed_out = await self._bridge.sign_out()
        except Exception as e:
            logger.error("Native sign-out failed", extra={"error": str(e)})
            return on_error(str(e))
        if not signed_out:
            return error(ErrorCode.STORAGE_ERROR, "Native bridge refused to sign out.")
        return success("Signed out through the native bridge.")
