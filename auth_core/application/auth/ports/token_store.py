"""TokenStore Port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from auth_core.application.common.result import Result
    from auth_core.domain.value_objects import Token


class TokenStore(Protocol):
    """토큰 저장소 인터페이스.

    모든 연산은 Result 를 반환하며 예외를 던지지 않습니다.

    구현체:
        - InMemoryTokenStore, WebTokenStore, MobileTokenStore,
          NativeBridgeTokenStore (infrastructure/persistence/)
    """

    async def save_token(self, token: Token) -> Result[None]: ...

    async def get_token(self) -> Result[Token | None]: ...

    async def remove_token(self) -> Result[None]: ...

    async def has_token(self) -> Result[bool]: ...

    async def is_token_expired(self) -> Result[bool]:
        """expires_at 이 없으면 False (만료되지 않음)."""
        ...

    async def clear(self) -> Result[None]:
        """인증 관련 상태 전체 삭제 (remove_token 보다 넓은 범위)."""
        ...
