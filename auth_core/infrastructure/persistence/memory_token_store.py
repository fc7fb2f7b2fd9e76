"""In-memory Token Store."""

from __future__ import annotations

from dataclasses import dataclass

from auth_core.application.common.result import ErrorResult, SuccessResult, success
from auth_core.domain.value_objects import Token


@dataclass(slots=True)
class TokenCell:
    """저장소가 소유하는 단일 토큰 셀."""

    token: Token | None = None


class InMemoryTokenStore:
    """메모리 토큰 저장소.

    테스트용이자 AuthManager 의 기본 저장소입니다.
    셀을 명시적으로 주입받으며 모듈 전역 상태를 사용하지 않습니다.
    """

    def __init__(self, cell: TokenCell | None = None) -> None:
        self._cell = cell if cell is not None else TokenCell()

    async def save_token(self, token: Token) -> SuccessResult[None]:
        self._cell.token = token
        return success("Token saved.")

    async def get_token(self) -> SuccessResult[Token | None]:
        return success("Token loaded.", self._cell.token)

    async def remove_token(self) -> SuccessResult[None]:
        self._cell.token = None
        return success("Token removed.")

    async def has_token(self) -> SuccessResult[bool]:
        return success("Token presence checked.", self._cell.token is not None)

    async def is_token_expired(self) -> SuccessResult[bool] | ErrorResult:
        token = self._cell.token
        return success("Token expiry checked.", token is not None and token.is_expired())

    async def clear(self) -> SuccessResult[None]:
        self._cell.token = None
        return success("Storage cleared.")
