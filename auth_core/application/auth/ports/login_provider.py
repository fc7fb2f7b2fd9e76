"""LoginProvider Port.

인증 제공자 역할별 capability 인터페이스입니다.
EmailVerifiable 은 상속이 아닌 capability 검사로 확인합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from auth_core.application.auth.dto import (
        EmailVerificationConfirmRequest,
        EmailVerificationRequest,
        LoginRequest,
        LogoutRequest,
        RefreshTokenRequest,
    )
    from auth_core.application.common.result import Result
    from auth_core.domain.value_objects import Token


class LoginProvider(Protocol):
    """로그인 제공자 인터페이스.

    구현체:
        - EmailAuthProvider, GoogleAuthProvider, KakaoAuthProvider,
          NaverAuthProvider, FakeAuthProvider (infrastructure/providers/)
    """

    provider_name: str
    config: Any

    async def login(self, request: LoginRequest) -> Result[dict[str, Any]]: ...

    async def logout(self, request: LogoutRequest) -> Result[None]: ...

    async def refresh_token(self, request: RefreshTokenRequest) -> Result[dict[str, Any]]: ...

    async def validate_token(self, token: Token) -> Result[Any]: ...

    async def get_user_info(self, token: Token) -> Result[Any]: ...

    async def is_available(self) -> Result[Any]: ...


@runtime_checkable
class EmailVerifiable(Protocol):
    """이메일 인증번호 기능 (선택 capability)."""

    async def request_email_verification(
        self, request: EmailVerificationRequest
    ) -> Result[None]: ...

    async def verify_email(self, request: EmailVerificationConfirmRequest) -> Result[Any]: ...


def supports_email_verification(provider: object) -> bool:
    """제공자가 이메일 인증 capability 를 가지는지 확인."""
    return isinstance(provider, EmailVerifiable)
