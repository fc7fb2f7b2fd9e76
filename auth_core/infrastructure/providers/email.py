"""Email Auth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from auth_core.application.auth.dto import is_email_login_request
from auth_core.application.common.result import (
    ErrorCode,
    ErrorResult,
    SuccessResult,
    error,
    validation_error,
)
from auth_core.infrastructure.http.platform import build_login_body, platform_headers
from auth_core.infrastructure.providers.base import BackendAuthProvider

if TYPE_CHECKING:
    from auth_core.application.auth.dto import (
        EmailVerificationConfirmRequest,
        EmailVerificationRequest,
        LoginRequest,
        LogoutRequest,
        RefreshTokenRequest,
    )
    from auth_core.domain.value_objects import Token

EMAIL_REQUIRED_ENDPOINTS = (
    "request_verification",
    "verify_email",
    "login",
    "logout",
    "refresh",
    "validate",
    "me",
)


class EmailAuthProvider(BackendAuthProvider):
    """이메일 인증번호 로그인 제공자.

    EmailVerifiable capability 를 함께 구현합니다.
    """

    provider_name = "email"
    display_name = "Email"

    @property
    def required_endpoints(self) -> tuple[str, ...]:
        return EMAIL_REQUIRED_ENDPOINTS

    async def login(self, request: LoginRequest) -> SuccessResult[Any] | ErrorResult:
        if not is_email_login_request(request):
            return error(ErrorCode.VALIDATION_ERROR, "Email login requires an email address.")
        if not request.email:
            return validation_error("email")
        if not request.verify_code:
            return validation_error("verify code")

        return await self._send(
            "login",
            method="POST",
            body=build_login_body(request, self.platform),
            headers=platform_headers(self.platform),
            fallback_message="Email login failed.",
        )

    async def logout(self, request: LogoutRequest) -> SuccessResult[Any] | ErrorResult:
        return await self._logout("logout", request)

    async def refresh_token(self, request: RefreshTokenRequest) -> SuccessResult[Any] | ErrorResult:
        return await self._refresh("refresh", request)

    async def validate_token(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        return await self._send(
            "validate",
            method="POST",
            body={"accessToken": token.access_token},
            retry=False,
            fallback_message="Token validation failed.",
        )

    async def get_user_info(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        return await self._send(
            "me",
            method="POST",
            body={"accessToken": token.access_token},
            retry=False,
            fallback_message="Failed to fetch user info.",
        )

    async def request_email_verification(
        self, request: EmailVerificationRequest
    ) -> SuccessResult[Any] | ErrorResult:
        if not request.email:
            return validation_error("email")
        return await self._send(
            "request_verification",
            method="POST",
            body={"email": request.email},
            fallback_message="Failed to request a verification code.",
        )

    async def verify_email(
        self, request: EmailVerificationConfirmRequest
    ) -> SuccessResult[Any] | ErrorResult:
        if not request.email:
            return validation_error("email")
        if not request.verify_code:
            return validation_error("verify code")
        return await self._send(
            "verify_email",
            method="POST",
            body={"email": request.email, "verifyCode": request.verify_code},
            fallback_message="Email verification failed.",
        )
