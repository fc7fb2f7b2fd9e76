"""Fake Auth Provider.

네트워크 없이 동작하는 결정적 제공자입니다. 테스트와 데모에서 사용합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from auth_core.application.auth.dto import is_email_login_request
from auth_core.application.common.result import (
    ErrorCode,
    ErrorResult,
    SuccessResult,
    error,
    success,
)
from auth_core.domain.value_objects import Token, UserInfo
from auth_core.setup.config.api import AuthProviderConfig

if TYPE_CHECKING:
    from auth_core.application.auth.dto import (
        EmailVerificationConfirmRequest,
        EmailVerificationRequest,
        LoginRequest,
        LogoutRequest,
        RefreshTokenRequest,
    )

FAKE_ACCESS_TOKEN = "fake-access-token-123"
FAKE_REFRESH_TOKEN = "fake-refresh-token-123"
FAKE_REFRESHED_ACCESS_TOKEN = "fake-access-token-456"
FAKE_VERIFY_CODE = "123456"
FAILING_EMAIL = "fail@example.com"
INVALID_VERIFICATION_EMAIL = "invalid@example.com"
TOKEN_TTL_SECONDS = 3600


class FakeAuthProvider:
    """인메모리 가짜 인증 백엔드.

    - fail@example.com 로그인은 실패
    - refresh 는 fake-refresh-token-123 만 허용
    - invalid@example.com 인증번호 요청은 실패
    """

    provider_name = "fake"

    def __init__(self, config: AuthProviderConfig | None = None) -> None:
        self.config = config or AuthProviderConfig(timeout=5.0, retry_count=2)
        self._current_user: UserInfo | None = None
        self._current_token: Token | None = None

    @property
    def is_logged_in(self) -> bool:
        return self._current_token is not None

    @property
    def current_user(self) -> UserInfo | None:
        return self._current_user

    def reset(self) -> None:
        self._current_user = None
        self._current_token = None

    async def login(self, request: LoginRequest) -> SuccessResult[Any] | ErrorResult:
        if not is_email_login_request(request):
            return error(ErrorCode.AUTH_ERROR, "Unsupported login method.")
        if request.email == FAILING_EMAIL:
            return error(ErrorCode.AUTH_ERROR, "Login failed: invalid email.")

        self._current_user = UserInfo(
            id="u1",
            email=request.email,
            provider="email",
            nickname="Test User",
        )
        self._current_token = Token(
            access_token=FAKE_ACCESS_TOKEN,
            refresh_token=FAKE_REFRESH_TOKEN,
            expires_at=int(time.time()) + TOKEN_TTL_SECONDS,
        )
        return success(
            "Login succeeded.",
            {**self._current_token.to_payload(), "userInfo": self._current_user.to_payload()},
        )

    async def logout(self, request: LogoutRequest) -> SuccessResult[None]:
        self.reset()
        return success("Logout succeeded.")

    async def refresh_token(self, request: RefreshTokenRequest) -> SuccessResult[Any] | ErrorResult:
        if request.refresh_token != FAKE_REFRESH_TOKEN:
            return error(ErrorCode.AUTH_ERROR, "Refresh token is invalid.")

        self._current_token = Token(
            access_token=FAKE_REFRESHED_ACCESS_TOKEN,
            refresh_token=FAKE_REFRESH_TOKEN,
            expires_at=int(time.time()) + TOKEN_TTL_SECONDS,
        )
        return success("Token refreshed.", self._current_token.to_payload())

    async def validate_token(self, token: Token) -> SuccessResult[bool]:
        if token.access_token in (FAKE_ACCESS_TOKEN, FAKE_REFRESHED_ACCESS_TOKEN):
            return success("Token is valid.", True)
        return success("Token is invalid.", False)

    async def get_user_info(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        if self._current_user is None:
            return error(ErrorCode.USER_INFO_FAILED, "User info not found.")
        return success("Fetched user info.", self._current_user.to_payload())

    async def is_available(self) -> SuccessResult[bool]:
        return success("Service is available.", True)

    async def request_email_verification(
        self, request: EmailVerificationRequest
    ) -> SuccessResult[None] | ErrorResult:
        if request.email == INVALID_VERIFICATION_EMAIL:
            return error(ErrorCode.AUTH_ERROR, "Email verification request failed.")
        return success("Verification code sent.")

    async def verify_email(
        self, request: EmailVerificationConfirmRequest
    ) -> SuccessResult[Any] | ErrorResult:
        if request.verify_code != FAKE_VERIFY_CODE:
            return error(ErrorCode.AUTH_ERROR, "Verification code does not match.")
        return success("Email verified.", {"email": request.email, "verified": True})
