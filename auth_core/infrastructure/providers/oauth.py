"""OAuth Backend Provider Base.

Google / Kakao / Naver 는 같은 형태로 자기 엔드포인트 묶음만 다릅니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from auth_core.application.auth.dto import is_oauth_login_request
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
    from auth_core.application.auth.dto import LoginRequest, LogoutRequest, RefreshTokenRequest
    from auth_core.domain.value_objects import Token

OAUTH_OPERATIONS = ("login", "logout", "refresh", "validate", "userinfo")


class OAuthBackendProvider(BackendAuthProvider):
    """백엔드 OAuth 엔드포인트를 사용하는 제공자."""

    endpoint_group: str

    @property
    def required_endpoints(self) -> tuple[str, ...]:
        return tuple(f"{self.endpoint_group}_{operation}" for operation in OAUTH_OPERATIONS)

    def _endpoint_name(self, operation: str) -> str:
        return f"{self.endpoint_group}_{operation}"

    async def login(self, request: LoginRequest) -> SuccessResult[Any] | ErrorResult:
        # providerName 이 아니라 요청 형태로 판별
        if not is_oauth_login_request(request):
            return error(
                ErrorCode.VALIDATION_ERROR,
                f"{self.display_name} login requires an authorization code.",
            )
        if not request.auth_code:
            return validation_error(f"{self.display_name} authorization code")

        return await self._send(
            self._endpoint_name("login"),
            method="POST",
            body=build_login_body(request, self.platform),
            headers=platform_headers(self.platform),
            fallback_message=f"{self.display_name} login failed.",
        )

    async def logout(self, request: LogoutRequest) -> SuccessResult[Any] | ErrorResult:
        return await self._logout(self._endpoint_name("logout"), request)

    async def refresh_token(self, request: RefreshTokenRequest) -> SuccessResult[Any] | ErrorResult:
        return await self._refresh(self._endpoint_name("refresh"), request)

    async def validate_token(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        return await self._send(
            self._endpoint_name("validate"),
            method="POST",
            body={"accessToken": token.access_token},
            fallback_message=f"{self.display_name} token validation failed.",
        )

    async def get_user_info(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        return await self._send(
            self._endpoint_name("userinfo"),
            method="GET",
            headers={"Authorization": f"Bearer {token.access_token}"},
            fallback_message=f"Failed to fetch {self.display_name} user info.",
        )
