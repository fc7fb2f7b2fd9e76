"""Google Auth Provider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from auth_core.application.common.result import (
    ErrorResult,
    SuccessResult,
    success,
    token_validation_error,
    user_info_error,
)
from auth_core.domain.value_objects import UserInfo
from auth_core.infrastructure.http.request import RequestOptions, call_backend
from auth_core.infrastructure.providers.oauth import OAuthBackendProvider

if TYPE_CHECKING:
    from auth_core.domain.value_objects import Token
    from auth_core.setup.config.api import GoogleAuthProviderConfig

logger = logging.getLogger(__name__)

GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleAuthProvider(OAuthBackendProvider):
    """Google OAuth 제공자.

    verify_with_google_userinfo 가 켜져 있으면 토큰 검증과 사용자 정보 조회를
    백엔드 대신 Google userinfo 엔드포인트로 직접 수행하고,
    email_verified 가 참이 아니면 실패로 처리합니다.
    """

    provider_name = "google"
    display_name = "Google"
    endpoint_group = "google"

    config: GoogleAuthProviderConfig

    async def validate_token(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        if not self.config.verify_with_google_userinfo:
            return await super().validate_token(token)

        profile = await self._fetch_verified_profile(token)
        if isinstance(profile, ErrorResult):
            return token_validation_error(profile.message)
        return success("Google token is valid.", {"valid": True, "email": profile.get("email")})

    async def get_user_info(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        if not self.config.verify_with_google_userinfo:
            return await super().get_user_info(token)

        profile = await self._fetch_verified_profile(token)
        if isinstance(profile, ErrorResult):
            return user_info_error(profile.message)
        try:
            user_info = UserInfo(
                id=str(profile["sub"]),
                email=str(profile["email"]),
                provider=self.provider_name,
                nickname=profile.get("name") or profile.get("given_name"),
            )
        except KeyError as e:
            return user_info_error(f"Google profile is missing field: {e.args[0]}")
        return success("Fetched Google user info.", user_info.to_payload())

    async def _fetch_verified_profile(self, token: Token) -> dict[str, Any] | ErrorResult:
        result = await call_backend(
            self._http_client,
            self.api_config,
            GOOGLE_PROFILE_URL,
            options=RequestOptions(
                method="GET",
                headers={"Authorization": f"Bearer {token.access_token}"},
            ),
            fallback_message="Google userinfo request failed.",
        )
        if isinstance(result, ErrorResult):
            return result

        profile = result.data
        if not isinstance(profile, dict):
            return token_validation_error("Google userinfo response is malformed.")
        if profile.get("email_verified") not in (True, "true"):
            logger.warning(
                "Google account email is not verified",
                extra={"provider": self.provider_name, "sub": profile.get("sub")},
            )
            return token_validation_error("Google account email is not verified.")
        return profile
