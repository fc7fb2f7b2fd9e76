"""Auth Provider Factory.

알 수 없는 종류나 잘못된 구성은 예외 대신 ErrorResult 로 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from auth_core.application.common.exceptions import ConfigurationError
from auth_core.application.common.result import ErrorCode, ErrorResult, error
from auth_core.domain.enums import AuthProviderType, ClientPlatform
from auth_core.infrastructure.providers.email import EmailAuthProvider
from auth_core.infrastructure.providers.fake import FakeAuthProvider
from auth_core.infrastructure.providers.google import GoogleAuthProvider
from auth_core.infrastructure.providers.kakao import KakaoAuthProvider
from auth_core.infrastructure.providers.naver import NaverAuthProvider
from auth_core.setup.config.api import (
    AuthProviderConfig,
    GoogleAuthProviderConfig,
    KakaoAuthProviderConfig,
    NaverAuthProviderConfig,
)

if TYPE_CHECKING:
    from auth_core.application.auth.ports import HttpClient, LoginProvider
    from auth_core.setup.config.api import ApiConfig

logger = logging.getLogger(__name__)


def is_factory_error(result: object) -> bool:
    return isinstance(result, ErrorResult)


def create_auth_provider(
    provider_type: AuthProviderType | str,
    config: AuthProviderConfig | None,
    http_client: HttpClient | None,
    api_config: ApiConfig | None,
    platform: ClientPlatform | str = ClientPlatform.WEB,
) -> LoginProvider | ErrorResult:
    """제공자 종류 태그와 구성으로 제공자를 생성합니다."""
    try:
        kind = AuthProviderType(provider_type)
    except ValueError:
        return error(ErrorCode.FACTORY_ERROR, f"Unsupported provider type: {provider_type}")

    if kind is AuthProviderType.FAKE:
        return FakeAuthProvider(config)

    if http_client is None or api_config is None:
        return error(
            ErrorCode.FACTORY_ERROR,
            f"{kind.display_name} provider requires http_client and api_config.",
        )

    try:
        if kind is AuthProviderType.EMAIL:
            return EmailAuthProvider(
                config or AuthProviderConfig(), http_client, api_config, platform
            )
        if kind is AuthProviderType.GOOGLE:
            if not isinstance(config, GoogleAuthProviderConfig) or not config.google_client_id:
                return _missing_client_id(kind)
            return GoogleAuthProvider(config, http_client, api_config, platform)
        if kind is AuthProviderType.KAKAO:
            if not isinstance(config, KakaoAuthProviderConfig) or not config.kakao_client_id:
                return _missing_client_id(kind)
            return KakaoAuthProvider(config, http_client, api_config, platform)
        if not isinstance(config, NaverAuthProviderConfig) or not config.naver_client_id:
            return _missing_client_id(kind)
        return NaverAuthProvider(config, http_client, api_config, platform)
    except (ConfigurationError, ValueError) as e:
        logger.warning(
            "Auth provider construction failed",
            extra={"provider": kind.value, "error": str(e)},
        )
        return error(ErrorCode.FACTORY_ERROR, str(e))


def _missing_client_id(kind: AuthProviderType) -> ErrorResult:
    return error(
        ErrorCode.FACTORY_ERROR,
        f"{kind.display_name} provider requires a {kind.value}_client_id.",
    )
