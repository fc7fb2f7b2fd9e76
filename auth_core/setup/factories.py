"""Factory Setup.

Settings 로부터 AuthManager, PKCE 플로우, 메시지 채널을 조립합니다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from auth_core.application.common.exceptions import ConfigurationError
from auth_core.setup.config import Settings, get_settings
from auth_core.setup.logging import setup_logging_from_settings

if TYPE_CHECKING:
    from auth_core.application.auth.ports import HttpClient, KeyValueStorage, NativeBridge
    from auth_core.application.auth.services import AuthManager, AuthManagerConfig
    from auth_core.application.oauth.ports import OAuthStateStore
    from auth_core.application.oauth.services import OAuthMessageChannel, PkceFlowService

logger = logging.getLogger(__name__)


# ============================================================
# AuthManager
# ============================================================


def create_auth_manager(config: AuthManagerConfig) -> AuthManager:
    """AuthManager 생성.

    구성에 팩토리가 없으면 기본 제공자/저장소 팩토리를 채웁니다.

    Raises:
        ConfigurationError: 구성 오류 (원인 메시지 포함)
    """
    from auth_core.application.auth.services import AuthManager
    from auth_core.infrastructure.persistence import create_token_store
    from auth_core.infrastructure.providers import create_auth_provider

    config = replace(
        config,
        provider_factory=config.provider_factory or create_auth_provider,
        token_store_factory=config.token_store_factory or create_token_store,
    )
    try:
        return AuthManager(config)
    except Exception as e:
        logger.error("AuthManager construction failed", extra={"error": str(e)})
        raise ConfigurationError(f"[AuthManagerFactory] {e}") from e


def create_auth_manager_from_settings(
    settings: Settings | None = None,
    *,
    http_client: HttpClient | None = None,
    storage: KeyValueStorage | None = None,
    native_bridge: NativeBridge | None = None,
    configure_logging: bool = True,
) -> AuthManager:
    """환경 설정으로 AuthManager 생성.

    http_client 가 없으면 HttpxHttpClient 를 생성하고 매니저가 소유합니다
    (fake 제공자는 제외). 소유한 클라이언트는 manager.close() 로 닫습니다.
    configure_logging 이 True 이면 log_level / log_format 으로 로깅을 설정합니다.
    """
    from auth_core.application.auth.services import AuthManagerConfig
    from auth_core.domain.enums import AuthProviderType

    settings = settings or get_settings()
    if configure_logging:
        setup_logging_from_settings(settings)

    provider_type = settings.provider_type
    owns_http_client = False
    if http_client is None and provider_type is not AuthProviderType.FAKE:
        from auth_core.infrastructure.http import HttpxHttpClient

        http_client = HttpxHttpClient()
        owns_http_client = True

    config = AuthManagerConfig(
        provider_type=provider_type,
        provider_config=settings.provider_config(provider_type),
        api_config=settings.api_config(),
        http_client=http_client,
        owns_http_client=owns_http_client,
        token_store_type=settings.token_store_type,
        storage=storage,
        platform=settings.platform,
        native_bridge=native_bridge,
        device_id=settings.device_id,
    )
    return create_auth_manager(config)


# ============================================================
# OAuth
# ============================================================


def create_pkce_flow(
    settings: Settings | None = None,
    state_store: OAuthStateStore | None = None,
) -> PkceFlowService:
    """설정된 client_id 로 URL 생성기를 등록한 PKCE 플로우 생성."""
    from auth_core.application.oauth.services import PkceFlowService
    from auth_core.infrastructure.oauth import InMemoryOAuthStateStore, build_url_builders

    settings = settings or get_settings()
    return PkceFlowService(
        state_store or InMemoryOAuthStateStore(),
        build_url_builders(settings),
        state_ttl_seconds=settings.oauth_state_ttl_seconds,
    )


def create_message_channel(settings: Settings | None = None) -> OAuthMessageChannel:
    """앱 origin 기준 메시지 채널 생성.

    Raises:
        ConfigurationError: app_origin 이 올바른 origin 이 아닌 경우
    """
    from auth_core.application.oauth.services import OAuthMessageChannel

    settings = settings or get_settings()
    try:
        return OAuthMessageChannel(settings.app_origin)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
