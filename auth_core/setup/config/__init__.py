"""Configuration."""

from auth_core.setup.config.api import (
    ApiConfig,
    ApiEndpoints,
    AuthProviderConfig,
    GoogleAuthProviderConfig,
    KakaoAuthProviderConfig,
    NaverAuthProviderConfig,
)
from auth_core.setup.config.settings import Settings, get_settings

__all__ = [
    "ApiConfig",
    "ApiEndpoints",
    "AuthProviderConfig",
    "GoogleAuthProviderConfig",
    "KakaoAuthProviderConfig",
    "NaverAuthProviderConfig",
    "Settings",
    "get_settings",
]
