"""Kakao Auth Provider."""

from auth_core.infrastructure.providers.oauth import OAuthBackendProvider


class KakaoAuthProvider(OAuthBackendProvider):
    """Kakao OAuth 제공자."""

    provider_name = "kakao"
    display_name = "Kakao"
    endpoint_group = "kakao"
