"""Naver Auth Provider."""

from auth_core.infrastructure.providers.oauth import OAuthBackendProvider


class NaverAuthProvider(OAuthBackendProvider):
    """Naver OAuth 제공자."""

    provider_name = "naver"
    display_name = "Naver"
    endpoint_group = "naver"
