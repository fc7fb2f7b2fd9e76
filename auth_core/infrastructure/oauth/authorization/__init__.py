"""OAuth Authorization URL Builders."""

from auth_core.infrastructure.oauth.authorization.base import AuthorizationUrlBuilderBase
from auth_core.infrastructure.oauth.authorization.google import GoogleAuthorizationUrlBuilder
from auth_core.infrastructure.oauth.authorization.kakao import KakaoAuthorizationUrlBuilder
from auth_core.infrastructure.oauth.authorization.naver import NaverAuthorizationUrlBuilder
from auth_core.infrastructure.oauth.authorization.registry import build_url_builders

__all__ = [
    "AuthorizationUrlBuilderBase",
    "GoogleAuthorizationUrlBuilder",
    "KakaoAuthorizationUrlBuilder",
    "NaverAuthorizationUrlBuilder",
    "build_url_builders",
]
