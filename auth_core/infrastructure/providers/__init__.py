"""Auth Provider Implementations."""

from auth_core.infrastructure.providers.base import BackendAuthProvider
from auth_core.infrastructure.providers.email import EmailAuthProvider
from auth_core.infrastructure.providers.factory import create_auth_provider, is_factory_error
from auth_core.infrastructure.providers.fake import FakeAuthProvider
from auth_core.infrastructure.providers.google import GoogleAuthProvider
from auth_core.infrastructure.providers.kakao import KakaoAuthProvider
from auth_core.infrastructure.providers.naver import NaverAuthProvider
from auth_core.infrastructure.providers.oauth import OAuthBackendProvider

__all__ = [
    "BackendAuthProvider",
    "EmailAuthProvider",
    "FakeAuthProvider",
    "GoogleAuthProvider",
    "KakaoAuthProvider",
    "NaverAuthProvider",
    "OAuthBackendProvider",
    "create_auth_provider",
    "is_factory_error",
]
