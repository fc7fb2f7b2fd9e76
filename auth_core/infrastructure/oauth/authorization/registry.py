"""Authorization URL Builder Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from auth_core.domain.enums import AuthProviderType
from auth_core.infrastructure.oauth.authorization.google import GoogleAuthorizationUrlBuilder
from auth_core.infrastructure.oauth.authorization.kakao import KakaoAuthorizationUrlBuilder
from auth_core.infrastructure.oauth.authorization.naver import NaverAuthorizationUrlBuilder

if TYPE_CHECKING:
    from auth_core.application.oauth.ports import AuthorizationUrlBuilder
    from auth_core.setup.config.settings import Settings


def build_url_builders(settings: Settings) -> dict[str, AuthorizationUrlBuilder]:
    """client_id 가 설정된 제공자만 등록합니다."""
    builders: dict[str, AuthorizationUrlBuilder] = {}
    if settings.google_client_id:
        builders[AuthProviderType.GOOGLE.value] = GoogleAuthorizationUrlBuilder(
            client_id=settings.google_client_id,
            redirect_uri=settings.redirect_uri_for(AuthProviderType.GOOGLE),
        )
    if settings.kakao_client_id:
        builders[AuthProviderType.KAKAO.value] = KakaoAuthorizationUrlBuilder(
            client_id=settings.kakao_client_id,
            redirect_uri=settings.redirect_uri_for(AuthProviderType.KAKAO),
        )
    if settings.naver_client_id:
        builders[AuthProviderType.NAVER.value] = NaverAuthorizationUrlBuilder(
            client_id=settings.naver_client_id,
            redirect_uri=settings.redirect_uri_for(AuthProviderType.NAVER),
        )
    return builders
