"""Kakao Authorization URL Builder."""

from __future__ import annotations

from urllib.parse import urlencode

from auth_core.infrastructure.oauth.authorization.base import AuthorizationUrlBuilderBase

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"


class KakaoAuthorizationUrlBuilder(AuthorizationUrlBuilderBase):
    """Kakao 인증 URL 생성기."""

    name = "kakao"

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        scope: str | None,
        redirect_uri: str | None,
    ) -> str:
        params = self._base_params(state=state, redirect_uri=redirect_uri)
        # 동의항목은 개발자 콘솔에서 관리, 명시된 경우만 전달
        if scope:
            params["scope"] = scope
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        return f"{KAKAO_AUTH_URL}?{urlencode(params)}"
