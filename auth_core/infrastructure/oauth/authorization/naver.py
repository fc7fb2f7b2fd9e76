"""Naver Authorization URL Builder."""

from __future__ import annotations

from urllib.parse import urlencode

from auth_core.infrastructure.oauth.authorization.base import AuthorizationUrlBuilderBase

NAVER_AUTH_URL = "https://nid.naver.com/oauth2.0/authorize"


class NaverAuthorizationUrlBuilder(AuthorizationUrlBuilderBase):
    """Naver 인증 URL 생성기. PKCE 미지원으로 state 만 사용합니다."""

    name = "naver"
    supports_pkce = False

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("profile", "email")

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        scope: str | None,
        redirect_uri: str | None,
    ) -> str:
        params = self._base_params(state=state, redirect_uri=redirect_uri)
        scope_values = scope or " ".join(self.default_scopes)
        if scope_values:
            params["scope"] = scope_values
        return f"{NAVER_AUTH_URL}?{urlencode(params)}"
