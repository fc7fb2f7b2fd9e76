"""Google Authorization URL Builder."""

from __future__ import annotations

from urllib.parse import urlencode

from auth_core.infrastructure.oauth.authorization.base import AuthorizationUrlBuilderBase

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"


class GoogleAuthorizationUrlBuilder(AuthorizationUrlBuilderBase):
    """Google 인증 URL 생성기."""

    name = "google"

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        scope: str | None,
        redirect_uri: str | None,
    ) -> str:
        params = self._base_params(state=state, redirect_uri=redirect_uri)
        params.update(
            {
                "scope": scope or " ".join(self.default_scopes),
                "access_type": "offline",
                "include_granted_scopes": "true",
                "prompt": "consent",
            }
        )
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"
