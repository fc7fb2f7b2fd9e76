"""AuthorizationUrlBuilder Port."""

from typing import Protocol


class AuthorizationUrlBuilder(Protocol):
    """제공자 인증 URL 생성기.

    구현체:
        - GoogleAuthorizationUrlBuilder, KakaoAuthorizationUrlBuilder,
          NaverAuthorizationUrlBuilder (infrastructure/oauth/authorization/)
    """

    name: str
    supports_pkce: bool
    redirect_uri: str | None

    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        scope: str | None,
        redirect_uri: str | None,
    ) -> str: ...
