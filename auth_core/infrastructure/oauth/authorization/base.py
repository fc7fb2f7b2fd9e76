"""Authorization URL Builder Base Class.

클라이언트 측에서는 client_id 만 사용합니다. 코드 교환과 secret 은 백엔드 책임입니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthorizationUrlBuilderBase(ABC):
    """인증 URL 생성기 추상 클래스."""

    name: str
    supports_pkce: bool = True

    def __init__(self, *, client_id: str, redirect_uri: str | None = None) -> None:
        if not client_id:
            raise ValueError(f"{self.name} client_id is required")
        self.client_id = client_id
        self.redirect_uri = redirect_uri

    @property
    def default_scopes(self) -> tuple[str, ...]:
        """기본 스코프."""
        return ()

    @abstractmethod
    def build_authorization_url(
        self,
        *,
        state: str,
        code_challenge: str | None,
        scope: str | None,
        redirect_uri: str | None,
    ) -> str:
        """인증 URL 생성."""
        raise NotImplementedError

    def _base_params(self, *, state: str, redirect_uri: str | None) -> dict[str, str]:
        final_redirect_uri = redirect_uri or self.redirect_uri
        if not final_redirect_uri:
            raise ValueError(f"{self.name} redirect_uri is required")
        return {
            "client_id": self.client_id,
            "redirect_uri": final_redirect_uri,
            "response_type": "code",
            "state": state,
        }
