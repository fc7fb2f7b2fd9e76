"""OAuth Exceptions."""

from auth_core.application.common.exceptions.base import ApplicationError


class InvalidStateError(ApplicationError):
    """OAuth state 검증 실패 (없음, 만료, 재사용, 제공자 불일치)."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class UnsupportedOAuthProviderError(ApplicationError):
    """등록되지 않은 OAuth 제공자."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported OAuth provider: {provider}")
