"""OAuth DTOs."""

from auth_core.application.oauth.dto.authorization import AuthorizationRedirect
from auth_core.application.oauth.dto.messages import (
    OAUTH_MESSAGE_ADAPTER,
    OAuthCallbackMessage,
    OAuthErrorMessage,
    OAuthMessage,
)

__all__ = [
    "OAUTH_MESSAGE_ADAPTER",
    "AuthorizationRedirect",
    "OAuthCallbackMessage",
    "OAuthErrorMessage",
    "OAuthMessage",
]
