"""Auth Ports."""

from auth_core.application.auth.ports.factories import AuthProviderFactory, TokenStoreFactory
from auth_core.application.auth.ports.http_client import HttpClient, HttpRequest, HttpResponse
from auth_core.application.auth.ports.key_value_storage import KeyValueStorage
from auth_core.application.auth.ports.login_provider import (
    EmailVerifiable,
    LoginProvider,
    supports_email_verification,
)
from auth_core.application.auth.ports.native_bridge import (
    AuthenticatedRequest,
    AuthenticatedResponse,
    AuthStatusEvent,
    AuthStatusListener,
    NativeBridge,
    SessionInfo,
    UserProfile,
)
from auth_core.application.auth.ports.token_store import TokenStore

__all__ = [
    "AuthProviderFactory",
    "AuthStatusEvent",
    "AuthStatusListener",
    "AuthenticatedRequest",
    "AuthenticatedResponse",
    "EmailVerifiable",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "KeyValueStorage",
    "LoginProvider",
    "NativeBridge",
    "SessionInfo",
    "TokenStore",
    "TokenStoreFactory",
    "UserProfile",
    "supports_email_verification",
]
