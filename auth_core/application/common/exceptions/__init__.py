"""Application Exceptions.

공통 예외만 포함합니다. OAuth 관련 예외는 auth_core.application.oauth.exceptions 에서 import 하세요.
"""

from auth_core.application.common.exceptions.base import (
    ApplicationError,
    ConfigurationError,
    PlatformNotSupportedError,
)
from auth_core.application.common.exceptions.transport import (
    MissingRefreshTokenError,
    RequestTimeoutError,
    ResponseParseError,
    TransportError,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "MissingRefreshTokenError",
    "PlatformNotSupportedError",
    "RequestTimeoutError",
    "ResponseParseError",
    "TransportError",
]
