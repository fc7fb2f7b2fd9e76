"""Auth DTOs."""

from auth_core.application.auth.dto.requests import (
    EmailLoginRequest,
    EmailVerificationConfirmRequest,
    EmailVerificationRequest,
    LoginRequest,
    LogoutRequest,
    OAuthLoginRequest,
    RefreshTokenRequest,
    is_email_login_request,
    is_oauth_login_request,
    login_request_from_payload,
)

__all__ = [
    "EmailLoginRequest",
    "EmailVerificationConfirmRequest",
    "EmailVerificationRequest",
    "LoginRequest",
    "LogoutRequest",
    "OAuthLoginRequest",
    "RefreshTokenRequest",
    "is_email_login_request",
    "is_oauth_login_request",
    "login_request_from_payload",
]
