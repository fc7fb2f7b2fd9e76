"""Auth Services."""

from auth_core.application.auth.services.auth_manager import AuthManager, AuthManagerConfig

__all__ = ["AuthManager", "AuthManagerConfig"]
