"""Domain Value Objects."""

from auth_core.domain.value_objects.token import Token
from auth_core.domain.value_objects.user_info import UserInfo

__all__ = ["Token", "UserInfo"]
