"""OAuth Infrastructure."""

from auth_core.infrastructure.oauth.authorization import (
    GoogleAuthorizationUrlBuilder,
    KakaoAuthorizationUrlBuilder,
    NaverAuthorizationUrlBuilder,
    build_url_builders,
)
from auth_core.infrastructure.oauth.state_store_key_value import KeyValueOAuthStateStore
from auth_core.infrastructure.oauth.state_store_memory import InMemoryOAuthStateStore

__all__ = [
    "GoogleAuthorizationUrlBuilder",
    "InMemoryOAuthStateStore",
    "KakaoAuthorizationUrlBuilder",
    "KeyValueOAuthStateStore",
    "NaverAuthorizationUrlBuilder",
    "build_url_builders",
]
