"""Token Store Implementations."""

from auth_core.infrastructure.persistence.factory import create_token_store
from auth_core.infrastructure.persistence.key_value_memory import InMemoryKeyValueStorage
from auth_core.infrastructure.persistence.memory_token_store import InMemoryTokenStore, TokenCell
from auth_core.infrastructure.persistence.mobile_token_store import MobileTokenStore
from auth_core.infrastructure.persistence.native_token_store import NativeBridgeTokenStore
from auth_core.infrastructure.persistence.web_token_store import WebTokenStore

__all__ = [
    "InMemoryKeyValueStorage",
    "InMemoryTokenStore",
    "MobileTokenStore",
    "NativeBridgeTokenStore",
    "TokenCell",
    "WebTokenStore",
    "create_token_store",
]
