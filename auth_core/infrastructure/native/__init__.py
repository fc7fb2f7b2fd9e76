"""Native Bridge Infrastructure."""

from auth_core.infrastructure.native.event_handler import AuthEventHandler, AuthEventHandlers
from auth_core.infrastructure.native.mock_bridge import (
    MockNativeBridge,
    NativeBridgeUnavailableError,
)

__all__ = [
    "AuthEventHandler",
    "AuthEventHandlers",
    "MockNativeBridge",
    "NativeBridgeUnavailableError",
]
