"""OAuth Services."""

from auth_core.application.oauth.services.message_channel import (
    OAuthMessageChannel,
    normalize_origin,
)
from auth_core.application.oauth.services.pkce_flow_service import PkceFlowService

__all__ = ["OAuthMessageChannel", "PkceFlowService", "normalize_origin"]
