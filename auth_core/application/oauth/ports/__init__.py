"""OAuth Ports."""

from auth_core.application.oauth.ports.authorization_url_builder import AuthorizationUrlBuilder
from auth_core.application.oauth.ports.state_store import OAuthStateStore, PkceState

__all__ = ["AuthorizationUrlBuilder", "OAuthStateStore", "PkceState"]
