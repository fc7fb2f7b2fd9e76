"""OAuth Application (PKCE / state)."""
