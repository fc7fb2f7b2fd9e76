"""PKCE helpers (RFC 7636)."""

import base64
import hashlib
import secrets

CODE_VERIFIER_BYTES = 64
STATE_BYTES = 32


def generate_code_verifier() -> str:
    """64 바이트 엔트로피의 URL-safe code_verifier."""
    return secrets.token_urlsafe(CODE_VERIFIER_BYTES)


def generate_code_challenge(code_verifier: str) -> str:
    """S256 code_challenge (패딩 없는 URL-safe base64)."""
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def generate_state() -> str:
    """32 바이트 엔트로피의 CSRF state."""
    return secrets.token_urlsafe(STATE_BYTES)
