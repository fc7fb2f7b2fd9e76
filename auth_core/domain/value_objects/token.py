"""Token Value Object."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from auth_core.domain.exceptions import InvalidTokenPayloadError


@dataclass(frozen=True, slots=True)
class Token:
    """세션 토큰.

    expires_at 은 unix timestamp (초) 입니다.
    만료 시각이 없으면 "만료되지 않음" 으로 취급합니다.
    """

    access_token: str
    refresh_token: str | None = None
    expires_at: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.access_token, str) or not self.access_token:
            raise InvalidTokenPayloadError("access token cannot be empty")

    def is_expired(self, now: float | None = None) -> bool:
        """만료 여부. now == expires_at 은 만료가 아닙니다."""
        if self.expires_at is None:
            return False
        current = time.time() if now is None else now
        return current > self.expires_at

    def with_refresh_token(self, refresh_token: str | None) -> Token:
        return Token(
            access_token=self.access_token,
            refresh_token=refresh_token,
            expires_at=self.expires_at,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Token:
        """백엔드 응답 (camelCase) 에서 Token 생성.

        expiredAt 은 이전 버전 백엔드 호환용 별칭입니다.
        """
        access_token = payload.get("accessToken")
        if not isinstance(access_token, str) or not access_token:
            raise InvalidTokenPayloadError("missing accessToken")

        refresh_token = payload.get("refreshToken")
        if refresh_token is not None and not isinstance(refresh_token, str):
            raise InvalidTokenPayloadError("refreshToken must be a string")

        expires_at = payload.get("expiresAt", payload.get("expiredAt"))
        if expires_at is not None:
            if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
                raise InvalidTokenPayloadError("expiresAt must be a number")

        return cls(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"accessToken": self.access_token}
        if self.refresh_token is not None:
            payload["refreshToken"] = self.refresh_token
        if self.expires_at is not None:
            payload["expiresAt"] = self.expires_at
        return payload

    def __repr__(self) -> str:
        return f"Token(access_token={self.access_token[:6]}***, expires_at={self.expires_at})"
