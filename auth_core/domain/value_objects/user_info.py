"""UserInfo Value Object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from auth_core.domain.exceptions import InvalidUserInfoError


@dataclass(frozen=True, slots=True)
class UserInfo:
    """인증된 사용자 정보.

    provider 는 이 정보를 만든 인증 제공자와 일치해야 합니다.
    """

    id: str
    email: str
    provider: str
    nickname: str | None = None

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], *, default_provider: str | None = None
    ) -> UserInfo:
        user_id = payload.get("id")
        if user_id is None or user_id == "":
            raise InvalidUserInfoError("missing id")
        email = payload.get("email")
        if not isinstance(email, str):
            raise InvalidUserInfoError("missing email")
        provider = payload.get("provider") or default_provider
        if not provider:
            raise InvalidUserInfoError("missing provider")
        return cls(
            id=str(user_id),
            email=email,
            provider=str(provider),
            nickname=payload.get("nickname"),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "email": self.email,
            "provider": self.provider,
        }
        if self.nickname is not None:
            payload["nickname"] = self.nickname
        return payload
