"""Authorization DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthorizationRedirect:
    """인증 페이지 이동 정보."""

    authorization_url: str
    state: str
    provider: str
