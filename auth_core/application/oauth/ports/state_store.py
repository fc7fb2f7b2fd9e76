"""OAuthStateStore Port.

PKCE state 를 리다이렉트 직전에 저장하고 콜백에서 정확히 한 번 소비합니다.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class PkceState:
    """PKCE 상관관계 데이터.

    code_verifier 는 PKCE 를 지원하지 않는 제공자 (Naver) 에서 None 입니다.
    created_at 은 unix timestamp (초) 입니다.
    """

    state: str
    provider: str
    created_at: float
    code_verifier: str | None = None
    redirect_uri: str | None = None


class OAuthStateStore(Protocol):
    """OAuth 상태 저장소 인터페이스.

    구현체:
        - InMemoryOAuthStateStore, KeyValueOAuthStateStore (infrastructure/oauth/)
    """

    async def save(self, data: PkceState, ttl_seconds: int = 600) -> None:
        """상태 저장.

        Args:
            data: 상태 데이터 (data.state 가 키)
            ttl_seconds: TTL (기본 10분)
        """
        ...

    async def consume(self, state: str) -> PkceState | None:
        """상태 조회 및 삭제 (일회용).

        Returns:
            상태 데이터 또는 None (없거나 만료)
        """
        ...
