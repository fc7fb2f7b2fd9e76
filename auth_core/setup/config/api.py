"""API / Provider Configuration Models.

생성 후 변경 불가한 구성 객체입니다. camelCase 별칭으로도 생성할 수 있습니다.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_RETRY_COUNT = 3


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ApiEndpoints(_FrozenModel):
    """논리 연산 이름 → 경로 매핑.

    제공자마다 필요한 엔드포인트 묶음이 다릅니다.
    """

    # Email
    request_verification: str | None = None
    verify_email: str | None = None
    login: str | None = None
    logout: str | None = None
    refresh: str | None = None
    validate_: str | None = Field(default=None, alias="validate")
    me: str | None = None
    health: str | None = None

    # Google
    google_login: str | None = None
    google_logout: str | None = None
    google_refresh: str | None = None
    google_validate: str | None = None
    google_userinfo: str | None = None

    # Kakao
    kakao_login: str | None = None
    kakao_logout: str | None = None
    kakao_refresh: str | None = None
    kakao_validate: str | None = None
    kakao_userinfo: str | None = None

    # Naver
    naver_login: str | None = None
    naver_logout: str | None = None
    naver_refresh: str | None = None
    naver_validate: str | None = None
    naver_userinfo: str | None = None

    def get(self, name: str) -> str | None:
        """논리 이름으로 경로 조회 (없으면 None)."""
        attr = "validate_" if name == "validate" else name
        value = getattr(self, attr, None)
        return value or None

    def missing(self, names: tuple[str, ...]) -> list[str]:
        return [name for name in names if self.get(name) is None]


class ApiConfig(_FrozenModel):
    """백엔드 API 구성.

    timeout 은 초 단위입니다.
    """

    api_base_url: str
    endpoints: ApiEndpoints = Field(default_factory=ApiEndpoints)
    timeout: float | None = None
    retry_count: int | None = None

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    def with_defaults(self, *, timeout: float | None, retry_count: int | None) -> ApiConfig:
        """비어 있는 timeout / retry_count 만 채운 사본을 반환합니다."""
        updates: dict[str, float | int] = {}
        if self.timeout is None and timeout is not None:
            updates["timeout"] = timeout
        if self.retry_count is None and retry_count is not None:
            updates["retry_count"] = retry_count
        if not updates:
            return self
        return self.model_copy(update=updates)


class AuthProviderConfig(_FrozenModel):
    """제공자 공통 튜닝값."""

    timeout: float | None = None
    retry_count: int | None = None


class GoogleAuthProviderConfig(AuthProviderConfig):
    google_client_id: str
    verify_with_google_userinfo: bool = False


class KakaoAuthProviderConfig(AuthProviderConfig):
    kakao_client_id: str


class NaverAuthProviderConfig(AuthProviderConfig):
    naver_client_id: str
