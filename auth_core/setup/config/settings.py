"""Application Settings.

env_prefix="AUTH_CORE_" 사용으로 AUTH_CORE_GOOGLE_CLIENT_ID 등의 환경변수를 매핑합니다.
엔드포인트는 AUTH_CORE_ENDPOINTS__GOOGLE_LOGIN 처럼 중첩 구분자로 덮어씁니다.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auth_core.domain.enums import AuthProviderType, ClientPlatform, TokenStoreType
from auth_core.setup.config.api import (
    DEFAULT_RETRY_COUNT,
    DEFAULT_TIMEOUT_SECONDS,
    ApiConfig,
    ApiEndpoints,
    AuthProviderConfig,
    GoogleAuthProviderConfig,
    KakaoAuthProviderConfig,
    NaverAuthProviderConfig,
)


class EndpointSettings(BaseModel):
    """기본 백엔드 경로."""

    request_verification: str = "/api/auth/email/request"
    verify_email: str = "/api/auth/email/verify"
    login: str = "/api/auth/login"
    logout: str = "/api/auth/logout"
    refresh: str = "/api/auth/refresh"
    validate_path: str = "/api/auth/validate"
    me: str = "/api/auth/me"
    health: str = "/api/health"

    google_login: str = "/api/auth/google/login"
    google_logout: str = "/api/auth/google/logout"
    google_refresh: str = "/api/auth/google/refresh"
    google_validate: str = "/api/auth/google/validate"
    google_userinfo: str = "/api/auth/google/userinfo"

    kakao_login: str = "/api/auth/kakao/login"
    kakao_logout: str = "/api/auth/kakao/logout"
    kakao_refresh: str = "/api/auth/kakao/refresh"
    kakao_validate: str = "/api/auth/kakao/validate"
    kakao_userinfo: str = "/api/auth/kakao/userinfo"

    naver_login: str = "/api/auth/naver/login"
    naver_logout: str = "/api/auth/naver/logout"
    naver_refresh: str = "/api/auth/naver/refresh"
    naver_validate: str = "/api/auth/naver/validate"
    naver_userinfo: str = "/api/auth/naver/userinfo"

    def to_api_endpoints(self) -> ApiEndpoints:
        values = self.model_dump()
        values["validate_"] = values.pop("validate_path")
        return ApiEndpoints(**values)


class Settings(BaseSettings):
    """클라이언트 인증 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        AUTH_CORE_API_BASE_URL → api_base_url
        AUTH_CORE_GOOGLE_CLIENT_ID → google_client_id
    """

    # Backend
    api_base_url: str = "http://localhost:8080"
    api_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    api_retry_count: int = DEFAULT_RETRY_COUNT
    endpoints: EndpointSettings = EndpointSettings()

    # Client
    platform: ClientPlatform = ClientPlatform.WEB
    provider_type: AuthProviderType = AuthProviderType.EMAIL
    token_store_type: TokenStoreType = TokenStoreType.AUTO
    device_id: Optional[str] = None  # 요청에 device_id 가 없을 때의 기본값

    # OAuth
    app_origin: str = "http://localhost:3000"
    oauth_state_ttl_seconds: int = 600

    # OAuth Providers - Google
    google_client_id: str = ""
    google_redirect_uri: Optional[HttpUrl] = None
    verify_with_google_userinfo: bool = False

    # OAuth Providers - Kakao
    kakao_client_id: str = ""
    kakao_redirect_uri: Optional[HttpUrl] = None

    # OAuth Providers - Naver
    naver_client_id: str = ""
    naver_redirect_uri: Optional[HttpUrl] = None

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    model_config = SettingsConfigDict(
        env_prefix="AUTH_CORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator(
        "kakao_redirect_uri", "google_redirect_uri", "naver_redirect_uri", mode="before"
    )
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("api_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("api_timeout_seconds must be positive")
        return value

    def api_config(self) -> ApiConfig:
        return ApiConfig(
            api_base_url=self.api_base_url,
            endpoints=self.endpoints.to_api_endpoints(),
            timeout=self.api_timeout_seconds,
            retry_count=self.api_retry_count,
        )

    def provider_config(
        self, provider_type: AuthProviderType | None = None
    ) -> AuthProviderConfig:
        """제공자 종류에 맞는 구성 객체를 만듭니다."""
        kind = provider_type or self.provider_type
        if kind is AuthProviderType.GOOGLE:
            return GoogleAuthProviderConfig(
                google_client_id=self.google_client_id,
                verify_with_google_userinfo=self.verify_with_google_userinfo,
            )
        if kind is AuthProviderType.KAKAO:
            return KakaoAuthProviderConfig(kakao_client_id=self.kakao_client_id)
        if kind is AuthProviderType.NAVER:
            return NaverAuthProviderConfig(naver_client_id=self.naver_client_id)
        return AuthProviderConfig()

    def redirect_uri_for(self, provider: AuthProviderType) -> Optional[str]:
        uri = {
            AuthProviderType.GOOGLE: self.google_redirect_uri,
            AuthProviderType.KAKAO: self.kakao_redirect_uri,
            AuthProviderType.NAVER: self.naver_redirect_uri,
        }.get(provider)
        return str(uri) if uri is not None else None


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
