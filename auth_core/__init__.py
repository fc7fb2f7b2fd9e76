"""auth_core - 클라이언트 인증 오케스트레이션 패키지.

로그인/로그아웃/토큰 갱신/토큰 검증과 세션 조회를 원격 인증 백엔드에 위임하고,
결과 토큰을 교체 가능한 저장소에 보관합니다.
"""

from auth_core.application.auth.dto import (
    EmailLoginRequest,
    LogoutRequest,
    OAuthLoginRequest,
    RefreshTokenRequest,
)
from auth_core.application.auth.services.auth_manager import AuthManager, AuthManagerConfig
from auth_core.application.common.result import ErrorResult, Result, SuccessResult
from auth_core.domain.enums import AuthProviderType, ClientPlatform, TokenStoreType
from auth_core.domain.value_objects import Token, UserInfo

__all__ = [
    "AuthManager",
    "AuthManagerConfig",
    "AuthProviderType",
    "ClientPlatform",
    "EmailLoginRequest",
    "ErrorResult",
    "LogoutRequest",
    "OAuthLoginRequest",
    "RefreshTokenRequest",
    "Result",
    "SuccessResult",
    "Token",
    "TokenStoreType",
    "UserInfo",
]
