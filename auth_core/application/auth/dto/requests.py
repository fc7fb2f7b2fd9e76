"""Auth Request DTOs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeGuard, Union


@dataclass(frozen=True, slots=True)
class EmailVerificationRequest:
    """이메일 인증번호 요청."""

    email: str


@dataclass(frozen=True, slots=True)
class EmailVerificationConfirmRequest:
    """이메일 인증번호 확인 요청."""

    email: str
    verify_code: str


@dataclass(frozen=True, slots=True)
class EmailLoginRequest:
    """이메일 로그인 요청.

    provider 는 "email" 또는 테스트용 "fake" 입니다.
    """

    email: str
    verify_code: str
    provider: str = "email"
    device_id: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthLoginRequest:
    """OAuth 로그인 요청 (google / kakao / naver)."""

    provider: str
    auth_code: str
    redirect_uri: str | None = None
    code_verifier: str | None = None
    device_id: str | None = None


LoginRequest = Union[EmailLoginRequest, OAuthLoginRequest]


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청.

    headers 와 refresh_token 은 AuthManager 가 저장된 토큰으로 채웁니다.
    """

    provider: str | None = None
    device_id: str | None = None
    refresh_token: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RefreshTokenRequest:
    """토큰 갱신 요청. web 플랫폼에서는 refresh_token 없이 쿠키로 갱신합니다."""

    refresh_token: str | None = None
    device_id: str | None = None
    provider: str | None = None


def is_email_login_request(request: object) -> TypeGuard[EmailLoginRequest]:
    """email 필드 존재 여부로 판별하는 구조적 가드."""
    return isinstance(getattr(request, "email", None), str)


def is_oauth_login_request(request: object) -> TypeGuard[OAuthLoginRequest]:
    """auth_code 필드 존재 여부로 판별하는 구조적 가드."""
    return isinstance(getattr(request, "auth_code", None), str)


def login_request_from_payload(payload: Mapping[str, Any]) -> LoginRequest:
    """camelCase 매핑에서 로그인 요청을 생성합니다.

    Raises:
        ValueError: email 과 authCode 가 모두 없는 경우
    """
    if "email" in payload:
        return EmailLoginRequest(
            email=str(payload.get("email") or ""),
            verify_code=str(payload.get("verifyCode") or ""),
            provider=str(payload.get("provider") or "email"),
            device_id=payload.get("deviceId"),
        )
    if "authCode" in payload:
        return OAuthLoginRequest(
            provider=str(payload.get("provider") or ""),
            auth_code=str(payload.get("authCode") or ""),
            redirect_uri=payload.get("redirectUri"),
            code_verifier=payload.get("codeVerifier"),
            device_id=payload.get("deviceId"),
        )
    raise ValueError("login payload must contain either 'email' or 'authCode'")
