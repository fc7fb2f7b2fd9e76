"""Domain Enums."""

from __future__ import annotations

from enum import Enum


class AuthProviderType(str, Enum):
    """인증 제공자 종류."""

    EMAIL = "email"
    GOOGLE = "google"
    KAKAO = "kakao"
    NAVER = "naver"
    FAKE = "fake"

    @property
    def is_oauth(self) -> bool:
        return self in (AuthProviderType.GOOGLE, AuthProviderType.KAKAO, AuthProviderType.NAVER)

    @property
    def display_name(self) -> str:
        """오류 메시지용 표시 이름 (첫 글자 대문자)."""
        return self.value.capitalize()


class ClientPlatform(str, Enum):
    """클라이언트 배포 플랫폼.

    web 은 refresh token 을 쿠키로, app 은 요청 본문으로 전송합니다.
    react-native 는 네이티브 브리지가 토큰을 소유합니다.
    """

    WEB = "web"
    APP = "app"
    REACT_NATIVE = "react-native"

    @property
    def request_shape(self) -> ClientPlatform:
        """요청 본문 형태를 결정하는 플랫폼. react-native 는 app 형태를 씁니다."""
        if self is ClientPlatform.REACT_NATIVE:
            return ClientPlatform.APP
        return self


class TokenStoreType(str, Enum):
    """토큰 저장소 종류."""

    WEB = "web"
    MOBILE = "mobile"
    FAKE = "fake"
    REACT_NATIVE = "react-native"
    AUTO = "auto"


class AuthStatus(str, Enum):
    """네이티브 브리지 인증 상태 이벤트."""

    STARTED = "started"
    CALLBACK_RECEIVED = "callback_received"
    SUCCESS = "success"
    ERROR = "error"
    TOKEN_REFRESHED = "token_refreshed"
    SIGNED_OUT = "signed_out"
