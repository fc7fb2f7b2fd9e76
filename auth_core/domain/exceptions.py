"""Domain Exceptions."""


class DomainError(Exception):
    """도메인 계층 예외 기본 클래스."""


class InvalidTokenPayloadError(DomainError, ValueError):
    """토큰 페이로드 형식 오류."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid token payload: {reason}")


class InvalidUserInfoError(DomainError, ValueError):
    """사용자 정보 페이로드 형식 오류."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid user info payload: {reason}")
