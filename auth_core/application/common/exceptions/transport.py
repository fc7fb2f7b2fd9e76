"""Transport Exceptions."""

from auth_core.application.common.exceptions.base import ApplicationError


class TransportError(ApplicationError):
    """전송 계층 실패 (연결 오류 등)."""


class RequestTimeoutError(TransportError):
    """요청 타임아웃."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout}s")


class ResponseParseError(ApplicationError):
    """정상 응답 본문의 JSON 파싱 실패."""

    def __init__(self, status: int, reason: str) -> None:
        self.status = status
        super().__init__(f"Failed to parse response body (status {status}): {reason}")


class MissingRefreshTokenError(ApplicationError):
    """app 플랫폼에서 refresh token 누락."""

    def __init__(self) -> None:
        super().__init__("refresh token is required on the app platform")
