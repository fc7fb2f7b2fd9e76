"""Result Envelope.

모든 공개 연산이 반환하는 성공/실패 래퍼입니다.
백엔드 와이어 형식 ``{success, message, data, error?}`` 과 1:1 로 대응합니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """기계 판독용 오류 코드."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    SERVER_ERROR = "SERVER_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    TOKEN_VALIDATION_FAILED = "TOKEN_VALIDATION_FAILED"
    USER_INFO_FAILED = "USER_INFO_FAILED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    PROVIDER_MISMATCH = "PROVIDER_MISMATCH"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    NO_STORED_TOKEN = "NO_STORED_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    STORAGE_ERROR = "STORAGE_ERROR"
    PLATFORM_UNAVAILABLE = "PLATFORM_UNAVAILABLE"
    FACTORY_ERROR = "FACTORY_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass(frozen=True, slots=True)
class SuccessResult(Generic[T]):
    """성공 결과. data 는 반환값이 없는 연산에서 None 일 수 있습니다."""

    success: ClassVar[bool] = True

    message: str
    data: T

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "message": self.message, "data": self.data}


@dataclass(frozen=True, slots=True)
class ErrorResult:
    """실패 결과. data 는 항상 None 입니다."""

    success: ClassVar[bool] = False
    data: ClassVar[None] = None

    error: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": False,
            "message": self.message,
            "error": self.error,
            "data": None,
        }


Result = Union[SuccessResult[T], ErrorResult]


def success(message: str, data: Any = None) -> SuccessResult[Any]:
    return SuccessResult(message=message, data=data)


def error(code: ErrorCode | str, message: str) -> ErrorResult:
    return ErrorResult(error=code.value if isinstance(code, ErrorCode) else code, message=message)


def is_error(result: object) -> bool:
    return isinstance(result, ErrorResult)


def result_from_payload(payload: Mapping[str, Any]) -> SuccessResult[Any] | ErrorResult:
    """백엔드가 보낸 envelope 을 그대로 Result 로 변환합니다."""
    message = payload.get("message")
    if not isinstance(message, str):
        message = ""
    if payload.get("success") is True:
        return SuccessResult(message=message, data=payload.get("data"))

    code = payload.get("error")
    if not isinstance(code, str) or not code:
        code = message or ErrorCode.UNKNOWN_ERROR.value
    return ErrorResult(error=code, message=message or code)


# ============================================================
# Error helpers
# ============================================================


def validation_error(field: str) -> ErrorResult:
    return error(ErrorCode.VALIDATION_ERROR, f"{field} is required.")


def network_error(message: str = "A network error occurred. Please try again.") -> ErrorResult:
    return error(ErrorCode.NETWORK_ERROR, message)


def timeout_error(message: str = "The request timed out.") -> ErrorResult:
    return error(ErrorCode.TIMEOUT, message)


def server_error(status_code: int, message: str | None = None) -> ErrorResult:
    return error(ErrorCode.SERVER_ERROR, message or f"Server error ({status_code}).")


def auth_error(status_code: int, message: str | None = None) -> ErrorResult:
    return error(ErrorCode.AUTH_ERROR, message or f"Request was rejected ({status_code}).")


def status_error(status_code: int, message: str | None = None) -> ErrorResult:
    """HTTP 상태 코드로 5xx/4xx 를 구분한 오류."""
    if status_code >= 500:
        return server_error(status_code, message)
    return auth_error(status_code, message)


def parse_error(message: str = "Failed to parse the server response.") -> ErrorResult:
    return error(ErrorCode.PARSE_ERROR, message)


def token_validation_error(reason: str = "Token validation failed.") -> ErrorResult:
    return error(ErrorCode.TOKEN_VALIDATION_FAILED, reason)


def user_info_error(reason: str = "Failed to fetch user info.") -> ErrorResult:
    return error(ErrorCode.USER_INFO_FAILED, reason)


def service_availability_error(reason: str = "The service is unavailable.") -> ErrorResult:
    return error(ErrorCode.SERVICE_UNAVAILABLE, reason)


def token_save_error(reason: str | None = None) -> ErrorResult:
    return error(ErrorCode.STORAGE_ERROR, _with_reason("Failed to save token", reason))


def token_read_error(reason: str | None = None) -> ErrorResult:
    return error(ErrorCode.STORAGE_ERROR, _with_reason("Failed to read token", reason))


def token_delete_error(reason: str | None = None) -> ErrorResult:
    return error(ErrorCode.STORAGE_ERROR, _with_reason("Failed to delete token", reason))


def storage_clear_error(reason: str | None = None) -> ErrorResult:
    return error(ErrorCode.STORAGE_ERROR, _with_reason("Failed to clear storage", reason))


def platform_unavailable_error(feature: str) -> ErrorResult:
    return error(
        ErrorCode.PLATFORM_UNAVAILABLE,
        f"{feature} is only available on the react-native platform.",
    )


def error_from_exception(
    exc: BaseException, default_message: str = "Unexpected error."
) -> ErrorResult:
    return error(ErrorCode.UNKNOWN_ERROR, str(exc) or default_message)


def _with_reason(prefix: str, reason: str | None) -> str:
    return f"{prefix}: {reason}" if reason else f"{prefix}."
