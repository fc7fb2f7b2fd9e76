"""Resilient Request Layer.

타임아웃, 전송 실패 재시도 (지수 백오프), 응답 정규화를 담당합니다.
모든 제공자 네트워크 호출이 이 모듈을 거칩니다.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from auth_core.application.auth.ports import HttpRequest
from auth_core.application.common.exceptions import RequestTimeoutError, ResponseParseError
from auth_core.application.common.result import (
    ErrorResult,
    SuccessResult,
    network_error,
    parse_error,
    result_from_payload,
    status_error,
    success,
    timeout_error,
)
from auth_core.setup.config.api import DEFAULT_RETRY_COUNT, DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from auth_core.application.auth.ports import HttpClient, HttpResponse
    from auth_core.setup.config.api import ApiConfig

logger = logging.getLogger(__name__)

RETRY_BASE_DELAY_SECONDS = 1.0

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """요청 옵션. timeout 은 초 단위입니다."""

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: float | None = None


def build_url(api_base_url: str, endpoint: str) -> str:
    """절대 URL 이면 그대로, 아니면 base URL 에 붙입니다."""
    if endpoint.startswith(("http://", "https://")):
        return endpoint
    return f"{api_base_url}{endpoint}"


def resolve_timeout(options: RequestOptions, api_config: ApiConfig) -> float:
    if options.timeout is not None:
        return options.timeout
    if api_config.timeout is not None:
        return api_config.timeout
    return DEFAULT_TIMEOUT_SECONDS


def resolve_max_retries(api_config: ApiConfig) -> int:
    retry_count = api_config.retry_count
    return max(1, DEFAULT_RETRY_COUNT if retry_count is None else retry_count)


async def request(
    client: HttpClient,
    api_config: ApiConfig,
    endpoint: str,
    options: RequestOptions | None = None,
) -> HttpResponse:
    """단일 요청.

    타임아웃 스코프는 성공/예외/취소 모든 경로에서 해제됩니다.

    Raises:
        RequestTimeoutError: 타임아웃
        Exception: 전송 계층 예외는 그대로 전파
    """
    options = options or RequestOptions()
    url = build_url(api_config.api_base_url, endpoint)
    timeout = resolve_timeout(options, api_config)

    headers = {"Content-Type": "application/json", **options.headers}
    http_request = HttpRequest(
        url=url,
        method=options.method,
        headers=headers,
        body=options.body,
        timeout=timeout,
    )

    try:
        async with asyncio.timeout(timeout):
            return await client.request(http_request)
    except TimeoutError as e:
        raise RequestTimeoutError(url, timeout) from e


async def request_with_retry(
    client: HttpClient,
    api_config: ApiConfig,
    endpoint: str,
    options: RequestOptions | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
) -> HttpResponse:
    """전송 실패에 한해 지수 백오프로 재시도합니다.

    k 번째 시도 실패 후 2^(k-1) 초 대기합니다. 응답을 받으면 상태 코드와 무관하게
    그대로 반환합니다 (4xx/5xx 는 재시도하지 않음).
    """
    max_retries = resolve_max_retries(api_config)
    attempt = 1
    while True:
        try:
            return await request(client, api_config, endpoint, options)
        except Exception as e:
            log_ctx = {
                "endpoint": endpoint,
                "attempt": attempt,
                "max_retries": max_retries,
                "error": str(e),
                "error_type": type(e).__name__,
            }
            if attempt >= max_retries:
                logger.error("Request failed permanently", extra=log_ctx)
                raise

            delay = RETRY_BASE_DELAY_SECONDS * (2 ** (attempt - 1))
            logger.warning(
                "Request failed, retrying",
                extra={**log_ctx, "retry_delay_seconds": delay},
            )
            await sleep(delay)
            attempt += 1


async def handle_response(
    response: HttpResponse, fallback_message: str
) -> SuccessResult[Any] | ErrorResult:
    """응답을 Result 로 정규화합니다.

    - 본문에 boolean success 가 있으면 백엔드 envelope 을 그대로 신뢰
    - 그 외 비정상 상태는 5xx → SERVER_ERROR, 4xx → AUTH_ERROR
    - 정상 상태의 JSON 파싱 실패는 ResponseParseError

    Raises:
        ResponseParseError: 2xx 응답 본문이 JSON 이 아닌 경우
    """
    try:
        body = await response.json()
    except ValueError as e:
        if not response.ok:
            return status_error(response.status, fallback_message)
        raise ResponseParseError(response.status, str(e)) from e

    if isinstance(body, dict) and isinstance(body.get("success"), bool):
        return result_from_payload(body)

    if not response.ok:
        message = body.get("message") if isinstance(body, dict) else None
        if not isinstance(message, str) or not message:
            message = fallback_message
        return status_error(response.status, message)

    return success(fallback_message, body)


async def call_backend(
    client: HttpClient,
    api_config: ApiConfig,
    endpoint: str,
    *,
    options: RequestOptions,
    fallback_message: str,
    retry: bool = True,
    sleep: Sleep = asyncio.sleep,
) -> SuccessResult[Any] | ErrorResult:
    """요청 + 응답 정규화. 예외를 던지지 않습니다."""
    try:
        if retry:
            response = await request_with_retry(
                client, api_config, endpoint, options, sleep=sleep
            )
        else:
            response = await request(client, api_config, endpoint, options)
        return await handle_response(response, fallback_message)
    except ResponseParseError as e:
        logger.warning("Response parse failed", extra={"endpoint": endpoint, "error": str(e)})
        return parse_error()
    except RequestTimeoutError:
        return timeout_error()
    except Exception as e:
        logger.warning(
            "Backend call failed",
            extra={"endpoint": endpoint, "error": str(e), "error_type": type(e).__name__},
        )
        return network_error()
