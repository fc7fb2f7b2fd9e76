"""Resilient Request Layer 테스트."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from auth_core.application.common.exceptions import RequestTimeoutError, ResponseParseError
from auth_core.application.common.result import ErrorResult, SuccessResult
from auth_core.infrastructure.http.request import (
    RequestOptions,
    build_url,
    call_backend,
    handle_response,
    request,
    request_with_retry,
    resolve_max_retries,
)
from auth_core.setup.config import ApiConfig
from auth_core.tests.conftest import API_BASE_URL, StubHttpClient, StubResponse


def _config(**overrides: object) -> ApiConfig:
    return ApiConfig(api_base_url=API_BASE_URL, **overrides)


class TestRequest:
    """단일 요청 테스트."""

    def test_build_url(self) -> None:
        assert build_url(API_BASE_URL, "/api/auth/login") == f"{API_BASE_URL}/api/auth/login"
        absolute = "https://other.example.com/x"
        assert build_url(API_BASE_URL, absolute) == absolute

    def test_trailing_slash_stripped_from_base_url(self) -> None:
        assert ApiConfig(api_base_url="https://api.example.com/").api_base_url == API_BASE_URL

    @pytest.mark.asyncio
    async def test_json_content_type_and_timeout(self, stub_http_client: StubHttpClient) -> None:
        # Act
        await request(
            stub_http_client,
            _config(timeout=3.0),
            "/api/auth/login",
            RequestOptions(method="POST", headers={"X-Trace": "1"}, body={"a": 1}),
        )

        # Assert
        sent = stub_http_client.last_request
        assert sent.url == f"{API_BASE_URL}/api/auth/login"
        assert sent.headers == {"Content-Type": "application/json", "X-Trace": "1"}
        assert sent.body == {"a": 1}
        assert sent.timeout == 3.0

    @pytest.mark.asyncio
    async def test_default_timeout(self, stub_http_client: StubHttpClient) -> None:
        await request(stub_http_client, _config(), "/x")

        assert stub_http_client.last_request.timeout == 10.0

    @pytest.mark.asyncio
    async def test_option_timeout_wins(self, stub_http_client: StubHttpClient) -> None:
        await request(stub_http_client, _config(timeout=3.0), "/x", RequestOptions(timeout=1.5))

        assert stub_http_client.last_request.timeout == 1.5

    @pytest.mark.asyncio
    async def test_timeout_raises(self) -> None:
        """응답이 timeout 보다 늦으면 RequestTimeoutError."""
        # Arrange
        client = AsyncMock()

        async def never_answers(_request: object) -> None:
            await asyncio.sleep(10)

        client.request.side_effect = never_answers

        # Act & Assert
        with pytest.raises(RequestTimeoutError):
            await request(client, _config(timeout=0.01), "/slow")


class TestRequestWithRetry:
    """재시도 테스트."""

    @pytest.mark.parametrize(("retry_count", "expected"), [(None, 3), (0, 1), (-2, 1), (5, 5)])
    def test_resolve_max_retries(self, retry_count: int | None, expected: int) -> None:
        assert resolve_max_retries(_config(retry_count=retry_count)) == expected

    @pytest.mark.asyncio
    async def test_always_failing_transport(self, no_sleep: AsyncMock) -> None:
        """최대 횟수만큼 시도 후 마지막 예외 전파. 대기는 1, 2 초."""
        # Arrange
        client = StubHttpClient(default=ConnectionError("refused"))

        # Act
        with pytest.raises(ConnectionError):
            await request_with_retry(client, _config(retry_count=3), "/x", sleep=no_sleep)

        # Assert
        assert client.call_count == 3
        assert [call.args[0] for call in no_sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_exponential_delays(self, no_sleep: AsyncMock) -> None:
        client = StubHttpClient(default=ConnectionError("refused"))

        with pytest.raises(ConnectionError):
            await request_with_retry(client, _config(retry_count=4), "/x", sleep=no_sleep)

        assert [call.args[0] for call in no_sleep.await_args_list] == [1.0, 2.0, 4.0]

    @pytest.mark.asyncio
    async def test_recovers_after_transient_failure(self, no_sleep: AsyncMock) -> None:
        # Arrange
        client = StubHttpClient()
        client.enqueue(ConnectionError("reset"), StubResponse(200, {"ok": True}))

        # Act
        response = await request_with_retry(client, _config(retry_count=3), "/x", sleep=no_sleep)

        # Assert
        assert response.status == 200
        assert client.call_count == 2
        no_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_server_error_not_retried(self, no_sleep: AsyncMock) -> None:
        client = StubHttpClient(default=StubResponse(500, {"message": "down"}))

        response = await request_with_retry(client, _config(retry_count=3), "/x", sleep=no_sleep)

        assert response.status == 500
        assert client.call_count == 1
        no_sleep.assert_not_awaited()


class TestHandleResponse:
    """응답 정규화 테스트."""

    @pytest.mark.asyncio
    async def test_envelope_trusted_verbatim(self) -> None:
        response = StubResponse(200, {"success": False, "message": "Denied", "error": "DENIED"})

        result = await handle_response(response, "fallback")

        assert isinstance(result, ErrorResult)
        assert result.error == "DENIED"

    @pytest.mark.asyncio
    async def test_envelope_success_on_error_status_trusted(self) -> None:
        response = StubResponse(400, {"success": True, "message": "odd", "data": 1})

        result = await handle_response(response, "fallback")

        assert isinstance(result, SuccessResult)
        assert result.data == 1

    @pytest.mark.asyncio
    async def test_plain_body_wrapped(self) -> None:
        result = await handle_response(StubResponse(200, {"id": 1}), "Fetched.")

        assert result == SuccessResult(message="Fetched.", data={"id": 1})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "code"),
        [(500, "SERVER_ERROR"), (502, "SERVER_ERROR"), (401, "AUTH_ERROR"), (404, "AUTH_ERROR")],
    )
    async def test_status_errors(self, status: int, code: str) -> None:
        result = await handle_response(StubResponse(status, {"detail": "x"}), "fallback")

        assert result.error == code
        assert result.message == "fallback"

    @pytest.mark.asyncio
    async def test_status_error_uses_body_message(self) -> None:
        result = await handle_response(StubResponse(403, {"message": "Forbidden"}), "fallback")

        assert result.message == "Forbidden"

    @pytest.mark.asyncio
    async def test_non_json_error_response(self) -> None:
        result = await handle_response(StubResponse(503, json_error=True), "fallback")

        assert result.error == "SERVER_ERROR"

    @pytest.mark.asyncio
    async def test_non_json_ok_response_raises(self) -> None:
        with pytest.raises(ResponseParseError):
            await handle_response(StubResponse(200, json_error=True), "fallback")


class TestCallBackend:
    """요청 + 정규화 (예외 없음) 테스트."""

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, no_sleep: AsyncMock) -> None:
        client = StubHttpClient(default=ConnectionError("refused"))

        result = await call_backend(
            client,
            _config(retry_count=2),
            "/x",
            options=RequestOptions(),
            fallback_message="fallback",
            sleep=no_sleep,
        )

        assert result.error == "NETWORK_ERROR"
        assert client.call_count == 2

    @pytest.mark.asyncio
    async def test_single_attempt_without_retry(self) -> None:
        client = StubHttpClient(default=ConnectionError("refused"))

        result = await call_backend(
            client,
            _config(retry_count=3),
            "/x",
            options=RequestOptions(),
            fallback_message="fallback",
            retry=False,
        )

        assert result.error == "NETWORK_ERROR"
        assert client.call_count == 1

    @pytest.mark.asyncio
    async def test_parse_failure_is_parse_error(self) -> None:
        client = StubHttpClient(default=StubResponse(200, json_error=True))

        result = await call_backend(
            client, _config(), "/x", options=RequestOptions(), fallback_message="fallback"
        )

        assert result.error == "PARSE_ERROR"

    @pytest.mark.asyncio
    async def test_timeout_is_timeout_error(self) -> None:
        client = StubHttpClient(default=RequestTimeoutError("/x", 1.0))

        result = await call_backend(
            client,
            _config(retry_count=1),
            "/x",
            options=RequestOptions(),
            fallback_message="fallback",
        )

        assert result.error == "TIMEOUT"
