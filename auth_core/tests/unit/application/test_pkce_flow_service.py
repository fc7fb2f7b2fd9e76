"""PkceFlowService 단위 테스트."""

from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qs, urlparse

import pytest

from auth_core.application.auth.dto import OAuthLoginRequest
from auth_core.application.common.exceptions import ConfigurationError
from auth_core.application.common.result import ErrorResult, SuccessResult, success
from auth_core.application.oauth.dto import OAuthCallbackMessage, OAuthErrorMessage
from auth_core.application.oauth.exceptions import InvalidStateError, UnsupportedOAuthProviderError
from auth_core.application.oauth.pkce import generate_code_challenge
from auth_core.application.oauth.services import PkceFlowService
from auth_core.infrastructure.oauth import (
    GoogleAuthorizationUrlBuilder,
    InMemoryOAuthStateStore,
    NaverAuthorizationUrlBuilder,
)

REDIRECT_URI = "https://app.example.com/oauth/callback"


class TestPkceFlowService:
    """PkceFlowService 테스트."""

    @pytest.fixture
    def clock(self) -> list[float]:
        return [1_000.0]

    @pytest.fixture
    def state_store(self, clock: list[float]) -> InMemoryOAuthStateStore:
        return InMemoryOAuthStateStore(clock=lambda: clock[0])

    @pytest.fixture
    def service(self, state_store: InMemoryOAuthStateStore) -> PkceFlowService:
        return PkceFlowService(
            state_store,
            {
                "google": GoogleAuthorizationUrlBuilder(
                    client_id="google-client", redirect_uri=REDIRECT_URI
                ),
                "naver": NaverAuthorizationUrlBuilder(
                    client_id="naver-client", redirect_uri=REDIRECT_URI
                ),
            },
            state_ttl_seconds=600,
        )

    @pytest.mark.asyncio
    async def test_begin_authorization_embeds_state_and_challenge(
        self, service: PkceFlowService, state_store: InMemoryOAuthStateStore
    ) -> None:
        """인증 URL 에 state 와 S256 challenge 포함."""
        # Act
        redirect = await service.begin_authorization("google")

        # Assert
        query = parse_qs(urlparse(redirect.authorization_url).query)
        assert query["state"] == [redirect.state]
        assert query["code_challenge_method"] == ["S256"]
        assert redirect.provider == "google"
        assert len(state_store) == 1

        saved = await state_store.consume(redirect.state)
        assert saved is not None
        assert query["code_challenge"] == [generate_code_challenge(saved.code_verifier)]
        assert saved.redirect_uri == REDIRECT_URI

    @pytest.mark.asyncio
    async def test_state_saved_before_redirect_is_returned(self) -> None:
        """반환 시점에 state 가 이미 저장되어 있어야 함."""
        # Arrange
        store = AsyncMock()
        builder = MagicMock()
        builder.supports_pkce = True
        builder.redirect_uri = REDIRECT_URI
        builder.build_authorization_url.return_value = "https://auth.example.com/authorize"
        service = PkceFlowService(store, {"google": builder})

        # Act
        redirect = await service.begin_authorization("google")

        # Assert
        assert redirect.authorization_url == "https://auth.example.com/authorize"
        store.save.assert_awaited_once()
        saved_state = store.save.await_args.args[0]
        assert saved_state.state == redirect.state

    @pytest.mark.asyncio
    async def test_missing_redirect_uri_raises_without_saving_state(
        self, state_store: InMemoryOAuthStateStore
    ) -> None:
        """redirect_uri 가 없으면 ConfigurationError, state 는 남지 않음."""
        # Arrange
        service = PkceFlowService(
            state_store,
            {"google": GoogleAuthorizationUrlBuilder(client_id="google-client")},
        )

        # Act & Assert
        with pytest.raises(ConfigurationError):
            await service.begin_authorization("google")
        assert len(state_store) == 0

    @pytest.mark.asyncio
    async def test_naver_has_no_code_verifier(
        self, service: PkceFlowService, state_store: InMemoryOAuthStateStore
    ) -> None:
        redirect = await service.begin_authorization("naver")

        query = parse_qs(urlparse(redirect.authorization_url).query)
        assert "code_challenge" not in query
        saved = await state_store.consume(redirect.state)
        assert saved is not None
        assert saved.code_verifier is None

    @pytest.mark.asyncio
    async def test_unsupported_provider(self, service: PkceFlowService) -> None:
        with pytest.raises(UnsupportedOAuthProviderError):
            await service.begin_authorization("facebook")

    @pytest.mark.asyncio
    async def test_handle_redirect_returns_login_request(
        self, service: PkceFlowService, state_store: InMemoryOAuthStateStore
    ) -> None:
        # Arrange
        redirect = await service.begin_authorization("google")

        # Act
        result = await service.handle_redirect(
            f"{REDIRECT_URI}?code=auth-code&state={redirect.state}"
        )

        # Assert
        assert isinstance(result, SuccessResult)
        login_request = result.data
        assert isinstance(login_request, OAuthLoginRequest)
        assert login_request.provider == "google"
        assert login_request.auth_code == "auth-code"
        assert login_request.redirect_uri == REDIRECT_URI
        assert login_request.code_verifier is not None
        assert len(state_store) == 0

    @pytest.mark.asyncio
    async def test_replayed_state_rejected(self, service: PkceFlowService) -> None:
        """state 는 일회용."""
        # Arrange
        redirect = await service.begin_authorization("google")
        callback_url = f"{REDIRECT_URI}?code=auth-code&state={redirect.state}"
        await service.handle_redirect(callback_url)

        # Act
        result = await service.handle_redirect(callback_url)

        # Assert
        assert isinstance(result, ErrorResult)
        assert result.error == "AUTH_ERROR"

    @pytest.mark.asyncio
    async def test_unknown_state_rejected(self, service: PkceFlowService) -> None:
        result = await service.handle_redirect(f"{REDIRECT_URI}?code=c&state=forged")

        assert isinstance(result, ErrorResult)
        assert result.error == "AUTH_ERROR"

    @pytest.mark.asyncio
    async def test_missing_state_is_validation_error(self, service: PkceFlowService) -> None:
        result = await service.handle_redirect(f"{REDIRECT_URI}?code=c")

        assert result.error == "VALIDATION_ERROR"
        assert result.message == "state is required."

    @pytest.mark.asyncio
    async def test_expired_state_rejected(
        self, service: PkceFlowService, clock: list[float]
    ) -> None:
        # Arrange
        redirect = await service.begin_authorization("google")
        clock[0] += 601

        # Act
        result = await service.handle_redirect(
            f"{REDIRECT_URI}?code=c&state={redirect.state}"
        )

        # Assert
        assert result.error == "AUTH_ERROR"

    @pytest.mark.asyncio
    async def test_provider_error_consumes_state(
        self, service: PkceFlowService, state_store: InMemoryOAuthStateStore
    ) -> None:
        # Arrange
        redirect = await service.begin_authorization("google")

        # Act
        result = await service.handle_redirect(
            f"{REDIRECT_URI}?error=access_denied&state={redirect.state}"
        )

        # Assert
        assert result.error == "AUTH_ERROR"
        assert "access_denied" in result.message
        assert len(state_store) == 0

    @pytest.mark.asyncio
    async def test_consume_state_provider_mismatch(self, service: PkceFlowService) -> None:
        redirect = await service.begin_authorization("google")

        with pytest.raises(InvalidStateError):
            await service.consume_state(redirect.state, provider="naver")

    @pytest.mark.asyncio
    async def test_handle_message_callback(self, service: PkceFlowService) -> None:
        # Arrange
        redirect = await service.begin_authorization("google")
        message = OAuthCallbackMessage(type="OAUTH_CALLBACK", code="c", state=redirect.state)

        # Act
        result = await service.handle_message(message, provider="google")

        # Assert
        assert isinstance(result, SuccessResult)
        assert result.data.auth_code == "c"

    @pytest.mark.asyncio
    async def test_handle_message_error(self, service: PkceFlowService) -> None:
        message = OAuthErrorMessage(type="OAUTH_ERROR", error="server_error")

        result = await service.handle_message(message)

        assert result.error == "AUTH_ERROR"

    @pytest.mark.asyncio
    async def test_complete_login_skips_exchange_on_failure(
        self, service: PkceFlowService
    ) -> None:
        # Arrange
        manager = AsyncMock()
        callback = await service.handle_redirect(f"{REDIRECT_URI}?code=c&state=forged")

        # Act
        result = await service.complete_login(manager, callback)

        # Assert
        assert result is callback
        manager.login.assert_not_called()

    @pytest.mark.asyncio
    async def test_complete_login_delegates_to_manager(self, service: PkceFlowService) -> None:
        # Arrange
        manager = AsyncMock()
        manager.login.return_value = success("Login succeeded.", {"accessToken": "a"})
        redirect = await service.begin_authorization("google")
        callback = await service.handle_redirect(
            f"{REDIRECT_URI}?code=c&state={redirect.state}"
        )

        # Act
        result = await service.complete_login(manager, callback)

        # Assert
        assert result.success is True
        manager.login.assert_awaited_once_with(callback.data)
