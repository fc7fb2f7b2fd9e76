"""PkceFlowService - PKCE/state 상관관계 서비스.

리다이렉트 전에 state 와 code_verifier 를 저장하고, 콜백 (리다이렉트 쿼리 또는
창 간 메시지) 에서 state 를 단 한 번 소비한 뒤 로그인 요청을 만듭니다.
state 가 맞지 않으면 코드 교환을 시도하지 않습니다.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlparse

from auth_core.application.auth.dto import OAuthLoginRequest
from auth_core.application.common.exceptions import ConfigurationError
from auth_core.application.common.result import (
    ErrorCode,
    ErrorResult,
    Result,
    error,
    success,
    validation_error,
)
from auth_core.application.oauth.dto import (
    AuthorizationRedirect,
    OAuthCallbackMessage,
    OAuthErrorMessage,
)
from auth_core.application.oauth.exceptions import InvalidStateError, UnsupportedOAuthProviderError
from auth_core.application.oauth.pkce import (
    generate_code_challenge,
    generate_code_verifier,
    generate_state,
)
from auth_core.application.oauth.ports import PkceState

if TYPE_CHECKING:
    from auth_core.application.auth.services import AuthManager
    from auth_core.application.oauth.dto import OAuthMessage
    from auth_core.application.oauth.ports import AuthorizationUrlBuilder, OAuthStateStore

logger = logging.getLogger(__name__)

DEFAULT_STATE_TTL_SECONDS = 600


class PkceFlowService:
    """OAuth PKCE/state 컨트롤러.

    Responsibilities:
        - code_verifier / code_challenge / state 생성
        - 리다이렉트 전 state 저장
        - 콜백 state 검증 및 소비 (일회용)

    Collaborators:
        - OAuthStateStore: state 저장/소비
        - AuthorizationUrlBuilder: 제공자별 인증 URL 생성
    """

    def __init__(
        self,
        state_store: OAuthStateStore,
        url_builders: Mapping[str, AuthorizationUrlBuilder],
        *,
        state_ttl_seconds: int = DEFAULT_STATE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._state_store = state_store
        self._url_builders = dict(url_builders)
        self._state_ttl_seconds = state_ttl_seconds
        self._clock = clock

    def _builder(self, provider: str) -> AuthorizationUrlBuilder:
        builder = self._url_builders.get(provider)
        if builder is None:
            raise UnsupportedOAuthProviderError(provider)
        return builder

    async def begin_authorization(
        self,
        provider: str,
        *,
        redirect_uri: str | None = None,
        scope: str | None = None,
    ) -> AuthorizationRedirect:
        """인증 URL 을 만들고 state 를 저장한 뒤 반환합니다.

        URL 생성이 실패하면 state 는 저장되지 않습니다.

        Raises:
            UnsupportedOAuthProviderError: 등록되지 않은 제공자
            ConfigurationError: redirect_uri 가 없는 등 URL 을 만들 수 없는 경우
        """
        builder = self._builder(provider)
        state = generate_state()
        code_verifier = generate_code_verifier() if builder.supports_pkce else None
        code_challenge = generate_code_challenge(code_verifier) if code_verifier else None
        final_redirect_uri = redirect_uri or builder.redirect_uri

        try:
            authorization_url = builder.build_authorization_url(
                state=state,
                code_challenge=code_challenge,
                scope=scope,
                redirect_uri=final_redirect_uri,
            )
        except ValueError as e:
            logger.error(
                "Authorization URL build failed",
                extra={"provider": provider, "error": str(e)},
            )
            raise ConfigurationError(str(e)) from e

        # 이동 전에 저장
        await self._state_store.save(
            PkceState(
                state=state,
                provider=provider,
                created_at=self._clock(),
                code_verifier=code_verifier,
                redirect_uri=final_redirect_uri,
            ),
            self._state_ttl_seconds,
        )
        logger.info(
            "OAuth authorization started",
            extra={"provider": provider, "pkce": code_challenge is not None},
        )
        return AuthorizationRedirect(
            authorization_url=authorization_url,
            state=state,
            provider=provider,
        )

    async def consume_state(self, state: str, *, provider: str | None = None) -> PkceState:
        """state 를 소비합니다. 두 번째 소비는 실패합니다.

        Raises:
            InvalidStateError: 없음, 만료, 재사용, 제공자 불일치
        """
        if not state:
            raise InvalidStateError("Missing state")
        state_data = await self._state_store.consume(state)
        if state_data is None or state_data.state != state:
            logger.warning("Invalid or expired OAuth state", extra={"state": state[:8]})
            raise InvalidStateError("Invalid or expired state")

        if provider is not None and state_data.provider != provider:
            logger.warning(
                "State provider mismatch",
                extra={"expected": state_data.provider, "actual": provider},
            )
            raise InvalidStateError("State provider mismatch")
        return state_data

    async def handle_redirect(
        self, callback_url: str, *, provider: str | None = None
    ) -> Result[OAuthLoginRequest]:
        """리다이렉트 콜백 URL 의 쿼리를 검증합니다."""
        query = parse_qs(urlparse(callback_url).query)
        state = _first(query, "state")
        provider_error = _first(query, "error")

        if provider_error:
            return await self._reject_provider_error(provider_error, state)
        return await self._accept(state, _first(query, "code"), provider)

    async def handle_message(
        self, message: OAuthMessage, *, provider: str | None = None
    ) -> Result[OAuthLoginRequest]:
        """검증된 창 간 메시지를 처리합니다."""
        if isinstance(message, OAuthErrorMessage):
            return await self._reject_provider_error(message.error, message.state)
        if isinstance(message, OAuthCallbackMessage):
            return await self._accept(message.state, message.code, provider)
        return error(ErrorCode.VALIDATION_ERROR, "Unrecognized OAuth message.")

    async def complete_login(
        self, manager: AuthManager, callback: Result[OAuthLoginRequest]
    ) -> Result[Any]:
        """콜백 검증 결과가 성공일 때만 로그인을 진행합니다."""
        if isinstance(callback, ErrorResult):
            return callback
        return await manager.login(callback.data)

    async def _accept(
        self, state: str | None, code: str | None, provider: str | None
    ) -> Result[OAuthLoginRequest]:
        if not state:
            logger.warning("OAuth callback without state")
            return validation_error("state")
        try:
            state_data = await self.consume_state(state, provider=provider)
        except InvalidStateError as e:
            return error(ErrorCode.AUTH_ERROR, str(e))
        if not code:
            return validation_error("authorization code")

        return success(
            "OAuth callback accepted.",
            OAuthLoginRequest(
                provider=state_data.provider,
                auth_code=code,
                redirect_uri=state_data.redirect_uri,
                code_verifier=state_data.code_verifier,
            ),
        )

    async def _reject_provider_error(
        self, provider_error: str, state: str | None
    ) -> ErrorResult:
        if state:
            # 실패한 시도의 state 는 재사용되지 않도록 폐기
            await self._state_store.consume(state)
        logger.warning("OAuth provider returned an error", extra={"error": provider_error})
        return error(ErrorCode.AUTH_ERROR, f"OAuth authorization failed: {provider_error}")


def _first(query: dict[str, list[str]], key: str) -> str | None:
    values = query.get(key)
    return values[0] if values else None
