"""AuthManager - 인증 세션 오케스트레이터.

요청 형태를 검증하고, 선택된 제공자를 호출한 뒤 결과를 토큰 저장소에 반영합니다.
생성 시점의 구성 오류를 제외하면 공개 연산은 예외를 던지지 않고 Result 를 반환합니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from auth_core.application.auth.dto import (
    LogoutRequest,
    is_email_login_request,
    is_oauth_login_request,
)
from auth_core.application.auth.ports import supports_email_verification
from auth_core.application.common.exceptions import ConfigurationError, PlatformNotSupportedError
from auth_core.application.common.result import (
    ErrorCode,
    ErrorResult,
    Result,
    error,
    error_from_exception,
    platform_unavailable_error,
    success,
    token_delete_error,
    validation_error,
)
from auth_core.domain.enums import AuthProviderType, ClientPlatform, TokenStoreType
from auth_core.domain.value_objects import Token, UserInfo

if TYPE_CHECKING:
    from auth_core.application.auth.dto import (
        EmailVerificationConfirmRequest,
        EmailVerificationRequest,
        LoginRequest,
        RefreshTokenRequest,
    )
    from auth_core.application.auth.ports import (
        AuthenticatedRequest,
        AuthenticatedResponse,
        AuthProviderFactory,
        HttpClient,
        KeyValueStorage,
        LoginProvider,
        NativeBridge,
        SessionInfo,
        TokenStore,
        TokenStoreFactory,
    )

logger = logging.getLogger(__name__)

# 이메일 요청을 받을 수 있는 제공자 (fake 는 email 의 별칭)
EMAIL_STYLE_PROVIDERS = frozenset({AuthProviderType.EMAIL.value, AuthProviderType.FAKE.value})


@dataclass(frozen=True, slots=True)
class AuthManagerConfig:
    """AuthManager 구성.

    provider 와 provider_type 중 정확히 하나를 지정해야 합니다.
    provider_type 은 provider_factory 로, token_store 가 없으면 token_store_factory 로
    생성합니다 (setup.factories.create_auth_manager 가 기본 팩토리를 채움).
    provider_config / api_config 는 팩토리에 그대로 전달됩니다.

    owns_http_client 가 True 이면 close() 가 http_client 를 닫습니다.
    device_id 는 요청에 device_id 가 없을 때 기본값으로 쓰입니다.
    """

    provider: LoginProvider | None = None
    provider_type: AuthProviderType | str | None = None
    provider_config: Any = None
    api_config: Any = None
    http_client: HttpClient | None = None
    owns_http_client: bool = False
    token_store: TokenStore | None = None
    token_store_type: TokenStoreType | str | None = None
    storage: KeyValueStorage | None = None
    platform: ClientPlatform | str = ClientPlatform.WEB
    native_bridge: NativeBridge | None = None
    device_id: str | None = None
    provider_factory: AuthProviderFactory | None = None
    token_store_factory: TokenStoreFactory | None = None


def _is_react_native_store_type(value: TokenStoreType | str | None) -> bool:
    if value is None:
        return False
    raw = value.value if isinstance(value, TokenStoreType) else value
    return raw == TokenStoreType.REACT_NATIVE.value


def _display(provider_name: str) -> str:
    return provider_name.capitalize() if provider_name else "Unknown"


def _token_from_data(data: Any) -> Token | None:
    """제공자 응답 data 에서 토큰 추출 (평탄형 또는 data.token 중첩형)."""
    if not isinstance(data, Mapping):
        return None
    payload = data
    if not payload.get("accessToken") and isinstance(data.get("token"), Mapping):
        payload = data["token"]
    if not payload.get("accessToken"):
        return None
    return Token.from_payload(payload)


def _is_positive_validation(result: Result[Any]) -> bool:
    if isinstance(result, ErrorResult):
        return False
    data = result.data
    if data is False:
        return False
    if isinstance(data, Mapping) and data.get("valid") is False:
        return False
    return True


class AuthManager:
    """인증 세션 오케스트레이터.

    Responsibilities:
        - 로그인 요청 형태 및 제공자 호환성 검증 (네트워크 호출 전)
        - 제공자 위임 및 토큰 저장소 write-through
        - 세션 조회 (2단계 인증 여부 확인)
        - react-native 전용 브리지 기능

    Collaborators:
        - LoginProvider: 원격 인증 호출
        - TokenStore: 토큰 보관
        - NativeBridge: react-native 세션 (선택)
    """

    def __init__(self, config: AuthManagerConfig) -> None:
        if (config.provider is None) == (config.provider_type is None):
            raise ConfigurationError("Exactly one of provider or provider_type must be supplied")

        try:
            platform = ClientPlatform(config.platform)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported platform: {config.platform}") from e

        react_native = (
            platform is ClientPlatform.REACT_NATIVE
            or _is_react_native_store_type(config.token_store_type)
            or config.native_bridge is not None
        )
        if react_native and config.native_bridge is None:
            raise ConfigurationError("A native bridge is required on the react-native platform")

        self._config = config
        self._platform = ClientPlatform.REACT_NATIVE if react_native else platform
        self._native_bridge = config.native_bridge if react_native else None
        self._owned_http_client = config.http_client if config.owns_http_client else None
        self._provider = self._resolve_provider(config)
        self._token_store = self._resolve_token_store(config)

        logger.info(
            "AuthManager initialized",
            extra={
                "provider": self._provider.provider_name,
                "platform": self._platform.value,
                "store_class": type(self._token_store).__name__,
            },
        )

    def _resolve_provider(self, config: AuthManagerConfig) -> LoginProvider:
        if config.provider is not None:
            return config.provider
        if config.provider_factory is None:
            raise ConfigurationError("provider_type requires a provider_factory")
        result = config.provider_factory(
            config.provider_type,
            config.provider_config,
            config.http_client,
            config.api_config,
            self._platform.request_shape,
        )
        if isinstance(result, ErrorResult):
            raise ConfigurationError(f"Failed to create auth provider: {result.message}")
        return result

    def _resolve_token_store(self, config: AuthManagerConfig) -> TokenStore:
        if config.token_store is not None:
            return config.token_store
        if config.token_store_factory is None:
            raise ConfigurationError("A token_store or token_store_factory must be supplied")

        store_type = config.token_store_type
        if store_type is None:
            store_type = (
                TokenStoreType.REACT_NATIVE
                if self._native_bridge is not None
                else TokenStoreType.FAKE
            )
        result = config.token_store_factory(
            store_type,
            storage=config.storage,
            native_bridge=self._native_bridge,
        )
        if isinstance(result, ErrorResult):
            raise ConfigurationError(f"Failed to create token store: {result.message}")
        return result

    @property
    def provider(self) -> LoginProvider:
        return self._provider

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    @property
    def platform(self) -> ClientPlatform:
        return self._platform

    async def close(self) -> None:
        """매니저가 소유한 전송 계층을 닫습니다. 여러 번 호출해도 안전합니다."""
        client, self._owned_http_client = self._owned_http_client, None
        if client is None:
            return
        close = getattr(client, "close", None)
        if close is not None:
            await close()
            logger.debug("Owned HTTP client closed")

    async def __aenter__(self) -> AuthManager:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ============================================================
    # Login / Logout / Refresh
    # ============================================================

    async def login(self, request: LoginRequest) -> Result[Any]:
        try:
            rejection = self._check_login_request(request)
            if rejection is not None:
                logger.info(
                    "Login request rejected",
                    extra={"provider": self._provider.provider_name, "reason": rejection.error},
                )
                return rejection

            result = await self._provider.login(self._with_device_id(request))
            if isinstance(result, ErrorResult):
                logger.info(
                    "Login failed",
                    extra={"provider": self._provider.provider_name, "error": result.error},
                )
                return result

            await self._write_through_login(result.data)
            logger.info("Login succeeded", extra={"provider": self._provider.provider_name})
            return result
        except Exception as e:
            logger.exception("Unexpected error during login")
            return error_from_exception(e, "An error occurred during login.")

    def _check_login_request(self, request: LoginRequest) -> ErrorResult | None:
        """형태 검증 → 제공자 호환성 검증. 통과하면 None."""
        is_email = is_email_login_request(request)
        is_oauth = is_oauth_login_request(request)
        if is_email == is_oauth:
            return error(ErrorCode.VALIDATION_ERROR, "Unrecognized login request.")

        current = self._provider.provider_name
        if is_email:
            if not request.email:
                return validation_error("email")
            if not request.verify_code:
                return validation_error("verify code")
            if request.provider not in EMAIL_STYLE_PROVIDERS:
                return error(
                    ErrorCode.VALIDATION_ERROR,
                    f"Email login cannot use the '{request.provider}' provider.",
                )
            if current not in EMAIL_STYLE_PROVIDERS:
                return self._mismatch(request.provider)
            return None

        if not request.auth_code:
            return validation_error("authorization code")
        if not request.provider or request.provider == AuthProviderType.EMAIL.value:
            return error(
                ErrorCode.VALIDATION_ERROR,
                "OAuth login requires an OAuth provider.",
            )
        if request.provider != current:
            return self._mismatch(request.provider)
        return None

    def _mismatch(self, requested: str) -> ErrorResult:
        return error(
            ErrorCode.PROVIDER_MISMATCH,
            f"{_display(requested)} login is not supported by the current "
            f"{_display(self._provider.provider_name)} provider.",
        )

    async def _write_through_login(self, data: Any) -> None:
        try:
            token = _token_from_data(data)
        except ValueError as e:
            logger.error("Login token payload is malformed", extra={"error": str(e)})
            return
        if token is None:
            return
        # web 에서 refresh token 은 쿠키로 관리
        await self._save(token.with_refresh_token(token.refresh_token or ""))

    async def _save(self, token: Token) -> None:
        saved = await self._token_store.save_token(token)
        if isinstance(saved, ErrorResult):
            logger.error("Token save failed", extra={"error": saved.message})

    async def logout(self, request: LogoutRequest | None = None) -> Result[Any]:
        request = request or LogoutRequest()
        try:
            stored = await self._token_store.get_token()
            if isinstance(stored, ErrorResult):
                return stored
            token = stored.data
            if token is None:
                return error(ErrorCode.VALIDATION_ERROR, "No stored token to log out.")

            if self._platform is ClientPlatform.REACT_NATIVE:
                return await self._native_logout()

            headers = dict(request.headers)
            if self._provider.provider_name in EMAIL_STYLE_PROVIDERS:
                headers["Authorization"] = f"Bearer {token.access_token}"
            refresh_token = request.refresh_token
            if self._platform.request_shape is ClientPlatform.APP and token.refresh_token:
                refresh_token = token.refresh_token

            result = await self._provider.logout(
                replace(
                    self._with_device_id(request),
                    headers=headers,
                    refresh_token=refresh_token,
                )
            )
            if isinstance(result, ErrorResult):
                logger.info("Logout failed", extra={"error": result.error})
                return result

            removed = await self._token_store.remove_token()
            if isinstance(removed, ErrorResult):
                logger.error("Token removal after logout failed", extra={"error": removed.message})
            logger.info("Logout succeeded", extra={"provider": self._provider.provider_name})
            return result
        except Exception as e:
            logger.exception("Unexpected error during logout")
            return error_from_exception(e, "An error occurred during logout.")

    async def _native_logout(self) -> Result[None]:
        # 네이티브 세션은 브리지 sign-out 으로만 종료
        if self._native_bridge is None:
            return platform_unavailable_error("Native logout")
        try:
            signed_out = await self._native_bridge.sign_out()
        except Exception as e:
            logger.error("Native sign-out failed", extra={"error": str(e)})
            return token_delete_error(str(e))
        if not signed_out:
            return error(ErrorCode.STORAGE_ERROR, "Native bridge refused to sign out.")
        return success("Logged out.")

    def _with_device_id(self, request: Any) -> Any:
        """요청에 device_id 가 없으면 구성의 기본값을 채웁니다."""
        if self._config.device_id is None or getattr(request, "device_id", None):
            return request
        return replace(request, device_id=self._config.device_id)

    async def refresh_token(self, request: RefreshTokenRequest) -> Result[Any]:
        try:
            result = await self._provider.refresh_token(self._with_device_id(request))
            if isinstance(result, ErrorResult):
                logger.info("Token refresh failed", extra={"error": result.error})
                return result

            try:
                token = _token_from_data(result.data)
            except ValueError as e:
                logger.error("Refreshed token payload is malformed", extra={"error": str(e)})
                return result
            if token is not None:
                await self._save(token)
            return result
        except Exception as e:
            logger.exception("Unexpected error during token refresh")
            return error_from_exception(e, "An error occurred during token refresh.")

    # ============================================================
    # Session queries
    # ============================================================

    async def _current_token(self) -> Token | ErrorResult:
        """저장된 토큰을 읽고, 없거나 만료면 ErrorResult."""
        stored = await self._token_store.get_token()
        if isinstance(stored, ErrorResult) or stored.data is None:
            return error(ErrorCode.NO_STORED_TOKEN, "No stored token.")
        expired = await self._token_store.is_token_expired()
        if isinstance(expired, ErrorResult):
            return expired
        if expired.data:
            return error(ErrorCode.TOKEN_EXPIRED, "The stored token has expired.")
        return stored.data

    async def validate_current_token(self) -> Result[Any]:
        try:
            token = await self._current_token()
            if isinstance(token, ErrorResult):
                return token
            if self._platform is ClientPlatform.REACT_NATIVE:
                return success("Native session is active.", True)
            return await self._provider.validate_token(token)
        except Exception as e:
            logger.exception("Unexpected error during token validation")
            return error_from_exception(e, "An error occurred during token validation.")

    async def get_current_user_info(self) -> Result[Any]:
        try:
            token = await self._current_token()
            if isinstance(token, ErrorResult):
                return token
            if self._platform is ClientPlatform.REACT_NATIVE:
                return await self._native_user_info()
            return await self._provider.get_user_info(token)
        except Exception as e:
            logger.exception("Unexpected error while fetching user info")
            return error_from_exception(e, "An error occurred while fetching user info.")

    async def _native_user_info(self) -> Result[Any]:
        session = await self.get_current_session()
        profile = session.user_profile
        if profile is None:
            return error(ErrorCode.USER_INFO_FAILED, "Native session has no user profile.")
        user_info = UserInfo(
            id=profile.id,
            email=profile.email or "",
            provider=profile.provider or self._provider.provider_name,
            nickname=profile.name,
        )
        return success("Fetched user info.", user_info.to_payload())

    async def is_authenticated(self) -> Result[bool]:
        """로컬 토큰 확인 후에만 원격 검증을 수행합니다."""
        try:
            has_token = await self._token_store.has_token()
            if isinstance(has_token, ErrorResult):
                logger.warning("Token presence check failed", extra={"error": has_token.message})
                return success("Not authenticated.", False)
            if not has_token.data:
                return success("Not authenticated.", False)

            validation = await self.validate_current_token()
            authenticated = _is_positive_validation(validation)
            return success(
                "Authenticated." if authenticated else "Not authenticated.",
                authenticated,
            )
        except Exception as e:
            logger.exception("Unexpected error during authentication check")
            return error_from_exception(e, "An error occurred during authentication check.")

    async def get_token(self) -> Result[Token | None]:
        try:
            return await self._token_store.get_token()
        except Exception as e:
            logger.exception("Unexpected error while reading token")
            return error_from_exception(e, "An error occurred while reading the token.")

    async def clear(self) -> Result[None]:
        try:
            return await self._token_store.clear()
        except Exception as e:
            logger.exception("Unexpected error while clearing storage")
            return error_from_exception(e, "An error occurred while clearing storage.")

    async def is_provider_available(self) -> Result[Any]:
        try:
            return await self._provider.is_available()
        except Exception as e:
            logger.exception("Unexpected error during availability check")
            return error_from_exception(e, "An error occurred during availability check.")

    # ============================================================
    # Email verification (capability)
    # ============================================================

    def _unsupported_email_verification(self) -> ErrorResult:
        return error(
            ErrorCode.UNSUPPORTED_OPERATION,
            f"{_display(self._provider.provider_name)} provider does not support "
            "email verification.",
        )

    async def request_email_verification(self, request: EmailVerificationRequest) -> Result[Any]:
        if not supports_email_verification(self._provider):
            return self._unsupported_email_verification()
        try:
            return await self._provider.request_email_verification(request)
        except Exception as e:
            logger.exception("Unexpected error during email verification request")
            return error_from_exception(e, "An error occurred during email verification request.")

    async def verify_email(self, request: EmailVerificationConfirmRequest) -> Result[Any]:
        if not supports_email_verification(self._provider):
            return self._unsupported_email_verification()
        try:
            return await self._provider.verify_email(request)
        except Exception as e:
            logger.exception("Unexpected error during email verification")
            return error_from_exception(e, "An error occurred during email verification.")

    # ============================================================
    # React Native
    # ============================================================

    def is_react_native_platform(self) -> bool:
        return self._platform is ClientPlatform.REACT_NATIVE

    def get_native_bridge(self) -> NativeBridge | None:
        return self._native_bridge

    async def is_native_bridge_healthy(self) -> Result[bool]:
        """세션 조회가 성공하면 정상으로 봅니다."""
        if self._native_bridge is None:
            return platform_unavailable_error("Native bridge health check")
        try:
            await self._native_bridge.get_session()
        except Exception as e:
            logger.warning("Native bridge health check failed", extra={"error": str(e)})
            return success("Native bridge health checked.", False)
        return success("Native bridge health checked.", True)

    async def start_native_oauth(self, provider: str) -> Result[bool]:
        if self._native_bridge is None:
            return platform_unavailable_error("Native OAuth")
        try:
            started = await self._native_bridge.start_oauth(provider)
        except Exception as e:
            logger.exception("Native OAuth failed", extra={"provider": provider})
            return error_from_exception(e, "Native OAuth failed.")
        if not started:
            return error(
                ErrorCode.AUTH_ERROR,
                f"{_display(provider)} native login was not completed.",
            )
        return success("Native OAuth completed.", True)

    async def get_current_session(self) -> SessionInfo:
        """Raises: PlatformNotSupportedError (react-native 가 아닌 경우)."""
        if self._native_bridge is None:
            raise PlatformNotSupportedError("get_current_session", self._platform.value)
        return await self._native_bridge.get_session()

    async def call_protected_api(self, request: AuthenticatedRequest) -> AuthenticatedResponse:
        """Raises: PlatformNotSupportedError (react-native 가 아닌 경우)."""
        if self._native_bridge is None:
            raise PlatformNotSupportedError("call_protected_api", self._platform.value)
        return await self._native_bridge.call_with_auth(request)
