"""Backend Auth Provider Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from auth_core.application.common.exceptions import ConfigurationError, MissingRefreshTokenError
from auth_core.application.common.result import (
    ErrorResult,
    SuccessResult,
    service_availability_error,
    validation_error,
)
from auth_core.domain.enums import ClientPlatform
from auth_core.infrastructure.http.platform import (
    build_logout_body,
    build_refresh_body,
    platform_headers,
)
from auth_core.infrastructure.http.request import RequestOptions, call_backend

if TYPE_CHECKING:
    from auth_core.application.auth.dto import LoginRequest, LogoutRequest, RefreshTokenRequest
    from auth_core.application.auth.ports import HttpClient
    from auth_core.domain.value_objects import Token
    from auth_core.setup.config.api import ApiConfig, AuthProviderConfig

logger = logging.getLogger(__name__)


class BackendAuthProvider(ABC):
    """원격 인증 백엔드를 호출하는 제공자 추상 클래스.

    required_endpoints 가 ApiConfig 에 없으면 생성 시 ConfigurationError 를 던집니다.
    백엔드 envelope 은 재해석하지 않고 그대로 반환합니다.
    """

    provider_name: str
    display_name: str

    def __init__(
        self,
        config: AuthProviderConfig,
        http_client: HttpClient,
        api_config: ApiConfig,
        platform: ClientPlatform | str = ClientPlatform.WEB,
    ) -> None:
        missing = api_config.endpoints.missing(self.required_endpoints)
        if missing:
            raise ConfigurationError(
                f"{self.display_name} provider requires endpoints: {', '.join(missing)}"
            )
        self.config = config
        self._http_client = http_client
        self._api_config = api_config.with_defaults(
            timeout=config.timeout,
            retry_count=config.retry_count,
        )
        self._platform = ClientPlatform(platform)

    @property
    @abstractmethod
    def required_endpoints(self) -> tuple[str, ...]:
        raise NotImplementedError

    @property
    def api_config(self) -> ApiConfig:
        return self._api_config

    @property
    def platform(self) -> ClientPlatform:
        return self._platform

    @abstractmethod
    async def login(self, request: LoginRequest) -> SuccessResult[Any] | ErrorResult:
        raise NotImplementedError

    @abstractmethod
    async def validate_token(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        raise NotImplementedError

    @abstractmethod
    async def get_user_info(self, token: Token) -> SuccessResult[Any] | ErrorResult:
        raise NotImplementedError

    async def _send(
        self,
        endpoint_name: str,
        *,
        method: str,
        fallback_message: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
        retry: bool = True,
    ) -> SuccessResult[Any] | ErrorResult:
        endpoint = self._api_config.endpoints.get(endpoint_name)
        if endpoint is None:
            return service_availability_error(f"Endpoint '{endpoint_name}' is not configured.")
        return await call_backend(
            self._http_client,
            self._api_config,
            endpoint,
            options=RequestOptions(method=method, headers=headers or {}, body=body),
            fallback_message=fallback_message,
            retry=retry,
        )

    async def _logout(
        self, endpoint_name: str, request: LogoutRequest
    ) -> SuccessResult[Any] | ErrorResult:
        try:
            body = build_logout_body(request, self._platform)
        except MissingRefreshTokenError:
            return validation_error("refresh token")
        headers = {**platform_headers(self._platform), **request.headers}
        return await self._send(
            endpoint_name,
            method="POST",
            body=body,
            headers=headers,
            fallback_message=f"{self.display_name} logout failed.",
        )

    async def _refresh(
        self, endpoint_name: str, request: RefreshTokenRequest
    ) -> SuccessResult[Any] | ErrorResult:
        try:
            body = build_refresh_body(request, self._platform)
        except MissingRefreshTokenError:
            return validation_error("refresh token")
        return await self._send(
            endpoint_name,
            method="POST",
            body=body,
            headers=platform_headers(self._platform),
            fallback_message=f"{self.display_name} token refresh failed.",
        )

    async def is_available(self) -> SuccessResult[Any] | ErrorResult:
        if self._api_config.endpoints.get("health") is None:
            return service_availability_error("Health endpoint is not configured.")
        return await self._send(
            "health",
            method="GET",
            retry=False,
            fallback_message=f"{self.display_name} service availability check failed.",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self._platform.value!r})"
