"""Component Factory Ports.

AuthManager 는 종류 태그만 알고, 구체 제공자와 저장소 생성은 이 포트에 위임합니다.
생성 실패는 예외 대신 ErrorResult 로 반환합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from auth_core.application.auth.ports.http_client import HttpClient
    from auth_core.application.auth.ports.key_value_storage import KeyValueStorage
    from auth_core.application.auth.ports.login_provider import LoginProvider
    from auth_core.application.auth.ports.native_bridge import NativeBridge
    from auth_core.application.auth.ports.token_store import TokenStore
    from auth_core.application.common.result import ErrorResult
    from auth_core.domain.enums import AuthProviderType, ClientPlatform, TokenStoreType


class AuthProviderFactory(Protocol):
    """제공자 종류 태그로 LoginProvider 생성.

    구현체:
        - create_auth_provider (infrastructure/providers/factory.py)
    """

    def __call__(
        self,
        provider_type: AuthProviderType | str,
        config: Any,
        http_client: HttpClient | None,
        api_config: Any,
        platform: ClientPlatform | str = ...,
    ) -> LoginProvider | ErrorResult: ...


class TokenStoreFactory(Protocol):
    """저장소 종류 태그로 TokenStore 생성.

    구현체:
        - create_token_store (infrastructure/persistence/factory.py)
    """

    def __call__(
        self,
        store_type: TokenStoreType | str,
        *,
        storage: KeyValueStorage | None = None,
        native_bridge: NativeBridge | None = None,
    ) -> TokenStore | ErrorResult: ...
