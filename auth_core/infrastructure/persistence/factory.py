"""Token Store Factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from auth_core.application.common.result import ErrorCode, ErrorResult, error
from auth_core.domain.enums import TokenStoreType
from auth_core.infrastructure.persistence.memory_token_store import InMemoryTokenStore, TokenCell
from auth_core.infrastructure.persistence.mobile_token_store import MobileTokenStore
from auth_core.infrastructure.persistence.native_token_store import NativeBridgeTokenStore
from auth_core.infrastructure.persistence.web_token_store import WebTokenStore

if TYPE_CHECKING:
    from auth_core.application.auth.ports import KeyValueStorage, NativeBridge, TokenStore


def create_token_store(
    store_type: TokenStoreType | str,
    *,
    storage: KeyValueStorage | None = None,
    native_bridge: NativeBridge | None = None,
    cell: TokenCell | None = None,
) -> TokenStore | ErrorResult:
    """저장소 종류 태그로 토큰 저장소를 생성합니다.

    auto: 브리지가 있으면 react-native, storage 가 있으면 mobile, 그 외 메모리.
    """
    try:
        kind = TokenStoreType(store_type)
    except ValueError:
        return error(ErrorCode.FACTORY_ERROR, f"Unsupported token store type: {store_type}")

    if kind is TokenStoreType.AUTO:
        if native_bridge is not None:
            kind = TokenStoreType.REACT_NATIVE
        elif storage is not None:
            kind = TokenStoreType.MOBILE
        else:
            kind = TokenStoreType.FAKE

    if kind is TokenStoreType.FAKE:
        return InMemoryTokenStore(cell)
    if kind is TokenStoreType.REACT_NATIVE:
        if native_bridge is None:
            return error(
                ErrorCode.FACTORY_ERROR, "react-native token store requires a native bridge."
            )
        return NativeBridgeTokenStore(native_bridge)
    if storage is None:
        return error(
            ErrorCode.FACTORY_ERROR, f"{kind.value} token store requires a storage medium."
        )
    if kind is TokenStoreType.WEB:
        return WebTokenStore(storage)
    return MobileTokenStore(storage)
