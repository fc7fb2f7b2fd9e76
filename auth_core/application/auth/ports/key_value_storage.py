"""KeyValueStorage Port."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """영속 키-값 저장 매체 (브라우저 storage, 모바일 secure storage 등).

    구현체:
        - InMemoryKeyValueStorage (infrastructure/persistence/)
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...
