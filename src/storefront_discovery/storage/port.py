"""Storage – KeyValueStore port consumed by the search history store."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Port: async string key-value store.

    ``get`` returns ``None`` for an absent key.  ``set`` returns ``False``
    when the backend refused the write; adapters may also raise.
    """

    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> bool: ...
    async def remove(self, key: str) -> None: ...


__all__ = ["KeyValueStore"]
