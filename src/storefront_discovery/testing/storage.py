"""Testing – key-value store that fails on demand."""
from __future__ import annotations

from storefront_discovery.kernel.errors import PersistenceError
from storefront_discovery.storage.memory import InMemoryKeyValueStore


class FlakyKeyValueStore(InMemoryKeyValueStore):
    """In-memory store whose reads/writes can be switched to fail.

    ``reject_writes`` makes ``set`` return ``False`` instead of raising.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False
        self.reject_writes = False
        self.set_calls = 0
        self.remove_calls = 0

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise PersistenceError(key, "read")
        return await super().get(key)

    async def set(self, key: str, value: str) -> bool:
        self.set_calls += 1
        if self.fail_writes:
            raise PersistenceError(key, "write")
        if self.reject_writes:
            return False
        return await super().set(key, value)

    async def remove(self, key: str) -> None:
        self.remove_calls += 1
        if self.fail_writes:
            raise PersistenceError(key, "remove")
        await super().remove(key)


__all__ = ["FlakyKeyValueStore"]
