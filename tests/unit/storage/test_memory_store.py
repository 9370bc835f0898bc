"""Unit tests for InMemoryKeyValueStore."""

from __future__ import annotations

import asyncio

from storefront_discovery.storage import InMemoryKeyValueStore, KeyValueStore


class TestInMemoryKeyValueStore:
    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryKeyValueStore(), KeyValueStore)

    def test_get_missing_returns_none(self) -> None:
        async def run() -> None:
            assert await InMemoryKeyValueStore().get("nope") is None
        asyncio.run(run())

    def test_set_get_remove(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore()
            assert await store.set("k", "v") is True
            assert await store.get("k") == "v"
            await store.remove("k")
            assert await store.get("k") is None
        asyncio.run(run())

    def test_remove_missing_is_noop(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore({"a": "1"})
            await store.remove("b")
            assert store.snapshot() == {"a": "1"}
        asyncio.run(run())

    def test_initial_data_is_copied(self) -> None:
        initial = {"a": "1"}
        store = InMemoryKeyValueStore(initial)
        initial["b"] = "2"
        assert store.snapshot() == {"a": "1"}
