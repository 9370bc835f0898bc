"""Storage – pick a KeyValueStore adapter from settings."""
from __future__ import annotations

from storefront_discovery.config.settings import DiscoverySettings
from storefront_discovery.config.validation import InvalidSettingValueError
from storefront_discovery.storage.file import JsonFileKeyValueStore
from storefront_discovery.storage.memory import InMemoryKeyValueStore
from storefront_discovery.storage.port import KeyValueStore


def build_key_value_store(settings: DiscoverySettings) -> KeyValueStore:
    backend = settings.storage_backend
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileKeyValueStore(settings.storage_path)
    if backend == "redis":
        if not settings.redis_url:
            raise InvalidSettingValueError("redis_url", settings.redis_url, "required for the redis backend")
        from storefront_discovery.storage.redis import RedisKeyValueStore  # lazy: optional extra

        return RedisKeyValueStore(settings.redis_url)
    raise InvalidSettingValueError("storage_backend", backend, "unknown backend")


__all__ = ["build_key_value_store"]
