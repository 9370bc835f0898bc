"""Storage – the KeyValueStore port and its adapters.

``RedisKeyValueStore`` lives in :mod:`storefront_discovery.storage.redis` and
needs the ``redis`` extra.
"""
from storefront_discovery.storage.factory import build_key_value_store
from storefront_discovery.storage.file import JsonFileKeyValueStore
from storefront_discovery.storage.memory import InMemoryKeyValueStore
from storefront_discovery.storage.port import KeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "build_key_value_store",
]
