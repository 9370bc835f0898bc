"""Storage – Redis-backed key-value store (``redis.asyncio``)."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'storefront-discovery[redis]' to use RedisKeyValueStore") from exc


class RedisKeyValueStore:
    """Persist history blobs in Redis under an optional key namespace."""

    def __init__(self, url: str, *, namespace: str = "", **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, decode_responses=True, **kwargs)
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}" if self._namespace else key

    async def get(self, key: str) -> str | None:
        value = await self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> bool:
        return bool(await self._client.set(self._key(key), value))

    async def remove(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisKeyValueStore"]
