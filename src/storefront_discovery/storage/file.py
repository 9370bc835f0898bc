"""Storage – key-value store persisted as one JSON object on disk.

File I/O runs in a worker thread so the event loop is never blocked.  Writes
go to a temporary sibling file that is then renamed over the target.
"""
from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path

from storefront_discovery.kernel.errors import PersistenceError


class JsonFileKeyValueStore:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read_all, key)
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> bool:
        async with self._lock:
            data = await asyncio.to_thread(self._read_all, key)
            data[key] = value
            await asyncio.to_thread(self._write_all, data, key)
        return True

    async def remove(self, key: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read_all, key)
            if data.pop(key, None) is not None:
                await asyncio.to_thread(self._write_all, data, key)

    def _read_all(self, key: str) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except OSError as exc:
            raise PersistenceError(key, "read", cause=exc) from exc
        except ValueError:
            # A corrupt file is replaced on the next write.
            return {}
        return raw if isinstance(raw, dict) else {}

    def _write_all(self, data: dict[str, object], key: str) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise PersistenceError(key, "write", cause=exc) from exc


__all__ = ["JsonFileKeyValueStore"]
