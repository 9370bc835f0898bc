"""History – SearchHistoryStore: bounded, deduplicated, persisted recent searches.

Lifecycle::

    store = SearchHistoryStore(InMemoryKeyValueStore())
    await store.init()                # load once; failures yield empty history
    store.record("shoes", 5)          # in-memory update, write scheduled
    store.list()                      # newest first, at most ``cap`` entries
    await store.flush()               # wait until the durable write is done

The in-memory list is the source of truth for the session.  Persistence
failures are logged and never reach the caller; a failed write leaves the
store dirty so the next write (scheduled by a later mutation or an explicit
``flush()``) tries again.
"""
from __future__ import annotations

import asyncio
import uuid

from storefront_discovery.history.codec import decode_history, encode_history
from storefront_discovery.history.entry import SearchHistoryEntry
from storefront_discovery.kernel.errors import HistoryNotInitializedError, SerializationError
from storefront_discovery.kernel.text import normalize_query
from storefront_discovery.kernel.time import Clock, SystemClock
from storefront_discovery.observability.logging import get_logger
from storefront_discovery.storage.port import KeyValueStore

DEFAULT_HISTORY_CAP = 10
DEFAULT_HISTORY_KEY = "@search_history"

logger = get_logger(__name__)


def _newest_first(entries: list[SearchHistoryEntry], cap: int) -> list[SearchHistoryEntry]:
    """Order by timestamp desc (stable), keep one entry per normalized query, cap."""
    seen: set[str] = set()
    result: list[SearchHistoryEntry] = []
    for entry in sorted(entries, key=lambda e: e.timestamp_millis, reverse=True):
        if entry.normalized in seen or not entry.normalized:
            continue
        seen.add(entry.normalized)
        result.append(entry)
    return result[:cap]


class SearchHistoryStore:
    """Recent text searches for one app session, persisted to a key-value store."""

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        clock: Clock | None = None,
        cap: int = DEFAULT_HISTORY_CAP,
        key: str = DEFAULT_HISTORY_KEY,
    ) -> None:
        if cap < 1:
            raise ValueError("cap must be >= 1")
        self._storage = storage
        self._clock: Clock = clock or SystemClock()
        self._cap = cap
        self._key = key
        self._entries: list[SearchHistoryEntry] = []
        self._initialized = False
        self._dirty = False
        self._write_lock = asyncio.Lock()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def cap(self) -> int:
        return self._cap

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def dirty(self) -> bool:
        """``True`` while the in-memory list has changes not yet persisted."""
        return self._dirty

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def init(self) -> None:
        """Load persisted history once.  Later calls are no-ops."""
        if self._initialized:
            return
        self._entries = await self._load()
        self._initialized = True
        logger.debug("history.loaded", key=self._key, entries=len(self._entries))

    async def flush(self) -> None:
        """Wait for scheduled writes, then persist any state still dirty."""
        if self._pending:
            await asyncio.gather(*tuple(self._pending))
        if self._dirty:
            await self._write()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def record(self, query: str, result_count: int) -> SearchHistoryEntry | None:
        """Put *query* at the front of the history.

        Returns the new entry, or ``None`` when the query is blank.  A previous
        entry for the same normalized text is replaced, and entries beyond the
        cap are evicted oldest-first.
        """
        self._require_init("record")
        normalized = normalize_query(query)
        if not normalized:
            return None

        entry = SearchHistoryEntry(
            id=uuid.uuid4().hex,
            query=query.strip(),
            timestamp_millis=self._clock.millis(),
            result_count=result_count,
        )
        entries = [entry, *(e for e in self._entries if e.normalized != normalized)]
        evicted = entries[self._cap:]
        self._entries = entries[: self._cap]
        if evicted:
            logger.debug("history.evicted", queries=[e.query for e in evicted])
        self._schedule_write()
        return entry

    def list(self) -> tuple[SearchHistoryEntry, ...]:
        """Entries newest first, already capped."""
        self._require_init("list")
        return tuple(self._entries)

    def clear(self) -> None:
        self._require_init("clear")
        self._entries = []
        self._schedule_write()

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _require_init(self, operation: str) -> None:
        if not self._initialized:
            raise HistoryNotInitializedError(operation)

    def _schedule_write(self) -> None:
        self._dirty = True
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop on this thread: the write waits for the next flush().
            return
        task = loop.create_task(self._write())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write(self) -> None:
        async with self._write_lock:
            if not self._dirty:
                return
            snapshot = tuple(self._entries)
            self._dirty = False
            try:
                if snapshot:
                    ok = await self._storage.set(self._key, encode_history(snapshot))
                else:
                    await self._storage.remove(self._key)
                    ok = True
            except Exception as exc:  # noqa: BLE001 – persistence must not reach callers
                ok = False
                logger.error("history.write_failed", key=self._key, error=repr(exc))
            else:
                if not ok:
                    logger.warning("history.write_rejected", key=self._key)
            if not ok:
                self._dirty = True

    async def _load(self) -> list[SearchHistoryEntry]:
        try:
            blob = await self._storage.get(self._key)
        except Exception as exc:  # noqa: BLE001
            logger.error("history.load_failed", key=self._key, error=repr(exc))
            return []
        if blob is None:
            return []
        try:
            entries = decode_history(blob)
        except SerializationError as exc:
            logger.warning("history.malformed_discarded", key=self._key, **exc.to_dict())
            await self._discard_malformed()
            return []
        return _newest_first(entries, self._cap)

    async def _discard_malformed(self) -> None:
        try:
            await self._storage.remove(self._key)
        except Exception as exc:  # noqa: BLE001
            logger.error("history.discard_failed", key=self._key, error=repr(exc))


__all__ = ["DEFAULT_HISTORY_CAP", "DEFAULT_HISTORY_KEY", "SearchHistoryStore"]
