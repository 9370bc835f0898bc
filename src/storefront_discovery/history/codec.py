"""History – JSON codec for the persisted search history list.

The stored blob is an ordered JSON array of
``{"id", "query", "timestamp", "resultCount"}`` objects.
"""
from __future__ import annotations

import json
from typing import Any, Iterable

from storefront_discovery.history.entry import SearchHistoryEntry
from storefront_discovery.kernel.errors import SerializationError

_PAYLOAD_TYPE = "search_history"


def encode_history(entries: Iterable[SearchHistoryEntry]) -> str:
    return json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)


def decode_history(blob: str | bytes) -> list[SearchHistoryEntry]:
    """Parse a persisted history blob.

    Raises:
        SerializationError: the blob is not JSON, not an array, or an element
            is missing a field or has the wrong type.
    """
    try:
        raw = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            "Search history is not valid JSON", payload_type=_PAYLOAD_TYPE, cause=exc
        ) from exc
    if not isinstance(raw, list):
        raise SerializationError(
            f"Search history must be a JSON array, got {type(raw).__name__}",
            payload_type=_PAYLOAD_TYPE,
        )
    return [_decode_entry(item, index) for index, item in enumerate(raw)]


def _decode_entry(item: Any, index: int) -> SearchHistoryEntry:
    if not isinstance(item, dict):
        raise SerializationError(
            f"Search history item {index} is not an object",
            payload_type=_PAYLOAD_TYPE,
            detail={"index": index},
        )
    try:
        query = item["query"]
        timestamp = item["timestamp"]
        result_count = item.get("resultCount", 0)
        if not isinstance(query, str):
            raise TypeError("query must be a string")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise TypeError("timestamp must be a number")
        return SearchHistoryEntry(
            id=str(item.get("id") or int(timestamp)),
            query=query,
            timestamp_millis=int(timestamp),
            result_count=int(result_count),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        # OverflowError: Infinity or 1e400 parse to a float int() cannot take
        raise SerializationError(
            f"Search history item {index} is malformed: {exc}",
            payload_type=_PAYLOAD_TYPE,
            detail={"index": index},
            cause=exc,
        ) from exc


__all__ = ["decode_history", "encode_history"]
