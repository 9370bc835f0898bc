"""History – SearchHistoryEntry and PopularSearchEntry value objects."""
from __future__ import annotations

import dataclasses
from typing import Any

from storefront_discovery.kernel.text import normalize_query


@dataclasses.dataclass(frozen=True, slots=True)
class SearchHistoryEntry:
    """One past text search.  ``query`` keeps the user's casing (trimmed)."""

    id: str
    query: str
    timestamp_millis: int
    result_count: int

    @property
    def normalized(self) -> str:
        return normalize_query(self.query)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "query": self.query,
            "timestamp": self.timestamp_millis,
            "resultCount": self.result_count,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class PopularSearchEntry:
    id: str
    query: str
    count: int
    category: str | None = None


__all__ = ["PopularSearchEntry", "SearchHistoryEntry"]
