"""History – ranked popular searches.

Popular searches are a curated list, not derived from any user's history.
"""
from __future__ import annotations

from typing import Iterable

from storefront_discovery.history.entry import PopularSearchEntry

DEFAULT_POPULAR_SEARCHES: tuple[PopularSearchEntry, ...] = (
    PopularSearchEntry(id="1", query="Korean face mask", count=145, category="skincare"),
    PopularSearchEntry(id="2", query="BB cream", count=98, category="cosmetics"),
    PopularSearchEntry(id="3", query="K-pop hoodie", count=76, category="fashion"),
    PopularSearchEntry(id="4", query="Korean snacks", count=234, category="snacks"),
    PopularSearchEntry(id="5", query="Sheet mask", count=87, category="skincare"),
    PopularSearchEntry(id="6", query="Ceramic mug", count=54, category="homeDecor"),
)


class PopularSearches:
    """Read-only popular search list, ranked by ``count`` descending."""

    def __init__(self, entries: Iterable[PopularSearchEntry] = DEFAULT_POPULAR_SEARCHES) -> None:
        # stable: equal counts keep their curated order
        self._ranked = tuple(sorted(entries, key=lambda e: e.count, reverse=True))

    def top(self, limit: int | None = None, category: str | None = None) -> list[PopularSearchEntry]:
        ranked = [e for e in self._ranked if category is None or e.category == category]
        return ranked if limit is None else ranked[: max(limit, 0)]

    def __len__(self) -> int:
        return len(self._ranked)


__all__ = ["DEFAULT_POPULAR_SEARCHES", "PopularSearches"]
