"""History – recent searches store and the popular searches list."""
from storefront_discovery.history.codec import decode_history, encode_history
from storefront_discovery.history.entry import PopularSearchEntry, SearchHistoryEntry
from storefront_discovery.history.popular import DEFAULT_POPULAR_SEARCHES, PopularSearches
from storefront_discovery.history.store import (
    DEFAULT_HISTORY_CAP,
    DEFAULT_HISTORY_KEY,
    SearchHistoryStore,
)

__all__ = [
    "DEFAULT_HISTORY_CAP",
    "DEFAULT_HISTORY_KEY",
    "DEFAULT_POPULAR_SEARCHES",
    "PopularSearchEntry",
    "PopularSearches",
    "SearchHistoryEntry",
    "SearchHistoryStore",
    "decode_history",
    "encode_history",
]
