"""Discovery – DiscoveryService, the façade every storefront screen calls.

One service instance is created at app start-up and handed to the Home,
Search, Advanced Search and Orders screens, so they all share the same
filter/sort rules and the same history store.
"""
from __future__ import annotations

from storefront_discovery.catalog.provider import CatalogProvider
from storefront_discovery.catalog.records import Order, Product
from storefront_discovery.config.settings import DiscoverySettings
from storefront_discovery.discovery.criteria import (
    FacetCriteria,
    SortDirection,
    SortField,
    SortSpec,
    TextQuery,
)
from storefront_discovery.discovery.executor import QueryExecutor
from storefront_discovery.discovery.filters import DEFAULT_HIGH_RATED_THRESHOLD
from storefront_discovery.discovery.stats import OrderStats, category_counts, compute_order_stats
from storefront_discovery.history.entry import PopularSearchEntry, SearchHistoryEntry
from storefront_discovery.history.popular import PopularSearches
from storefront_discovery.history.store import SearchHistoryStore
from storefront_discovery.kernel.time import Clock
from storefront_discovery.observability.logging import get_logger
from storefront_discovery.storage.factory import build_key_value_store
from storefront_discovery.storage.port import KeyValueStore

ORDERS_DEFAULT_SORT = SortSpec(SortField.DATE, SortDirection.DESC)

logger = get_logger(__name__)


class DiscoveryService:
    def __init__(
        self,
        catalog: CatalogProvider,
        history: SearchHistoryStore,
        *,
        popular: PopularSearches | None = None,
        high_rated_threshold: float = DEFAULT_HIGH_RATED_THRESHOLD,
        owned_storage: KeyValueStore | None = None,
    ) -> None:
        """
        *owned_storage* is a storage adapter this service created and must
        release on :meth:`shutdown`; storage passed in by the caller stays
        the caller's to close.
        """
        self._catalog = catalog
        self._history = history
        self._popular = popular or PopularSearches()
        self._products = QueryExecutor(history, high_rated_threshold=high_rated_threshold)
        # order lookups never feed the search history
        self._orders = QueryExecutor(high_rated_threshold=high_rated_threshold)
        self._owned_storage = owned_storage

    @classmethod
    def from_settings(
        cls,
        catalog: CatalogProvider,
        settings: DiscoverySettings,
        *,
        clock: Clock | None = None,
        popular: PopularSearches | None = None,
    ) -> "DiscoveryService":
        """Wire storage and history from *settings*.  Call :meth:`start` before use."""
        storage = build_key_value_store(settings)
        history = SearchHistoryStore(
            storage,
            clock=clock,
            cap=settings.history_cap,
            key=settings.history_key,
        )
        return cls(
            catalog,
            history,
            popular=popular,
            high_rated_threshold=settings.high_rated_threshold,
            owned_storage=storage,
        )

    @property
    def history(self) -> SearchHistoryStore:
        return self._history

    async def start(self) -> None:
        await self._history.init()

    async def shutdown(self) -> None:
        """Flush pending history writes, then close storage this service built."""
        try:
            await self._history.flush()
        finally:
            close = getattr(self._owned_storage, "close", None)
            if close is not None:
                await close()
                logger.debug("service.storage_closed", storage=type(self._owned_storage).__name__)
            self._owned_storage = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search_products(
        self,
        text: "TextQuery | str | None" = None,
        facets: FacetCriteria | None = None,
        sort: SortSpec | None = None,
    ) -> list[Product]:
        return self._products.execute(self._catalog.get_products(), text, facets, sort)

    def search_orders(
        self,
        text: "TextQuery | str | None" = None,
        facets: FacetCriteria | None = None,
        sort: SortSpec | None = None,
    ) -> list[Order]:
        return self._orders.execute(self._catalog.get_orders(), text, facets, sort or ORDERS_DEFAULT_SORT)

    def related_products(self, product_id: str, limit: int = 5) -> list[Product]:
        """Other products in the same category, in catalog order."""
        products = self._catalog.get_products()
        source = next((p for p in products if p.id == product_id), None)
        if source is None:
            return []
        related = [p for p in products if p.id != product_id and p.category == source.category]
        return related[: max(limit, 0)]

    def order_stats(self) -> OrderStats:
        return compute_order_stats(self._catalog.get_orders())

    def category_counts(self) -> dict[str, int]:
        return category_counts(self._catalog.get_products())

    # ------------------------------------------------------------------
    # Quick-search affordances
    # ------------------------------------------------------------------

    def recent_searches(self) -> tuple[SearchHistoryEntry, ...]:
        return self._history.list()

    def clear_history(self) -> None:
        self._history.clear()

    def popular_searches(self, limit: int | None = None, category: str | None = None) -> list[PopularSearchEntry]:
        return self._popular.top(limit, category)


__all__ = ["DiscoveryService", "ORDERS_DEFAULT_SORT"]
