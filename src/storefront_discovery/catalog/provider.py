"""Catalog – CatalogProvider port and an in-memory implementation."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from storefront_discovery.catalog.records import Order, Product


@runtime_checkable
class CatalogProvider(Protocol):
    """Port: supplies the full, materialized catalog snapshot."""

    def get_products(self) -> Sequence[Product]: ...
    def get_orders(self) -> Sequence[Order]: ...


class InMemoryCatalog:
    """Catalog held in memory, e.g. a static fixture or a prefetched response."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
    ) -> None:
        self._products = tuple(products)
        self._orders = tuple(orders)

    @classmethod
    def from_dicts(
        cls,
        products: Iterable[Mapping[str, Any]] = (),
        orders: Iterable[Mapping[str, Any]] = (),
    ) -> "InMemoryCatalog":
        return cls(
            products=[Product.from_dict(p) for p in products],
            orders=[Order.from_dict(o) for o in orders],
        )

    def get_products(self) -> Sequence[Product]:
        return self._products

    def get_orders(self) -> Sequence[Order]:
        return self._orders


__all__ = ["CatalogProvider", "InMemoryCatalog"]
