"""Discovery – aggregate views over a catalog snapshot (order summary, category counts)."""
from __future__ import annotations

import dataclasses
from collections import Counter
from typing import Iterable, Sequence

from storefront_discovery.catalog.records import Order, Product
from storefront_discovery.kernel.time import parse_timestamp

PENDING_STATUSES = frozenset({"pending", "confirmed", "processing", "packaged"})


@dataclasses.dataclass(frozen=True)
class OrderStats:
    total_orders: int = 0
    total_spent: float = 0.0
    average_order: float = 0.0
    pending_orders: int = 0
    delivered_orders: int = 0
    cancelled_orders: int = 0
    favourite_category: str | None = None
    last_order_date: str | None = None


def compute_order_stats(orders: Sequence[Order]) -> OrderStats:
    """Summarise an order history.

    ``favourite_category`` is the most frequent item category (first seen wins
    a tie).  Items without a category are left out of that count rather than
    pooled under an "Uncategorized" bucket, so unlabelled items never win;
    it is ``None`` only when no item carries a category.
    ``last_order_date`` is the latest parsable order date as stored.
    """
    if not orders:
        return OrderStats()

    total_spent = sum(order.total_amount for order in orders)
    categories = Counter(
        item.category for order in orders for item in order.items if item.category
    )
    dated = [(parse_timestamp(o.order_date), o.order_date) for o in orders]
    valid = [(moment, raw) for moment, raw in dated if moment is not None]

    return OrderStats(
        total_orders=len(orders),
        total_spent=round(total_spent, 2),
        average_order=round(total_spent / len(orders), 2),
        pending_orders=sum(1 for o in orders if o.status in PENDING_STATUSES),
        delivered_orders=sum(1 for o in orders if o.status == "delivered"),
        cancelled_orders=sum(1 for o in orders if o.status == "cancelled"),
        favourite_category=categories.most_common(1)[0][0] if categories else None,
        last_order_date=max(valid, key=lambda pair: pair[0])[1] if valid else None,
    )


def category_counts(products: Iterable[Product]) -> dict[str, int]:
    """Products per category, in first-seen catalog order."""
    counts: dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1
    return counts


__all__ = ["OrderStats", "PENDING_STATUSES", "category_counts", "compute_order_stats"]
