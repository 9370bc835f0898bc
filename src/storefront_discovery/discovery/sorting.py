"""Discovery – sort engine.

Sorting is stable: records that compare equal keep their input order, in both
directions.  Records without a usable sort key (no price, unparsable order
date) are moved after every keyed record, again in input order, whichever
direction was asked for.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from storefront_discovery.discovery.criteria import SortDirection, SortField, SortSpec
from storefront_discovery.kernel.time import parse_timestamp

R = TypeVar("R")

KeyFn = Callable[[Any], "float | None"]


def _numeric(attr: str) -> KeyFn:
    def key(record: Any) -> float | None:
        value = getattr(record, attr, None)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)
    return key


def _order_date(record: Any) -> float | None:
    moment = parse_timestamp(getattr(record, "order_date", None))
    return None if moment is None else moment.timestamp()


def _newness(record: Any) -> float | None:
    return 1.0 if getattr(record, "is_new", False) is True else 0.0


_KEYS: dict[SortField, KeyFn] = {
    SortField.DATE: _order_date,
    SortField.PRICE: _numeric("price"),
    SortField.AMOUNT: _numeric("total_amount"),
    SortField.RATING: _numeric("rating"),
    SortField.POPULARITY: _numeric("review_count"),
    SortField.NEWEST: _newness,
}


def sort_records(records: Iterable[R], spec: SortSpec | None = None) -> list[R]:
    """Return a new list of *records* ordered by *spec*; the input is not mutated."""
    spec = spec or SortSpec()
    items = list(records)
    key_fn = _KEYS.get(spec.field)
    if key_fn is None:
        # relevance: keep the order the filter stage produced
        return items

    keyed: list[tuple[float, R]] = []
    missing: list[R] = []
    for record in items:
        value = key_fn(record)
        if value is None:
            missing.append(record)
        else:
            keyed.append((value, record))

    # list.sort is stable and ``reverse=True`` preserves the order of equal keys
    keyed.sort(key=lambda pair: pair[0], reverse=spec.direction is SortDirection.DESC)
    return [record for _, record in keyed] + missing


__all__ = ["sort_records"]
