"""Discovery – filter engine.

``compile_criteria`` turns a text query plus :class:`FacetCriteria` into a
single :class:`Specification` containing only the active predicates; facets
are ANDed, members of a multi-valued facet are ORed.  Records missing the
field a facet reads fail that facet when it is active and never raise.
"""
from __future__ import annotations

from typing import Any, Callable

from storefront_discovery.catalog.records import Record
from storefront_discovery.discovery.criteria import (
    Availability,
    FacetCriteria,
    ShippingOption,
    TextQuery,
)
from storefront_discovery.discovery.specification import AllOf, Predicate, Specification
from storefront_discovery.kernel.time import parse_timestamp

DEFAULT_HIGH_RATED_THRESHOLD = 4.5


def _field(record: Record, name: str) -> Any:
    return getattr(record, name, None)


def _number(record: Record, name: str) -> float | None:
    value = _field(record, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def text_matches(record: Record, query: TextQuery) -> bool:
    """Substring containment over the record's searchable text, case-insensitive."""
    if not query:
        return True
    texts = getattr(record, "searchable_text", None)
    if texts is None:
        return False
    return any(query.value in text.casefold() for text in texts() if text)


def _in_categories(criteria: FacetCriteria) -> Callable[[Record], bool]:
    def check(record: Record) -> bool:
        return _field(record, "category") in criteria.categories
    return check


def _in_statuses(criteria: FacetCriteria) -> Callable[[Record], bool]:
    def check(record: Record) -> bool:
        return _field(record, "status") in criteria.statuses
    return check


def _within(name: str, attr: str, criteria: FacetCriteria) -> Callable[[Record], bool]:
    bounds = getattr(criteria, name)

    def check(record: Record) -> bool:
        value = _number(record, attr)
        return value is not None and bounds.contains(value)
    return check


def _rating_at_least(floor: float) -> Callable[[Record], bool]:
    def check(record: Record) -> bool:
        rating = _number(record, "rating")
        return rating is not None and rating >= floor
    return check


def _availability(option: Availability) -> Callable[[Record], bool]:
    def check(record: Record) -> bool:
        stock = _number(record, "stock")
        if stock is None:
            return False
        return stock > 0 if option is Availability.IN_STOCK else stock <= 0
    return check


def _shipping(option: ShippingOption) -> Callable[[Record], bool]:
    want_free = option is ShippingOption.FREE

    def check(record: Record) -> bool:
        info = _field(record, "shipping")
        if info is None:
            return False
        return bool(info.free_shipping) is want_free
    return check


def _on_sale(record: Record) -> bool:
    discount = _number(record, "discount")
    return discount is not None and discount > 0


def _new_arrival(record: Record) -> bool:
    return _field(record, "is_new") is True


def _ordered_within(criteria: FacetCriteria) -> Callable[[Record], bool]:
    def check(record: Record) -> bool:
        moment = parse_timestamp(_field(record, "order_date"))
        return moment is not None and criteria.date_range.contains(moment)
    return check


def compile_criteria(
    criteria: FacetCriteria | None = None,
    text: "TextQuery | str | None" = None,
    *,
    high_rated_threshold: float = DEFAULT_HIGH_RATED_THRESHOLD,
) -> Specification[Record]:
    """Build the conjunction of every active predicate for one query."""
    criteria = criteria or FacetCriteria()
    query = TextQuery.of(text)
    specs: list[Specification[Record]] = []

    if query:
        specs.append(Predicate(lambda r: text_matches(r, query), name="text"))
    if criteria.is_active("categories"):
        specs.append(Predicate(_in_categories(criteria), name="categories"))
    if criteria.is_active("price_range"):
        specs.append(Predicate(_within("price_range", "price", criteria), name="price_range"))
    if criteria.is_active("min_rating"):
        specs.append(Predicate(_rating_at_least(criteria.min_rating), name="min_rating"))
    if criteria.is_active("availability"):
        specs.append(Predicate(_availability(criteria.availability), name="availability"))
    if criteria.is_active("shipping"):
        specs.append(Predicate(_shipping(criteria.shipping), name="shipping"))
    if criteria.on_sale:
        specs.append(Predicate(_on_sale, name="on_sale"))
    if criteria.new_arrivals:
        specs.append(Predicate(_new_arrival, name="new_arrivals"))
    if criteria.high_rated:
        specs.append(Predicate(_rating_at_least(high_rated_threshold), name="high_rated"))
    if criteria.is_active("statuses"):
        specs.append(Predicate(_in_statuses(criteria), name="statuses"))
    if criteria.is_active("amount_range"):
        specs.append(Predicate(_within("amount_range", "total_amount", criteria), name="amount_range"))
    if criteria.is_active("date_range"):
        specs.append(Predicate(_ordered_within(criteria), name="date_range"))

    return AllOf(specs)


def matches(
    record: Record,
    criteria: FacetCriteria | None = None,
    text: "TextQuery | str | None" = None,
    *,
    high_rated_threshold: float = DEFAULT_HIGH_RATED_THRESHOLD,
) -> bool:
    """Return ``True`` when *record* satisfies the text query and every active facet."""
    spec = compile_criteria(criteria, text, high_rated_threshold=high_rated_threshold)
    return spec.is_satisfied_by(record)


__all__ = ["DEFAULT_HIGH_RATED_THRESHOLD", "compile_criteria", "matches", "text_matches"]
