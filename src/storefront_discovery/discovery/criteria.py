"""Discovery – criteria value objects: TextQuery, FacetCriteria, SortSpec.

Every facet has an explicit default that imposes no constraint, so filter code
asks ``criteria.is_active("price_range")`` instead of probing for missing
values.  ``FacetCriteria.build`` accepts the loose shapes screens produce
(lists, camelCase enum strings, ``{"min": .., "max": ..}`` dicts).
"""
from __future__ import annotations

import dataclasses
import math
import re
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Iterable, Mapping

from storefront_discovery.kernel.text import normalize_query
from storefront_discovery.kernel.time import parse_timestamp


@dataclasses.dataclass(frozen=True, slots=True)
class TextQuery:
    """Normalized free-text query.  Empty means no text filter."""

    value: str = ""

    @classmethod
    def of(cls, raw: "str | TextQuery | None") -> "TextQuery":
        if isinstance(raw, TextQuery):
            return raw
        return cls(normalize_query(raw))

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return self.value


def _enum_value(token: str) -> str:
    # "inStock" / "in-stock" / "IN_STOCK" -> "in_stock"
    token = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", token.strip())
    return token.replace("-", "_").lower()


class Availability(str, Enum):
    ALL = "all"
    IN_STOCK = "in_stock"
    OUT_OF_STOCK = "out_of_stock"

    @classmethod
    def parse(cls, value: "str | Availability") -> "Availability":
        if isinstance(value, cls):
            return value
        return cls(_enum_value(value))


class ShippingOption(str, Enum):
    ALL = "all"
    FREE = "free"
    PAID = "paid"

    @classmethod
    def parse(cls, value: "str | ShippingOption") -> "ShippingOption":
        if isinstance(value, cls):
            return value
        return cls(_enum_value(value))


@dataclasses.dataclass(frozen=True, slots=True)
class PriceRange:
    """Inclusive numeric range.  ``min > max`` matches nothing."""

    min: float = 0.0
    max: float = math.inf

    @property
    def is_unbounded(self) -> bool:
        return self.min <= 0 and self.max == math.inf

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    @classmethod
    def parse(cls, value: "PriceRange | Mapping[str, Any] | tuple[Any, Any] | None") -> "PriceRange":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            low, high = value.get("min"), value.get("max")
        else:
            low, high = value
        return cls(
            min=0.0 if low is None else float(low),
            max=math.inf if high is None else float(high),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive timestamp range; an open end is ``None``."""

    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, moment: datetime) -> bool:
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True

    @classmethod
    def parse(cls, value: "DateRange | Mapping[str, Any] | tuple[Any, Any] | None") -> "DateRange":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            start, end = value.get("start"), value.get("end")
        else:
            start, end = value
        return cls(start=_as_datetime(start), end=_as_datetime(end))


def _as_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    return parse_timestamp(str(value))


@dataclasses.dataclass(frozen=True, slots=True)
class FacetCriteria:
    """The facet half of a Criteria Model.  All fields default to "no constraint"."""

    categories: frozenset[str] = frozenset()
    price_range: PriceRange = PriceRange()
    min_rating: float = 0.0
    availability: Availability = Availability.ALL
    shipping: ShippingOption = ShippingOption.ALL
    on_sale: bool = False
    new_arrivals: bool = False
    high_rated: bool = False
    statuses: frozenset[str] = frozenset()
    amount_range: PriceRange = PriceRange()
    date_range: DateRange = DateRange()

    @classmethod
    def build(
        cls,
        *,
        categories: Iterable[str] | None = None,
        price_range: Any = None,
        min_rating: float | None = None,
        availability: "str | Availability | None" = None,
        shipping: "str | ShippingOption | None" = None,
        on_sale: bool = False,
        new_arrivals: bool = False,
        high_rated: bool = False,
        statuses: Iterable[str] | None = None,
        amount_range: Any = None,
        date_range: Any = None,
    ) -> "FacetCriteria":
        """Construct criteria from loose UI values, filling defaults.

        Raises:
            ValueError: ``availability`` or ``shipping`` is not a known option.
        """
        return cls(
            categories=frozenset(categories or ()),
            price_range=PriceRange.parse(price_range),
            min_rating=float(min_rating or 0.0),
            availability=Availability.parse(availability or Availability.ALL),
            shipping=ShippingOption.parse(shipping or ShippingOption.ALL),
            on_sale=bool(on_sale),
            new_arrivals=bool(new_arrivals),
            high_rated=bool(high_rated),
            statuses=frozenset(statuses or ()),
            amount_range=PriceRange.parse(amount_range),
            date_range=DateRange.parse(date_range),
        )

    def with_(self, **changes: Any) -> "FacetCriteria":
        """Return a copy with *changes* applied through :meth:`build` coercion."""
        current = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        return FacetCriteria.build(**{**current, **changes})

    def is_active(self, facet: str) -> bool:
        value = getattr(self, facet)
        if facet == "min_rating":
            return value > 0
        if facet in ("price_range", "amount_range", "date_range"):
            return not value.is_unbounded
        if facet in ("availability", "shipping"):
            return value.value != "all"
        return bool(value)

    def active_facets(self) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self) if self.is_active(f.name))

    @property
    def is_default(self) -> bool:
        return not self.active_facets()


class SortField(str, Enum):
    RELEVANCE = "relevance"
    DATE = "date"
    PRICE = "price"
    AMOUNT = "amount"
    RATING = "rating"
    POPULARITY = "popularity"
    NEWEST = "newest"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Direction used when an option token names only the field.
_DEFAULT_DIRECTION: dict[SortField, SortDirection] = {
    SortField.RELEVANCE: SortDirection.ASC,
    SortField.DATE: SortDirection.DESC,
    SortField.PRICE: SortDirection.ASC,
    SortField.AMOUNT: SortDirection.DESC,
    SortField.RATING: SortDirection.DESC,
    SortField.POPULARITY: SortDirection.DESC,
    SortField.NEWEST: SortDirection.DESC,
}


@dataclasses.dataclass(frozen=True, slots=True)
class SortSpec:
    field: SortField = SortField.RELEVANCE
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, token: "str | SortSpec | None") -> "SortSpec":
        """Parse a sort option token such as ``"price-asc"`` or ``"rating"``.

        Unknown tokens fall back to relevance (catalog order).
        """
        if isinstance(token, SortSpec):
            return token
        if not token:
            return cls()
        name, _, direction = token.strip().lower().partition("-")
        try:
            sort_field = SortField(name)
        except ValueError:
            return cls()
        try:
            sort_direction = SortDirection(direction) if direction else _DEFAULT_DIRECTION[sort_field]
        except ValueError:
            sort_direction = _DEFAULT_DIRECTION[sort_field]
        return cls(sort_field, sort_direction)

    @property
    def token(self) -> str:
        return f"{self.field.value}-{self.direction.value}"


__all__ = [
    "Availability",
    "DateRange",
    "FacetCriteria",
    "PriceRange",
    "ShippingOption",
    "SortDirection",
    "SortField",
    "SortSpec",
    "TextQuery",
    "normalize_query",
]
