"""Catalog – Product and Order records.

Records are immutable snapshots owned by the catalog provider.  The discovery
engine only reads them.  ``from_dict`` accepts the camelCase shape the
storefront's catalog fixtures and API use; unknown keys are ignored and
missing optional keys become ``None``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Union


@dataclasses.dataclass(frozen=True, slots=True)
class ShippingInfo:
    free_shipping: bool
    delivery_time: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShippingInfo":
        return cls(
            free_shipping=bool(data.get("freeShipping", False)),
            delivery_time=str(data.get("deliveryTime", "")),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Product:
    """A storefront product as exposed to the discovery engine."""

    id: str
    name: str
    price: float
    description: str = ""
    category: str = ""
    rating: float = 0.0
    review_count: int = 0
    stock: int = 0
    is_new: bool = False
    tags: tuple[str, ...] = ()
    original_price: float | None = None
    discount: float | None = None
    shipping: ShippingInfo | None = None

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def searchable_text(self) -> tuple[str, ...]:
        return (self.name, self.description, *self.tags)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        shipping = data.get("shippingInfo")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            price=float(data.get("price", 0)),
            description=str(data.get("description", "")),
            category=str(data.get("category", "")),
            rating=float(data.get("rating", 0)),
            review_count=int(data.get("reviewCount", 0)),
            stock=int(data.get("stock", 0)),
            is_new=bool(data.get("isNew", False)),
            tags=tuple(str(t) for t in data.get("tags", ())),
            original_price=_optional_float(data.get("originalPrice")),
            discount=_optional_float(data.get("discount")),
            shipping=ShippingInfo.from_dict(shipping) if isinstance(shipping, Mapping) else None,
        )


@dataclasses.dataclass(frozen=True, slots=True)
class OrderItem:
    id: str
    name: str = ""
    price: float = 0.0
    quantity: int = 1
    category: str | None = None
    variant: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrderItem":
        # Older order payloads nest the product instead of copying its name.
        product = data.get("product") if isinstance(data.get("product"), Mapping) else {}
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or product.get("name", "")),
            price=float(data.get("price", 0)),
            quantity=int(data.get("quantity", 1)),
            category=data.get("category") or product.get("category"),
            variant=data.get("variant"),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Order:
    """A past order as listed on the Orders screen."""

    id: str
    order_number: str
    status: str
    order_date: str
    total_amount: float
    items: tuple[OrderItem, ...] = ()
    currency: str = "USD"

    def searchable_text(self) -> tuple[str, ...]:
        return (self.order_number, *(item.name for item in self.items))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Order":
        return cls(
            id=str(data["id"]),
            order_number=str(data.get("orderNumber", "")),
            status=str(data.get("status", "")),
            order_date=str(data.get("orderDate", "")),
            total_amount=float(data.get("totalAmount", 0)),
            items=tuple(OrderItem.from_dict(item) for item in data.get("items", ())),
            currency=str(data.get("currency", "USD")),
        )


Record = Union[Product, Order]


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


__all__ = ["Order", "OrderItem", "Product", "Record", "ShippingInfo"]
