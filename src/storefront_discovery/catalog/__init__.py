"""Catalog – records and the provider port the discovery engine reads from."""
from storefront_discovery.catalog.provider import CatalogProvider, InMemoryCatalog
from storefront_discovery.catalog.records import Order, OrderItem, Product, Record, ShippingInfo

__all__ = [
    "CatalogProvider",
    "InMemoryCatalog",
    "Order",
    "OrderItem",
    "Product",
    "Record",
    "ShippingInfo",
]
