"""Shared fixtures: a small storefront catalog in its camelCase wire shape."""

from __future__ import annotations

import pytest

from storefront_discovery.catalog import InMemoryCatalog

PRODUCTS = [
    {
        "id": "1",
        "name": "Korean Face Mask Pack",
        "description": "Hydrating sheet mask with snail mucin extract",
        "price": 12.99,
        "originalPrice": 16.99,
        "discount": 23,
        "category": "skincare",
        "rating": 4.7,
        "reviewCount": 128,
        "stock": 45,
        "isNew": True,
        "tags": ["skincare", "face mask", "snail mucin"],
        "shippingInfo": {"freeShipping": True, "deliveryTime": "2-3 days"},
    },
    {
        "id": "2",
        "name": "Korean BB Cream",
        "description": "Lightweight foundation with SPF 50",
        "price": 24.99,
        "category": "cosmetics",
        "rating": 4.5,
        "reviewCount": 89,
        "stock": 32,
        "isNew": False,
        "tags": ["makeup", "foundation", "SPF"],
        "shippingInfo": {"freeShipping": False, "deliveryTime": "3-5 days"},
    },
    {
        "id": "3",
        "name": "Korean Snack Box",
        "description": "Assortment of popular Korean snacks",
        "price": 29.99,
        "originalPrice": 34.99,
        "discount": 14,
        "category": "snacks",
        "rating": 4.8,
        "reviewCount": 256,
        "stock": 0,
        "isNew": False,
        "tags": ["snacks", "korean food", "assortment"],
        "shippingInfo": {"freeShipping": True, "deliveryTime": "1-2 days"},
    },
    {
        "id": "4",
        "name": "Korean Fashion Hoodie",
        "description": "Oversized hoodie with K-pop design",
        "price": 49.99,
        "category": "fashion",
        "rating": 4.6,
        "reviewCount": 67,
        "stock": 18,
        "isNew": True,
        "tags": ["fashion", "hoodie", "k-pop"],
        "shippingInfo": {"freeShipping": False, "deliveryTime": "5-7 days"},
    },
    {
        "id": "5",
        "name": "Korean Ceramic Mug",
        "description": "Hand-painted traditional Korean design",
        "price": 18.99,
        "category": "homeDecor",
        "rating": 4.9,
        "reviewCount": 42,
        "stock": 56,
        "isNew": True,
        "tags": ["home decor", "ceramic", "traditional"],
        "shippingInfo": {"freeShipping": True, "deliveryTime": "3-4 days"},
    },
    {
        "id": "6",
        "name": "Korean Beauty Blender",
        "description": "Professional makeup sponge set",
        "price": 14.99,
        "originalPrice": 19.99,
        "discount": 25,
        "category": "cosmetics",
        "rating": 4.4,
        "reviewCount": 89,
        "stock": 0,
        "isNew": False,
        "tags": ["makeup", "sponge", "beauty tools"],
    },
]

ORDERS = [
    {
        "id": "1",
        "orderNumber": "KST20231215001",
        "orderDate": "2024-12-15T10:30:00Z",
        "status": "delivered",
        "totalAmount": 68.48,
        "items": [
            {"id": "101", "name": "Korean Face Sunscreen SPF 50+", "price": 24.99, "quantity": 2,
             "product": {"name": "Korean Face Sunscreen SPF 50+", "category": "Skincare"}},
            {"id": "102", "price": 18.50, "quantity": 1,
             "product": {"name": "Snail Mucin Essence", "category": "Skincare"}},
        ],
    },
    {
        "id": "2",
        "orderNumber": "KST20231212001",
        "orderDate": "2024-12-12T14:20:00Z",
        "status": "shipped",
        "totalAmount": 34.99,
        "items": [{"id": "201", "name": "BB Cream Foundation", "price": 29.99, "category": "Cosmetics"}],
    },
    {
        "id": "3",
        "orderNumber": "KST20231210001",
        "orderDate": "2024-12-10T09:15:00Z",
        "status": "processing",
        "totalAmount": 114.96,
        "items": [
            {"id": "301", "name": "Green Tea Serum", "price": 32.99, "quantity": 3},
            {"id": "302", "name": "Sheet Mask Pack", "price": 15.99},
        ],
    },
    {
        "id": "4",
        "orderNumber": "KST20231205001",
        "orderDate": "2024-12-05T16:45:00Z",
        "status": "cancelled",
        "totalAmount": 39.99,
        "items": [{"id": "401", "name": "Lip Tint Set", "price": 39.99}],
    },
]


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog.from_dicts(PRODUCTS, ORDERS)


@pytest.fixture
def products(catalog: InMemoryCatalog) -> list:
    return list(catalog.get_products())


@pytest.fixture
def orders(catalog: InMemoryCatalog) -> list:
    return list(catalog.get_orders())
