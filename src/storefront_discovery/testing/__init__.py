"""Testing support – record builders, deterministic clocks, failing storage.

Use from your tests::

    from storefront_discovery.testing import ProductBuilder, StepClock
"""
from storefront_discovery.testing.builders import Builder, OrderBuilder, ProductBuilder
from storefront_discovery.testing.clock import FakeClock, StepClock
from storefront_discovery.testing.storage import FlakyKeyValueStore

__all__ = [
    "Builder",
    "FakeClock",
    "FlakyKeyValueStore",
    "OrderBuilder",
    "ProductBuilder",
    "StepClock",
]
