"""Kernel time – Clock port + implementations."""
from storefront_discovery.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    from_millis,
    parse_timestamp,
    to_millis,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "from_millis", "parse_timestamp", "to_millis"]
