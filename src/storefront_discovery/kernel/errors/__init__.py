"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── HistoryNotInitializedError
    └── InfrastructureError      (infrastructure.py)
        ├── PersistenceError
        └── SerializationError

Configuration errors (``ConfigError`` and friends) extend ``ApplicationError``
and live in :mod:`storefront_discovery.config.validation`.
"""

from storefront_discovery.kernel.errors.application import (
    ApplicationError,
    HistoryNotInitializedError,
)
from storefront_discovery.kernel.errors.base import BaseError
from storefront_discovery.kernel.errors.infrastructure import (
    InfrastructureError,
    PersistenceError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "HistoryNotInitializedError",
    "InfrastructureError",
    "PersistenceError",
    "SerializationError",
]
