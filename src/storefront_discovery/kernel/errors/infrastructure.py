"""Infrastructure errors – persistence and serialisation failures."""

from __future__ import annotations

from typing import Any

from storefront_discovery.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PersistenceError(InfrastructureError):
    """A key-value store read, write or removal failed."""

    default_code = "persistence_error"

    def __init__(
        self,
        key: str,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not {operation} key '{key}'", **kwargs)
        self.key = key
        self.operation = operation


class SerializationError(InfrastructureError):
    """Failed to serialise or deserialise a persisted payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "PersistenceError", "SerializationError"]
