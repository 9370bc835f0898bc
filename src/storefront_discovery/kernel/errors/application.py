"""Application-layer errors – misuse of engine components."""

from __future__ import annotations

from storefront_discovery.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class HistoryNotInitializedError(ApplicationError):
    """The search history store was used before ``init()`` completed."""

    default_code = "history_not_initialized"

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"SearchHistoryStore.{operation}() called before init()",
            detail={"operation": operation},
        )
        self.operation = operation


__all__ = ["ApplicationError", "HistoryNotInitializedError"]
