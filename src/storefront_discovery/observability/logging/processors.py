"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

_PACKAGE = "storefront_discovery."


def add_component(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor that tags events with the engine component.

    ``storefront_discovery.history.store`` becomes ``component="history"``.
    Events from other loggers pass through untouched.
    """
    name = event_dict.get("logger")
    if isinstance(name, str) and name.startswith(_PACKAGE):
        event_dict.setdefault("component", name[len(_PACKAGE):].split(".", 1)[0])
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_component", "get_logger"]
