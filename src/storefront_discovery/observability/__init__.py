"""Observability – structured logging for the discovery engine."""
from storefront_discovery.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
