"""Observability – structlog configuration and logger helpers."""
from storefront_discovery.observability.logging.factory import configure_logging
from storefront_discovery.observability.logging.processors import add_component, get_logger

__all__ = ["add_component", "configure_logging", "get_logger"]
