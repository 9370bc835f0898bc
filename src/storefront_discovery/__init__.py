"""
storefront_discovery – product discovery engine for the storefront app.

Import path convention::

    from storefront_discovery.discovery import FacetCriteria, QueryExecutor, SortSpec
    from storefront_discovery.history import SearchHistoryStore
    from storefront_discovery.storage import InMemoryKeyValueStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
