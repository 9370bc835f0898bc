"""Discovery – criteria model, filter and sort engines, query executor."""
from storefront_discovery.discovery.criteria import (
    Availability,
    DateRange,
    FacetCriteria,
    PriceRange,
    ShippingOption,
    SortDirection,
    SortField,
    SortSpec,
    TextQuery,
)
from storefront_discovery.discovery.executor import HistoryRecorder, QueryExecutor
from storefront_discovery.discovery.filters import compile_criteria, matches, text_matches
from storefront_discovery.discovery.service import DiscoveryService
from storefront_discovery.discovery.sorting import sort_records
from storefront_discovery.discovery.specification import AllOf, AnyOf, Not, Predicate, Specification
from storefront_discovery.discovery.stats import OrderStats, category_counts, compute_order_stats

__all__ = [
    "AllOf",
    "AnyOf",
    "Availability",
    "DateRange",
    "DiscoveryService",
    "FacetCriteria",
    "HistoryRecorder",
    "Not",
    "OrderStats",
    "Predicate",
    "PriceRange",
    "QueryExecutor",
    "ShippingOption",
    "SortDirection",
    "SortField",
    "SortSpec",
    "Specification",
    "TextQuery",
    "category_counts",
    "compile_criteria",
    "compute_order_stats",
    "matches",
    "sort_records",
    "text_matches",
]
