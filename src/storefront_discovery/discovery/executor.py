"""Discovery – QueryExecutor: text filter → facet filters → sort."""
from __future__ import annotations

import time
from typing import Iterable, Protocol, TypeVar

from storefront_discovery.discovery.criteria import FacetCriteria, SortSpec, TextQuery
from storefront_discovery.discovery.filters import DEFAULT_HIGH_RATED_THRESHOLD, compile_criteria
from storefront_discovery.discovery.sorting import sort_records
from storefront_discovery.observability.logging import get_logger

R = TypeVar("R")

logger = get_logger(__name__)


class HistoryRecorder(Protocol):
    """The slice of the history store the executor needs."""

    def record(self, query: str, result_count: int) -> object: ...


class QueryExecutor:
    """Runs one discovery query over an in-memory catalog snapshot.

    When a history recorder is attached, every execution with a non-empty
    text query records that query and its result count once, after the
    result list has been produced.  Facet-only refinements are not recorded.
    """

    def __init__(
        self,
        history: HistoryRecorder | None = None,
        *,
        high_rated_threshold: float = DEFAULT_HIGH_RATED_THRESHOLD,
    ) -> None:
        self._history = history
        self._high_rated_threshold = high_rated_threshold

    def execute(
        self,
        catalog: Iterable[R],
        text_query: "TextQuery | str | None" = None,
        facets: FacetCriteria | None = None,
        sort: SortSpec | None = None,
    ) -> list[R]:
        t0 = time.monotonic()
        query = TextQuery.of(text_query)
        facets = facets or FacetCriteria()
        sort = sort or SortSpec()

        spec = compile_criteria(facets, query, high_rated_threshold=self._high_rated_threshold)
        snapshot = list(catalog)
        matched = [record for record in snapshot if spec.is_satisfied_by(record)]
        result = sort_records(matched, sort)

        logger.debug(
            "query.executed",
            text=query.value,
            facets=list(facets.active_facets()),
            sort=sort.token,
            catalog_size=len(snapshot),
            result_count=len(result),
            took_ms=round((time.monotonic() - t0) * 1000, 2),
        )
        if query and self._history is not None:
            raw = text_query.value if isinstance(text_query, TextQuery) else str(text_query)
            self._history.record(raw, len(result))
        return result


__all__ = ["HistoryRecorder", "QueryExecutor"]
