"""Search table orchestration layer.

Binds one table's static search configuration (field projection, weights,
synonyms, status field, URL parameter names) to a memoized row index, and
runs filter-and-rank for each query change.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from maglo_search.observability import (
    INDEX_BUILDS,
    INDEX_ROW_COUNT,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    bind_table,
    create_span,
    track_latency,
)
from maglo_search.search.index import IndexedRow, build_index
from maglo_search.search.ranking import RankOptions, ScoredRow, query_tokens, rank_rows
from maglo_search.utils.search_params import SearchParams, parse_search_params


logger = logging.getLogger(__name__)

T = TypeVar("T")


class SearchParamNames(BaseModel):
    """URL parameter names a table reads its query and status from."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(default="search", min_length=1)
    status: str = Field(default="status", min_length=1)


class SearchTableConfig(BaseModel):
    """Static search configuration for one table.

    ``synonyms=None`` uses the default synonym table. When
    ``use_url_params`` is set, the query and status come from URL parameters
    and the static ``query``/``status`` values are ignored.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    get_fields: Callable[[Any], Mapping[str, object]]
    enabled: bool = True
    use_url_params: bool = False
    param_names: SearchParamNames = Field(default_factory=SearchParamNames)
    query: str = ""
    status: str = ""
    weights: dict[str, PositiveFloat] | None = None
    synonyms: dict[str, list[str]] | None = None
    status_field_key: str | None = None
    max_query_tokens: PositiveInt | None = None

    def rank_options(self, status: str | None = None) -> RankOptions:
        return RankOptions(
            synonyms=self.synonyms,
            weights=self.weights,
            status=status,
            status_field_key=self.status_field_key,
            max_tokens=self.max_query_tokens,
        )


class SearchTable(Generic[T]):
    """Runs searches for one table and caches its index between calls.

    The index is rebuilt only when a different row collection (by identity)
    or a different ``version`` is passed in. Callers that mutate a row list
    in place must bump ``version`` to see the change.
    """

    def __init__(self, config: SearchTableConfig):
        self.config = config
        self._rows: Sequence[T] | None = None
        self._version: object = None
        self._index: list[IndexedRow[T]] = []

    @property
    def name(self) -> str:
        return self.config.name

    def index_for(self, rows: Sequence[T], version: object = None) -> list[IndexedRow[T]]:
        """Return the index for ``rows``, building it when the rows changed."""
        if rows is self._rows and version == self._version:
            return self._index

        self._index = build_index(rows, self.config.get_fields)
        self._rows = rows
        self._version = version
        INDEX_BUILDS.labels(table=self.name).inc()
        INDEX_ROW_COUNT.labels(table=self.name).set(len(self._index))
        logger.debug("Built search index for %s: %d rows", self.name, len(self._index))
        return self._index

    def resolve_criteria(self, params: SearchParams | str | None = None) -> tuple[str, str]:
        """Work out the (query, status) pair this table should apply."""
        if not self.config.use_url_params:
            return self.config.query, self.config.status

        if params is None or isinstance(params, str):
            params = parse_search_params(params)
        names = self.config.param_names
        return params.get(names.query) or "", params.get(names.status) or ""

    def search_scored(
        self,
        rows: Sequence[T],
        params: SearchParams | str | None = None,
        *,
        query: str | None = None,
        status: str | None = None,
        version: object = None,
    ) -> list[ScoredRow[T]]:
        """Filter and rank ``rows``, keeping scores.

        Explicit ``query``/``status`` arguments take precedence over values
        resolved from ``params`` or the static configuration. Disabled tables
        return every row unscored, in original order.
        """
        if not self.config.enabled:
            return [ScoredRow(row=row, score=0.0, position=pos) for pos, row in enumerate(rows)]

        resolved_query, resolved_status = self.resolve_criteria(params)
        if query is not None:
            resolved_query = query
        if status is not None:
            resolved_status = status

        bind_table(self.name)
        index = self.index_for(rows, version)
        options = self.config.rank_options(resolved_status)
        attributes = {
            "search.table": self.name,
            "search.rows": len(index),
            "search.tokens": len(query_tokens(resolved_query, options.max_tokens)),
            "search.status_filtered": bool(resolved_status and options.status_field_key),
        }
        with create_span("search_table.search", attributes=attributes) as span:
            with track_latency(SEARCH_LATENCY, table=self.name):
                results = rank_rows(index, resolved_query, options)
            span.set_attribute("search.results", len(results))

        SEARCH_RESULTS.labels(table=self.name).observe(len(results))
        logger.debug(
            "Search on %s returned %d of %d rows",
            self.name,
            len(results),
            len(index),
            extra={"query_tokens": attributes["search.tokens"]},
        )
        return results

    def search(
        self,
        rows: Sequence[T],
        params: SearchParams | str | None = None,
        *,
        query: str | None = None,
        status: str | None = None,
        version: object = None,
    ) -> list[T]:
        """Return ``rows`` filtered and ranked for the resolved query and status."""
        scored = self.search_scored(rows, params, query=query, status=status, version=version)
        return [item.row for item in scored]
