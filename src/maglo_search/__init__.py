"""maglo-search: fuzzy filtering and ranking for invoice and transaction tables."""

from maglo_search.search import (
    DEFAULT_SYNONYMS,
    IndexedRow,
    RankOptions,
    ScoredRow,
    build_index,
    edit_distance,
    filter_and_rank,
    fuzzy_score,
    normalize,
    rank_rows,
)
from maglo_search.service_layer import SearchParamNames, SearchTable, SearchTableConfig


__all__ = [
    "DEFAULT_SYNONYMS",
    "IndexedRow",
    "RankOptions",
    "ScoredRow",
    "SearchParamNames",
    "SearchTable",
    "SearchTableConfig",
    "build_index",
    "edit_distance",
    "filter_and_rank",
    "fuzzy_score",
    "normalize",
    "rank_rows",
]
