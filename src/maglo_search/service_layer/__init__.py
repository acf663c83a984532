"""Service layer - search orchestration for table-shaped data."""

from .search_table import SearchParamNames, SearchTable, SearchTableConfig


__all__ = [
    "SearchParamNames",
    "SearchTable",
    "SearchTableConfig",
]
