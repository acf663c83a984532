"""Status filtering, scoring and ordering of indexed rows.

Pipeline per query: status pre-filter -> empty-query short-circuit ->
synonym expansion -> weighted fuzzy scoring -> drop zero scores -> sort.

Rows with equal scores keep their original relative order (the sort is
stable over the candidate list).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from maglo_search.search.fuzzy import fuzzy_score
from maglo_search.search.index import IndexedRow
from maglo_search.search.normalize import coerce_text, normalize
from maglo_search.search.synonyms import SynonymMap, expand_query_tokens


T = TypeVar("T")

DEFAULT_WEIGHT = 1.0


@dataclass(frozen=True, slots=True)
class RankOptions:
    """Static ranking configuration for one search call.

    ``synonyms=None`` selects the default synonym table; pass an empty
    mapping to disable expansion. ``max_tokens`` caps how many query tokens
    are scored (``None`` scores all of them).
    """

    synonyms: SynonymMap | None = None
    weights: Mapping[str, float] | None = None
    status: str | None = None
    status_field_key: str | None = None
    max_tokens: int | None = None


@dataclass(frozen=True, slots=True)
class ScoredRow(Generic[T]):
    """A ranked row with its accumulated score and candidate position."""

    row: T
    score: float
    position: int


def filter_by_status(
    index: Sequence[IndexedRow[T]],
    status: str | None,
    status_field_key: str | None,
) -> list[IndexedRow[T]]:
    """Keep rows whose status field contains ``status`` after normalization.

    Filtering is skipped when ``status`` normalizes to nothing or no status
    field is configured.
    """
    wanted = normalize(coerce_text(status))
    if not wanted or not status_field_key:
        return list(index)
    return [item for item in index if wanted in item.fields.get(status_field_key, "")]


def query_tokens(query: str | None, max_tokens: int | None = None) -> list[str]:
    normalized = normalize(coerce_text(query))
    tokens = [token for token in normalized.split(" ") if token]
    if max_tokens is not None and max_tokens > 0:
        return tokens[:max_tokens]
    return tokens


def score_row(
    item: IndexedRow[Any],
    tokens: Sequence[str],
    weights: Mapping[str, float] | None = None,
) -> float:
    """Sum ``weight(field) * fuzzy_score(token, field)`` over fields and tokens."""
    weights = weights or {}
    score = 0.0
    for key, text in item.fields.items():
        weight = weights.get(key, DEFAULT_WEIGHT)
        for token in tokens:
            score += weight * fuzzy_score(token, text)
    return score


def rank_rows(
    index: Sequence[IndexedRow[T]],
    query: str | None,
    options: RankOptions | None = None,
) -> list[ScoredRow[T]]:
    """Filter and rank indexed rows, keeping their scores.

    An empty query returns every status-filtered row in original order with
    a score of 0.0. Otherwise only rows with a positive score are returned,
    highest score first.
    """
    options = options or RankOptions()
    candidates = filter_by_status(index, options.status, options.status_field_key)

    tokens = query_tokens(query, options.max_tokens)
    if not tokens:
        return [ScoredRow(row=item.row, score=0.0, position=pos) for pos, item in enumerate(candidates)]

    expanded = expand_query_tokens(tokens, options.synonyms)

    results: list[ScoredRow[T]] = []
    for pos, item in enumerate(candidates):
        score = score_row(item, expanded, options.weights)
        if score > 0:
            results.append(ScoredRow(row=item.row, score=score, position=pos))

    results.sort(key=lambda scored: -scored.score)
    return results


def filter_and_rank(
    index: Sequence[IndexedRow[T]],
    query: str | None,
    options: RankOptions | None = None,
    **overrides: Any,
) -> list[T]:
    """Return the original rows matching ``query``, best match first.

    Args:
        index: Output of :func:`~maglo_search.search.index.build_index`.
        query: Free-text query; normalized and split on whitespace.
        options: Ranking configuration. Keyword ``overrides`` (``synonyms``,
            ``weights``, ``status``, ``status_field_key``, ``max_tokens``)
            replace the matching option fields.

    Returns:
        The caller's row objects in ranked order.
    """
    if overrides:
        options = replace(options or RankOptions(), **overrides)
    return [scored.row for scored in rank_rows(index, query, options)]
