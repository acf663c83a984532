"""
Row search package.

This package provides a pure-Python table search stack:
- normalize: Text normalization (case, accents, punctuation)
- fuzzy: Edit distance and token-vs-field similarity
- synonyms: Default synonym table and one-level query expansion
- index: Per-row normalized field index
- ranking: Status filtering, weighted scoring and ordering
"""

from maglo_search.search.fuzzy import edit_distance, fuzzy_score
from maglo_search.search.index import FieldExtractor, IndexedRow, build_index
from maglo_search.search.normalize import coerce_text, normalize
from maglo_search.search.ranking import RankOptions, ScoredRow, filter_and_rank, rank_rows
from maglo_search.search.synonyms import DEFAULT_SYNONYMS, SynonymExpander, SynonymMap, merge_synonyms


__all__ = [
    "DEFAULT_SYNONYMS",
    "FieldExtractor",
    "IndexedRow",
    "RankOptions",
    "ScoredRow",
    "SynonymExpander",
    "SynonymMap",
    "build_index",
    "coerce_text",
    "edit_distance",
    "filter_and_rank",
    "fuzzy_score",
    "merge_synonyms",
    "normalize",
    "rank_rows",
]
