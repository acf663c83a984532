"""Synonym expansion for table search queries.

Query tokens are expanded one level through a synonym map before scoring,
so a search for "paid" also matches rows whose status reads "settled".
Synonyms of synonyms are not followed.

Example:
    - "paid" expands to ["paid", "settled", "completed", "cleared"]
    - "client" expands to ["client", "customer", "buyer"]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from maglo_search.search.normalize import normalize


SynonymMap = Mapping[str, Sequence[str]]


def _freeze(synonyms: SynonymMap) -> Mapping[str, tuple[str, ...]]:
    frozen: dict[str, tuple[str, ...]] = {}
    for key, values in synonyms.items():
        normalized_key = normalize(key)
        if not normalized_key:
            continue
        frozen[normalized_key] = tuple(normalized for value in values if (normalized := normalize(value)))
    return MappingProxyType(frozen)


# Default synonyms for invoice and transaction tables.
# Order matters only for readability; every synonym contributes to the score.
DEFAULT_SYNONYMS: Mapping[str, tuple[str, ...]] = _freeze(
    {
        # Payment state
        "paid": ("settled", "completed", "cleared"),
        "pending": ("awaiting", "due", "unpaid"),
        "overdue": ("late", "past due", "past-due"),
        # Documents and parties
        "invoice": ("bill", "receipt"),
        "client": ("customer", "buyer"),
        "email": ("mail", "e-mail"),
        # Line items
        "transaction": ("order", "purchase"),
        "service": ("consulting", "support"),
        "product": ("item", "goods"),
    }
)


def merge_synonyms(base: SynonymMap | None, extra: SynonymMap | None) -> Mapping[str, tuple[str, ...]]:
    """Combine two synonym maps into a new read-only map.

    Entries in ``extra`` replace entries in ``base`` with the same key.
    Neither input is modified.
    """
    merged: dict[str, Sequence[str]] = dict(_freeze(base or {}))
    merged.update(_freeze(extra or {}))
    return MappingProxyType(dict(merged))


class SynonymExpander:
    """Expands query tokens with their registered synonyms."""

    def __init__(self, synonyms: SynonymMap | None = None) -> None:
        """Initialize with synonym mappings.

        Args:
            synonyms: Custom synonym mappings. If None, uses DEFAULT_SYNONYMS.
        """
        self._synonyms = _freeze(synonyms) if synonyms is not None else DEFAULT_SYNONYMS

    def expand(self, token: str) -> list[str]:
        """Expand a single token to itself followed by its synonyms.

        Args:
            token: A normalized query token.

        Returns:
            List starting with ``token``; unknown tokens yield ``[token]``.
        """
        return [token, *self._synonyms.get(token, ())]


def expand_query_tokens(
    tokens: Sequence[str],
    synonyms: SynonymMap | None = None,
) -> list[str]:
    """Expand all query tokens, preserving order and repeated tokens.

    Args:
        tokens: Normalized query tokens.
        synonyms: Optional custom synonym mappings.

    Returns:
        Flat list of every token followed by its synonyms.
    """
    if not tokens:
        return []

    expander = SynonymExpander(synonyms)
    expanded: list[str] = []
    for token in tokens:
        expanded.extend(expander.expand(token))
    return expanded
