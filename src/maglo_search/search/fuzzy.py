"""Fuzzy matching for typo-tolerant row search.

This module provides edit distance calculation and the token-vs-field
similarity used by the ranker.

Scoring rules:
- Substring containment anywhere in the field scores 1.0 (covers ID and
  email prefix searches)
- Otherwise the best per-word similarity ``1 - distance / longest`` wins
- Empty tokens or empty fields never match
"""

from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Insertions, deletions and substitutions each cost 1. Keeps a single
    rolling row sized to the shorter string.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits needed to change
        ``a`` into ``b``.

    Examples:
        >>> edit_distance("kitten", "sitting")
        3
        >>> edit_distance("acme", "acem")
        2
        >>> edit_distance("", "abc")
        3
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Use shorter string as columns for space efficiency
    if len(a) < len(b):
        a, b = b, a

    row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = i
        for j, char_b in enumerate(b, start=1):
            above = row[j]
            cost = 0 if char_a == char_b else 1
            row[j] = min(
                above + 1,  # deletion
                row[j - 1] + 1,  # insertion
                diagonal + cost,  # substitution
            )
            diagonal = above
    return row[len(b)]


def fuzzy_score(token: str, text: str) -> float:
    """Score how well a query token matches a normalized field.

    Args:
        token: A single normalized query token (or expanded synonym).
        text: Normalized field text, words separated by single spaces.

    Returns:
        Similarity in ``[0, 1]``. 1.0 means ``token`` occurs in ``text``.
    """
    if not token or not text:
        return 0.0
    if token in text:
        return 1.0

    best = 0.0
    for word in text.split(" "):
        longest = max(len(token), len(word))
        if longest == 0:
            continue
        similarity = 1 - edit_distance(token, word) / longest
        if similarity > best:
            best = similarity
            if best == 1.0:
                break
    return best
