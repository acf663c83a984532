"""Text normalization shared by the index builder and the ranker.

Both sides of a comparison go through :func:`normalize` so that case,
accents and punctuation never decide whether a query matches a row.
"""

from __future__ import annotations

import re
import unicodedata


_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
# Keep characters needed for emails and identifiers (a@b.co, INV-0042)
_DISALLOWED = re.compile(r"[^a-z0-9@.\-\s]")
_WHITESPACE = re.compile(r"\s+")


def coerce_text(value: object) -> str:
    """Convert an arbitrary field value to text, treating ``None`` as empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize(text: str) -> str:
    """Return the canonical comparable form of ``text``.

    Examples:
        >>> normalize("  Café   Déjà-Vu! ")
        'cafe deja-vu'
        >>> normalize("John.Doe@Example.COM")
        'john.doe@example.com'
    """
    if not text:
        return ""
    folded = unicodedata.normalize("NFKD", text).lower()
    folded = _COMBINING_MARKS.sub("", folded)
    folded = _DISALLOWED.sub(" ", folded)
    return _WHITESPACE.sub(" ", folded).strip()
