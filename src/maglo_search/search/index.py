"""Per-row field index used by the ranker."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, TypeVar

from maglo_search.search.normalize import coerce_text, normalize


T = TypeVar("T")

FieldExtractor = Callable[[T], Mapping[str, object]]


@dataclass(frozen=True, slots=True)
class IndexedRow(Generic[T]):
    """A caller row paired with its normalized searchable fields."""

    row: T
    fields: Mapping[str, str]


def index_row(row: T, get_fields: FieldExtractor) -> IndexedRow[T]:
    raw = get_fields(row) or {}
    fields = {key: normalize(coerce_text(value)) for key, value in raw.items()}
    return IndexedRow(row=row, fields=MappingProxyType(fields))


def build_index(rows: Iterable[T], get_fields: FieldExtractor) -> list[IndexedRow[T]]:
    """Normalize every row's searchable fields once, ahead of querying.

    The result is a snapshot: it keeps input order and does not follow later
    changes to ``rows``. Rebuild it when the row collection changes.

    Args:
        rows: Caller-owned rows; never mutated.
        get_fields: Projection from a row to ``{field name: raw value}``.

    Returns:
        One :class:`IndexedRow` per input row, in input order.
    """
    return [index_row(row, get_fields) for row in rows]
