"""Unit tests for the per-row field index."""

import dataclasses

import pytest

from maglo_search.search.index import IndexedRow, build_index


@pytest.mark.unit
class TestBuildIndex:
    def test_one_entry_per_row_in_order(self, people_rows, people_fields):
        index = build_index(people_rows, people_fields)

        assert len(index) == len(people_rows)
        assert [item.row for item in index] == people_rows

    def test_keeps_original_row_objects(self, people_rows, people_fields):
        index = build_index(people_rows, people_fields)
        assert all(item.row is row for item, row in zip(index, people_rows, strict=True))

    def test_fields_are_normalized(self, people_rows, people_fields):
        index = build_index(people_rows, people_fields)

        assert index[0].fields == {"name": "acme corp", "email": "billing@acme.example", "status": "paid"}
        assert index[2].fields["status"] == "paid partial"

    def test_non_string_values_are_coerced(self):
        index = build_index([{"amount": 420.84, "note": None, "orders": 3}], lambda row: row)
        assert dict(index[0].fields) == {"amount": "420.84", "note": "", "orders": "3"}

    def test_empty_rows(self, people_fields):
        assert build_index([], people_fields) == []

    def test_missing_projection_yields_no_fields(self):
        index = build_index(["anything"], lambda row: None)
        assert dict(index[0].fields) == {}

    def test_rows_are_not_mutated(self, people_rows, people_fields):
        before = [dict(row) for row in people_rows]
        build_index(people_rows, people_fields)
        assert people_rows == before

    def test_each_build_is_an_independent_snapshot(self, people_rows, people_fields):
        first = build_index(people_rows, people_fields)
        people_rows.append({"id": 5, "name": "Late Row", "email": "", "status": ""})
        second = build_index(people_rows, people_fields)

        assert len(first) == 4
        assert len(second) == 5
        assert first[0] is not second[0]

    def test_accepts_any_iterable(self, people_rows, people_fields):
        index = build_index(iter(people_rows), people_fields)
        assert len(index) == len(people_rows)


@pytest.mark.unit
class TestIndexedRow:
    def test_is_frozen(self, people_rows, people_fields):
        item = build_index(people_rows, people_fields)[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.row = {}  # type: ignore[misc]

    def test_fields_are_read_only(self, people_rows, people_fields):
        item = build_index(people_rows, people_fields)[0]
        with pytest.raises(TypeError):
            item.fields["name"] = "changed"  # type: ignore[index]

    def test_direct_construction(self):
        item = IndexedRow(row="r", fields={"name": "x"})
        assert item.row == "r"
