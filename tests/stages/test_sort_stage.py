from __future__ import annotations

import logging

from gridview.core.columns import ColumnRegistry
from gridview.core.fields import collation_key, to_text
from gridview.core.grammar import SortDirection
from gridview.stages.sort import sort_records, sort_value

ROWS = [
    {"id": 1, "name": "Bob"},
    {"id": 2, "name": "Ann"},
    {"id": 3, "name": "cat"},
]


def _names(rows) -> list[str]:
    return [r["name"] for r in rows]


def test_ascending_uses_locale_style_collation() -> None:
    assert _names(sort_records(ROWS, "name")) == ["Ann", "Bob", "cat"]


def test_descending_reverses_order() -> None:
    assert _names(sort_records(ROWS, "name", SortDirection.DESC)) == ["cat", "Bob", "Ann"]
    assert _names(sort_records(ROWS, "name", "DESC")) == ["cat", "Bob", "Ann"]


def test_sort_does_not_mutate_input() -> None:
    rows = list(ROWS)
    sort_records(rows, "name", "desc")
    assert rows == ROWS


def test_stable_for_equal_keys_in_both_directions() -> None:
    rows = [
        {"id": 1, "team": "b"},
        {"id": 2, "team": "a"},
        {"id": 3, "team": "b"},
        {"id": 4, "team": "a"},
    ]
    assert [r["id"] for r in sort_records(rows, "team", "asc")] == [2, 4, 1, 3]
    assert [r["id"] for r in sort_records(rows, "team", "desc")] == [1, 3, 2, 4]


def test_adjacent_pairs_respect_collation() -> None:
    rows = [{"id": i, "v": v} for i, v in enumerate(["b", "B", "a", "10", "9", "", None])]
    out = sort_records(rows, "v")
    keys = [collation_key(to_text(r.get("v"))) for r in out]
    assert all(a <= b for a, b in zip(keys, keys[1:], strict=False))


def test_numbers_compare_as_text_by_default() -> None:
    rows = [{"id": 1, "age": 9}, {"id": 2, "age": 10}, {"id": 3, "age": 100}]
    assert [r["age"] for r in sort_records(rows, "age")] == [10, 100, 9]


def test_compare_override_gives_typed_order() -> None:
    def cmp(a, b) -> int:
        return (a > b) - (a < b)

    cols = ColumnRegistry([{"key": "age", "compare": cmp}])
    rows = [{"id": 1, "age": 9}, {"id": 2, "age": 10}, {"id": 3, "age": 100}]
    assert [r["age"] for r in sort_records(rows, "age", "asc", cols)] == [9, 10, 100]
    assert [r["age"] for r in sort_records(rows, "age", "desc", cols)] == [100, 10, 9]


def test_compare_receives_none_for_missing_fields() -> None:
    seen: list[object] = []

    def cmp(a, b) -> int:
        seen.extend([a, b])
        a = -1 if a is None else a
        b = -1 if b is None else b
        return (a > b) - (a < b)

    cols = ColumnRegistry([{"key": "age", "compare": cmp}])
    rows = [{"id": 1, "age": 5}, {"id": 2}, {"id": 3, "age": 1}]
    assert [r["id"] for r in sort_records(rows, "age", "asc", cols)] == [2, 3, 1]
    assert None in seen
    assert all(v is None or isinstance(v, int) for v in seen)


def test_missing_fields_sort_as_empty_and_are_logged(caplog) -> None:
    rows = [{"id": 1, "name": "Bob"}, {"id": 2}]
    with caplog.at_level(logging.DEBUG, logger="gridview.stages.sort"):
        out = sort_records(rows, "name")
    assert [r["id"] for r in out] == [2, 1]
    assert "missing on 1 of 2" in caplog.text


def test_accessor_supplies_sort_value_for_registered_column() -> None:
    cols = ColumnRegistry([{"key": "who", "accessor": lambda r: r["name"][::-1]}])
    # Reversed names: "boB", "nnA", "tac".
    assert _names(sort_records(ROWS, "who", "asc", cols)) == ["Bob", "Ann", "cat"]
    assert sort_value(ROWS[0], "who", cols) == "boB"
    assert sort_value(ROWS[0], "name") == "Bob"


def test_empty_field_keeps_input_order() -> None:
    assert sort_records(ROWS, "") == ROWS
