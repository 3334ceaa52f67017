from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from gridview.stages.selection import (
    is_selected,
    page_counts_as_selected,
    row_ids,
    select_all_visible,
    toggle_id,
)


def test_toggle_adds_then_removes() -> None:
    s = toggle_id(frozenset(), 1)
    assert s == {1}
    assert is_selected(s, 1)
    assert toggle_id(s, 1) == frozenset()


def test_toggle_twice_is_identity_for_any_selection() -> None:
    base = frozenset({"a", "b"})
    for rid in ("a", "c"):
        assert toggle_id(toggle_id(base, rid), rid) == base


def test_select_all_on_empty_selection_selects_page() -> None:
    assert select_all_visible(frozenset(), (1, 2)) == {1, 2}


def test_select_all_clears_when_sizes_match() -> None:
    assert select_all_visible(frozenset({1, 2}), (1, 2)) == frozenset()


def test_select_all_compares_cardinality_not_membership() -> None:
    # Two ids picked on page 1 make a two-row page 2 count as "all selected".
    assert page_counts_as_selected(frozenset({1, 2}), (3, 4))
    assert select_all_visible(frozenset({1, 2}), (3, 4)) == frozenset()
    # Different sizes replace the selection with the page ids.
    assert select_all_visible(frozenset({1}), (3, 4)) == {3, 4}


def test_row_ids_reads_identity_field() -> None:
    @dataclass
    class User:
        uid: str

    assert row_ids([{"id": 1}, {"name": "x"}]) == (1, None)
    assert row_ids([User("u1")], id_key="uid") == ("u1",)


def test_row_ids_reads_named_tuple_identity() -> None:
    class Item(NamedTuple):
        id: str
        label: str

    ids = row_ids([Item("a", "x"), Item("b", "y")])
    assert ids == ("a", "b")
    assert select_all_visible(frozenset(), ids) == {"a", "b"}
