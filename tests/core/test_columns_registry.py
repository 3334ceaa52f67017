from __future__ import annotations

from dataclasses import dataclass

import pytest

from gridview.core.columns import ColumnDescriptor, ColumnRegistry
from gridview.core.errors import ColumnConfigError
from gridview.core.fields import MISSING
from gridview.core.grammar import RowAlign


def test_descriptor_defaults() -> None:
    col = ColumnDescriptor(key="name")
    assert col.header == "name"
    assert col.sortable is True
    assert col.accessor is None and col.render is None and col.compare is None


def test_descriptor_rejects_empty_key() -> None:
    with pytest.raises(ColumnConfigError):
        ColumnDescriptor(key="")


def test_descriptor_normalizes_align_literal() -> None:
    assert ColumnDescriptor(key="age", align="right").align is RowAlign.RIGHT


def test_value_of_uses_accessor_then_key() -> None:
    row = {"id": 1, "name": "Ann", "email": "ann@example.com"}
    assert ColumnDescriptor(key="name").value_of(row) == "Ann"
    assert ColumnDescriptor(key="contact", accessor="email").value_of(row) == "ann@example.com"
    assert ColumnDescriptor(key="n", accessor=lambda r: len(r["name"])).value_of(row) == 3
    assert ColumnDescriptor(key="missing").value_of(row) is MISSING


def test_cell_value_prefers_render_and_maps_missing_to_none() -> None:
    row = {"id": 1, "name": "Ann"}
    assert ColumnDescriptor(key="name", render=lambda r: f"<b>{r['name']}</b>").cell_value(
        row
    ) == "<b>Ann</b>"
    assert ColumnDescriptor(key="email").cell_value(row) is None


def test_value_of_reads_attributes_of_objects() -> None:
    @dataclass
    class User:
        id: int
        name: str

    assert ColumnDescriptor(key="name").value_of(User(1, "Bob")) == "Bob"


def test_registry_order_lookup_and_first_key() -> None:
    reg = ColumnRegistry(
        [ColumnDescriptor(key="name", header="Name"), {"key": "email", "sortable": False}]
    )
    assert reg.keys() == ("name", "email")
    assert reg.first_key == "name"
    assert "email" in reg and "role" not in reg
    assert reg.get("email").sortable is False
    assert reg.get("role") is None
    assert [c.key for c in reg] == ["name", "email"]
    assert len(reg) == 2
    with pytest.raises(KeyError):
        reg.get_column("role")


def test_registry_rejects_duplicates_and_unknown_options() -> None:
    with pytest.raises(ColumnConfigError, match="duplicate"):
        ColumnRegistry([{"key": "a"}, {"key": "a"}])
    with pytest.raises(ColumnConfigError, match="unknown"):
        ColumnRegistry([{"key": "a", "onClick": print}])


def test_empty_registry_first_key_is_empty_string() -> None:
    assert ColumnRegistry().first_key == ""
    reg = ColumnRegistry([{"key": "a"}])
    assert ColumnRegistry.coerce(reg) is reg


def test_list_columns_returns_a_fresh_ordered_list() -> None:
    reg = ColumnRegistry([{"key": "name"}, {"key": "email"}])
    listed = reg.list_columns()
    assert [c.key for c in listed] == ["name", "email"]
    listed.clear()
    assert len(reg) == 2
