"""
Frozen column descriptors and the static column registry.

Notes:
    - A column's ``key`` is the join key used by both sorting and (by default) searching.
    - ``accessor`` (field name or callable) supplies the sort value and the default
      cell value; searching always reads the raw field named by ``key``.
    - ``compare`` optionally replaces the default string collation for this column.
    - The registry is immutable for the lifetime of an engine instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ColumnConfigError
from .fields import MISSING, get_field
from .grammar import RowAlign, align_from_value
from .typing import Accessor, ClickHandler, Comparator, Renderer

__all__ = [
    "ColumnDescriptor",
    "ColumnRegistry",
]


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Static metadata for one displayed column.

    Attributes:
        key (str): Unique column key; names the record field used for search and sort.
        header (Any): Opaque header content handed to the host (defaults to ``key``).
        accessor (str | Accessor | None): Field name or callable producing the sort
            value and default cell value. None means "read the field named ``key``".
        sortable (bool): Whether header clicks change the sort (default True).
        render (Renderer | None): Custom cell renderer ``record -> Any``.
        width (str | None): Width hint, e.g. "200px".
        align (RowAlign | None): Alignment hint.
        on_click (ClickHandler | None): Cell click handler ``record -> None``.
        compare (Comparator | None): ``(a, b) -> int`` comparator over sort values.

    Examples:
        >>> col = ColumnDescriptor(key="name", header="Name")
        >>> col.value_of({"id": 1, "name": "Ann"})
        'Ann'
        >>> ColumnDescriptor(key="n", accessor=lambda r: r["name"].upper()).value_of({"name": "a"})
        'A'
    """

    key: str
    header: Any = None
    accessor: str | Accessor | None = None
    sortable: bool = True
    render: Renderer | None = None
    width: str | None = None
    align: RowAlign | None = None
    on_click: ClickHandler | None = None
    compare: Comparator | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ColumnConfigError(f"column key must be a non-empty string (got {self.key!r})")
        if self.header is None:
            object.__setattr__(self, "header", self.key)
        object.__setattr__(self, "align", align_from_value(self.align))

    def value_of(self, record: Any) -> Any:
        """Sort value for `record` (MISSING when the field is absent)."""
        if self.accessor is None:
            return get_field(record, self.key)
        if isinstance(self.accessor, str):
            return get_field(record, self.accessor)
        return self.accessor(record)

    def cell_value(self, record: Any) -> Any:
        """Cell content: ``render(record)`` when supplied, else the accessor value."""
        if self.render is not None:
            return self.render(record)
        value = self.value_of(record)
        return None if value is MISSING else value

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> ColumnDescriptor:
        """Build a descriptor from a loose mapping (unknown keys are rejected)."""
        allowed = set(cls.__dataclass_fields__)
        unknown = set(cfg) - allowed
        if unknown:
            raise ColumnConfigError(f"unknown column option(s): {sorted(unknown)}")
        return cls(**dict(cfg))


class ColumnRegistry:
    """
    Ordered, immutable collection of column descriptors with unique keys.

    Args:
        columns (Iterable[ColumnDescriptor | Mapping[str, Any]]): Descriptors, or
            mappings accepted by ColumnDescriptor.from_mapping.

    Raises:
        ColumnConfigError: On duplicate keys or invalid descriptors.

    Examples:
        >>> reg = ColumnRegistry([{"key": "name"}, {"key": "email", "sortable": False}])
        >>> reg.keys()
        ('name', 'email')
        >>> reg.first_key
        'name'
    """

    __slots__ = ("_columns", "_by_key")

    def __init__(self, columns: Iterable[ColumnDescriptor | Mapping[str, Any]] = ()) -> None:
        cols: list[ColumnDescriptor] = []
        by_key: dict[str, ColumnDescriptor] = {}
        for c in columns:
            desc = c if isinstance(c, ColumnDescriptor) else ColumnDescriptor.from_mapping(c)
            if desc.key in by_key:
                raise ColumnConfigError(f"duplicate column key: {desc.key!r}")
            by_key[desc.key] = desc
            cols.append(desc)
        self._columns: tuple[ColumnDescriptor, ...] = tuple(cols)
        self._by_key: dict[str, ColumnDescriptor] = by_key

    @classmethod
    def coerce(
        cls, columns: ColumnRegistry | Iterable[ColumnDescriptor | Mapping[str, Any]]
    ) -> ColumnRegistry:
        if isinstance(columns, ColumnRegistry):
            return columns
        return cls(columns)

    @property
    def first_key(self) -> str:
        """Key of the first column, or "" for an empty registry."""
        return self._columns[0].key if self._columns else ""

    def keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self._columns)

    def get(self, key: str) -> ColumnDescriptor | None:
        return self._by_key.get(key)

    def get_column(self, key: str) -> ColumnDescriptor:
        """
        Look up a column descriptor by key.

        Raises:
            KeyError: If no column has this key.
        """
        return self._by_key[key]

    def list_columns(self) -> list[ColumnDescriptor]:
        return list(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"ColumnRegistry({list(self.keys())!r})"
