"""
Sort stage: order the filtered records by the single active column.

Default ordering coerces each operand's sort value to text and compares collation
keys (see gridview.core.fields.collation_key), so numbers and dates sort as
strings. A column may opt into typed ordering through its ``compare`` override.

Notes:
    - Stability: built on ``sorted``, which is guaranteed stable; descending order
      uses ``reverse=True``, which also keeps equal keys in input order.
    - Missing fields sort as "" and never raise.
    - The sort value is the column's accessor when the field names a registered
      column, otherwise the raw record field.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any

from gridview.core.columns import ColumnRegistry
from gridview.core.fields import MISSING, collation_key, get_field, to_text
from gridview.core.grammar import SortDirection, sort_direction_from_value
from gridview.core.typing import Record

__all__ = [
    "sort_value",
    "sort_records",
]

logger = logging.getLogger(__name__)


def sort_value(record: Any, field: str, columns: ColumnRegistry | None = None) -> Any:
    """Raw sort value of `record` for `field` (MISSING when absent)."""
    column = columns.get(field) if columns is not None else None
    if column is not None:
        return column.value_of(record)
    return get_field(record, field)


def sort_records(
    records: Sequence[Record],
    field: str,
    direction: SortDirection | str = SortDirection.ASC,
    columns: ColumnRegistry | None = None,
) -> list[Record]:
    """
    Return a new list of records ordered by `field`.

    Args:
        records (Sequence[Record]): Filtered records.
        field (str): Active sort column key.
        direction (SortDirection | str): asc or desc.
        columns (ColumnRegistry | None): Registry supplying accessors and comparators.

    Returns:
        list[Record]: Sorted copy; the input is not mutated.

    Examples:
        >>> rows = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}, {"id": 3, "name": "cat"}]
        >>> [r["name"] for r in sort_records(rows, "name")]
        ['Ann', 'Bob', 'cat']
        >>> [r["name"] for r in sort_records(rows, "name", "desc")]
        ['cat', 'Bob', 'Ann']
    """
    reverse = sort_direction_from_value(direction) is SortDirection.DESC
    column = columns.get(field) if columns is not None else None

    # Decorate once so accessors run a single time per record.
    decorated = [(sort_value(r, field, columns), r) for r in records]

    missing = sum(1 for value, _ in decorated if value is MISSING)
    if missing and field:
        logger.debug("sort field %r missing on %d of %d records", field, missing, len(decorated))

    if column is not None and column.compare is not None:
        compare = column.compare

        # Comparators see None, never the MISSING sentinel.
        def _cmp(a: tuple[Any, Any], b: tuple[Any, Any]) -> int:
            av = None if a[0] is MISSING else a[0]
            bv = None if b[0] is MISSING else b[0]
            return compare(av, bv)

        ordered = sorted(decorated, key=cmp_to_key(_cmp), reverse=reverse)
    else:
        ordered = sorted(
            decorated, key=lambda pair: collation_key(to_text(pair[0])), reverse=reverse
        )
    return [r for _, r in ordered]
