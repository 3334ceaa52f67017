"""
Search filter stage.

A record survives a non-empty search term when at least one registered column key
names a field the record owns and that field's text contains the term,
case-insensitively. Accessors and renderers are not consulted.

Notes:
    - Pure function of (records, term, columns); the input is never mutated.
    - Filtering twice with the same term returns the same records (idempotent).
    - A longer term containing a shorter one keeps a subset (monotone).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from gridview.core.columns import ColumnRegistry
from gridview.core.fields import get_field, has_field, to_text
from gridview.core.typing import Record

__all__ = [
    "matches_term",
    "filter_records",
]


def _fold(text: str) -> str:
    return text.lower()


def matches_term(record: Any, needle: str, keys: Iterable[str]) -> bool:
    """
    Check whether any own field named in `keys` contains `needle`.

    Args:
        record (Any): Host record.
        needle (str): Already lower-cased search term.
        keys (Iterable[str]): Column keys eligible for searching.

    Returns:
        bool: True on the first matching field.
    """
    for key in keys:
        if not has_field(record, key):
            continue
        if needle in _fold(to_text(get_field(record, key))):
            return True
    return False


def filter_records(
    records: Sequence[Record], term: str, columns: ColumnRegistry
) -> list[Record]:
    """
    Derive the filtered subset of records for a search term.

    Args:
        records (Sequence[Record]): Source records in display order.
        term (str): Search term; "" means no filtering.
        columns (ColumnRegistry): Columns whose keys scope the search.

    Returns:
        list[Record]: Matching records in input order (a new list).

    Examples:
        >>> cols = ColumnRegistry([{"key": "name"}])
        >>> rows = [{"id": 1, "name": "Bob"}, {"id": 2, "name": "Ann"}, {"id": 3, "name": "cat"}]
        >>> filter_records(rows, "an", cols)
        [{'id': 2, 'name': 'Ann'}]
    """
    if not term:
        return list(records)
    needle = _fold(term)
    keys = columns.keys()
    return [r for r in records if matches_term(r, needle, keys)]
