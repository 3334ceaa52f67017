"""
Selection tracker functions over immutable identity sets.

Selections are keyed by record identity, never by position, so they survive
sort, search and page transitions. Identities are not revalidated against the
live records: a deleted record's id stays selected until the host clears it.

The page-level "select all" control compares the selection's size with the number
of rows on the displayed page (cardinality, not membership). That comparison is
kept in one function, page_counts_as_selected, which also drives the header
checkbox state.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from gridview.core.fields import get_field
from gridview.core.typing import RowId, Selection

__all__ = [
    "row_ids",
    "toggle_id",
    "is_selected",
    "page_counts_as_selected",
    "select_all_visible",
]


def row_ids(records: Iterable[Any], id_key: str = "id") -> tuple[Any, ...]:
    """Identities of `records` in order (None for a record without an id field)."""
    return tuple(get_field(r, id_key, None) for r in records)


def toggle_id(selection: Selection, row_id: RowId) -> Selection:
    """Add `row_id` if absent, remove it if present."""
    if row_id in selection:
        return selection - {row_id}
    return selection | {row_id}


def is_selected(selection: Selection, row_id: RowId) -> bool:
    return row_id in selection


def page_counts_as_selected(selection: Selection, page_ids: Sequence[Any]) -> bool:
    """
    Whether the page is treated as "all selected".

    Args:
        selection (Selection): Current selection.
        page_ids (Sequence[Any]): Identities on the displayed page.

    Returns:
        bool: True when the selection size equals the page row count.

    Notes:
        Sizes are compared, not members: two ids selected on page 1 make a
        two-row page 2 count as selected. Switching to a membership check
        (``set(page_ids) <= selection``) only requires changing this function.
    """
    return len(selection) == len(page_ids)


def select_all_visible(selection: Selection, page_ids: Sequence[Any]) -> Selection:
    """
    Header checkbox click.

    Returns:
        Selection: An empty set when page_counts_as_selected holds, otherwise
        exactly the page's identities (replacing any previous selection).

    Examples:
        >>> sorted(select_all_visible(frozenset(), (1, 2)))
        [1, 2]
        >>> select_all_visible(frozenset({7, 8}), (1, 2))
        frozenset()
    """
    if page_counts_as_selected(selection, page_ids):
        return frozenset()
    return frozenset(page_ids)
