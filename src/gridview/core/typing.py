"""
Lightweight typing aliases used across columns, stages and the view engine.

This module contains no runtime logic and is zero-IO.

Notes:
    - Records are opaque host values; aliases only document intent.
    - Callback aliases describe the host notification surface.

Examples:
    >>> from gridview.core.typing import RowId, Selection
    >>> def first(sel: Selection) -> RowId | None:
    ...     return next(iter(sel), None)
    >>> first(frozenset({7}))
    7
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, TypeVar

__all__ = [
    "Record",
    "RowId",
    "Selection",
    "Accessor",
    "Comparator",
    "Renderer",
    "ClickHandler",
    "SortCallback",
    "SearchCallback",
    "SelectionCallback",
]

Record = TypeVar("Record")

# Identities only need to be hashable to live in a selection set.
RowId = Hashable
Selection = frozenset[Any]

Accessor = Callable[[Any], Any]
Comparator = Callable[[Any, Any], int]
Renderer = Callable[[Any], Any]
ClickHandler = Callable[[Any], None]

SortCallback = Callable[[str, str], None]
SearchCallback = Callable[[str], None]
SelectionCallback = Callable[[Selection], None]
