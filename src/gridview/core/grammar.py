"""
Canonical gridview vocabulary and helpers.

Defines sort directions, cell alignments and render gates, plus zero-IO
normalization helpers shared by column descriptors, state records and the
view engine.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (callbacks, settings, host widgets): lower_snake
2) Host callbacks receive plain strings (``direction.value``), never enum members,
   so a host can forward them to a server-side equivalent unchanged.

Downstream usage
----------------
- gridview.core.state validates SortState.direction through sort_direction_from_value.
- gridview.view.reducers applies next_sort_direction on header clicks.
- gridview.view.render tags each RenderResult with a RenderGate.

Examples
--------
>>> from gridview.core.grammar import SortDirection, next_sort_direction
>>> next_sort_direction("name", SortDirection.ASC, "name")
<SortDirection.DESC: 'desc'>
>>> next_sort_direction("name", SortDirection.DESC, "email")
<SortDirection.ASC: 'asc'>
"""

from __future__ import annotations

from enum import Enum

from .errors import GrammarError

__all__ = [
    "SortDirection",
    "RowAlign",
    "RenderGate",
    "sort_direction_from_value",
    "align_from_value",
    "flip_direction",
    "next_sort_direction",
]


class SortDirection(Enum):
    """
    Direction of the single active sort.

    Notes:
      Serialized values are what on_sort(field, direction) hands to the host.
    """

    ASC = "asc"
    DESC = "desc"


class RowAlign(Enum):
    """Horizontal alignment hint carried by a column descriptor."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class RenderGate(Enum):
    """
    Which branch of the render gating produced a RenderResult.

    Precedence (first match wins): error, loading, empty, content.
    """

    ERROR = "error"
    LOADING = "loading"
    EMPTY = "empty"
    CONTENT = "content"


def sort_direction_from_value(s: str | SortDirection) -> SortDirection:
    """
    Parse a direction literal into a SortDirection.

    Args:
      s (str | SortDirection): "asc"/"desc" (case-insensitive) or an enum member.

    Returns:
      SortDirection: Parsed direction.

    Raises:
      GrammarError: If s is not a known direction.
    """
    if isinstance(s, SortDirection):
        return s
    lo = (s or "").strip().lower()
    allowed = {d.value for d in SortDirection}
    if lo not in allowed:
        raise GrammarError(f"sort direction must be one of {sorted(allowed)} (got {s!r})")
    return SortDirection(lo)


def align_from_value(s: str | RowAlign | None) -> RowAlign | None:
    """
    Parse an alignment literal; None passes through.

    Raises:
      GrammarError: If s is not a known alignment.
    """
    if s is None or isinstance(s, RowAlign):
        return s
    lo = s.strip().lower()
    allowed = {a.value for a in RowAlign}
    if lo not in allowed:
        raise GrammarError(f"align must be one of {sorted(allowed)} (got {s!r})")
    return RowAlign(lo)


def flip_direction(direction: SortDirection) -> SortDirection:
    return SortDirection.DESC if direction is SortDirection.ASC else SortDirection.ASC


def next_sort_direction(
    active_field: str, active_direction: SortDirection, clicked_field: str
) -> SortDirection:
    """
    Direction that results from clicking a column header.

    Args:
      active_field (str): Currently sorted column key.
      active_direction (SortDirection): Current direction.
      clicked_field (str): Key of the clicked column.

    Returns:
      SortDirection: Flipped direction when the active column is clicked again,
      otherwise ASC.
    """
    if clicked_field == active_field:
        return flip_direction(active_direction)
    return SortDirection.ASC
