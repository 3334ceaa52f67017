"""
Pydantic v2 models for the single immutable view state and the actions that update it.

Responsibilities
- Define SortState, PaginationState and ViewState (frozen records).
- Define typed actions (one per user interaction) and the discriminated Action union.
- Normalize direction literals through grammar helpers.

Style
- Zero-IO (stdlib + pydantic only).
- Every transition produces a new ViewState; see gridview.view.reducers.

Notes:
    - ``current_page`` is deliberately unconstrained: paging outside 1..total_pages
      is legal and yields an empty page (no auto-clamp).
    - ``selection`` holds identities only; it is never revalidated against records.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_ROWS_PER_PAGE
from .grammar import SortDirection, sort_direction_from_value

__all__ = [
    "SortState",
    "PaginationState",
    "ViewState",
    "SearchChanged",
    "SortRequested",
    "PageChanged",
    "RowToggled",
    "VisibleRowsToggled",
    "SelectionCleared",
    "Action",
]


class SortState(BaseModel):
    """
    Active sort column and direction.

    Attributes:
        field (str): Column key being sorted ("" when there are no columns).
        direction (SortDirection): asc or desc; accepts case-insensitive literals.

    Examples:
        >>> SortState(field="name", direction="DESC").direction
        <SortDirection.DESC: 'desc'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = ""
    direction: SortDirection = SortDirection.ASC

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, v: Any) -> SortDirection:
        return sort_direction_from_value(v)


class PaginationState(BaseModel):
    """
    Current page (1-based) and the fixed page size.

    Attributes:
        current_page (int): 1-based page number; not clamped.
        rows_per_page (int): Page size (>= 1), fixed per engine instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_page: int = 1
    rows_per_page: int = Field(default=DEFAULT_ROWS_PER_PAGE, ge=1)


class ViewState(BaseModel):
    """
    Immutable snapshot of search, sort, pagination and selection.

    Attributes:
        search_term (str): Case-insensitive substring filter; "" disables filtering.
        sort (SortState): Active sort.
        pagination (PaginationState): Current page and page size.
        selection (frozenset[Any]): Selected record identities.

    Examples:
        >>> s = ViewState.initial(first_key="name", rows_per_page=2)
        >>> (s.sort.field, s.sort.direction.value, s.pagination.current_page)
        ('name', 'asc', 1)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_term: str = ""
    sort: SortState = Field(default_factory=SortState)
    pagination: PaginationState = Field(default_factory=PaginationState)
    selection: frozenset[Any] = frozenset()

    @classmethod
    def initial(cls, first_key: str = "", rows_per_page: int = DEFAULT_ROWS_PER_PAGE) -> ViewState:
        """Initial state: sort by the first column ascending, page 1, nothing selected."""
        return cls(
            sort=SortState(field=first_key, direction=SortDirection.ASC),
            pagination=PaginationState(current_page=1, rows_per_page=rows_per_page),
        )


# ============================================================================
# Actions
# ============================================================================


class SearchChanged(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["search_changed"] = "search_changed"
    term: str


class SortRequested(BaseModel):
    """Header click on column ``field``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["sort_requested"] = "sort_requested"
    field: str


class PageChanged(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["page_changed"] = "page_changed"
    page: int


class RowToggled(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["row_toggled"] = "row_toggled"
    row_id: Any


class VisibleRowsToggled(BaseModel):
    """Header "select all" click; carries the identities on the displayed page."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["visible_rows_toggled"] = "visible_rows_toggled"
    page_ids: tuple[Any, ...] = ()


class SelectionCleared(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["selection_cleared"] = "selection_cleared"


Action = Annotated[
    SearchChanged
    | SortRequested
    | PageChanged
    | RowToggled
    | VisibleRowsToggled
    | SelectionCleared,
    Field(discriminator="kind"),
]
