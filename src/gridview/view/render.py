"""
Render gating for the table control surface.

Precedence, evaluated on every render and short-circuiting the rest:
error, then loading, then an empty record collection, then the full pipeline.
Gates are read-only: they never reset search, sort, pagination or selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gridview.core.grammar import RenderGate

from .widgets import PageView

__all__ = [
    "RenderResult",
    "resolve_gate",
]


@dataclass(frozen=True)
class RenderResult:
    """
    Outcome of one render.

    Attributes:
        gate (RenderGate): Branch taken.
        node (Any): Host-supplied error/loading/empty node (opaque), for non-content gates.
        page (PageView | None): Populated only for RenderGate.CONTENT.
    """

    gate: RenderGate
    node: Any = None
    page: PageView | None = None


def resolve_gate(*, is_error: bool, is_loading: bool, has_records: bool) -> RenderGate:
    """
    Pick the render branch.

    Examples:
        >>> resolve_gate(is_error=True, is_loading=True, has_records=False).value
        'error'
        >>> resolve_gate(is_error=False, is_loading=False, has_records=False).value
        'empty'
    """
    if is_error:
        return RenderGate.ERROR
    if is_loading:
        return RenderGate.LOADING
    if not has_records:
        return RenderGate.EMPTY
    return RenderGate.CONTENT
