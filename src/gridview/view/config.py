"""
Configuration for the gridview view engine.

Defines ViewSettings, a frozen dataclass carrying per-instance engine options.
Defaults are sourced from gridview.core.constants (the single source of truth).

Source of truth
- gridview.core.constants.DEFAULT_ROWS_PER_PAGE, DEFAULT_ID_KEY, MAX_PAGE_BUTTONS,
  SEARCH_PLACEHOLDER

Import DAG discipline
- Depends only on stdlib and gridview.core.
- Does not import the app package.

Notes
- Loader precedence: environment > TOML > defaults.
- Loose values from env/TOML that fail to parse are ignored (the lower layer wins);
  explicit construction is checked by ViewSettings.validate().
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from gridview.core.constants import (
    DEFAULT_ID_KEY,
    DEFAULT_ROWS_PER_PAGE,
    MAX_PAGE_BUTTONS,
    SEARCH_PLACEHOLDER,
)
from gridview.core.errors import ViewConfigError

__all__ = [
    "ViewSettings",
]

_BOOL_FIELDS = ("selectable", "searchable", "pagination", "thread_safe")
_INT_FIELDS = ("rows_per_page", "max_page_buttons")
_STR_FIELDS = ("id_key", "search_placeholder")


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class ViewSettings:
    """
    Per-instance options for a TableEngine.

    Attributes:
        rows_per_page (int): Fixed page size (>= 1).
        selectable (bool): Expose row and header checkbox controls.
        searchable (bool): Expose the search control.
        pagination (bool): Slice the ordered records into pages; when False the
            whole ordered set is displayed and no pagination control is exposed.
        id_key (str): Record field holding the identity.
        max_page_buttons (int): Numbered entries in the pagination window.
        search_placeholder (str): Placeholder text handed to the search widget.
        thread_safe (bool): Guard every transition with a single re-entrant lock.

    Examples:
        >>> ViewSettings(rows_per_page=25).rows_per_page
        25
    """

    rows_per_page: int = DEFAULT_ROWS_PER_PAGE
    selectable: bool = True
    searchable: bool = True
    pagination: bool = True
    id_key: str = DEFAULT_ID_KEY
    max_page_buttons: int = MAX_PAGE_BUTTONS
    search_placeholder: str = SEARCH_PLACEHOLDER
    thread_safe: bool = False

    def validate(self) -> ViewSettings:
        """
        Check invariants and return self.

        Raises:
            ViewConfigError: If rows_per_page or max_page_buttons is < 1, or id_key is empty.
        """
        if self.rows_per_page < 1:
            raise ViewConfigError(f"rows_per_page must be >= 1, got {self.rows_per_page}")
        if self.max_page_buttons < 1:
            raise ViewConfigError(f"max_page_buttons must be >= 1, got {self.max_page_buttons}")
        if not self.id_key:
            raise ViewConfigError("id_key must be a non-empty string")
        return self

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ViewSettings, cfg: dict[str, Any] | None) -> ViewSettings:
        """Apply a loose config mapping onto ViewSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        for name in _INT_FIELDS:
            if name not in cfg:
                continue
            try:
                value = int(cfg[name])
            except (TypeError, ValueError):
                continue
            if value >= 1:
                s = replace(s, **{name: value})

        for name in _BOOL_FIELDS:
            if name in cfg:
                s = replace(s, **{name: _bool(cfg[name])})

        for name in _STR_FIELDS:
            if name in cfg and isinstance(cfg[name], str) and cfg[name]:
                s = replace(s, **{name: cfg[name]})

        return s

    @classmethod
    def from_env(
        cls, base: ViewSettings | None = None, prefix: str = "GRIDVIEW_VIEW_"
    ) -> ViewSettings:
        """
        Build ViewSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - GRIDVIEW_VIEW_ROWS_PER_PAGE
            - GRIDVIEW_VIEW_SELECTABLE / _SEARCHABLE / _PAGINATION (1/0/true/false/yes/no/on/off)
            - GRIDVIEW_VIEW_ID_KEY
            - GRIDVIEW_VIEW_MAX_PAGE_BUTTONS
            - GRIDVIEW_VIEW_SEARCH_PLACEHOLDER
            - GRIDVIEW_VIEW_THREAD_SAFE
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for name in (*_INT_FIELDS, *_BOOL_FIELDS, *_STR_FIELDS):
            v = os.getenv(prefix + name.upper())
            if v:
                mapping[name] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ViewSettings:
        """
        Build ViewSettings from a TOML file.

        Search order when `path` is None:
            1) ./gridview.toml (with either a [view] table or top-level keys)
            2) ./pyproject.toml under [tool.gridview.view]

        Returns defaults if no file is present or none parses.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "gridview.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                gv = tool.get("gridview", {}) if isinstance(tool, dict) else {}
                cfg = gv.get("view") if isinstance(gv, dict) else None
            elif isinstance(data.get("view"), dict):
                cfg = data["view"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ViewSettings:
        """
        Load ViewSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (gridview.toml, pyproject.toml).

        Returns:
            ViewSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
