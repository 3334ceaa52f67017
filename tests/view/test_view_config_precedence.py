from __future__ import annotations

from pathlib import Path

import pytest

from gridview.core.errors import ViewConfigError
from gridview.view.config import ViewSettings

_ENV_KEYS = [
    "GRIDVIEW_VIEW_ROWS_PER_PAGE",
    "GRIDVIEW_VIEW_SELECTABLE",
    "GRIDVIEW_VIEW_SEARCHABLE",
    "GRIDVIEW_VIEW_PAGINATION",
    "GRIDVIEW_VIEW_ID_KEY",
    "GRIDVIEW_VIEW_MAX_PAGE_BUTTONS",
    "GRIDVIEW_VIEW_SEARCH_PLACEHOLDER",
    "GRIDVIEW_VIEW_THREAD_SAFE",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_gridview_toml(tmp: Path, content: str) -> Path:
    p = tmp / "gridview.toml"
    p.write_text(content)
    return p


def test_view_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write_gridview_toml(
        tmp_path,
        """
        [view]
        rows_per_page = 25
        selectable = false
        id_key = "uid"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("GRIDVIEW_VIEW_ROWS_PER_PAGE", "50")
    monkeypatch.setenv("GRIDVIEW_VIEW_SELECTABLE", "yes")

    s = ViewSettings.load()

    assert s.rows_per_page == 50  # env override
    assert s.selectable is True  # env override
    assert s.id_key == "uid"  # from TOML


def test_view_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_gridview_toml(
        tmp_path,
        """
        [view]
        rows_per_page = 5
        searchable = false
        pagination = false
        thread_safe = true
        search_placeholder = "Find user"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ViewSettings.load()

    assert s.rows_per_page == 5
    assert s.searchable is False
    assert s.pagination is False
    assert s.thread_safe is True
    assert s.search_placeholder == "Find user"


def test_view_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [tool.gridview.view]
        rows_per_page = 7
        """.strip()
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert ViewSettings.load().rows_per_page == 7


def test_view_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = ViewSettings.load()

    assert s == ViewSettings()
    assert s.rows_per_page == 10
    assert s.id_key == "id"
    assert s.selectable and s.searchable and s.pagination
    assert s.thread_safe is False


def test_invalid_loose_values_fall_back_to_lower_layer(tmp_path: Path, monkeypatch) -> None:
    _write_gridview_toml(tmp_path, "rows_per_page = 3\n")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("GRIDVIEW_VIEW_ROWS_PER_PAGE", "zero")
    monkeypatch.setenv("GRIDVIEW_VIEW_MAX_PAGE_BUTTONS", "0")

    s = ViewSettings.load()

    assert s.rows_per_page == 3  # top-level TOML keys, env value unparseable
    assert s.max_page_buttons == 5


def test_malformed_toml_is_ignored(tmp_path: Path, monkeypatch) -> None:
    _write_gridview_toml(tmp_path, "[view\nrows_per_page = ")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    assert ViewSettings.load() == ViewSettings()


def test_validate_rejects_explicit_bad_values() -> None:
    with pytest.raises(ViewConfigError):
        ViewSettings(rows_per_page=0).validate()
    with pytest.raises(ViewConfigError):
        ViewSettings(max_page_buttons=0).validate()
    with pytest.raises(ViewConfigError):
        ViewSettings(id_key="").validate()
