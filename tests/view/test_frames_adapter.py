from __future__ import annotations

import polars as pl

from gridview.frames import frame_from_records, records_from_frame
from gridview.view.engine import TableEngine


def test_records_from_frame_keeps_existing_ids() -> None:
    df = pl.DataFrame({"id": [10, 11], "name": ["Bob", "Ann"]})
    assert records_from_frame(df) == [{"id": 10, "name": "Bob"}, {"id": 11, "name": "Ann"}]
    assert records_from_frame(df, add_row_index=True)[0]["id"] == 10


def test_records_from_frame_adds_row_index_when_asked() -> None:
    df = pl.DataFrame({"name": ["Bob", "Ann"]})
    assert records_from_frame(df) == [{"name": "Bob"}, {"name": "Ann"}]
    rows = records_from_frame(df, "uid", add_row_index=True)
    assert [r["uid"] for r in rows] == [0, 1]


def test_frame_from_records_projects_displayed_page() -> None:
    df = pl.DataFrame({"id": [1, 2, 3], "name": ["Bob", "Ann", "cat"], "age": [30, 40, 50]})
    engine = TableEngine([{"key": "name"}], records_from_frame(df))
    out = frame_from_records(list(engine.derive().page), ["id", "name", "missing"])
    assert out.columns == ["id", "name"]
    assert out["name"].to_list() == ["Ann", "Bob", "cat"]


def test_frame_from_records_empty() -> None:
    assert frame_from_records([]).height == 0
