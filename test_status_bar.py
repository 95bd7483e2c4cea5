from status_bar import render_status


def test_table_status_shows_window_position():
    ctx = {
        "view": "table",
        "file_path": "/data/sample.parquet",
        "total_rows": 100,
        "first_row": 1,
        "last_row": 32,
        "cursor_row": 32,
        "loading_more": False,
    }
    text = render_status(ctx, 80)
    assert len(text) == 80
    assert text.strip() == "TABLE | sample.parquet | rows 2-33 of 100 | row 33"


def test_loading_marker_and_empty_file():
    ctx = {"view": "table", "file_path": "x.parquet", "total_rows": 0, "loading_more": True}
    assert render_status(ctx, 60).strip() == "TABLE | x.parquet | 0 rows | loading…"


def test_non_table_views():
    assert render_status({"view": "input"}, 10) == " INPUT    "
    assert render_status({"view": "file_select", "file_path": ""}, 20).strip() == "FILES"


def test_truncates_to_width():
    assert len(render_status({"view": "table", "file_path": "a" * 50}, 12)) == 12
