import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from data_source import ParquetDataSource, open_data_source
from errors import DataSourceError, EndOfData, OpenFailed
from row_decoder import decode_row
from row_window import RowWindow
from sample_generator import Student, generate_sample_parquet
from schema_extractor import extract_column_names, extract_columns


@pytest.fixture
def sample_path(tmp_path):
    return generate_sample_parquet(str(tmp_path / "sample.parquet"), 10)


def test_reports_row_count_and_yields_records_in_order(sample_path):
    src = open_data_source(sample_path, batch_size=3)
    try:
        assert src.row_count == 10
        records = [src.read_next() for _ in range(10)]
        with pytest.raises(EndOfData):
            src.read_next()
    finally:
        src.close()
    assert [r["id"] for r in records] == list(range(1000, 1010))
    assert list(records[0]) == ["name", "age", "id", "weight", "gpa", "active", "courses"]


def test_schema_from_first_record_follows_file_order(sample_path):
    src = open_data_source(sample_path)
    try:
        names = extract_column_names(src.read_next())
    finally:
        src.close()
    assert names == ["name", "age", "id", "weight", "gpa", "active", "courses"]


def test_struct_records(sample_path):
    src = ParquetDataSource(sample_path, record_type=Student)
    try:
        first = src.read_next()
    finally:
        src.close()
    assert isinstance(first, Student)
    assert first.name == "Student 1"
    assert first.courses == ["Course 1", "Course 3"]
    assert extract_column_names(first)[:3] == ["name", "age", "id"]


def test_missing_file_fails_to_open(tmp_path):
    with pytest.raises(OpenFailed) as exc_info:
        open_data_source(str(tmp_path / "missing.parquet"))
    assert "failed to open parquet file" in str(exc_info.value)


def test_not_a_parquet_file(tmp_path):
    bogus = tmp_path / "bogus.parquet"
    bogus.write_text("definitely not parquet")
    with pytest.raises(OpenFailed):
        open_data_source(str(bogus))


def test_empty_path_fails_to_open():
    with pytest.raises(OpenFailed):
        open_data_source("")


def test_read_after_close(sample_path):
    src = open_data_source(sample_path)
    src.close()
    src.close()
    with pytest.raises(DataSourceError):
        src.read_next()


def test_window_over_real_file(tmp_path):
    path = str(tmp_path / "big.parquet")
    pd.DataFrame({"n": range(100), "label": [f"r{i}" for i in range(100)]}).to_parquet(path, index=False)

    first = open_data_source(path, batch_size=7)
    columns = extract_columns(first.read_next())
    first.close()

    with RowWindow.initialize(open_data_source(path, batch_size=7), columns, 32) as window:
        assert len(window.rows) == 32
        assert window.advance()
        assert window.global_offset == 1
        assert window.rows[0] == ["1", "r1"]
        assert window.rows[-1] == ["32", "r32"]


def test_nulls_render_as_placeholder(tmp_path):
    path = str(tmp_path / "nulls.parquet")
    pd.DataFrame({"a": [1.0, None], "b": ["x", None]}).to_parquet(path, index=False)
    src = open_data_source(path)
    try:
        columns = extract_columns(src.read_next())
        second = decode_row(src.read_next(), columns)
    finally:
        src.close()
    assert second == ["<nil>", "<nil>"]


def test_nan_is_a_value_not_a_null(tmp_path):
    path = str(tmp_path / "nan.parquet")
    table = pa.table({"x": pa.array([float("nan"), None], type=pa.float64(), from_pandas=False)})
    pq.write_table(table, path)
    src = open_data_source(path)
    try:
        first = src.read_next()
        columns = extract_columns(first)
        assert decode_row(first, columns) == ["nan"]
        assert decode_row(src.read_next(), columns) == ["<nil>"]
    finally:
        src.close()
