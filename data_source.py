import logging
import os
from collections import deque
from typing import Any, Protocol

import pyarrow as pa
import pyarrow.parquet as pq

from errors import DataSourceError, EndOfData, OpenFailed
from record_shapes import declared_fields

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 64


class DataSource(Protocol):
    """Forward-only row supplier. Each record is handed out exactly once."""

    row_count: int

    def read_next(self) -> Any: ...

    def close(self) -> None: ...


class ParquetDataSource:
    """Reads a parquet file one record at a time.

    Records are dicts keyed by column name in schema order, or instances of
    `record_type` (a dataclass or namedtuple) when one is given; dataclass
    fields are matched to columns through their `name=` tag.

    `record_type` is a library-level option for callers that want typed
    records, e.g. `ParquetDataSource(path, record_type=Student)`. The viewer
    itself always reads dicts and never sets it.
    """

    def __init__(self, path: str, batch_size: int = DEFAULT_BATCH_SIZE, record_type=None):
        self.path = path
        self.record_type = record_type
        try:
            self._file = pq.ParquetFile(path)
        except (OSError, pa.ArrowException) as exc:
            raise OpenFailed(path, exc) from exc

        self.row_count = int(self._file.metadata.num_rows)
        self._batches = self._file.iter_batches(batch_size=max(1, batch_size))
        self._pending = deque()
        self._consumed = 0
        self._closed = False
        self._field_for_column = None
        if record_type is not None:
            self._field_for_column = {
                f.label: f.identifier for f in declared_fields(record_type)
            }
        logger.info("opened %s (%d rows)", path, self.row_count)

    def _to_records(self, batch):
        records = batch.to_pylist()
        if self.record_type is None:
            return records
        built = []
        for rec in records:
            kwargs = {
                self._field_for_column[k]: v
                for k, v in rec.items()
                if k in self._field_for_column
            }
            built.append(self.record_type(**kwargs))
        return built

    def read_next(self):
        if self._closed:
            raise DataSourceError(f"{self.path} is closed")
        while not self._pending:
            try:
                batch = next(self._batches)
            except StopIteration:
                raise EndOfData() from None
            except (OSError, pa.ArrowException) as exc:
                raise DataSourceError(f"row {self._consumed}: {exc}") from exc
            try:
                self._pending.extend(self._to_records(batch))
            except TypeError as exc:
                raise DataSourceError(f"row {self._consumed}: {exc}") from exc
        self._consumed += 1
        return self._pending.popleft()

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        try:
            self._file.close()
        except OSError as exc:
            raise DataSourceError(f"failed to close {self.path}: {exc}") from exc
        logger.info("closed %s", self.path)


def open_data_source(path: str, batch_size: int = DEFAULT_BATCH_SIZE) -> ParquetDataSource:
    if not path:
        raise OpenFailed(path, "no parquet file specified")
    return ParquetDataSource(os.path.expanduser(path), batch_size=batch_size)
