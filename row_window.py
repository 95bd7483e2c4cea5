import logging

from errors import AdvanceFailed, DataSourceError, EndOfData, InitialReadFailed
from row_decoder import decode_row

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 32


class RowWindow:
    """Bounded, forward-sliding buffer of decoded rows over a DataSource.

    `rows[i]` is always source row `global_offset + i`, and
    `global_offset + len(rows) <= total_rows`. The window owns the data source
    and closes it on `release()`.
    """

    def __init__(self, source, columns, size: int = DEFAULT_WINDOW_SIZE):
        if size < 1:
            raise ValueError(f"window size must be positive, got {size}")
        self.source = source
        self.columns = list(columns)
        self.size = size
        self.rows: list[list[str]] = []
        self.global_offset = 0
        self.total_rows = max(0, int(source.row_count))
        self.released = False

    @classmethod
    def initialize(cls, source, columns, size: int = DEFAULT_WINDOW_SIZE):
        window = cls(source, columns, size)
        count = min(size, window.total_rows)
        for i in range(count):
            try:
                record = source.read_next()
            except (DataSourceError, EndOfData) as exc:
                window.release()
                raise InitialReadFailed(i, exc) from exc
            window.rows.append(decode_row(record, window.columns))
        logger.info(
            "window initialized with %d of %d rows", len(window.rows), window.total_rows
        )
        return window

    @property
    def has_more(self) -> bool:
        return self.global_offset + len(self.rows) < self.total_rows

    @property
    def first_row_number(self) -> int:
        return self.global_offset

    @property
    def last_row_number(self) -> int:
        return self.global_offset + max(0, len(self.rows) - 1)

    def fetch_next(self) -> list[str]:
        """Read and decode the next source row without touching the buffer."""
        if self.released:
            raise AdvanceFailed(DataSourceError("data source is closed"))
        if not self.has_more:
            raise AdvanceFailed(EndOfData())
        try:
            record = self.source.read_next()
        except (DataSourceError, EndOfData) as exc:
            raise AdvanceFailed(exc) from exc
        return decode_row(record, self.columns)

    def push(self, row) -> bool:
        """Slide the window forward by one with an already fetched row."""
        if not self.has_more or not self.rows:
            return False
        self.rows.append(list(row))
        del self.rows[0]
        self.global_offset += 1
        logger.debug("window advanced to offset %d", self.global_offset)
        return True

    def advance(self) -> bool:
        if not self.has_more:
            return False
        return self.push(self.fetch_next())

    def release(self):
        if self.released:
            return
        self.released = True
        try:
            self.source.close()
        except DataSourceError as exc:
            logger.warning("error closing data source: %s", exc)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
