import logging
import os
from enum import Enum

from data_source import DEFAULT_BATCH_SIZE, open_data_source
from errors import (
    AdvanceFailed,
    DataSourceError,
    EndOfData,
    NoFilesFound,
    SchemaUndetermined,
    ViewerError,
)
from file_discovery import find_candidate_files
from grid_pane import GridPane
from keys import QUIT_KEYS
from messages import FilesFound, RowFetched, TableLoaded, TaskFailed
from path_input import PathInput
from row_window import DEFAULT_WINDOW_SIZE, RowWindow
from schema_extractor import DEFAULT_COLUMN_WIDTH, extract_columns

logger = logging.getLogger(__name__)

EXIT_KEYS = ("q", "esc")
FORWARD_KEYS = ("down", "j", "pgdown", "f", " ", "end", "G")


class ViewState(Enum):
    INPUT = "input"
    FILE_SELECT = "file_select"
    TABLE = "table"


def _task(fn, session=None):
    fn.session = session
    return fn


def _close_quietly(source):
    try:
        source.close()
    except DataSourceError as exc:
        logger.warning("error closing sample reader: %s", exc)


def sample_columns(path, open_source, column_width=DEFAULT_COLUMN_WIDTH):
    """Derive columns from the first record using a throwaway reader."""
    reader = open_source(path)
    try:
        try:
            sample = reader.read_next()
        except EndOfData as exc:
            raise SchemaUndetermined("file has no rows") from exc
        return extract_columns(sample, column_width)
    finally:
        _close_quietly(reader)


def load_table(
    path,
    session,
    open_source=open_data_source,
    window_size=DEFAULT_WINDOW_SIZE,
    column_width=DEFAULT_COLUMN_WIDTH,
):
    """Open `path`, derive its columns and fill the initial window.

    Always returns a TableLoaded message; failures travel in its `error`.
    """
    try:
        columns = sample_columns(path, open_source, column_width)
        source = open_source(path)
    except ViewerError as exc:
        return TableLoaded(session, path, error=exc)

    try:
        window = RowWindow.initialize(source, columns, window_size)
    except ViewerError as exc:
        return TableLoaded(session, path, error=exc)
    return TableLoaded(session, path, columns=columns, window=window)


class AppState:
    """View state machine.

    Keys and background results go in through `handle_key` and
    `handle_message`; both return the background tasks to start. Each task is
    a zero-argument callable producing exactly one message.
    """

    def __init__(
        self,
        file_path=None,
        window_size=DEFAULT_WINDOW_SIZE,
        column_width=DEFAULT_COLUMN_WIDTH,
        table_height=10,
        file_suffix=".parquet",
        batch_size=DEFAULT_BATCH_SIZE,
        directory=None,
        open_source=None,
        discover=find_candidate_files,
    ):
        self.window_size = window_size
        self.column_width = column_width
        self.table_height = table_height
        self.file_suffix = file_suffix
        self.directory = directory
        if open_source is None:
            def open_parquet(path):
                return open_data_source(path, batch_size=batch_size)

            open_source = open_parquet
        self.open_source = open_source
        self.discover = discover

        self.file_path = file_path or ""
        self.view = ViewState.TABLE if file_path else ViewState.INPUT
        self.is_loading = bool(file_path)
        self.input = PathInput()

        self.files: list[str] = []
        self.selected_file = 0
        self.notice = None

        self.error = None
        self.columns = []
        self.window = None
        self.grid = GridPane(height=table_height)
        self.session = 0
        self.advance_pending = False
        self.quit_requested = False

    # ---------------- tasks ----------------

    def _scan_task(self):
        directory = self.directory
        suffix = self.file_suffix
        discover = self.discover

        def scan():
            return FilesFound(discover(directory, suffix), directory)

        return _task(scan)

    def _load_task(self, path):
        session = self.session
        open_source = self.open_source
        window_size = self.window_size
        column_width = self.column_width

        def load():
            return load_table(path, session, open_source, window_size, column_width)

        return _task(load, session)

    def _advance_task(self):
        window = self.window
        session = self.session

        def fetch():
            try:
                row = window.fetch_next()
            except AdvanceFailed as exc:
                return RowFetched(session, error=exc)
            return RowFetched(session, row=row)

        return _task(fetch, session)

    # ---------------- lifecycle ----------------

    def start(self):
        if self.file_path:
            return [self._open(self.file_path)]
        return [self._scan_task()]

    def _release_window(self):
        if self.window is not None:
            self.window.release()
            self.window = None

    def _open(self, path):
        self._release_window()
        self.session += 1
        self.file_path = path
        self.view = ViewState.TABLE
        self.is_loading = True
        self.error = None
        self.columns = []
        self.grid = GridPane(height=self.table_height)
        self.advance_pending = False
        self.input.reset()
        logger.info("opening %s (session %d)", path, self.session)
        return self._load_task(path)

    def _exit_table(self):
        self._release_window()
        self.session += 1
        self.view = ViewState.FILE_SELECT
        self.is_loading = False
        self.error = None
        self.columns = []
        self.grid = GridPane(height=self.table_height)
        self.advance_pending = False
        return [self._scan_task()]

    def shutdown(self):
        self._release_window()

    def quit(self):
        self.shutdown()
        # results still in flight are stale from here on
        self.session += 1
        self.quit_requested = True

    # ---------------- keys ----------------

    def handle_key(self, key):
        if key is None:
            return []
        if key in QUIT_KEYS:
            self.quit()
            return []
        if self.view is ViewState.TABLE:
            return self._table_key(key)
        if self.view is ViewState.FILE_SELECT and self.files:
            return self._select_key(key)
        return self._input_key(key)

    def _input_key(self, key):
        if key == "enter":
            path = self.input.value()
            if path:
                return [self._open(path)]
            return []
        self.input.handle_key(key)
        return []

    def _select_key(self, key):
        if key in ("up", "k"):
            self.selected_file -= 1
            if self.selected_file < 0:
                self.selected_file = len(self.files) - 1
        elif key in ("down", "j"):
            self.selected_file += 1
            if self.selected_file >= len(self.files):
                self.selected_file = 0
        elif key == "enter":
            name = self.files[self.selected_file]
            path = os.path.join(self.directory, name) if self.directory else name
            return [self._open(path)]
        return []

    def _table_key(self, key):
        if key in EXIT_KEYS:
            return self._exit_table()
        if self.is_loading or self.error is not None or self.window is None:
            return []

        old = self.grid.curr_row
        if not self.grid.handle_key(key):
            return []
        new = self.grid.curr_row
        last = len(self.window.rows) - 1

        forward = new > old or (key in FORWARD_KEYS and old == last)
        if forward and new == last and self.window.has_more and not self.advance_pending:
            self.advance_pending = True
            return [self._advance_task()]
        return []

    # ---------------- messages ----------------

    def handle_message(self, msg):
        if isinstance(msg, FilesFound):
            return self._on_files(msg)
        if isinstance(msg, TableLoaded):
            return self._on_table_loaded(msg)
        if isinstance(msg, RowFetched):
            return self._on_row_fetched(msg)
        if isinstance(msg, TaskFailed):
            return self._on_task_failed(msg)
        logger.debug("ignoring unknown message %r", msg)
        return []

    def _on_files(self, msg):
        self.files = list(msg.files)
        if self.selected_file >= len(self.files):
            self.selected_file = 0
        if self.files:
            self.notice = None
            if self.view is ViewState.INPUT:
                self.view = ViewState.FILE_SELECT
        else:
            self.notice = NoFilesFound(msg.directory, self.file_suffix)
        return []

    def _stale(self, session):
        return session != self.session or self.view is not ViewState.TABLE

    def _on_table_loaded(self, msg):
        if self._stale(msg.session):
            logger.info("discarding stale load of %s", msg.path)
            if msg.window is not None:
                msg.window.release()
            return []

        self.is_loading = False
        if msg.error is not None:
            self._set_error(msg.error)
            return []

        self.window = msg.window
        self.columns = list(msg.columns)
        self.grid = GridPane(self.columns, self.window.rows, height=self.table_height)
        return []

    def _on_row_fetched(self, msg):
        if self._stale(msg.session):
            logger.debug("discarding stale row for session %d", msg.session)
            return []
        self.advance_pending = False
        if msg.error is not None:
            self._set_error(msg.error)
            return []
        if self.window is None or not self.window.push(msg.row):
            return []
        self.grid.set_rows(self.window.rows)
        self.grid.set_cursor(len(self.window.rows) - 1)
        return []

    def _on_task_failed(self, msg):
        if msg.session is None:
            # only the directory scan runs without a session
            return self._on_files(FilesFound([], self.directory))
        if self._stale(msg.session):
            return []
        self.is_loading = False
        self.advance_pending = False
        self._set_error(msg.error)
        return []

    def _set_error(self, error):
        logger.warning("%s: %s", self.file_path, error)
        self.error = error

    # ---------------- presentation helpers ----------------

    def status_context(self):
        ctx = {"view": self.view.value, "file_path": self.file_path}
        if self.window is not None:
            ctx.update(
                total_rows=self.window.total_rows,
                first_row=self.window.first_row_number,
                last_row=self.window.last_row_number,
                cursor_row=self.window.global_offset + self.grid.curr_row,
                loading_more=self.advance_pending,
            )
        return ctx
