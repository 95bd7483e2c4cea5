# ~/Apps/pqview/orchestrator.py
import curses
import logging

from app_state import ViewState
from grid_pane import GridPane
from keys import key_name
from screen_layout import ScreenLayout
from screens import INPUT_MARK, TABLE_HINT, screen_lines
from status_bar import render_status
from task_runner import TaskRunner

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, runner=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)
        self.stdscr.keypad(True)
        GridPane.init_colors()

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.runner = runner or TaskRunner()

    # ---------------- tasks ----------------

    def _submit(self, tasks):
        for task in tasks or []:
            self.runner.submit(task)

    def _pump_messages(self):
        changed = False
        for msg in self.runner.drain():
            self._submit(self.state.handle_message(msg))
            changed = True
        return changed

    def _drain_late_results(self):
        # a load finishing after quit still owns an open reader
        for msg in self.runner.drain():
            self.state.handle_message(msg)

    # ---------------- UI ----------------

    def _resize(self):
        try:
            curses.update_lines_cols()
        except curses.error:
            pass
        self.stdscr.clear()
        self.layout = ScreenLayout(self.stdscr)

    def redraw(self):
        win = self.layout.main_win
        win.erase()
        h, w = win.getmaxyx()

        cursor_at = None
        lines = screen_lines(self.state)
        if lines is None:
            y = self.state.grid.draw(win, top=1, left=0)
            try:
                win.addnstr(min(h - 1, y + 1), 0, TABLE_HINT, w - 1)
            except curses.error:
                pass
        else:
            for y, line in enumerate(lines[:h]):
                if line == INPUT_MARK:
                    cursor_at = y
                    continue
                try:
                    win.addnstr(y, 0, line, w - 1)
                except curses.error:
                    pass
            if cursor_at is not None:
                self.state.input.draw(win, cursor_at, 2)

        try:
            curses.curs_set(1 if cursor_at is not None else 0)
        except curses.error:
            pass
        sw = self.layout.status_win
        sw.erase()
        _, sw_w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(self.state.status_context(), sw_w), sw_w - 1, curses.A_REVERSE)
        except curses.error:
            pass
        sw.noutrefresh()
        # main window last so the terminal cursor stays in the path input
        win.noutrefresh()
        curses.doupdate()

    # ---------------- loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        logger.info("viewer started in %s view", self.state.view.value)
        self._submit(self.state.start())
        self.redraw()

        try:
            while not self.state.quit_requested:
                ch = self.stdscr.getch()
                changed = self._pump_messages()

                if ch == -1:
                    if changed:
                        self.redraw()
                    continue

                key = key_name(ch)
                if key == "resize":
                    self._resize()
                else:
                    self._submit(self.state.handle_key(key))
                self.redraw()
        finally:
            self._drain_late_results()
            self.state.shutdown()
