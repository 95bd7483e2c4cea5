# ~/Apps/pqview/grid_pane.py
import curses


class GridPane:
    """Table cursor and viewport over the rows currently held in memory.

    The cursor indexes the materialized rows only; the row window decides
    when those rows change.
    """

    PAIR_SELECTED = 1
    PAIR_HEADER = 2
    ELLIPSIS = "…"

    def __init__(self, columns=None, rows=None, height=10):
        self.columns = list(columns or [])
        self.rows = list(rows or [])
        self.height = max(1, height)
        self.curr_row = 0
        self.row_offset = 0

    @classmethod
    def init_colors(cls):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(cls.PAIR_SELECTED, 229, 57)
            curses.init_pair(cls.PAIR_HEADER, -1, -1)
        except (curses.error, ValueError):
            try:
                curses.init_pair(cls.PAIR_SELECTED, curses.COLOR_YELLOW, curses.COLOR_MAGENTA)
            except curses.error:
                pass

    # ---------- state ----------
    def set_rows(self, rows):
        self.rows = list(rows)
        self._clamp()

    def set_cursor(self, idx):
        self.curr_row = idx
        self._clamp()

    def _clamp(self):
        last = max(0, len(self.rows) - 1)
        self.curr_row = max(0, min(self.curr_row, last))
        if self.curr_row < self.row_offset:
            self.row_offset = self.curr_row
        elif self.curr_row >= self.row_offset + self.height:
            self.row_offset = self.curr_row - self.height + 1
        max_offset = max(0, len(self.rows) - self.height)
        self.row_offset = max(0, min(self.row_offset, max_offset))

    # ---------- navigation ----------
    def move_up(self, n=1):
        self.set_cursor(self.curr_row - n)

    def move_down(self, n=1):
        self.set_cursor(self.curr_row + n)

    def page_up(self):
        self.move_up(self.height)

    def page_down(self):
        self.move_down(self.height)

    def goto_top(self):
        self.set_cursor(0)

    def goto_bottom(self):
        self.set_cursor(len(self.rows) - 1)

    def handle_key(self, key) -> bool:
        if key in ("up", "k"):
            self.move_up()
        elif key in ("down", "j"):
            self.move_down()
        elif key in ("pgup", "b"):
            self.page_up()
        elif key in ("pgdown", "f", " "):
            self.page_down()
        elif key in ("home", "g"):
            self.goto_top()
        elif key in ("end", "G"):
            self.goto_bottom()
        else:
            return False
        return True

    # ---------- rendering ----------
    @classmethod
    def fit(cls, text, width):
        if width <= 0:
            return ""
        text = str(text).replace("\n", " ")
        if len(text) > width:
            text = text[: width - 1] + cls.ELLIPSIS
        return text.ljust(width)

    def visible_rows(self):
        return list(range(self.row_offset, min(len(self.rows), self.row_offset + self.height)))

    def header_line(self):
        return " ".join(self.fit(c.name, c.width) for c in self.columns)

    def row_line(self, idx):
        row = self.rows[idx]
        cells = []
        for i, col in enumerate(self.columns):
            cells.append(self.fit(row[i] if i < len(row) else "", col.width))
        return " ".join(cells)

    def draw(self, win, top=1, left=0):
        h, w = win.getmaxyx()
        avail = max(0, w - left - 1)
        try:
            win.addnstr(top, left, self.header_line(), avail, curses.A_BOLD | curses.A_UNDERLINE)
        except curses.error:
            pass
        y = top + 1
        for idx in self.visible_rows():
            if y >= h:
                break
            attr = curses.A_NORMAL
            if idx == self.curr_row:
                attr = curses.color_pair(self.PAIR_SELECTED) | curses.A_BOLD
            try:
                win.addnstr(y, left, self.row_line(idx), avail, attr)
            except curses.error:
                pass
            y += 1
        return y
