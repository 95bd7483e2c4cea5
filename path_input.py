import curses


class PathInput:
    """Single-line editor for a file path."""

    def __init__(self, placeholder="Path to parquet file", char_limit=256, width=80):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width

    # ---------- state helpers ----------
    def reset(self):
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def get_buffer(self):
        return self.buffer

    def set_buffer(self, text):
        self.buffer = (text or "")[: self.char_limit]
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def value(self):
        return self.buffer.strip()

    # ---------- word helpers ----------
    @staticmethod
    def _is_word_char(ch):
        return ch.isalnum() or ch in "_-."

    def _word_boundary_left(self):
        i = self.cursor
        # separators first (spaces, slashes), then the word itself
        while i > 0 and not self._is_word_char(self.buffer[i - 1]):
            i -= 1
        while i > 0 and self._is_word_char(self.buffer[i - 1]):
            i -= 1
        return i

    # ---------- input handling ----------
    def handle_key(self, key):
        """Apply one named key. Returns True when the buffer or cursor changed."""
        if key == "ctrl+w":
            start = self._word_boundary_left()
            if start < self.cursor:
                self.buffer = self.buffer[:start] + self.buffer[self.cursor :]
                self.cursor = start
            return True

        if key == "ctrl+u":
            if self.cursor > 0:
                self.buffer = self.buffer[self.cursor :]
                self.cursor = 0
            return True

        if key == "backspace":
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return True

        if key == "delete":
            if self.cursor < len(self.buffer):
                self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
            return True

        if key == "left":
            self.cursor = max(0, self.cursor - 1)
            return True

        if key == "right":
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return True

        if key in ("home", "ctrl+a"):
            self.cursor = 0
            return True

        if key in ("end", "ctrl+e"):
            self.cursor = len(self.buffer)
            return True

        if isinstance(key, str) and len(key) == 1 and key.isprintable():
            if len(self.buffer) >= self.char_limit:
                return False
            self.buffer = self.buffer[: self.cursor] + key + self.buffer[self.cursor :]
            self.cursor += 1
            return True

        return False

    # ---------- rendering ----------
    def visible_text(self, text_w=None):
        text_w = max(1, text_w or self.width)
        # keep cursor visible
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w
        return self.buffer[self.hscroll : self.hscroll + text_w]

    def draw(self, win, y, x):
        h, w = win.getmaxyx()
        prompt = "> "
        text_w = max(1, min(self.width, w - x - len(prompt) - 1))
        try:
            win.addnstr(y, x, prompt, len(prompt))
            if self.buffer:
                win.addnstr(y, x + len(prompt), self.visible_text(text_w), text_w)
            else:
                win.addnstr(y, x + len(prompt), self.placeholder, text_w, curses.A_DIM)
        except curses.error:
            pass
        cx = x + len(prompt) + (self.cursor - self.hscroll)
        try:
            win.move(y, max(0, min(cx, w - 1)))
        except curses.error:
            pass
