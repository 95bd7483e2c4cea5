import curses

_NAMED = {
    10: "enter",
    13: "enter",
    27: "esc",
    127: "backspace",
    8: "backspace",
    1: "ctrl+a",
    3: "ctrl+c",
    4: "ctrl+d",
    5: "ctrl+e",
    21: "ctrl+u",
    23: "ctrl+w",
    curses.KEY_ENTER: "enter",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_PPAGE: "pgup",
    curses.KEY_NPAGE: "pgdown",
    curses.KEY_RESIZE: "resize",
}

QUIT_KEYS = ("ctrl+d", "ctrl+c")


def key_name(ch):
    """Translate a curses key code into the name the state machine understands."""
    if ch is None or ch < 0:
        return None
    if ch in _NAMED:
        return _NAMED[ch]
    if 32 <= ch <= 126:
        return chr(ch)
    return None
