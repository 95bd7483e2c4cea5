import curses

import pytest

from keys import key_name


@pytest.mark.parametrize(
    "ch, expected",
    [
        (10, "enter"),
        (13, "enter"),
        (curses.KEY_ENTER, "enter"),
        (curses.KEY_UP, "up"),
        (curses.KEY_DOWN, "down"),
        (27, "esc"),
        (4, "ctrl+d"),
        (3, "ctrl+c"),
        (127, "backspace"),
        (ord("q"), "q"),
        (ord("G"), "G"),
        (ord(" "), " "),
        (-1, None),
        (200, None),
    ],
)
def test_key_name(ch, expected):
    assert key_name(ch) == expected
