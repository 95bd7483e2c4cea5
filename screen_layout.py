import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: main view, status bar (1 line)
        self.status_h = 1
        self.main_h = max(1, self.H - self.status_h)

        self.main_win = curses.newwin(self.main_h, self.W, 0, 0)

        self.status_win = curses.newwin(self.status_h, self.W, self.main_h, 0)
        # do not let status bar steal cursor
        self.status_win.leaveok(True)
