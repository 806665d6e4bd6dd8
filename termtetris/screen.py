"""Curses front end: window layout and the main game loop."""

import curses
import sys
import time
from dataclasses import dataclass

from .board import DEFAULT_SHAPE, DEFAULT_START_COL, Board, FallingPiece
from .numbers import parse_bounded_int

DEFAULT_ROWS = 50
DEFAULT_COLS = 60
KEY_TIMEOUT_MS = 100
FRAME_DELAY = 0.005
_BACKGROUND_PAIR = 1
_BORDER_PAIR = 2


@dataclass(frozen=True)
class Layout:
    """Geometry of each window as (lines, columns, top, left)."""

    game: tuple
    level: tuple
    current: tuple
    next: tuple


def compute_layout(rows, cols, lines, columns):
    """Place the game window and its three side panels on a *lines* x *columns* screen."""
    panel_rows = rows // 5
    panel_cols = cols // 5
    return Layout(
        game=(rows, cols, 2, columns // 2 - rows // 2),
        level=(panel_rows, panel_cols, lines - panel_rows, 0),
        current=(panel_rows, panel_cols, 0, 0),
        next=(panel_rows, panel_cols, 0, columns - panel_cols),
    )


def parse_size(argv):
    """Return (rows, cols) from the arguments, defaulting to 50 by 60."""
    if not argv:
        return DEFAULT_ROWS, DEFAULT_COLS
    if len(argv) < 2:
        raise ValueError("expected both a row count and a column count")
    rows, cols = parse_bounded_int(argv[0]), parse_bounded_int(argv[1])
    if rows < 2 or cols < 2:
        raise ValueError(f"window size {rows}x{cols} is too small")
    return rows, cols


def _put(window, y, x, text):
    try:
        window.addstr(y, x, text)
    except curses.error:
        pass


def _boxed_window(geometry):
    window = curses.newwin(*geometry)
    window.clear()
    window.attron(curses.color_pair(_BORDER_PAIR))
    window.box(0, 0)
    window.attroff(curses.color_pair(_BORDER_PAIR))
    return window


def _draw(window, frame):
    for y, line in enumerate(frame):
        if y == 0:
            continue
        for x, char in enumerate(line):
            if x == 0:
                continue
            try:
                window.addch(y, x, char)
            except curses.error:
                pass


def _key_char(code):
    return chr(code) if 0 <= code < 256 else None


def run(stdscr, rows, cols):
    """Run the game loop on *stdscr* with a *rows* x *cols* game window."""
    curses.start_color()
    curses.noecho()
    curses.curs_set(0)
    curses.init_pair(_BACKGROUND_PAIR, curses.COLOR_BLACK, curses.COLOR_CYAN)
    curses.init_pair(_BORDER_PAIR, curses.COLOR_BLUE, curses.COLOR_BLUE)
    layout = compute_layout(rows, cols, curses.LINES, curses.COLS)
    game = _boxed_window(layout.game)
    stdscr.bkgd(" ", curses.color_pair(_BACKGROUND_PAIR))
    level = _boxed_window(layout.level)
    current = _boxed_window(layout.current)
    upcoming = _boxed_window(layout.next)

    board = Board(rows - 1, cols - 1)
    width = max(len(line) for line in DEFAULT_SHAPE)
    start_col = max(0, min(DEFAULT_START_COL, cols - 1 - width))
    piece = FallingPiece(board, DEFAULT_SHAPE, start_col)

    stdscr.clear()
    stdscr.timeout(KEY_TIMEOUT_MS)
    while True:
        stdscr.refresh()
        _put(level, 1, 1, "LEVEL")
        _put(level, 3, 4, "1")
        _put(current, 1, 1, "HOLD")
        _put(upcoming, 1, 1, "NEXT")
        key = _key_char(stdscr.getch())
        frame = piece.step(key)
        time.sleep(FRAME_DELAY)
        _draw(game, frame)
        for window in (level, game, current, upcoming):
            window.refresh()


def main(argv=None):
    """Start the game; *argv* holds the optional rows and columns."""
    args = sys.argv[1:] if argv is None else list(argv)
    rows, cols = parse_size(args)
    try:
        curses.wrapper(run, rows, cols)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())