"""Terminal display of the worm game: board, status area and dialogs."""

from __future__ import annotations

import curses
import time
from collections.abc import Iterator
from contextlib import contextmanager

from .board import Board, Position
from .common import (
    ROWS_RESERVED,
    SYMBOL_BARRIER,
    BoardCode,
    ColorPair,
)

# Foreground and background colour of each colour pair.
_PAIR_COLORS = {
    ColorPair.USER_WORM: (curses.COLOR_BLUE, curses.COLOR_BLACK),
    ColorPair.FREE_CELL: (curses.COLOR_BLACK, curses.COLOR_BLACK),
    ColorPair.FOOD_1: (curses.COLOR_YELLOW, curses.COLOR_BLACK),
    ColorPair.FOOD_2: (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
    ColorPair.FOOD_3: (curses.COLOR_CYAN, curses.COLOR_BLACK),
    ColorPair.BARRIER: (curses.COLOR_RED, curses.COLOR_BLACK),
}

# Colour pair used to draw each kind of cell content.
_CODE_COLORS = {
    BoardCode.FREE_CELL: ColorPair.FREE_CELL,
    BoardCode.USED_BY_WORM: ColorPair.USER_WORM,
    BoardCode.FOOD_1: ColorPair.FOOD_1,
    BoardCode.FOOD_2: ColorPair.FOOD_2,
    BoardCode.FOOD_3: ColorPair.FOOD_3,
    BoardCode.BARRIER: ColorPair.BARRIER,
}


def status_lines(board: Board, worm) -> list[str]:
    """Return the three lines of the status area for a board and a worm."""
    head = worm.head()
    return [
        f"Anzahl verbleibender Futterbrocken: {board.food_items:2d} ",
        f"Wurm ist an Position: y={head.y:3d} x={head.x:3d}",
        f"Laenge des Wurms: {worm.length():3d}",
    ]


class Screen:
    """Drawing and keyboard input on a curses window."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self._attrs: dict[ColorPair, int] = {}

    @property
    def lines(self) -> int:
        """Number of lines of the window."""
        return self.stdscr.getmaxyx()[0]

    @property
    def cols(self) -> int:
        """Number of columns of the window."""
        return self.stdscr.getmaxyx()[1]

    def _attr(self, color: ColorPair) -> int:
        return self._attrs.get(color, 0)

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        # Writing into the bottom-right cell makes curses report an error
        # after the text has been written; that is harmless here.
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _message_rows(self) -> tuple[int, int, int]:
        base = self.lines - ROWS_RESERVED
        return base + 1, base + 2, base + 3

    def init_colors(self) -> None:
        """Define the colour pairs of the game."""
        curses.start_color()
        for pair, (fg, bg) in _PAIR_COLORS.items():
            curses.init_pair(int(pair), fg, bg)
        self._attrs = {pair: curses.color_pair(int(pair)) for pair in _PAIR_COLORS}

    def draw_board(self, board: Board) -> None:
        """Draw every cell of the board in its colour."""
        for y in range(board.last_row + 1):
            for x in range(board.last_col + 1):
                color = _CODE_COLORS[board.content_at(Position(y, x))]
                self._put(y, x, board.symbol_at(y, x), self._attr(color))

    def draw_separator(self, row: int, width: int) -> None:
        """Draw the barrier line that separates the message area."""
        self._put(row, 0, SYMBOL_BARRIER * width, self._attr(ColorPair.BARRIER))

    def clear_line(self, row: int) -> None:
        """Blank an entire line of the window."""
        self._put(row, 0, " " * self.cols)

    def show_status(self, board: Board, worm) -> None:
        """Show food left, head position and worm length in the message area."""
        for row, text in zip(self._message_rows(), status_lines(board, worm)):
            self._put(row, 1, text)

    def show_dialog(self, prompt1: str, prompt2: str | None = None) -> int:
        """Show up to two prompts, wait for a key and return its code."""
        if prompt1 is None:
            raise ValueError("a dialog needs a first prompt")
        rows = self._message_rows()
        for row in rows:
            self.clear_line(row)
        self._put(rows[1], 1, prompt1)
        if prompt2 is not None:
            self._put(rows[2], 1, prompt2)
        self.refresh()

        self.set_blocking(True)
        key = self.read_key()
        self.set_blocking(False)

        for row in rows:
            self.clear_line(row)
        self.refresh()
        return key

    def read_key(self) -> int:
        """Return the code of the next key, or -1 if none is waiting."""
        return self.stdscr.getch()

    def set_blocking(self, blocking: bool) -> None:
        """Make reading a key wait for input (single step) or return at once."""
        self.stdscr.nodelay(not blocking)

    def refresh(self) -> None:
        """Bring the terminal up to date."""
        self.stdscr.refresh()

    def nap(self, milliseconds: int) -> None:
        """Sleep for a number of milliseconds."""
        time.sleep(max(milliseconds, 0) / 1000)


@contextmanager
def curses_session() -> Iterator[Screen]:
    """Set up the terminal for the game and restore it afterwards."""
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        curses.nonl()
        stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.nodelay(True)
        yield Screen(stdscr)
    finally:
        stdscr.standend()
        stdscr.refresh()
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        curses.endwin()