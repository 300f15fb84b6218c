"""Shared enumerations, constants and errors of the worm game."""

from __future__ import annotations

import enum

# Dimensions and timing
NAP_TIME = 100  # milliseconds to sleep between display updates
ROWS_RESERVED = 4  # status area lines plus one separator line
MIN_NUMBER_OF_ROWS = 26  # rows guaranteed for the board
MIN_NUMBER_OF_COLS = 70  # columns guaranteed for the board

# Symbols shown on the display
SYMBOL_FREE_CELL = " "
SYMBOL_BARRIER = "#"
SYMBOL_FOOD_1 = "2"
SYMBOL_FOOD_2 = "4"
SYMBOL_FOOD_3 = "6"
SYMBOL_WORM_HEAD_ELEMENT = "0"
SYMBOL_WORM_INNER_ELEMENT = "o"
SYMBOL_WORM_TAIL_ELEMENT = "`"


class ResCode(enum.IntEnum):
    """Result codes; also used as the program's exit status."""

    OK = 0
    FAILED = 1
    WRONG_OPTION = 2
    INTERNAL_ERROR = 3


class GameState(enum.Enum):
    """State of a running level."""

    ONGOING = enum.auto()
    CRASH = enum.auto()  # crashed into a barrier
    OUT_OF_BOUNDS = enum.auto()  # left the board
    CROSSING = enum.auto()  # head crossed a worm element
    QUIT = enum.auto()  # the user quit


class ColorPair(enum.IntEnum):
    """Curses colour pair numbers."""

    USER_WORM = 1
    FREE_CELL = 2
    FOOD_1 = 3
    FOOD_2 = 4
    FOOD_3 = 5
    BARRIER = 6


class BoardCode(enum.Enum):
    """What occupies a cell of the board."""

    FREE_CELL = enum.auto()
    USED_BY_WORM = enum.auto()
    FOOD_1 = enum.auto()
    FOOD_2 = enum.auto()
    FOOD_3 = enum.auto()
    BARRIER = enum.auto()


_DELTAS = {
    "UP": (-1, 0),
    "DOWN": (1, 0),
    "LEFT": (0, -1),
    "RIGHT": (0, 1),
}


class Heading(enum.Enum):
    """Direction the worm travels in."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()

    def delta(self) -> tuple[int, int]:
        """Return the (dy, dx) step for this heading."""
        return _DELTAS[self.name]


class Bonus(enum.IntEnum):
    """Number of elements the worm grows by when eating food."""

    BONUS_1 = 2
    BONUS_2 = 4
    BONUS_3 = 6


class GameError(Exception):
    """An error that ends the game with a result code."""

    def __init__(self, message: str, code: ResCode = ResCode.FAILED) -> None:
        super().__init__(message)
        self.message = message
        self.code = code