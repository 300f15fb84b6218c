"""Filling a board with the contents of a level."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from .board import Board, Position
from .common import (
    MIN_NUMBER_OF_COLS,
    SYMBOL_BARRIER,
    SYMBOL_FOOD_1,
    SYMBOL_FOOD_2,
    SYMBOL_FOOD_3,
    SYMBOL_FREE_CELL,
    BoardCode,
    ColorPair,
    GameError,
    ResCode,
)

# Number of food items a level is considered to hold.
FOOD_ITEMS_PER_LEVEL = 10

# Symbols understood in a level description; everything else is ignored.
_LEVEL_ITEMS: dict[str, tuple[BoardCode, ColorPair]] = {
    SYMBOL_BARRIER: (BoardCode.BARRIER, ColorPair.BARRIER),
    SYMBOL_FOOD_1: (BoardCode.FOOD_1, ColorPair.FOOD_1),
    SYMBOL_FOOD_2: (BoardCode.FOOD_2, ColorPair.FOOD_2),
    SYMBOL_FOOD_3: (BoardCode.FOOD_3, ColorPair.FOOD_3),
}

# Fixed food placements of the built-in levels: (y, x, symbol).
_BORDERED_FOOD = [
    (3, 3, SYMBOL_FOOD_1),
    (15, 27, SYMBOL_FOOD_1),
    (11, 25, SYMBOL_FOOD_2),
    (11, 39, SYMBOL_FOOD_2),
    (12, 11, SYMBOL_FOOD_2),
    (14, 51, SYMBOL_FOOD_2),
    (20, 30, SYMBOL_FOOD_3),
    (14, 7, SYMBOL_FOOD_3),
    (4, 60, SYMBOL_FOOD_3),
    (9, 30, SYMBOL_FOOD_3),
]

_BARRIER_FOOD = [
    (4, 2, SYMBOL_FOOD_1),
    (15, 27, SYMBOL_FOOD_1),
    (11, 25, SYMBOL_FOOD_2),
    (11, 62, SYMBOL_FOOD_2),
    (12, 12, SYMBOL_FOOD_2),
    (14, MIN_NUMBER_OF_COLS // 2, SYMBOL_FOOD_2),
    (20, 40, SYMBOL_FOOD_3),
    (14, 8, SYMBOL_FOOD_3),
    (4, MIN_NUMBER_OF_COLS // 3, SYMBOL_FOOD_3),
    (9, 67, SYMBOL_FOOD_3),
]


class LevelFileError(GameError):
    """A level description could not be opened or read."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ResCode.FAILED)


def _place_symbol(board: Board, y: int, x: int, symbol: str) -> None:
    code, color = _LEVEL_ITEMS[symbol]
    board.place_item(y, x, code, symbol, color)


def _place_barriers(board: Board, x: int, rows: range) -> None:
    for y in rows:
        if board.in_bounds(Position(y, x)):
            _place_symbol(board, y, x, SYMBOL_BARRIER)


def clear_board(board: Board) -> None:
    """Mark every cell of the board as free."""
    for y in range(board.last_row + 1):
        for x in range(board.last_col + 1):
            board.place_item(
                y, x, BoardCode.FREE_CELL, SYMBOL_FREE_CELL, ColorPair.FREE_CELL
            )


def load_level(board: Board, lines: Iterable[str]) -> None:
    """Fill the board from the lines of a level description.

    At most one line per board row and one character per board column are
    used; symbols other than barriers and food are ignored.
    """
    clear_board(board)
    board.food_items = FOOD_ITEMS_PER_LEVEL
    width = board.last_col + 1
    rows = zip(range(board.last_row + 1), lines)
    for y, line in rows:
        for x, symbol in enumerate(line.rstrip("\n")[:width]):
            if symbol in _LEVEL_ITEMS:
                _place_symbol(board, y, x, symbol)


def load_level_file(board: Board, filename: str | PathLike[str]) -> None:
    """Fill the board from a level description file."""
    try:
        handle = open(filename, encoding="latin-1")
    except OSError as exc:
        raise LevelFileError(f"Kann Datei {filename} nicht oeffnen") from exc
    with handle:
        lines_read = 0

        def _lines():
            nonlocal lines_read
            for line in handle:
                lines_read += 1
                yield line

        try:
            load_level(board, _lines())
        except OSError as exc:
            raise LevelFileError(
                f"Fehler beim Lesen von Zeile {lines_read + 1} aus Datei {filename}"
            ) from exc


def barrier_level(board: Board) -> None:
    """Set up the built-in level with two barrier walls and ten food items."""
    clear_board(board)
    _place_barriers(board, MIN_NUMBER_OF_COLS, range(3, 14))
    _place_barriers(board, MIN_NUMBER_OF_COLS // 4, range(9, 22))
    for y, x, symbol in _BARRIER_FOOD:
        _place_symbol(board, y, x, symbol)
    board.food_items = FOOD_ITEMS_PER_LEVEL


def bordered_level(board: Board) -> None:
    """Set up the built-in level walled off at its rightmost column."""
    clear_board(board)
    _place_barriers(board, board.last_col, range(board.last_row + 1))
    _place_barriers(board, MIN_NUMBER_OF_COLS // 2, range(3, 14))
    _place_barriers(board, MIN_NUMBER_OF_COLS // 3, range(9, 22))
    for y, x, symbol in _BORDERED_FOOD:
        _place_symbol(board, y, x, symbol)
    board.food_items = FOOD_ITEMS_PER_LEVEL