"""The game board: a grid of cells with their contents and symbols."""

from __future__ import annotations

from dataclasses import dataclass

from .common import (
    MIN_NUMBER_OF_COLS,
    MIN_NUMBER_OF_ROWS,
    ROWS_RESERVED,
    SYMBOL_FREE_CELL,
    BoardCode,
    ColorPair,
    GameError,
    ResCode,
)


@dataclass(frozen=True)
class Position:
    """A cell position: row y, column x."""

    y: int
    x: int


class BoardTooSmallError(GameError):
    """The terminal is too small to hold the board and message area."""

    def __init__(self) -> None:
        super().__init__(
            "Das Fenster ist zu klein: wir brauchen "
            f"{MIN_NUMBER_OF_COLS}x{MIN_NUMBER_OF_ROWS + ROWS_RESERVED}",
            ResCode.FAILED,
        )


class Board:
    """Board contents, with the symbol and colour shown in each cell."""

    def __init__(self, last_row: int, last_col: int) -> None:
        if last_row < 0 or last_col < 0:
            raise ValueError("board needs at least one row and one column")
        self.last_row = last_row
        self.last_col = last_col
        self.food_items = 0
        rows, cols = last_row + 1, last_col + 1
        self._codes = [[BoardCode.FREE_CELL] * cols for _ in range(rows)]
        self._symbols = [[SYMBOL_FREE_CELL] * cols for _ in range(rows)]
        self._colors = [[ColorPair.FREE_CELL] * cols for _ in range(rows)]

    @classmethod
    def for_screen(cls, lines: int, cols: int) -> Board:
        """Create a board filling a screen, leaving room for the message area."""
        if cols < MIN_NUMBER_OF_COLS or lines < MIN_NUMBER_OF_ROWS + ROWS_RESERVED:
            raise BoardTooSmallError()
        return cls(lines - ROWS_RESERVED - 1, cols - 1)

    def _check(self, y: int, x: int) -> None:
        if not self.in_bounds(Position(y, x)):
            raise IndexError(f"position y={y} x={x} is outside the board")

    def place_item(
        self, y: int, x: int, code: BoardCode, symbol: str, color: ColorPair
    ) -> None:
        """Put an item with its display symbol and colour into a cell."""
        self._check(y, x)
        self._codes[y][x] = code
        self._symbols[y][x] = symbol
        self._colors[y][x] = color

    def content_at(self, position: Position) -> BoardCode:
        """Return what occupies a cell; the unused marker (-1, -1) reads as free."""
        if position.y == -1 and position.x == -1:
            return BoardCode.FREE_CELL
        self._check(position.y, position.x)
        return self._codes[position.y][position.x]

    def symbol_at(self, y: int, x: int) -> str:
        """Return the symbol displayed in a cell."""
        self._check(y, x)
        return self._symbols[y][x]

    def in_bounds(self, position: Position) -> bool:
        """Tell whether a position lies on the board."""
        return 0 <= position.y <= self.last_row and 0 <= position.x <= self.last_col

    def decrement_food(self) -> None:
        """Count one food item as eaten."""
        self.food_items -= 1