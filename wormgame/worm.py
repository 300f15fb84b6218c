"""The worm: a ring buffer of element positions moving over a board."""

from __future__ import annotations

from .board import Board, Position
from .common import (
    MIN_NUMBER_OF_COLS,
    MIN_NUMBER_OF_ROWS,
    SYMBOL_FREE_CELL,
    SYMBOL_WORM_HEAD_ELEMENT,
    SYMBOL_WORM_INNER_ELEMENT,
    SYMBOL_WORM_TAIL_ELEMENT,
    BoardCode,
    Bonus,
    ColorPair,
    GameState,
    Heading,
)

UNUSED_POS_ELEM = -1  # coordinate marking an unused element
WORM_LENGTH = MIN_NUMBER_OF_ROWS * MIN_NUMBER_OF_COLS  # maximal worm length
WORM_INITIAL_LENGTH = 4  # initial length of the user's worm

_UNUSED = Position(UNUSED_POS_ELEM, UNUSED_POS_ELEM)

_FOOD_BONUS = {
    BoardCode.FOOD_1: Bonus.BONUS_1,
    BoardCode.FOOD_2: Bonus.BONUS_2,
    BoardCode.FOOD_3: Bonus.BONUS_3,
}


class Worm:
    """A worm whose elements are kept in a ring buffer of positions."""

    def __init__(
        self,
        max_length: int,
        initial_length: int,
        head: Position,
        heading: Heading,
        color: ColorPair,
    ) -> None:
        if max_length < 1:
            raise ValueError("a worm needs a maximal length of at least 1")
        if not 1 <= initial_length <= max_length:
            raise ValueError("initial length must lie between 1 and the maximal length")
        self.max_length = max_length
        self._last_index = initial_length - 1
        self._head_index = 0
        self._positions = [_UNUSED] * max_length
        self._positions[0] = head
        self.color = color
        self.heading = heading
        self.dy, self.dx = heading.delta()

    def set_heading(self, heading: Heading) -> None:
        """Change the direction of travel."""
        self.heading = heading
        self.dy, self.dx = heading.delta()

    def grow(self, bonus: int) -> None:
        """Let the worm grow by a number of elements, up to its maximal length."""
        self._last_index = min(self._last_index + int(bonus), self.max_length - 1)

    def head(self) -> Position:
        """Return the position of the worm's head."""
        return self._positions[self._head_index]

    def length(self) -> int:
        """Return the current length of the worm."""
        return self._last_index + 1

    @property
    def _tail_index(self) -> int:
        return (self._head_index + 1) % (self._last_index + 1)

    def show(self, board: Board) -> None:
        """Draw all used elements of the worm onto the board."""
        tail_index = self._tail_index
        for index, pos in enumerate(self._positions[: self._last_index + 1]):
            if pos == _UNUSED:
                break
            if index == self._head_index:
                symbol = SYMBOL_WORM_HEAD_ELEMENT
            elif index == tail_index:
                symbol = SYMBOL_WORM_TAIL_ELEMENT
            else:
                symbol = SYMBOL_WORM_INNER_ELEMENT
            board.place_item(pos.y, pos.x, BoardCode.USED_BY_WORM, symbol, self.color)

    def clean_tail(self, board: Board) -> None:
        """Free the board cell held by the worm's tail element."""
        tail = self._positions[self._tail_index]
        if board.content_at(tail) == BoardCode.USED_BY_WORM:
            board.place_item(
                tail.y, tail.x, BoardCode.FREE_CELL, SYMBOL_FREE_CELL, ColorPair.FREE_CELL
            )

    def move(self, board: Board) -> GameState:
        """Move the worm one step and return the resulting game state."""
        current = self.head()
        new_head = Position(current.y + self.dy, current.x + self.dx)
        if not board.in_bounds(new_head):
            return GameState.OUT_OF_BOUNDS

        content = board.content_at(new_head)
        if content == BoardCode.BARRIER:
            return GameState.CRASH
        if content == BoardCode.USED_BY_WORM:
            return GameState.CROSSING
        if content in _FOOD_BONUS:
            self.grow(_FOOD_BONUS[content])
            board.decrement_food()

        self._head_index = (
            0 if self._head_index + 1 > self._last_index else self._head_index + 1
        )
        self._positions[self._head_index] = new_head
        return GameState.ONGOING