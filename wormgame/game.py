"""Running a level of the worm game and the program's entry point."""

from __future__ import annotations

import curses
import sys
from collections.abc import Sequence
from os import PathLike

from .board import Board, Position
from .common import (
    MIN_NUMBER_OF_COLS,
    MIN_NUMBER_OF_ROWS,
    ROWS_RESERVED,
    Bonus,
    ColorPair,
    GameError,
    GameState,
    Heading,
    ResCode,
)
from .levels import load_level_file
from .options import GameOptions, UsageError, parse_options
from .screen import Screen, curses_session
from .worm import WORM_INITIAL_LENGTH, WORM_LENGTH, Worm

DEFAULT_LEVEL_FILE = "basic.level.1"
PRESS_KEY = "Bitte Taste druecken"
PRESS_A_KEY = "Bitte eine Taste druecken"

_KEY_HEADINGS = {
    curses.KEY_UP: Heading.UP,
    curses.KEY_DOWN: Heading.DOWN,
    curses.KEY_LEFT: Heading.LEFT,
    curses.KEY_RIGHT: Heading.RIGHT,
}

_OUTCOMES = {
    GameState.QUIT: "Sie haben die aktuelle Runde abgebrochen!",
    GameState.CRASH: "Sie haben das Spiel verloren,"
    " weil Sie in die Barriere gefahren sind",
    GameState.OUT_OF_BOUNDS: "Sie haben das Spiel verloren, "
    " weil Sie das Spielfeld verlassen haben",
    GameState.CROSSING: "Sie haben das Spiel verloren,"
    " weil Sie einen Wurm gekreuzt haben",
}


def handle_key(worm: Worm, key: int, screen: Screen) -> GameState:
    """React to a key code; return QUIT if the user wants to stop."""
    if key <= 0:
        return GameState.ONGOING
    if key in _KEY_HEADINGS:
        worm.set_heading(_KEY_HEADINGS[key])
    elif key == ord("q"):
        return GameState.QUIT
    elif key == ord("s"):
        screen.set_blocking(True)
    elif key == ord(" "):
        screen.set_blocking(False)
    elif key == ord("g"):
        worm.grow(Bonus.BONUS_3)
    return GameState.ONGOING


def outcome_message(state: GameState, food_items: int) -> tuple[str, ResCode]:
    """Return the closing message of a level and its result code."""
    if state == GameState.ONGOING:
        if food_items == 0:
            return "Sie haben diese Runde erfolgreich beendet !!!", ResCode.OK
        return "Interner Fehler!", ResCode.INTERNAL_ERROR
    if state in _OUTCOMES:
        return _OUTCOMES[state], ResCode.OK
    return "Interner Fehler!", ResCode.INTERNAL_ERROR


def _redraw(screen: Screen, board: Board) -> None:
    screen.draw_board(board)
    screen.draw_separator(board.last_row + 1, board.last_col + 1)


def play_level(
    screen: Screen, options: GameOptions, level_file: str | PathLike[str]
) -> ResCode:
    """Play one level read from a file and return its result code."""
    try:
        board = Board.for_screen(screen.lines, screen.cols)
        load_level_file(board, level_file)
    except GameError as exc:
        screen.show_dialog(exc.message, PRESS_A_KEY)
        return exc.code

    worm = Worm(
        WORM_LENGTH,
        WORM_INITIAL_LENGTH,
        Position(board.last_row, 0),
        Heading.RIGHT,
        ColorPair.USER_WORM,
    )
    worm.show(board)
    _redraw(screen, board)
    screen.refresh()

    state = GameState.ONGOING
    while True:
        state = handle_key(worm, screen.read_key(), screen)
        if state == GameState.QUIT:
            break
        worm.clean_tail(board)
        state = worm.move(board)
        if state != GameState.ONGOING:
            break
        worm.show(board)
        _redraw(screen, board)
        screen.show_status(board, worm)
        screen.nap(options.nap_time)
        screen.refresh()
        if board.food_items == 0:
            break

    message, code = outcome_message(state, board.food_items)
    screen.show_dialog(message, PRESS_KEY)
    return code


def play_game(screen: Screen, argv: Sequence[str] | None = None) -> ResCode:
    """Read the command line options and play the chosen level."""
    try:
        options = parse_options(argv)
    except UsageError as exc:
        screen.show_dialog(exc.message, PRESS_A_KEY)
        return exc.code
    if options.start_single_step:
        screen.set_blocking(True)
    level_file = options.start_level_filename or DEFAULT_LEVEL_FILE
    return play_level(screen, options, level_file)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    too_small = False
    with curses_session() as screen:
        screen.init_colors()
        if (
            screen.lines < ROWS_RESERVED + MIN_NUMBER_OF_ROWS
            or screen.cols < MIN_NUMBER_OF_COLS
        ):
            too_small = True
            code = ResCode.FAILED
        else:
            code = play_game(screen, argv)
    if too_small:
        print(
            "Das Fenster ist zu klein: wir brauchen mindestens "
            f"{MIN_NUMBER_OF_COLS}x{MIN_NUMBER_OF_ROWS + ROWS_RESERVED}"
        )
    return int(code)


if __name__ == "__main__":
    sys.exit(main())