import curses

import pytest

from wormgame.board import Position
from wormgame.common import (
    Bonus,
    ColorPair,
    GameState,
    Heading,
    ResCode,
)
from wormgame.game import handle_key, outcome_message, play_game, play_level
from wormgame.options import GameOptions, usage_text
from wormgame.screen import Screen
from wormgame.worm import Worm


class FakeWindow:
    def __init__(self, lines=30, cols=70, keys=()):
        self.size = (lines, cols)
        self.keys = list(keys)
        self.writes = []
        self.nodelay_calls = []

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def nodelay(self, flag):
        self.nodelay_calls.append(flag)

    def refresh(self):
        pass


def texts(window):
    return [text for _, _, text in window.writes]


def make_worm():
    return Worm(100, 4, Position(5, 5), Heading.RIGHT, ColorPair.USER_WORM)


def write_level(tmp_path, last_line):
    lines = [""] * 25 + [last_line]
    path = tmp_path / "level.txt"
    path.write_text("\n".join(lines) + "\n")
    return path


FAST = GameOptions(nap_time=0)


def test_outcome_messages():
    assert outcome_message(GameState.ONGOING, 0) == (
        "Sie haben diese Runde erfolgreich beendet !!!",
        ResCode.OK,
    )
    assert outcome_message(GameState.ONGOING, 3) == (
        "Interner Fehler!",
        ResCode.INTERNAL_ERROR,
    )
    assert outcome_message(GameState.QUIT, 5) == (
        "Sie haben die aktuelle Runde abgebrochen!",
        ResCode.OK,
    )
    assert outcome_message(GameState.CRASH, 5)[0] == (
        "Sie haben das Spiel verloren, weil Sie in die Barriere gefahren sind"
    )
    assert outcome_message(GameState.OUT_OF_BOUNDS, 5)[0] == (
        "Sie haben das Spiel verloren,  weil Sie das Spielfeld verlassen haben"
    )
    assert outcome_message(GameState.CROSSING, 5)[0] == (
        "Sie haben das Spiel verloren, weil Sie einen Wurm gekreuzt haben"
    )


def test_handle_key_quit():
    screen = Screen(FakeWindow())
    assert handle_key(make_worm(), ord("q"), screen) == GameState.QUIT


@pytest.mark.parametrize(
    "key, heading",
    [
        (curses.KEY_UP, Heading.UP),
        (curses.KEY_DOWN, Heading.DOWN),
        (curses.KEY_LEFT, Heading.LEFT),
        (curses.KEY_RIGHT, Heading.RIGHT),
    ],
)
def test_handle_key_arrows(key, heading):
    worm = make_worm()
    worm.set_heading(Heading.UP if heading != Heading.UP else Heading.DOWN)
    assert handle_key(worm, key, Screen(FakeWindow())) == GameState.ONGOING
    assert worm.heading == heading
    assert (worm.dy, worm.dx) == heading.delta()


def test_handle_key_grow():
    worm = make_worm()
    before = worm.length()
    handle_key(worm, ord("g"), Screen(FakeWindow()))
    assert worm.length() == before + Bonus.BONUS_3


def test_handle_key_single_step_toggles_blocking():
    window = FakeWindow()
    screen = Screen(window)
    handle_key(make_worm(), ord("s"), screen)
    handle_key(make_worm(), ord(" "), screen)
    assert window.nodelay_calls == [False, True]


def test_handle_key_no_input_changes_nothing():
    worm = make_worm()
    assert handle_key(worm, -1, Screen(FakeWindow())) == GameState.ONGOING
    assert worm.heading == Heading.RIGHT
    assert worm.length() == 4


def test_play_level_quit(tmp_path):
    path = write_level(tmp_path, "")
    window = FakeWindow(keys=[ord("q")])
    assert play_level(Screen(window), FAST, path) == ResCode.OK
    assert "Sie haben die aktuelle Runde abgebrochen!" in texts(window)


def test_play_level_out_of_bounds(tmp_path):
    path = write_level(tmp_path, "")
    window = FakeWindow()
    assert play_level(Screen(window), FAST, path) == ResCode.OK
    assert (
        "Sie haben das Spiel verloren,  weil Sie das Spielfeld verlassen haben"
        in texts(window)
    )


def test_play_level_crash_into_barrier(tmp_path):
    path = write_level(tmp_path, "     #")
    window = FakeWindow()
    assert play_level(Screen(window), FAST, path) == ResCode.OK
    assert (
        "Sie haben das Spiel verloren, weil Sie in die Barriere gefahren sind"
        in texts(window)
    )


def test_play_level_all_food_eaten(tmp_path):
    path = write_level(tmp_path, " 2222222222")
    window = FakeWindow()
    assert play_level(Screen(window), FAST, path) == ResCode.OK
    assert "Sie haben diese Runde erfolgreich beendet !!!" in texts(window)


def test_play_level_missing_file(tmp_path):
    path = tmp_path / "missing.level"
    window = FakeWindow()
    assert play_level(Screen(window), FAST, path) == ResCode.FAILED
    assert f"Kann Datei {path} nicht oeffnen" in texts(window)


def test_play_level_screen_too_small(tmp_path):
    path = write_level(tmp_path, "")
    window = FakeWindow(lines=20, cols=70)
    assert play_level(Screen(window), FAST, path) == ResCode.FAILED
    assert "Das Fenster ist zu klein: wir brauchen 70x30" in texts(window)


def test_play_game_wrong_option():
    window = FakeWindow()
    assert play_game(Screen(window), ["-x"]) == ResCode.WRONG_OPTION
    assert usage_text() in texts(window)


def test_play_game_with_level_file(tmp_path):
    path = write_level(tmp_path, "  #")
    window = FakeWindow()
    assert play_game(Screen(window), ["-n", "0", str(path)]) == ResCode.OK
    assert (
        "Sie haben das Spiel verloren, weil Sie in die Barriere gefahren sind"
        in texts(window)
    )


def test_play_game_single_step_starts_blocking(tmp_path):
    path = write_level(tmp_path, "")
    window = FakeWindow(keys=[ord("q")])
    assert play_game(Screen(window), ["-s", "-n", "0", str(path)]) == ResCode.OK
    assert window.nodelay_calls[0] is False


def test_play_game_default_level_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = FakeWindow()
    assert play_game(Screen(window), ["-n", "0"]) == ResCode.FAILED
    assert "Kann Datei basic.level.1 nicht oeffnen" in texts(window)