"""Command line options of the worm game."""

from __future__ import annotations

import getopt
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .common import NAP_TIME, GameError, ResCode

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GameOptions:
    """Settings taken from the command line."""

    nap_time: int = NAP_TIME  # milliseconds to sleep per step
    start_single_step: bool = False  # start in single step mode
    start_level_filename: str | None = None


def usage_text() -> str:
    """Return the usage line shown for wrong options."""
    return "Aufruf: worm [-h] [-n ms] [-s] [ Dateiname ] "


class UsageError(GameError):
    """The command line could not be understood."""

    def __init__(self) -> None:
        super().__init__(usage_text(), ResCode.WRONG_OPTION)


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way; no number reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_options(argv: Sequence[str] | None = None) -> GameOptions:
    """Parse command line arguments (without the program name)."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        opts, rest = getopt.gnu_getopt(list(argv), "n:s")
    except getopt.GetoptError as exc:
        raise UsageError() from exc

    options = GameOptions()
    for flag, value in opts:
        if flag == "-n":
            options.nap_time = _to_int(value)
        elif flag == "-s":
            options.start_single_step = True

    if len(rest) > 1:
        raise UsageError()
    if rest:
        options.start_level_filename = rest[0]
    return options