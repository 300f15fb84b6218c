# wormgame

A small terminal game in the spirit of Snake. You steer a worm across a
board, eat food to grow, and lose if you hit a barrier, leave the board or
cross your own body. The level is won once the food counter reaches zero.

## Installation

```
pip install .
```

The game runs in a terminal through curses, so it needs a platform where
Python's `curses` module is available. The window must be at least 70
columns wide and 30 lines high. The board fills the whole window except the
bottom four lines, which hold a separator line and the status area.

## Playing

```
worm [-n ms] [-s] [levelfile]
```

The same can be started with `python -m wormgame.game`.

- `-n ms` sets the pause between two steps in milliseconds (default 100).
- `-s` starts in single-step mode, where each key press advances one step.
- Any other option, such as `-h`, or more than one file name shows the
  usage line and ends the game.
- `levelfile` is a text file that describes the level. If you leave it
  out, `basic.level.1` in the current directory is used.

Keys while playing:

| Key          | Action                                      |
|--------------|---------------------------------------------|
| arrow keys   | change the worm's heading                   |
| `s`          | switch to single-step mode                  |
| space        | leave single-step mode                      |
| `g`          | let the worm grow by 6 (for trying things out) |
| `q`          | give up the current level                   |

The worm starts in the bottom-left corner of the board heading right, four
elements long. Food `2`, `4` and `6` makes it grow by 2, 4 and 6 elements.
When the level ends, a message explains why and waits for a key.

The exit status is 0 for a finished level (won, lost or given up), 1 when
the window is too small or the level file cannot be read, 2 for wrong
command line options and 3 for an internal error.

## Level files

Every line of a level file is one row of the board, and every character is
one column. These characters are understood:

| Character | Meaning        |
|-----------|----------------|
| `#`       | barrier        |
| `2`       | food, bonus 2  |
| `4`       | food, bonus 4  |
| `6`       | food, bonus 6  |

Every other character leaves the cell free. Lines longer than the board are
cut off, and lines past the last board row are ignored. The food counter is
always set to ten, whatever the file holds, so a level file should contain
exactly ten pieces of food.

## Using the modules

The game model can be used without a terminal:

```python
from wormgame.board import Board, Position
from wormgame.common import ColorPair, Heading
from wormgame.levels import load_level
from wormgame.worm import Worm

board = Board(last_row=25, last_col=69)
load_level(board, ["", "   2", "#####"])

worm = Worm(max_length=26 * 70, initial_length=4,
            head=Position(y=25, x=0), heading=Heading.RIGHT,
            color=ColorPair.USER_WORM)
worm.show(board)
worm.clean_tail(board)
state = worm.move(board)
print(state, worm.head(), worm.length())
```

- `wormgame.common` holds the enumerations (`ResCode`, `GameState`,
  `ColorPair`, `BoardCode`, `Heading`, `Bonus`), the constants and
  `GameError`.
- `wormgame.board` has `Board` and `Position`; `Board.for_screen(lines, cols)`
  raises `BoardTooSmallError` for a window that is too small.
- `wormgame.levels` has `load_level`, `load_level_file` (raising
  `LevelFileError`), `clear_board` and two built-in levels, `barrier_level`
  and `bordered_level`.
- `wormgame.options` has `parse_options`, returning `GameOptions` or raising
  `UsageError`.
- `wormgame.worm` has `Worm`, whose `move` returns the new `GameState`.
- `wormgame.screen` has the curses `Screen`, `curses_session` and
  `status_lines`.
- `wormgame.game` has `play_level`, `play_game` and `main`.

## Limits

The command plays a single level per run and always reads it from a file;
the built-in levels are only reachable from Python. Resizing the terminal
while playing is not handled.