"""A terminal worm game: steer the worm, eat the food, avoid the barriers."""

__version__ = "0.9.0"
__all__ = ["board", "common", "game", "levels", "options", "screen", "worm"]