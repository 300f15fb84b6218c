[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "wormgame"
version = "0.9.0"
description = "A terminal worm (snake) game with file-based levels"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "snake", "worm", "curses", "terminal", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
worm = "wormgame.game:main"

[tool.setuptools]
packages = ["wormgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
