# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the fog-of-war maze."""
from __future__ import annotations

from typing import Literal

# ----- Cell values -----
WALL = "#"
PASSAGE = " "
EXIT = "E"

# Only ever part of a derived view, never of a stored maze.
PLAYER = "@"
HIDDEN = "?"

# Integer codes used by the web front-end.
CELL_CODES = {
    PASSAGE: 0,
    WALL: 1,
    EXIT: 2,
    PLAYER: 3,
    HIDDEN: -1,
}

# ----- Maze sizes -----
MIN_SIZE = 11       # smallest odd size >= 10
MAX_SIZE = 101
DEFAULT_SIZE = 21

START_XY = (1, 1)

# Decoy branches
DECOY_MAX_DEPTH = 5
DECOY_CHANCE = 0.5

# ----- Visibility -----
VISIBLE_RADIUS = 4.0
FLASH_RADIUS = 5.0

Cell = Literal["#", " ", "E", "@", "?"]
Algorithm = Literal["division", "backtracker", "prim", "wilson", "decoy"]
Direction = Literal["up", "down", "left", "right"]
VisibilityMode = Literal["normal", "blind", "flash", "god_eye"]
Status = Literal["not_started", "in_progress", "won"]
