# -*- coding: utf-8 -*-
"""Grid movement: direction offsets and move legality."""
from __future__ import annotations

from .constants import Direction
from .models import Maze

DIRECTIONS: dict[str, tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


def step_target(x: int, y: int, direction: Direction) -> tuple[int, int]:
    try:
        dx, dy = DIRECTIONS[direction]
    except KeyError:
        raise ValueError(
            f"unknown direction {direction!r} (expected one of: {', '.join(DIRECTIONS)})"
        ) from None
    return x + dx, y + dy


def can_enter(maze: Maze, x: int, y: int) -> bool:
    """Whether a player may stand on (x, y). Outside the grid counts as wall."""
    return not maze.is_wall(x, y)
