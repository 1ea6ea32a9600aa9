# -*- coding: utf-8 -*-
"""Fog-of-war views derived from a maze and a player position.

A view is a tuple of strings with the same shape as the maze. Cells the
player cannot see are HIDDEN, the player's own cell is always PLAYER.
The stored maze is never touched.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from .constants import CELL_CODES, FLASH_RADIUS, HIDDEN, PLAYER, VISIBLE_RADIUS
from .models import Maze


def visible_cells(
    maze: Maze, px: int, py: int, radius: float
) -> set[tuple[int, int]]:
    """Cells within Euclidean ``radius`` of (px, py), bounds-clipped."""
    r = int(math.floor(radius))
    cells = set()
    for y in range(max(0, py - r), min(maze.size, py + r + 1)):
        for x in range(max(0, px - r), min(maze.width, px + r + 1)):
            if math.hypot(x - px, y - py) <= radius:
                cells.add((x, y))
    return cells


def _overlay_player(rows: list[str], px: int, py: int) -> tuple[str, ...]:
    row = rows[py]
    rows[py] = row[:px] + PLAYER + row[px + 1 :]
    return tuple(rows)


def compute_view(
    maze: Maze,
    position: tuple[int, int],
    mode: str,
    *,
    started: bool = True,
    radius: float = VISIBLE_RADIUS,
    flash_radius: float = FLASH_RADIUS,
) -> tuple[str, ...]:
    """Render the player's view of ``maze``.

    ``mode`` is the effective visibility mode: ``normal`` and ``flash`` clip
    to their radius, ``blind`` shows only the player, ``god_eye`` and any
    not-yet-started game show the whole maze.
    """
    px, py = position

    if not started or mode == "god_eye":
        return _overlay_player(list(maze.rows), px, py)

    limit: Optional[float]
    if mode == "normal":
        limit = radius
    elif mode == "flash":
        limit = flash_radius
    elif mode == "blind":
        limit = None
    else:
        raise ValueError(f"unknown visibility mode {mode!r}")

    seen = visible_cells(maze, px, py, limit) if limit is not None else set()
    rows = [
        "".join(
            maze.rows[y][x] if (x, y) in seen else HIDDEN
            for x in range(maze.width)
        )
        for y in range(maze.size)
    ]
    return _overlay_player(rows, px, py)


def view_codes(view: Sequence[str]) -> list[list[int]]:
    """Integer cell codes for the web front-end."""
    return [[CELL_CODES[ch] for ch in row] for row in view]


def view_to_text(view: Sequence[str]) -> str:
    return "\n".join(view)
