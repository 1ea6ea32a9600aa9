# -*- coding: utf-8 -*-
"""Core data models (maze, player position, configuration, results)."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .constants import (
    DEFAULT_SIZE,
    EXIT,
    FLASH_RADIUS,
    START_XY,
    VISIBLE_RADIUS,
    WALL,
    Algorithm,
    Cell,
)


@dataclass(frozen=True)
class Maze:
    """An immutable grid, one string per row, indexed ``rows[y][x]``.

    Generated mazes are square; hand-built ones only need equal-length rows.
    """

    rows: tuple[str, ...]
    start: tuple[int, int]
    exit: tuple[int, int]
    algorithm: Optional[str] = None
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.rows) and 0 <= x < self.width

    def cell(self, x: int, y: int) -> Cell:
        return self.rows[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.rows[y][x] == WALL

    def to_text(self) -> str:
        return "\n".join(self.rows)

    @classmethod
    def from_rows(
        cls, rows: Iterable[str], start: tuple[int, int] = START_XY
    ) -> "Maze":
        """Build a maze from hand-written rows.

        Exactly one exit cell is required and the start must be an open cell.
        Used by tests and by callers that load fixed layouts.
        """
        grid = tuple(rows)
        if not grid or any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("maze rows must be non-empty and of equal length")

        exits = [
            (x, y) for y, row in enumerate(grid) for x, ch in enumerate(row) if ch == EXIT
        ]
        if len(exits) != 1:
            raise ValueError(f"maze must contain exactly one exit, found {len(exits)}")

        sx, sy = start
        if not (0 <= sy < len(grid) and 0 <= sx < len(grid[0])) or grid[sy][sx] == WALL:
            raise ValueError(f"start {start} is not an open cell")

        return cls(rows=grid, start=(sx, sy), exit=exits[0])


@dataclass
class Position:
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass
class Settings:
    size: int = DEFAULT_SIZE
    algorithm: Algorithm = "backtracker"
    seed: Optional[int] = None
    blind: bool = False
    radius: float = VISIBLE_RADIUS
    flash_radius: float = FLASH_RADIUS


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    position: tuple[int, int]
    won: bool


@dataclass
class SessionStats:
    steps: int = 0
    flash_count: int = 0
    god_eye_count: int = 0
    won: bool = False

    def to_dict(self) -> dict:
        return {
            "steps": self.steps,
            "flash_count": self.flash_count,
            "god_eye_count": self.god_eye_count,
            "won": self.won,
        }
