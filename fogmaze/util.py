# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

from collections.abc import Iterator, Sequence


def in_bounds(grid: Sequence[Sequence[str]], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def neighbors4(x: int, y: int, step: int = 1) -> Iterator[tuple[int, int]]:
    for dx, dy in ((step, 0), (-step, 0), (0, step), (0, -step)):
        yield x + dx, y + dy
