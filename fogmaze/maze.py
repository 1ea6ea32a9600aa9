"""Maze generation and grid helpers."""

from __future__ import annotations

import logging
import random
import zlib
from collections import deque
from collections.abc import Sequence
from typing import Optional, Union

from .algorithms import ALGORITHM_NAMES, ALGORITHMS, Grid
from .constants import EXIT, MAX_SIZE, MIN_SIZE, PASSAGE, START_XY, WALL
from .errors import MazeConfigError, MazeGenerationError
from .models import Maze
from .util import in_bounds, neighbors4

logger = logging.getLogger(__name__)

SeedLike = Union[int, str, None]


def normalize_size(size: int) -> int:
    """Validate ``size`` and round it up to the next odd value >= MIN_SIZE.

    Sizes outside ``1..MAX_SIZE`` are rejected; everything else is rounded
    (``20 -> 21``, ``4 -> 11``).
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise MazeConfigError(f"maze size must be an integer, got {size!r}")
    if size < 1 or size > MAX_SIZE:
        raise MazeConfigError(f"maze size must be between 1 and {MAX_SIZE}, got {size}")
    size = max(size, MIN_SIZE)
    if size % 2 == 0:
        size += 1
    return size


def parse_seed(seed: SeedLike) -> Optional[int]:
    """Turn a human-entered seed into an integer.

    Decimal strings parse as numbers, any other text hashes to a stable
    32-bit value so the same phrase always yields the same maze.
    """
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise MazeConfigError(f"invalid seed {seed!r}")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        text = seed.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            return zlib.crc32(text.encode("utf-8"))
    raise MazeConfigError(f"invalid seed {seed!r}")


def is_wall(grid: Sequence[Sequence[str]], x: int, y: int) -> bool:
    if not in_bounds(grid, x, y):
        return True
    return grid[y][x] == WALL


def reachable(grid: Sequence[Sequence[str]], start: tuple[int, int]) -> set[tuple[int, int]]:
    """All non-wall cells connected to ``start`` by orthogonal steps."""
    if is_wall(grid, *start):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nx, ny in neighbors4(x, y):
            if (nx, ny) not in seen and not is_wall(grid, nx, ny):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def find_path_cells(
    grid: Sequence[Sequence[str]], start: tuple[int, int], goal: tuple[int, int]
) -> list[tuple[int, int]]:
    if not in_bounds(grid, *start) or not in_bounds(grid, *goal):
        return [start]

    q = deque([start])
    prev: dict[tuple[int, int], Optional[tuple[int, int]]] = {start: None}

    while q:
        x, y = q.popleft()
        if (x, y) == goal:
            break
        for nx, ny in neighbors4(x, y):
            if (nx, ny) not in prev and not is_wall(grid, nx, ny):
                prev[(nx, ny)] = (x, y)
                q.append((nx, ny))

    if goal not in prev:
        return [start]

    path: list[tuple[int, int]] = []
    cur: Optional[tuple[int, int]] = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def repair_connectivity(grid: Grid, start: tuple[int, int], goal: tuple[int, int]) -> int:
    """Open an L-shaped corridor to ``goal`` if it cannot be reached.

    The corridor starts at the reachable cell closest to the goal (Manhattan
    distance, first in row-major order on ties), runs along its row to the
    goal column and then down or up that column. Returns the number of cells
    that were opened.
    """
    seen = reachable(grid, start)
    if goal in seen:
        return 0
    if not seen:
        grid[start[1]][start[0]] = PASSAGE
        seen = {start}

    gx, gy = goal
    fx, fy = min(seen, key=lambda c: (abs(c[0] - gx) + abs(c[1] - gy), c[1], c[0]))

    corridor = []
    step = 1 if gx >= fx else -1
    corridor.extend((x, fy) for x in range(fx, gx + step, step))
    step = 1 if gy >= fy else -1
    corridor.extend((gx, y) for y in range(fy, gy + step, step))

    opened = 0
    for x, y in corridor:
        if grid[y][x] == WALL:
            grid[y][x] = PASSAGE
            opened += 1
    logger.warning("repaired maze connectivity: opened %d cells from %s to %s", opened, (fx, fy), goal)
    return opened


def generate(size: int, algorithm: str = "backtracker", seed: SeedLike = None) -> Maze:
    """Generate a maze of (normalized) ``size`` with the given algorithm.

    A missing seed is replaced with a fresh random one, recorded on the
    returned maze so the same layout can be shared and regenerated.
    """
    size = normalize_size(size)
    try:
        carve = ALGORITHMS[algorithm]
    except KeyError:
        known = ", ".join(ALGORITHM_NAMES)
        raise MazeConfigError(f"unknown algorithm {algorithm!r} (expected one of: {known})") from None

    seed = parse_seed(seed)
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
    rng = random.Random(seed)
    logger.debug("generating %dx%d maze with %s (seed=%d)", size, size, algorithm, seed)

    grid = carve(size, rng)
    start = START_XY
    goal = (size - 2, size - 2)
    grid[start[1]][start[0]] = PASSAGE
    grid[goal[1]][goal[0]] = EXIT

    repair_connectivity(grid, start, goal)
    if goal not in reachable(grid, start):
        raise MazeGenerationError(
            f"exit {goal} unreachable after repair ({algorithm}, size={size}, seed={seed})"
        )

    return Maze(
        rows=tuple("".join(row) for row in grid),
        start=start,
        exit=goal,
        algorithm=algorithm,
        seed=seed,
    )
