# -*- coding: utf-8 -*-
"""Maze carving algorithms.

Every algorithm has the same shape: ``carve_*(size, rng)`` takes an odd grid
size and a seeded ``random.Random`` and returns a ``size x size`` grid of
WALL/PASSAGE characters with a solid outer border. Rooms are the cells with
odd coordinates; the cell between two rooms is opened to join them. None of
the algorithms recurse, so the largest grids stay well within the call-stack
limit.
"""
from __future__ import annotations

import random
from collections.abc import Callable

from .constants import DECOY_CHANCE, DECOY_MAX_DEPTH, PASSAGE, START_XY, WALL
from .util import neighbors4

Grid = list[list[str]]
Carver = Callable[[int, random.Random], Grid]


def _solid(size: int) -> Grid:
    return [[WALL] * size for _ in range(size)]


def _rooms_around(x: int, y: int, size: int) -> list[tuple[int, int]]:
    return [
        (nx, ny)
        for nx, ny in neighbors4(x, y, step=2)
        if 1 <= nx <= size - 2 and 1 <= ny <= size - 2
    ]


def _carve_between(grid: Grid, a: tuple[int, int], b: tuple[int, int]) -> None:
    (x1, y1), (x2, y2) = a, b
    grid[y1][x1] = PASSAGE
    grid[(y1 + y2) // 2][(x1 + x2) // 2] = PASSAGE
    grid[y2][x2] = PASSAGE


def carve_division(size: int, rng: random.Random) -> Grid:
    """Recursive division, driven by an explicit stack of open regions.

    Regions are inclusive bounds whose corners sit on rooms. A dividing wall
    goes on an even line across the longer axis and keeps a single gap on an
    odd cell, so passages stay aligned with the room lattice.
    """
    grid = _solid(size)
    for y in range(1, size - 1):
        for x in range(1, size - 1):
            grid[y][x] = PASSAGE

    stack = [(1, 1, size - 2, size - 2)]
    while stack:
        x0, y0, x1, y1 = stack.pop()
        width = x1 - x0 + 1
        height = y1 - y0 + 1
        if width < 3 or height < 3:
            continue

        if height != width:
            horizontal = height > width
        else:
            horizontal = rng.random() < 0.5

        if horizontal:
            wy = rng.randrange(y0 + 1, y1, 2)
            gap = rng.randrange(x0, x1 + 1, 2)
            for x in range(x0, x1 + 1):
                if x != gap:
                    grid[wy][x] = WALL
            stack.append((x0, y0, x1, wy - 1))
            stack.append((x0, wy + 1, x1, y1))
        else:
            wx = rng.randrange(x0 + 1, x1, 2)
            gap = rng.randrange(y0, y1 + 1, 2)
            for y in range(y0, y1 + 1):
                if y != gap:
                    grid[y][wx] = WALL
            stack.append((x0, y0, wx - 1, y1))
            stack.append((wx + 1, y0, x1, y1))

    return grid


def carve_backtracker(size: int, rng: random.Random) -> Grid:
    grid = _solid(size)
    sx, sy = START_XY
    grid[sy][sx] = PASSAGE
    stack = [(sx, sy)]

    while stack:
        cx, cy = stack[-1]
        neigh = [(nx, ny) for nx, ny in _rooms_around(cx, cy, size) if grid[ny][nx] == WALL]
        if neigh:
            nxt = rng.choice(neigh)
            _carve_between(grid, (cx, cy), nxt)
            stack.append(nxt)
        else:
            stack.pop()

    return grid


def carve_prim(size: int, rng: random.Random) -> Grid:
    """Frontier growth from the start room.

    Frontier entries pair a wall cell with the room beyond it. An entry is
    only carved while that room is still solid, which keeps the region a tree.
    """
    grid = _solid(size)
    sx, sy = START_XY
    grid[sy][sx] = PASSAGE

    def frontier_of(x: int, y: int) -> list[tuple[tuple[int, int], tuple[int, int]]]:
        return [
            (((x + nx) // 2, (y + ny) // 2), (nx, ny))
            for nx, ny in _rooms_around(x, y, size)
            if grid[ny][nx] == WALL
        ]

    frontier = frontier_of(sx, sy)
    while frontier:
        i = rng.randrange(len(frontier))
        frontier[i], frontier[-1] = frontier[-1], frontier[i]
        (wx, wy), (rx, ry) = frontier.pop()
        if grid[ry][rx] != WALL:
            continue
        grid[wy][wx] = PASSAGE
        grid[ry][rx] = PASSAGE
        frontier.extend(frontier_of(rx, ry))

    return grid


def carve_wilson(size: int, rng: random.Random) -> Grid:
    """Wilson's algorithm: uniform spanning tree via loop-erased random walks.

    The exit room seeds the visited set.
    """
    grid = _solid(size)
    ex, ey = size - 2, size - 2
    grid[ey][ex] = PASSAGE
    visited = {(ex, ey)}

    order = [(x, y) for y in range(1, size - 1, 2) for x in range(1, size - 1, 2)]
    rng.shuffle(order)

    for origin in order:
        if origin in visited:
            continue

        path = [origin]
        index = {origin: 0}
        cur = origin
        while cur not in visited:
            nxt = rng.choice(_rooms_around(cur[0], cur[1], size))
            if nxt in index:
                # loop: cut back to the earlier visit of nxt
                cut = index[nxt] + 1
                for cell in path[cut:]:
                    del index[cell]
                del path[cut:]
            else:
                index[nxt] = len(path)
                path.append(nxt)
            cur = path[-1]

        for a, b in zip(path, path[1:]):
            _carve_between(grid, a, b)
        visited.update(path)

    return grid


def _isolated(grid: Grid, x: int, y: int) -> bool:
    if grid[y][x] != WALL:
        return False
    return all(grid[ny][nx] == WALL for nx, ny in neighbors4(x, y))


def carve_decoy(size: int, rng: random.Random) -> Grid:
    """One depth-first solution path plus short dead-end branches.

    Only the rooms left on the DFS stack when it reaches the exit are carved.
    Branch rooms must be surrounded by walls before they are opened, so a
    branch never touches another corridor and cannot create a second route.
    """
    grid = _solid(size)
    start = START_XY
    goal = (size - 2, size - 2)

    seen = {start}
    stack = [start]
    while stack:
        cur = stack[-1]
        if cur == goal:
            break
        neigh = [n for n in _rooms_around(cur[0], cur[1], size) if n not in seen]
        if neigh:
            nxt = rng.choice(neigh)
            seen.add(nxt)
            stack.append(nxt)
        else:
            stack.pop()

    grid[start[1]][start[0]] = PASSAGE
    for a, b in zip(stack, stack[1:]):
        _carve_between(grid, a, b)

    for room in stack[:-1]:
        if rng.random() >= DECOY_CHANCE:
            continue
        depth = rng.randint(1, DECOY_MAX_DEPTH)
        cx, cy = room
        for _ in range(depth):
            options = [n for n in _rooms_around(cx, cy, size) if _isolated(grid, n[0], n[1])]
            if not options:
                break
            nxt = rng.choice(options)
            _carve_between(grid, (cx, cy), nxt)
            cx, cy = nxt

    return grid


ALGORITHMS: dict[str, Carver] = {
    "division": carve_division,
    "backtracker": carve_backtracker,
    "prim": carve_prim,
    "wilson": carve_wilson,
    "decoy": carve_decoy,
}

ALGORITHM_NAMES = tuple(ALGORITHMS)
