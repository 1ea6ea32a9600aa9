"""Command line tool for generating and checking mazes."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .algorithms import ALGORITHM_NAMES
from .constants import DEFAULT_SIZE
from .errors import MazeConfigError, MazeGenerationError
from .levels import level_config
from .maze import generate, reachable

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fogmaze", description="Generate fog-of-war mazes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print a maze as text")
    gen.add_argument("--size", type=int, default=None)
    gen.add_argument("--level", type=int, default=None, help="Take size and algorithm from the level table")
    gen.add_argument("--algorithm", choices=ALGORITHM_NAMES, default=None)
    gen.add_argument("--seed", type=str, default=None, help="Number or phrase; reuse it to share a maze")

    check = sub.add_parser("check", help="Verify the exit is reachable over many seeds")
    check.add_argument("--size", type=int, default=DEFAULT_SIZE)
    check.add_argument("--algorithm", choices=ALGORITHM_NAMES, default="backtracker")
    check.add_argument("--count", type=int, default=100)
    return parser.parse_args(argv)


def _cmd_generate(args: argparse.Namespace) -> int:
    size = args.size if args.size is not None else DEFAULT_SIZE
    algorithm = args.algorithm or "backtracker"
    if args.level is not None:
        cfg = level_config(args.level)
        size = args.size if args.size is not None else cfg.size
        algorithm = args.algorithm or cfg.algorithm

    maze = generate(size, algorithm, args.seed)
    print(f"seed={maze.seed} size={maze.size} algorithm={maze.algorithm}")
    print(maze.to_text())
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    failures = []
    for seed in range(args.count):
        try:
            maze = generate(args.size, args.algorithm, seed)
        except MazeGenerationError as exc:
            logger.error("seed %d: %s", seed, exc)
            failures.append(seed)
            continue
        if maze.exit not in reachable(maze.rows, maze.start):
            failures.append(seed)
    if failures:
        print(f"{len(failures)}/{args.count} mazes without a path: seeds {failures}")
        return 1
    print(f"ok: {args.count} {args.algorithm} mazes of size {args.size}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "generate":
            return _cmd_generate(args)
        return _cmd_check(args)
    except MazeConfigError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
