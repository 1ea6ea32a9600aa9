"""Game sessions: player state, moves, visibility and win detection.

A session goes through three phases:
- not started: the whole maze is shown so the player can study it
- in progress: moves are accepted and fog of war applies
- won: the player reached the exit; nothing changes any more
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .constants import FLASH_RADIUS, VISIBLE_RADIUS, Direction, Status, VisibilityMode
from .levels import level_config
from .maze import SeedLike, generate
from .models import Maze, MoveResult, Position, SessionStats, Settings
from .movement import can_enter, step_target
from .visibility import compute_view

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """All state tied to a single generated maze."""

    maze: Maze
    blind: bool = False
    radius: float = VISIBLE_RADIUS
    flash_radius: float = FLASH_RADIUS

    status: Status = "not_started"
    temp_mode: Optional[VisibilityMode] = None
    position: Position = field(init=False)
    stats: SessionStats = field(init=False, default_factory=SessionStats)

    def __post_init__(self) -> None:
        self.position = Position(*self.maze.start)

    @property
    def base_mode(self) -> VisibilityMode:
        return "blind" if self.blind else "normal"

    @property
    def mode(self) -> VisibilityMode:
        return self.temp_mode or self.base_mode

    @property
    def started(self) -> bool:
        return self.status != "not_started"

    @property
    def won(self) -> bool:
        return self.status == "won"

    def start(self) -> bool:
        if self.status != "not_started":
            return False
        self.status = "in_progress"
        logger.debug("session started at %s", self.position.as_tuple())
        return True

    def move(self, direction: Direction) -> MoveResult:
        """Try to step one cell; walls, the grid edge and idle sessions reject."""
        nx, ny = step_target(self.position.x, self.position.y, direction)
        # No movement until start(): the pre-game full-map view stays at the start cell.
        if self.status != "in_progress" or not can_enter(self.maze, nx, ny):
            return MoveResult(accepted=False, position=self.position.as_tuple(), won=self.won)

        self.position.x, self.position.y = nx, ny
        self.stats.steps += 1
        self.temp_mode = None

        if (nx, ny) == self.maze.exit:
            self.status = "won"
            self.stats.won = True
            logger.debug("exit reached in %d steps", self.stats.steps)

        return MoveResult(accepted=True, position=(nx, ny), won=self.won)

    attempt_move = move

    def activate_flash(self) -> bool:
        if self.status != "in_progress":
            return False
        self.temp_mode = "flash"
        self.stats.flash_count += 1
        return True

    def activate_god_eye(self) -> bool:
        if self.status != "in_progress":
            return False
        self.temp_mode = "god_eye"
        self.stats.god_eye_count += 1
        return True

    def get_view(self) -> tuple[str, ...]:
        return compute_view(
            self.maze,
            self.position.as_tuple(),
            self.mode,
            started=self.started,
            radius=self.radius,
            flash_radius=self.flash_radius,
        )

    compute_view = get_view

    def get_stats(self) -> SessionStats:
        return SessionStats(**self.stats.to_dict())


def create_session(
    size: int,
    algorithm: str = "backtracker",
    seed: SeedLike = None,
    *,
    blind: bool = False,
    radius: float = VISIBLE_RADIUS,
    flash_radius: float = FLASH_RADIUS,
) -> Session:
    """Generate a maze and wrap it in a fresh, not yet started session."""
    maze = generate(size, algorithm, seed)
    logger.debug(
        "new session: %dx%d %s seed=%s blind=%s", maze.size, maze.size, algorithm, maze.seed, blind
    )
    return Session(maze=maze, blind=blind, radius=radius, flash_radius=flash_radius)


def create_session_from_settings(settings: Settings) -> Session:
    return create_session(
        settings.size,
        settings.algorithm,
        settings.seed,
        blind=settings.blind,
        radius=settings.radius,
        flash_radius=settings.flash_radius,
    )


def create_level_session(level: int, seed: SeedLike = None) -> Session:
    cfg = level_config(level)
    return create_session(cfg.size, cfg.algorithm, seed, blind=cfg.blind)
