# -*- coding: utf-8 -*-
"""Default level table: 15 levels in three tiers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import Algorithm
from .errors import MazeConfigError

Tier = Literal["easy", "medium", "hard"]


@dataclass(frozen=True)
class LevelConfig:
    level: int
    tier: Tier
    size: int
    algorithm: Algorithm
    blind: bool = False


LEVELS: dict[int, LevelConfig] = {
    cfg.level: cfg
    for cfg in (
        LevelConfig(1, "easy", 11, "division"),
        LevelConfig(2, "easy", 13, "division"),
        LevelConfig(3, "easy", 15, "backtracker"),
        LevelConfig(4, "easy", 17, "prim"),
        LevelConfig(5, "easy", 19, "decoy"),
        LevelConfig(6, "medium", 21, "division"),
        LevelConfig(7, "medium", 23, "backtracker"),
        LevelConfig(8, "medium", 25, "prim"),
        LevelConfig(9, "medium", 27, "wilson"),
        LevelConfig(10, "medium", 29, "decoy"),
        LevelConfig(11, "hard", 31, "backtracker", blind=True),
        LevelConfig(12, "hard", 35, "prim", blind=True),
        LevelConfig(13, "hard", 39, "wilson", blind=True),
        LevelConfig(14, "hard", 45, "decoy", blind=True),
        LevelConfig(15, "hard", 51, "wilson", blind=True),
    )
}


def level_config(level: int) -> LevelConfig:
    try:
        return LEVELS[level]
    except KeyError:
        raise MazeConfigError(f"unknown level {level!r} (expected 1-{len(LEVELS)})") from None


def levels_in_tier(tier: Tier) -> list[LevelConfig]:
    return [cfg for cfg in LEVELS.values() if cfg.tier == tier]
