"""
Difficulty controller.

A small state machine keyed on the cumulative score. The level is
``score // points_per_level + 1``; every level gained produces exactly one
LevelChange, and asking again with the same score produces none.
"""

from dataclasses import dataclass
from typing import List

from models import DifficultyConfig
from bullseye.logging import get_logger

log = get_logger('difficulty')


@dataclass(frozen=True)
class LevelChange:
    """Settings that apply from a newly reached level on.

    Attributes:
        level: The level just reached
        speed: Target bounce speed in pixels per second
        move_interval: Seconds between target jumps
        size: Target side length
        obstacle_count: Obstacles to spawn, 0 for none
    """
    level: int
    speed: float
    move_interval: float
    size: float
    obstacle_count: int


class DifficultyController:
    """Tracks the level and derives speed, interval, size and obstacles.

    Examples:
        >>> from models import DifficultyConfig
        >>> controller = DifficultyController(DifficultyConfig(
        ...     points_per_level=50, speed_step=50.0, base_size=100.0,
        ...     shrink_per_level=5.0, min_size=40.0, obstacle_start_level=3))
        >>> controller.start(speed=150.0, move_interval=1.0)
        >>> [c.level for c in controller.update(50)]
        [2]
        >>> controller.update(50)
        []
    """

    def __init__(self, config: DifficultyConfig):
        self._config = config
        self._level = 1
        self._speed = 0.0
        self._move_interval = 1.0

    @property
    def level(self) -> int:
        return self._level

    def start(self, speed: float, move_interval: float) -> None:
        """Reset to level 1 with the variant's starting target settings."""
        self._level = 1
        self._speed = speed
        self._move_interval = move_interval

    def level_for(self, score: int) -> int:
        return score // self._config.points_per_level + 1

    def size_for(self, level: int) -> float:
        cfg = self._config
        return max(cfg.min_size, cfg.base_size - level * cfg.shrink_per_level)

    def obstacles_for(self, level: int) -> int:
        cfg = self._config
        if cfg.obstacle_start_level <= 0 or level < cfg.obstacle_start_level:
            return 0
        return min(cfg.obstacle_cap, level - 1)

    def ramp_speed(self, step: float) -> float:
        """Apply a time-based speed increase. Returns the new speed."""
        self._speed += step
        return self._speed

    def update(self, score: int) -> List[LevelChange]:
        """Advance the level for ``score``, one change per threshold crossed."""
        cfg = self._config
        changes = []
        target_level = self.level_for(score)
        while self._level < target_level:
            self._level += 1
            self._speed += cfg.speed_step
            self._move_interval = max(cfg.min_interval, self._move_interval - cfg.interval_step)
            change = LevelChange(
                level=self._level,
                speed=self._speed,
                move_interval=self._move_interval,
                size=self.size_for(self._level),
                obstacle_count=self.obstacles_for(self._level),
            )
            log.info("level %d: speed=%.1f interval=%.2f size=%.1f obstacles=%d",
                     change.level, change.speed, change.move_interval,
                     change.size, change.obstacle_count)
            changes.append(change)
        return changes
