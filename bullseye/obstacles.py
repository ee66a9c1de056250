"""
Obstacle placement.

Obstacles are static boxes scattered between the bow and the target. Each
spawn replaces the previous set.
"""

import random
from typing import List, Optional

from models import ArcheryConfig, ObstacleData, Rectangle


class ObstacleField:
    """Spawns obstacles inside the configured placement band."""

    def __init__(self, config: ArcheryConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng or random.Random()

    def spawn(self, count: int) -> List[ObstacleData]:
        """Create ``count`` randomly placed obstacles.

        The left edge is drawn from ``[min_x, width - right_margin]`` and the
        top edge from ``[top_margin, height - bottom_margin]``; both are then
        clamped so the whole box stays in the play area.
        """
        cfg = self._config.obstacles
        area = self._config.play_area
        max_left = max(0.0, area.width - cfg.width)
        max_top = max(0.0, area.height - cfg.height)

        x_low = min(cfg.min_x, max_left)
        x_high = min(max(x_low, area.width - cfg.right_margin), max_left)
        y_low = min(cfg.top_margin, max_top)
        y_high = min(max(y_low, area.height - cfg.bottom_margin), max_top)

        obstacles = []
        for index in range(max(0, count)):
            obstacles.append(ObstacleData(
                id=index,
                bounds=Rectangle(
                    x=self._rng.uniform(x_low, x_high),
                    y=self._rng.uniform(y_low, y_high),
                    width=cfg.width,
                    height=cfg.height,
                ),
            ))
        return obstacles

    def bounce(self, obstacle: ObstacleData) -> ObstacleData:
        """Start the squash animation of a struck obstacle."""
        return obstacle.model_copy(update={
            'bounce_remaining': self._config.obstacles.bounce_duration,
        })

    @staticmethod
    def settle(obstacles: List[ObstacleData], dt: float) -> List[ObstacleData]:
        """Run down bounce animations by ``dt`` seconds."""
        return [
            o.model_copy(update={'bounce_remaining': max(0.0, o.bounce_remaining - dt)})
            if o.bouncing else o
            for o in obstacles
        ]
