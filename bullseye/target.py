"""
Target mover.

Positions the target inside the play area, either by jumping to a random
spot (JUMP) or by gliding up and down and bouncing near the edges (BOUNCE).
Every method returns a new TargetData that lies fully inside the play area.
"""

import random
from typing import Optional

from models import ArcheryConfig, Point2D, TargetData, TargetMotion, clamp
from bullseye.logging import get_logger

log = get_logger('target')


class TargetMover:
    """Computes target positions for one variant.

    Args:
        config: Variant configuration (play area, target and difficulty sections)
        rng: Random source for jumps; pass a seeded Random in tests
    """

    def __init__(self, config: ArcheryConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng or random.Random()

    @property
    def motion(self) -> TargetMotion:
        return self._config.target.motion

    @property
    def _width(self) -> float:
        return float(self._config.play_area.width)

    @property
    def _height(self) -> float:
        return float(self._config.play_area.height)

    def initial(self) -> TargetData:
        """Target as it appears when a game starts."""
        cfg = self._config.target
        size = cfg.size
        if cfg.right_margin is not None:
            x = self._width - cfg.right_margin - size
        elif cfg.start_x is not None:
            x = cfg.start_x
        else:
            x = (self._width - size) / 2
        y = cfg.start_y if cfg.start_y is not None else (self._height - size) / 2

        target = TargetData(
            position=Point2D(x=x, y=y),
            size=size,
            direction=1,
            speed=cfg.speed if cfg.motion == TargetMotion.BOUNCE else 0.0,
            move_interval=cfg.move_interval,
        )
        return self.clamp(target)

    def clamp(self, target: TargetData) -> TargetData:
        """Pull the target box back inside the play area."""
        x = clamp(target.position.x, 0.0, max(0.0, self._width - target.size))
        y = clamp(target.position.y, 0.0, max(0.0, self._height - target.size))
        if x == target.position.x and y == target.position.y:
            return target
        return target.model_copy(update={'position': Point2D(x=x, y=y)})

    def jump(self, target: TargetData) -> TargetData:
        """Move the target to a uniformly random position.

        The left edge stays within ``[0, width - size - border]`` and the top
        edge within the upper part of the play area.
        """
        cfg = self._config.target
        max_x = max(0.0, self._width - target.size - cfg.jump_border)
        max_y = max(0.0, min(self._height * cfg.upper_fraction, self._height - target.size))
        position = Point2D(
            x=self._rng.uniform(0.0, max_x),
            y=self._rng.uniform(0.0, max_y),
        )
        log.trace("jump to %s", position)
        return target.model_copy(update={'position': position})

    def step(self, target: TargetData, dt: float) -> TargetData:
        """Glide vertically for ``dt`` seconds, bouncing near the edges.

        The direction flips to down at or above the top margin and to up at
        or below the bottom margin, before the move is applied.
        """
        margin = self._config.target.bounce_margin
        top = target.position.y
        max_top = max(0.0, self._height - target.size)

        direction = target.direction
        if top <= margin:
            direction = 1
        elif top >= max_top - margin:
            direction = -1

        new_top = clamp(top + target.speed * direction * dt, 0.0, max_top)
        return target.model_copy(update={
            'position': Point2D(x=target.position.x, y=new_top),
            'direction': direction,
        })

    def resize(self, target: TargetData, size: float) -> TargetData:
        """Change the target size, keeping it inside the play area."""
        return self.clamp(target.model_copy(update={'size': size}))
