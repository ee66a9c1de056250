"""
Bow controls.

SLIDE bows move left/right along the bottom edge in percent steps and shoot
straight up. AIM bows sit at the left edge, move up/down in pixel steps and
shoot along the angle towards the last pointer position.
"""

import math

from models import (
    ArcheryConfig,
    BowControl,
    BowData,
    Direction,
    Point2D,
    Vector2D,
    clamp,
)


class Bow:
    """Pure bow geometry for one variant; every method returns new data."""

    def __init__(self, config: ArcheryConfig):
        self._config = config
        self._low, self._high = config.bow_limits()

    @property
    def control(self) -> BowControl:
        return self._config.bow.control

    def initial(self) -> BowData:
        cfg = self._config.bow
        start = clamp(cfg.start, self._low, self._high)
        if cfg.control == BowControl.SLIDE:
            return self._place_slide(BowData(
                control=cfg.control,
                slide_percent=start,
                width=cfg.width,
                height=cfg.height,
            ))
        return BowData(
            control=cfg.control,
            x=cfg.x,
            y=start,
            width=cfg.width,
            height=cfg.height,
            angle=0.0,
        )

    def _place_slide(self, bow: BowData) -> BowData:
        """Derive the bow box from its percent position."""
        area = self._config.play_area
        center_x = area.width * bow.slide_percent / 100.0
        return bow.model_copy(update={
            'x': center_x - bow.width / 2,
            'y': area.height - bow.height,
        })

    def move(self, bow: BowData, direction: Direction) -> BowData:
        """Step the bow one notch, clamped to its travel limits.

        Directions that do not apply to this control are ignored.
        """
        step = self._config.bow.step
        if bow.control == BowControl.SLIDE:
            if direction == Direction.LEFT:
                percent = max(self._low, bow.slide_percent - step)
            elif direction == Direction.RIGHT:
                percent = min(self._high, bow.slide_percent + step)
            else:
                return bow
            return self._place_slide(bow.model_copy(update={'slide_percent': percent}))

        if direction == Direction.UP:
            y = max(self._low, bow.y - step)
        elif direction == Direction.DOWN:
            y = min(self._high, bow.y + step)
        else:
            return bow
        return bow.model_copy(update={'y': y})

    def aim_at(self, bow: BowData, point: Point2D) -> BowData:
        """Rotate an AIM bow towards a screen point. SLIDE bows ignore this."""
        if bow.control != BowControl.AIM:
            return bow
        center = bow.center
        angle = math.atan2(point.y - center.y, point.x - center.x)
        return bow.model_copy(update={'angle': angle})

    def arrow_rest(self, bow: BowData) -> Point2D:
        """Where the arrow tip sits while the arrow is idle."""
        if bow.control == BowControl.SLIDE:
            area = self._config.play_area
            center_x = area.width * bow.slide_percent / 100.0
            tail_y = area.height - self._config.bow.arrow_offset
            return Point2D(x=center_x, y=tail_y - self._config.arrow.length)
        return bow.center

    def launch_velocity(self, bow: BowData) -> Vector2D:
        """Initial arrow velocity in pixels per second."""
        speed = self._config.arrow.speed
        if bow.control == BowControl.SLIDE:
            return Vector2D(x=0.0, y=-speed)
        return Vector2D(x=math.cos(bow.angle) * speed, y=math.sin(bow.angle) * speed)
