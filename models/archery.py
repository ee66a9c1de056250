"""
Archery entity models.

These models hold the state of the target, the bow, the arrow and the
obstacles. They are immutable; the core replaces them with updated copies
on every change.
"""

import math
from typing import FrozenSet

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict

from .enums import BowControl
from .primitives import Point2D, Vector2D, Rectangle


class TargetData(BaseModel):
    """Immutable target state.

    Attributes:
        position: Top-left corner of the target box
        size: Side length of the (square) target box, must be positive
        direction: Vertical travel direction for bouncing, +1 down or -1 up
        speed: Bounce speed in pixels per second
        move_interval: Seconds between random jumps

    Examples:
        >>> target = TargetData(position=Point2D(x=10.0, y=20.0), size=50.0)
        >>> target.get_bounds().right
        60.0
    """
    position: Point2D
    size: float
    direction: int = 1
    speed: float = Field(default=0.0, ge=0.0)
    move_interval: float = Field(default=1.0, gt=0.0)

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f'Size must be positive, got {v}')
        return v

    @field_validator('direction')
    @classmethod
    def validate_direction(cls, v: int) -> int:
        if v not in (-1, 1):
            raise ValueError(f'Direction must be -1 or 1, got {v}')
        return v

    def get_bounds(self) -> Rectangle:
        """Bounding box used for collision detection."""
        return Rectangle(
            x=self.position.x,
            y=self.position.y,
            width=self.size,
            height=self.size,
        )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"TargetData(pos={self.position}, size={self.size:.1f}, speed={self.speed:.1f})"


class ArrowData(BaseModel):
    """Immutable arrow state.

    The arrow is tracked by its tip. While idle it rests at the bow with a
    zero velocity and is hidden.

    Attributes:
        flying: True while the arrow is in flight (and visible)
        tip: Position of the arrow tip
        velocity: Velocity in pixels per second (zero when idle)
        width: Shaft thickness in pixels
        length: Shaft length in pixels
        hit_obstacles: Obstacle ids already hit by the current shot
    """
    flying: bool = False
    tip: Point2D
    velocity: Vector2D = Vector2D(x=0.0, y=0.0)
    width: float = Field(default=6.0, gt=0.0)
    length: float = Field(default=40.0, gt=0.0)
    hit_obstacles: FrozenSet[int] = frozenset()

    @computed_field
    @property
    def visible(self) -> bool:
        """The arrow is only drawn while it flies."""
        return self.flying

    def heading(self) -> Vector2D:
        """Unit vector of travel; straight up while the arrow is at rest."""
        vx, vy = self.velocity.x, self.velocity.y
        norm = math.hypot(vx, vy)
        if norm == 0:
            return Vector2D(x=0.0, y=-1.0)
        return Vector2D(x=vx / norm, y=vy / norm)

    def tail(self) -> Point2D:
        """Position of the arrow's back end."""
        heading = self.heading()
        return self.tip.offset(-heading.x * self.length, -heading.y * self.length)

    def get_bounds(self) -> Rectangle:
        """Axis-aligned box around the whole shaft.

        Examples:
            >>> arrow = ArrowData(tip=Point2D(x=100.0, y=50.0), width=6.0, length=40.0)
            >>> box = arrow.get_bounds()
            >>> (box.x, box.y, box.width, box.height)
            (97.0, 50.0, 6.0, 40.0)
        """
        tail = self.tail()
        half = self.width / 2
        left = min(self.tip.x, tail.x) - half
        top = min(self.tip.y, tail.y) - half
        right = max(self.tip.x, tail.x) + half
        bottom = max(self.tip.y, tail.y) + half
        # A perfectly vertical or horizontal shaft has no extent along its
        # own axis beyond the length, so only pad across it.
        heading = self.heading()
        if heading.x == 0:
            top, bottom = top + half, bottom - half
        elif heading.y == 0:
            left, right = left + half, right - half
        return Rectangle(x=left, y=top, width=right - left, height=bottom - top)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        state = "flying" if self.flying else "idle"
        return f"ArrowData({state}, tip={self.tip}, vel={self.velocity})"


class BowData(BaseModel):
    """Immutable bow state.

    Attributes:
        control: SLIDE or AIM
        slide_percent: Horizontal position as percent of play-area width (SLIDE)
        x: Left edge of the bow box (AIM)
        y: Top edge of the bow box (AIM)
        width: Bow box width
        height: Bow box height
        angle: Aim angle in radians, 0 = pointing right (AIM)
    """
    control: BowControl
    slide_percent: float = 50.0
    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=60.0, gt=0.0)
    height: float = Field(default=140.0, gt=0.0)
    angle: float = 0.0

    @computed_field
    @property
    def center(self) -> Point2D:
        """Screen-space centre of the bow box."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def angle_degrees(self) -> float:
        return math.degrees(self.angle)

    model_config = ConfigDict(frozen=True)


class ObstacleData(BaseModel):
    """Immutable static obstacle.

    Attributes:
        id: Identifier, unique within one spawn batch
        bounds: Obstacle box
        bounce_remaining: Seconds left of the squash animation after a hit
    """
    id: int = Field(..., ge=0)
    bounds: Rectangle
    bounce_remaining: float = Field(default=0.0, ge=0.0)

    @property
    def bouncing(self) -> bool:
        return self.bounce_remaining > 0

    model_config = ConfigDict(frozen=True)
