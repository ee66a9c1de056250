"""
Shared primitive data types for the archery core.

This module provides the basic geometric types used by the collision
detector, the projectile simulator and the play-area bounds checks.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and velocities.

    Coordinates follow screen convention: x grows to the right, y grows
    downward. The same type is used for positions (pixels) and velocities
    (pixels per second).

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> tip = Point2D(x=300.0, y=340.0)
        >>> velocity = Point2D(x=0.0, y=-600.0)  # Straight up
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def offset(self, dx: float, dy: float) -> 'Point2D':
        """Return a new point moved by (dx, dy)."""
        return Point2D(x=self.x + dx, y=self.y + dy)

    def scaled(self, factor: float) -> 'Point2D':
        """Return this vector multiplied by a scalar."""
        return Point2D(x=self.x * factor, y=self.y * factor)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities read better as vectors
Vector2D = Point2D


class Resolution(BaseModel):
    """Play-area or window size in pixels.

    Examples:
        >>> str(Resolution(width=600, height=400))
        'Resolution(600x400)'
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle, positioned by its top-left corner.

    All containment and overlap tests are inclusive: a point on an edge is
    inside, and two rectangles that only touch along an edge intersect.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.contains_point(Point2D(x=150.0, y=125.0))
        True
        >>> rect.intersects(Rectangle(x=150.0, y=150.0, width=10.0, height=10.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Centre point of the rectangle."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside or on the boundary of the rectangle.

        Examples:
            >>> rect = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect.contains_point(Point2D(x=100.0, y=0.0))
            True
            >>> rect.contains_point(Point2D(x=100.1, y=0.0))
            False
        """
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps or touches another rectangle.

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> a.intersects(Rectangle(x=10.0, y=0.0, width=5.0, height=5.0))
            True
            >>> a.intersects(Rectangle(x=10.5, y=0.0, width=5.0, height=5.0))
            False
        """
        return not (self.right < other.left or
                    self.left > other.right or
                    self.bottom < other.top or
                    self.top > other.bottom)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
