"""
Collision detection between the arrow and boxes.

Two policies are supported and chosen per variant:

- ``RECT``: the arrow's bounding box overlaps the box
- ``POINT``: the arrow tip lies inside the box

Both are inclusive at the edges.
"""

from models import ArrowData, CollisionPolicy, Point2D, Rectangle


def rects_overlap(a: Rectangle, b: Rectangle) -> bool:
    """True if the rectangles overlap or touch."""
    return a.intersects(b)


def point_in_rect(point: Point2D, rect: Rectangle) -> bool:
    """True if the point is inside the rectangle or on its edge."""
    return rect.contains_point(point)


def check_collision(policy: CollisionPolicy, arrow: ArrowData, box: Rectangle) -> bool:
    """Test the arrow against a box using the given policy.

    Examples:
        >>> from models import Point2D, Rectangle, ArrowData, CollisionPolicy
        >>> arrow = ArrowData(tip=Point2D(x=105.0, y=140.0), length=40.0)
        >>> target = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        >>> check_collision(CollisionPolicy.POINT, arrow, target)
        False
        >>> check_collision(CollisionPolicy.RECT, arrow, target)
        False
    """
    if policy == CollisionPolicy.POINT:
        return point_in_rect(arrow.tip, box)
    return rects_overlap(arrow.get_bounds(), box)
