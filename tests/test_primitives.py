"""
Primitive Model Tests

Tests for Point2D, Rectangle and clamp.

Run with: pytest tests/test_primitives.py -v
"""

import pytest
from pydantic import ValidationError

from models import Point2D, Rectangle, Resolution, Vector2D, clamp


class TestPoint2D:
    """Test Point2D construction and helpers."""

    def test_offset_returns_new_point(self):
        p = Point2D(x=1.0, y=2.0)
        moved = p.offset(3.0, -4.0)
        assert (moved.x, moved.y) == (4.0, -2.0)
        assert (p.x, p.y) == (1.0, 2.0)

    def test_scaled(self):
        v = Vector2D(x=10.0, y=-20.0).scaled(0.5)
        assert (v.x, v.y) == (5.0, -10.0)

    def test_is_frozen(self):
        p = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            p.x = 5.0


class TestRectangle:
    """Test Rectangle geometry."""

    def test_edges_and_center(self):
        rect = Rectangle(x=10.0, y=20.0, width=30.0, height=40.0)
        assert rect.left == 10.0
        assert rect.right == 40.0
        assert rect.top == 20.0
        assert rect.bottom == 60.0
        assert rect.center == Point2D(x=25.0, y=40.0)

    @pytest.mark.parametrize('width,height', [(0.0, 10.0), (10.0, -1.0)])
    def test_rejects_non_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=width, height=height)

    def test_contains_point_is_inclusive(self):
        rect = Rectangle(x=0.0, y=0.0, width=100.0, height=50.0)
        assert rect.contains_point(Point2D(x=0.0, y=0.0))
        assert rect.contains_point(Point2D(x=100.0, y=50.0))
        assert not rect.contains_point(Point2D(x=100.01, y=25.0))
        assert not rect.contains_point(Point2D(x=50.0, y=-0.01))

    def test_touching_rectangles_intersect(self):
        a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        assert a.intersects(Rectangle(x=10.0, y=10.0, width=5.0, height=5.0))
        assert not a.intersects(Rectangle(x=0.0, y=10.5, width=5.0, height=5.0))

    def test_contains_rect(self):
        outer = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        assert outer.contains_rect(Rectangle(x=0.0, y=0.0, width=100.0, height=100.0))
        assert not outer.contains_rect(Rectangle(x=90.0, y=0.0, width=20.0, height=10.0))


class TestHelpers:

    def test_clamp(self):
        assert clamp(5.0, 0.0, 10.0) == 5.0
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(11.0, 0.0, 10.0) == 10.0

    def test_resolution(self):
        assert str(Resolution(width=600, height=400)) == "Resolution(600x400)"
        with pytest.raises(ValueError):
            Resolution(width=0, height=400)
