"""
Bow Tests

Tests for slide and aim bow movement, aiming and arrow launch.
"""

import math

import pytest

from models import BowControl, Direction, Point2D
from bullseye.bow import Bow


class TestSlideBow:

    def test_initial_position(self, slide_config):
        bow = Bow(slide_config).initial()
        assert bow.control == BowControl.SLIDE
        assert bow.slide_percent == 50.0
        assert (bow.x, bow.y) == (270.0, 360.0)

    def test_move_left_and_right(self, slide_config):
        control = Bow(slide_config)
        bow = control.move(control.initial(), Direction.LEFT)
        assert bow.slide_percent == 45.0
        bow = control.move(bow, Direction.RIGHT)
        bow = control.move(bow, Direction.RIGHT)
        assert bow.slide_percent == 55.0

    def test_clamped_to_travel_limits(self, slide_config):
        control = Bow(slide_config)
        bow = control.initial()
        for _ in range(30):
            bow = control.move(bow, Direction.LEFT)
        assert bow.slide_percent == 5.0
        for _ in range(30):
            bow = control.move(bow, Direction.RIGHT)
        assert bow.slide_percent == 95.0

    @pytest.mark.parametrize('direction', [Direction.UP, Direction.DOWN])
    def test_vertical_moves_ignored(self, slide_config, direction):
        control = Bow(slide_config)
        bow = control.initial()
        assert control.move(bow, direction) == bow

    def test_aim_ignored(self, slide_config):
        control = Bow(slide_config)
        bow = control.initial()
        assert control.aim_at(bow, Point2D(x=0.0, y=0.0)) == bow

    def test_arrow_rests_above_bottom_edge(self, slide_config):
        control = Bow(slide_config)
        assert control.arrow_rest(control.initial()) == Point2D(x=300.0, y=330.0)

    def test_shoots_straight_up(self, slide_config):
        control = Bow(slide_config)
        velocity = control.launch_velocity(control.initial())
        assert (velocity.x, velocity.y) == (0.0, -600.0)


class TestAimBow:

    def test_initial_position(self, aim_config):
        bow = Bow(aim_config).initial()
        assert bow.control == BowControl.AIM
        assert (bow.x, bow.y) == (50.0, 300.0)
        assert bow.center == Point2D(x=80.0, y=370.0)

    def test_move_up_and_down(self, aim_config):
        control = Bow(aim_config)
        bow = control.move(control.initial(), Direction.UP)
        assert bow.y == 290.0
        bow = control.move(bow, Direction.DOWN)
        bow = control.move(bow, Direction.DOWN)
        assert bow.y == 310.0

    def test_clamped_to_travel_limits(self, aim_config):
        control = Bow(aim_config)
        bow = control.initial()
        for _ in range(100):
            bow = control.move(bow, Direction.UP)
        assert bow.y == 50.0
        for _ in range(100):
            bow = control.move(bow, Direction.DOWN)
        assert bow.y == 570.0

    def test_horizontal_moves_ignored(self, aim_config):
        control = Bow(aim_config)
        bow = control.initial()
        assert control.move(bow, Direction.LEFT) == bow

    def test_aim_angle_from_center(self, aim_config):
        control = Bow(aim_config)
        bow = control.aim_at(control.initial(), Point2D(x=180.0, y=470.0))
        assert math.isclose(bow.angle, math.pi / 4)

    def test_launch_follows_aim(self, aim_config):
        control = Bow(aim_config)
        bow = control.aim_at(control.initial(), Point2D(x=80.0, y=0.0))
        velocity = control.launch_velocity(bow)
        assert math.isclose(velocity.x, 0.0, abs_tol=1e-9)
        assert math.isclose(velocity.y, -1250.0)

    def test_arrow_rests_at_bow_center(self, aim_config):
        control = Bow(aim_config)
        bow = control.initial()
        assert control.arrow_rest(bow) == bow.center
