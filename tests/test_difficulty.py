"""
Difficulty Controller Tests
"""

import pytest

from bullseye.difficulty import DifficultyController


@pytest.fixture
def aim_difficulty(aim_config):
    controller = DifficultyController(aim_config.difficulty)
    controller.start(speed=150.0, move_interval=1.0)
    return controller


@pytest.fixture
def slide_difficulty(slide_config):
    controller = DifficultyController(slide_config.difficulty)
    controller.start(speed=0.0, move_interval=1.0)
    return controller


class TestLevels:

    def test_level_for_score(self, aim_difficulty):
        assert aim_difficulty.level_for(0) == 1
        assert aim_difficulty.level_for(49) == 1
        assert aim_difficulty.level_for(50) == 2
        assert aim_difficulty.level_for(120) == 3

    def test_no_change_below_threshold(self, aim_difficulty):
        assert aim_difficulty.update(40) == []
        assert aim_difficulty.level == 1

    def test_level_up_applies_once(self, aim_difficulty):
        changes = aim_difficulty.update(50)
        assert len(changes) == 1
        change = changes[0]
        assert change.level == 2
        assert change.speed == 200.0
        assert change.size == 90.0
        assert change.obstacle_count == 0
        assert aim_difficulty.update(50) == []
        assert aim_difficulty.update(60) == []

    def test_skipped_levels_each_apply(self, aim_difficulty):
        changes = aim_difficulty.update(150)
        assert [c.level for c in changes] == [2, 3, 4]
        assert [c.speed for c in changes] == [200.0, 250.0, 300.0]
        assert [c.obstacle_count for c in changes] == [0, 2, 3]

    def test_start_resets(self, aim_difficulty):
        aim_difficulty.update(200)
        aim_difficulty.start(speed=150.0, move_interval=1.0)
        assert aim_difficulty.level == 1
        assert aim_difficulty.update(50)[0].speed == 200.0


class TestDerivedValues:

    def test_size_shrinks_to_floor(self, aim_difficulty):
        assert aim_difficulty.size_for(2) == 90.0
        assert aim_difficulty.size_for(12) == 40.0
        assert aim_difficulty.size_for(30) == 40.0

    def test_obstacles_capped(self, aim_difficulty):
        assert aim_difficulty.obstacles_for(2) == 0
        assert aim_difficulty.obstacles_for(3) == 2
        assert aim_difficulty.obstacles_for(7) == 6
        assert aim_difficulty.obstacles_for(20) == 6

    def test_slide_has_no_obstacles(self, slide_difficulty):
        assert slide_difficulty.obstacles_for(10) == 0

    def test_ramp_speed(self, aim_difficulty):
        assert aim_difficulty.ramp_speed(25.0) == 175.0
        assert aim_difficulty.update(50)[0].speed == 225.0


class TestSlideProgression:

    def test_interval_shrinks(self, slide_difficulty):
        change = slide_difficulty.update(20)[0]
        assert change.move_interval == pytest.approx(0.9)
        assert change.size == 45.0

    def test_interval_floor(self, slide_difficulty):
        changes = slide_difficulty.update(400)
        assert changes[-1].level == 21
        assert changes[-1].move_interval == pytest.approx(0.2)
        assert all(c.move_interval >= 0.2 for c in changes)
        assert changes[-1].size == 30.0
