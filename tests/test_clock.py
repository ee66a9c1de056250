"""
Game Clock Tests
"""

from models import ClockConfig
from bullseye.clock import GameClock


class TestGameClock:

    def test_counts_down_to_zero(self):
        clock = GameClock(ClockConfig(duration=3))
        ticks = [clock.tick() for _ in range(3)]
        assert [t.time_left for t in ticks] == [2, 1, 0]
        assert [t.expired for t in ticks] == [False, False, True]
        assert clock.expired

    def test_tick_after_expiry_is_harmless(self):
        clock = GameClock(ClockConfig(duration=1))
        assert clock.tick().expired
        again = clock.tick()
        assert again.time_left == 0
        assert not again.expired
        assert clock.time_left == 0

    def test_reset(self):
        clock = GameClock(ClockConfig(duration=5))
        clock.tick()
        clock.reset()
        assert clock.time_left == 5
        assert clock.elapsed == 0

    def test_no_ramp_by_default(self):
        clock = GameClock(ClockConfig(duration=60))
        assert not any(clock.tick().ramp for _ in range(60))

    def test_ramp_every_interval(self):
        clock = GameClock(ClockConfig(duration=60, ramp_interval=10, ramp_speed_step=25))
        ramps = [i + 1 for i in range(60) if clock.tick().ramp]
        # Elapsed 10..50 ramp; the tick that ends the game does not
        assert ramps == [10, 20, 30, 40, 50]

    def test_elapsed(self):
        clock = GameClock(ClockConfig(duration=10))
        for _ in range(4):
            clock.tick()
        assert clock.elapsed == 4
        assert clock.time_left == 6
