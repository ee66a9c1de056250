"""
Game clock - the one-second countdown.

The clock only does arithmetic; the session owns the timer that calls
``tick()`` and decides what expiry and ramps mean.
"""

from dataclasses import dataclass

from models import ClockConfig


@dataclass(frozen=True)
class ClockTick:
    """Outcome of one countdown step.

    Attributes:
        time_left: Seconds remaining after this tick
        expired: True exactly on the tick that reaches zero
        ramp: True when a speed ramp is due on this tick
    """
    time_left: int
    expired: bool
    ramp: bool


class GameClock:
    """Countdown from ``duration`` to zero, one second per tick.

    Examples:
        >>> clock = GameClock(ClockConfig(duration=3))
        >>> [clock.tick().time_left for _ in range(4)]
        [2, 1, 0, 0]
    """

    def __init__(self, config: ClockConfig):
        self._config = config
        self._time_left = config.duration

    @property
    def duration(self) -> int:
        return self._config.duration

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def elapsed(self) -> int:
        return self._config.duration - self._time_left

    @property
    def expired(self) -> bool:
        return self._time_left <= 0

    def reset(self) -> None:
        self._time_left = self._config.duration

    def tick(self) -> ClockTick:
        """Count down one second.

        Ticking an expired clock is harmless: time stays at zero and
        ``expired`` is not reported again.
        """
        if self._time_left <= 0:
            return ClockTick(time_left=0, expired=False, ramp=False)

        self._time_left -= 1
        expired = self._time_left == 0

        ramp_every = self._config.ramp_interval
        ramp = (
            not expired
            and ramp_every > 0
            and self.elapsed % ramp_every == 0
        )
        return ClockTick(time_left=self._time_left, expired=expired, ramp=ramp)
