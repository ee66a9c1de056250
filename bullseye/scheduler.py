"""
Simulated-time timer service.

Replaces browser-style ``setInterval``/``clearInterval`` with handles owned
by whoever started them. Time only moves when ``advance(dt)`` is called, so
the same game runs identically under a pygame frame loop and under tests.

Every callback runs to completion before the next one starts. Due
callbacks run in due-time order; ties run in registration order.

Examples:
    >>> scheduler = Scheduler()
    >>> ticks = []
    >>> handle = scheduler.every(1.0, lambda: ticks.append(scheduler.now))
    >>> scheduler.advance(2.5)
    >>> ticks
    [1.0, 2.0]
    >>> handle.cancel()
    >>> scheduler.advance(5.0)
    >>> ticks
    [1.0, 2.0]
"""

import itertools
from typing import Callable, List, Optional

from bullseye.logging import get_logger

log = get_logger('scheduler')

# Absorbs float drift when many small steps add up to a due time
_EPSILON = 1e-9


class TimerHandle:
    """A periodic registration that can be cancelled.

    Attributes:
        name: Label used in logs
        interval: Seconds between runs
        due: Simulated time of the next run
    """

    def __init__(
        self,
        scheduler: 'Scheduler',
        interval: float,
        callback: Callable[[], None],
        name: str,
        due: float,
        seq: int,
    ):
        self._scheduler = scheduler
        self.interval = interval
        self.callback = callback
        self.name = name
        self.due = due
        self.seq = seq
        self.runs = 0
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop this timer. Safe to call more than once."""
        self._scheduler.cancel(self)

    def _deactivate(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"TimerHandle({self.name!r}, every {self.interval:.3f}s, due={self.due:.3f}, {state})"


class Scheduler:
    """Cooperative, single-threaded timer service driven by simulated time."""

    def __init__(self, start_time: float = 0.0):
        self._now = start_time
        self._handles: List[TimerHandle] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Current simulated time in seconds."""
        return self._now

    @property
    def active_handles(self) -> List[TimerHandle]:
        """Handles that will still run."""
        return [h for h in self._handles if h.active]

    def every(self, interval: float, callback: Callable[[], None], name: str = "timer") -> TimerHandle:
        """Run ``callback`` every ``interval`` seconds, first at now + interval.

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        handle = TimerHandle(
            scheduler=self,
            interval=interval,
            callback=callback,
            name=name,
            due=self._now + interval,
            seq=next(self._seq),
        )
        self._handles.append(handle)
        log.debug("started %s every %.3fs", name, interval)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        """Cancel a handle. None and already-cancelled handles are ignored."""
        if handle is None or not handle.active:
            return
        handle._deactivate()
        self._handles = [h for h in self._handles if h is not handle]
        log.debug("cancelled %s after %d runs", handle.name, handle.runs)

    def cancel_all(self) -> int:
        """Cancel every active handle. Returns how many were cancelled."""
        handles = self.active_handles
        for handle in handles:
            self.cancel(handle)
        return len(handles)

    def _next_due(self, until: float) -> Optional[TimerHandle]:
        due = [h for h in self._handles if h.active and h.due <= until + _EPSILON]
        if not due:
            return None
        return min(due, key=lambda h: (h.due, h.seq))

    def advance(self, dt: float) -> int:
        """Move simulated time forward by ``dt`` seconds, running due callbacks.

        Callbacks may cancel handles (their own included) or start new ones;
        a new handle that falls due before the end of this window also runs.

        Returns:
            Number of callbacks executed
        """
        if dt < 0:
            raise ValueError(f"Cannot advance by a negative time step ({dt})")
        until = self._now + dt
        executed = 0
        while True:
            handle = self._next_due(until)
            if handle is None:
                break
            self._now = max(self._now, handle.due)
            handle.due += handle.interval
            handle.runs += 1
            executed += 1
            log.trace("run %s at %.3f", handle.name, self._now)
            handle.callback()
        self._now = until
        return executed
