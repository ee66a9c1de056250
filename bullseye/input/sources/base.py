"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List

from bullseye.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass


class ScriptedInputSource(InputSource):
    """Replays queued events; used for tests and headless runs."""

    def __init__(self, events: Iterable[InputEvent] = ()):
        self._pending: List[InputEvent] = list(events)
        self._ready: List[InputEvent] = []

    def push(self, *events: InputEvent) -> None:
        self._pending.extend(events)

    def update(self, dt: float) -> None:
        self._ready.extend(self._pending)
        self._pending.clear()

    def poll_events(self) -> List[InputEvent]:
        events = self._ready.copy()
        self._ready.clear()
        return events
