"""
Pygame Input Source - mouse and keyboard input for desktop play.
"""
import time
from typing import List, Optional

import pygame

from bullseye.input.input_event import InputEvent
from bullseye.input.sources.base import InputSource


class PygameInputSource(InputSource):
    """Converts pygame mouse and keyboard events into InputEvents.

    Left clicks become CLICK events, mouse motion becomes POINTER events
    and key presses become KEY events named by ``pygame.key.name``.
    Key presses are also re-posted to the pygame event queue, along with
    everything else (QUIT, window events), for the main loop to handle.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect input."""
        passthrough = []
        for event in pygame.event.get():
            converted = self.convert(event)
            if converted is not None:
                self._event_queue.append(converted)
            if event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                passthrough.append(event)
        for event in passthrough:
            pygame.event.post(event)

    @staticmethod
    def convert(event: pygame.event.Event) -> Optional[InputEvent]:
        """Translate one pygame event, or None if it is not game input."""
        now = time.monotonic()
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            return InputEvent.click(float(x), float(y), timestamp=now)
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            return InputEvent.pointer(float(x), float(y), timestamp=now)
        if event.type == pygame.KEYDOWN:
            return InputEvent.key_press(pygame.key.name(event.key), timestamp=now)
        return None
