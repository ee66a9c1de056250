"""
Input abstraction layer for Bullseye games.

Games consume InputEvents and never look at pygame events directly, so
the same game logic runs from a mouse/keyboard or from scripted events
in tests.
"""

from bullseye.input.input_event import InputEvent
from bullseye.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
