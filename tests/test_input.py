"""
Input Layer Tests

Tests for InputEvent validation, the scripted source and InputManager.
"""

import pytest

from models import InputKind, Point2D
from bullseye.input import InputEvent, InputManager
from bullseye.input.sources import ScriptedInputSource


class TestInputEvent:

    def test_click_factory(self):
        event = InputEvent.click(100.0, 200.0, timestamp=1.5)
        assert event.kind == InputKind.CLICK
        assert event.position == Point2D(x=100.0, y=200.0)
        assert event.timestamp == 1.5

    def test_key_names_are_lowercased(self):
        assert InputEvent.key_press('SPACE').key == 'space'

    def test_negative_timestamp(self):
        with pytest.raises(ValueError, match="non-negative"):
            InputEvent.pointer(1.0, 1.0, timestamp=-0.1)

    def test_key_without_name(self):
        with pytest.raises(ValueError):
            InputEvent(kind=InputKind.KEY)

    def test_click_without_position(self):
        with pytest.raises(ValueError):
            InputEvent(kind=InputKind.CLICK)

    def test_immutable(self):
        event = InputEvent.pointer(1.0, 2.0)
        with pytest.raises(AttributeError):
            event.timestamp = 3.0

    def test_str(self):
        assert str(InputEvent.key_press('a', 2.0)) == "InputEvent(key=a, t=2.000)"
        assert "pointer" in str(InputEvent.pointer(1.0, 2.0))


class TestInputManager:

    def test_without_source(self):
        manager = InputManager()
        manager.update(0.016)
        assert not manager.has_source()
        assert manager.get_events() == []

    def test_scripted_events_arrive_after_update(self):
        source = ScriptedInputSource([InputEvent.key_press('space')])
        manager = InputManager(source)
        assert manager.get_events() == []

        manager.update(0.016)
        events = manager.get_events()
        assert [e.key for e in events] == ['space']
        # Drained
        assert manager.get_events() == []

    def test_push_and_swap_source(self):
        source = ScriptedInputSource()
        manager = InputManager()
        manager.set_source(source)
        assert manager.get_source() is source

        source.push(InputEvent.click(1.0, 1.0), InputEvent.pointer(2.0, 2.0))
        manager.update(0.016)
        assert [e.kind.value for e in manager.get_events()] == ['click', 'pointer']

        manager.set_source(ScriptedInputSource([InputEvent.key_press('a')]))
        manager.update(0.016)
        assert [e.key for e in manager.get_events()] == ['a']
