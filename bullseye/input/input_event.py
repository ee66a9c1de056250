"""
Input Event - Represents a single input action.
"""
from dataclasses import dataclass
from typing import Optional

from models import InputKind, Point2D


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Attributes:
        kind: POINTER (moved), CLICK (primary button) or KEY
        position: Screen position for pointer/click events
        timestamp: Time when the event occurred (seconds, monotonic clock)
        key: Key name for KEY events ('space', 'left', 'a', ...)
    """
    kind: InputKind
    position: Optional[Point2D] = None
    timestamp: float = 0.0
    key: Optional[str] = None

    def __post_init__(self):
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.kind == InputKind.KEY and not self.key:
            raise ValueError('KEY events need a key name')
        if self.kind in (InputKind.POINTER, InputKind.CLICK) and self.position is None:
            raise ValueError(f'{self.kind.value} events need a position')

    @classmethod
    def pointer(cls, x: float, y: float, timestamp: float = 0.0) -> 'InputEvent':
        return cls(kind=InputKind.POINTER, position=Point2D(x=x, y=y), timestamp=timestamp)

    @classmethod
    def click(cls, x: float, y: float, timestamp: float = 0.0) -> 'InputEvent':
        return cls(kind=InputKind.CLICK, position=Point2D(x=x, y=y), timestamp=timestamp)

    @classmethod
    def key_press(cls, key: str, timestamp: float = 0.0) -> 'InputEvent':
        return cls(kind=InputKind.KEY, key=key.lower(), timestamp=timestamp)

    def __str__(self) -> str:
        if self.kind == InputKind.KEY:
            return f"InputEvent(key={self.key}, t={self.timestamp:.3f})"
        return (f"InputEvent({self.kind.value}, pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f})")
