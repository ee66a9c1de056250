"""
Session event model.

A GameSession publishes one of these for every externally visible change so
a presentation layer can mirror the game without polling.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, ConfigDict

from .enums import SessionEventType


class SessionEvent(BaseModel):
    """Immutable notification from a GameSession.

    Attributes:
        type: What happened
        score: Score after the change
        time_left: Seconds left after the change
        level: Difficulty level after the change
        data: Event-specific details (e.g. obstacle id, hit position)

    Examples:
        >>> event = SessionEvent(type=SessionEventType.SCORE, score=10, time_left=55, level=1)
        >>> event.type.value
        'score'
    """
    type: SessionEventType
    score: int = Field(default=0, ge=0)
    time_left: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    data: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"SessionEvent({self.type.value}, score={self.score}, time_left={self.time_left}, level={self.level})"
