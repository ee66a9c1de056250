"""
Enumerations shared by the archery core and the games.
"""

from enum import Enum


class CollisionPolicy(str, Enum):
    """How arrow/target overlap is decided.

    Attributes:
        RECT: The arrow's bounding box against the target box (generous
            for a thin vertical arrow)
        POINT: Only the arrow tip against the target box
    """
    RECT = "rect"
    POINT = "point"


class TargetMotion(str, Enum):
    """How the target repositions itself.

    Attributes:
        JUMP: Teleport to a random spot on a timer
        BOUNCE: Glide vertically and reverse near the top/bottom margin
    """
    JUMP = "jump"
    BOUNCE = "bounce"


class BowControl(str, Enum):
    """How the player moves the bow.

    Attributes:
        SLIDE: Bow slides left/right along the bottom edge
        AIM: Bow sits at the left edge, moves up/down and rotates to the pointer
    """
    SLIDE = "slide"
    AIM = "aim"


class Direction(str, Enum):
    """Bow movement directions accepted by move_bow()."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class FlightOutcome(str, Enum):
    """Result of advancing an arrow by one step.

    Attributes:
        IDLE: No arrow in flight, nothing happened
        FLYING: Arrow still in flight
        HIT: Arrow reached the target
        MISSED: Arrow left the play area
    """
    IDLE = "idle"
    FLYING = "flying"
    HIT = "hit"
    MISSED = "missed"


class SessionEventType(str, Enum):
    """Notifications a GameSession publishes to its listeners."""
    STARTED = "started"
    TICK = "tick"
    SCORE = "score"
    LEVEL_UP = "level_up"
    OBSTACLES = "obstacles"
    OBSTACLE_HIT = "obstacle_hit"
    FIRED = "fired"
    MISSED = "missed"
    GAME_OVER = "game_over"
    RESET = "reset"


class InputKind(str, Enum):
    """Kinds of input a game receives.

    Attributes:
        POINTER: Pointer moved (aiming)
        CLICK: Primary button pressed at a position (fire)
        KEY: Key pressed; the key name is carried on the event
    """
    POINTER = "pointer"
    CLICK = "click"
    KEY = "key"
