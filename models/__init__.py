"""
Unified models library for the Bullseye archery game.

This package provides the Pydantic data models used across the project:
- Primitives: Basic geometric types (Point2D, Vector2D, Rectangle, Resolution)
- Enums: Collision policies, target motion, bow control, session events
- Archery: Entity state (TargetData, ArrowData, BowData, ObstacleData)
- Config: Validated variant configuration (ArcheryConfig and sections)
- Events: SessionEvent notifications

Usage:
    >>> from models import Point2D, Rectangle, ArcheryConfig
    >>> from models.archery import ArrowData
"""

# ============================================================================
# Primitives
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,
    Resolution,
    Rectangle,
    clamp,
)

# ============================================================================
# Enums
# ============================================================================
from .enums import (
    CollisionPolicy,
    TargetMotion,
    BowControl,
    Direction,
    FlightOutcome,
    SessionEventType,
    InputKind,
)

# ============================================================================
# Entities
# ============================================================================
from .archery import (
    TargetData,
    ArrowData,
    BowData,
    ObstacleData,
)

# ============================================================================
# Configuration
# ============================================================================
from .config import (
    PlayAreaConfig,
    ClockConfig,
    TargetConfig,
    ArrowConfig,
    BowConfig,
    DifficultyConfig,
    ObstacleConfig,
    ScoringConfig,
    ArcheryConfig,
)

from .events import SessionEvent

__all__ = [
    'Point2D',
    'Vector2D',
    'Resolution',
    'Rectangle',
    'clamp',
    'CollisionPolicy',
    'TargetMotion',
    'BowControl',
    'Direction',
    'FlightOutcome',
    'SessionEventType',
    'InputKind',
    'TargetData',
    'ArrowData',
    'BowData',
    'ObstacleData',
    'PlayAreaConfig',
    'ClockConfig',
    'TargetConfig',
    'ArrowConfig',
    'BowConfig',
    'DifficultyConfig',
    'ObstacleConfig',
    'ScoringConfig',
    'ArcheryConfig',
    'SessionEvent',
]
