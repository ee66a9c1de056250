"""
Bullseye - archery target practice core.

A timed game: shoot arrows at a moving target, score on hits, get a harder
target as the score climbs. The core is presentation-agnostic; games under
``games/`` render it with pygame.

Modules:
- scheduler: Simulated-time periodic timers with cancellable handles
- clock: Countdown with optional speed ramp
- target / bow / obstacles: Entity behaviour
- projectile / collision: Arrow flight and hit tests
- difficulty: Score-driven level progression
- session: GameSession tying it all together
- config: YAML presets validated with Pydantic
- logging: Per-module loggers and structured record sinks
"""

__version__ = "1.0.0"

__all__ = ['__version__']
