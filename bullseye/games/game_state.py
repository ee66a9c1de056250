"""Common GameState enum for Bullseye sessions and games.

A session moves through these states:

    IDLE --start()--> PLAYING --time runs out--> GAME_OVER
      ^                  |                           |
      +----reset()-------+-----------reset()---------+

``start()`` from GAME_OVER begins a fresh game directly.
"""
from enum import Enum


class GameState(Enum):
    """Lifecycle states of a game session.

    States:
        IDLE: Nothing running, waiting for start
        PLAYING: Clock, target and arrow timers active
        GAME_OVER: Time ran out; final score is shown
    """
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"
