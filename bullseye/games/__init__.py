"""
Bullseye Game Framework.

Provides:
- game_state: Standard GameState enum shared by sessions and games
- base_game: BaseGame class that all games inherit from (needs pygame,
  import it from bullseye.games.base_game)
"""

from bullseye.games.game_state import GameState

__all__ = ['GameState']
