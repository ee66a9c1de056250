"""
Game Registry - Auto-discovery and management of Bullseye games.

Games are automatically discovered by scanning the games/ directory for
subdirectories containing a game_mode.py with a class inheriting from BaseGame.

Game metadata and CLI arguments are retrieved from the game class itself
(via BaseGame class attributes).

Usage:
    from games.registry import get_registry

    registry = get_registry()
    available = registry.list_games()  # ['archery']

    # Get game info including CLI arguments
    info = registry.get_game_info('archery')
    args = registry.get_game_arguments('archery')

    # Create game instance
    game = registry.create_game('archery', width=1280, height=720, variant='aim')
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TYPE_CHECKING

from bullseye.logging import get_logger

if TYPE_CHECKING:
    from bullseye.games.base_game import BaseGame
    from bullseye.input.input_manager import InputManager

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str  # lowercase identifier (directory name)
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.Archery'

    # CLI arguments (from game class)
    arguments: List[Dict[str, Any]] = field(default_factory=list)

    # Optional features
    has_config: bool = False
    config_file: Optional[str] = None


class GameRegistry:
    """
    Registry for auto-discovering and managing Bullseye games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Finding classes that inherit from BaseGame
    3. Reading metadata from class attributes (NAME, DESCRIPTION, etc.)
    """

    def __init__(self, games_dir: Optional[Path] = None, package: str = 'games'):
        """
        Args:
            games_dir: Directory to scan (defaults to this package)
            package: Import package the game directories live in
        """
        self._games_dir = Path(games_dir) if games_dir else GAMES_DIR
        self._package = package
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type['BaseGame']] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        if not self._games_dir.exists():
            return
        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith('_') or game_dir.name.startswith('.'):
                continue
            if (game_dir / 'game_mode.py').exists():
                self._register_game(game_dir)

    def _register_game(self, game_dir: Path) -> None:
        """Register a game from its directory, skipping it if it fails to load."""
        slug = game_dir.name.lower()
        module_path = f"{self._package}.{game_dir.name}"

        try:
            game_class = self._find_game_class(module_path)
        except Exception as e:
            log.warning("Failed to load game from %s: %s", game_dir, e)
            return

        if game_class is None:
            log.debug("No BaseGame subclass in %s", game_dir)
            return

        has_config = (game_dir / '.env').exists() or (game_dir / 'config.py').exists()
        config_file = '.env' if (game_dir / '.env').exists() else None

        self._game_classes[slug] = game_class
        self._games[slug] = GameInfo(
            name=game_class.NAME,
            slug=slug,
            description=game_class.DESCRIPTION,
            version=game_class.VERSION,
            author=game_class.AUTHOR,
            module_path=module_path,
            arguments=game_class.get_arguments(),
            has_config=has_config,
            config_file=config_file,
        )
        log.debug("Registered game %s (%s)", slug, game_class.__name__)

    def _find_game_class(self, module_path: str) -> Optional[Type['BaseGame']]:
        """Find the BaseGame subclass defined in ``<module_path>.game_mode``."""
        from bullseye.games.base_game import BaseGame

        module = importlib.import_module(f"{module_path}.game_mode")
        for _, obj in inspect.getmembers(module, inspect.isclass):
            # Only classes defined in this module
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, BaseGame) and obj is not BaseGame:
                return obj
        return None

    def list_games(self) -> List[str]:
        """Get sorted list of available game slugs."""
        return sorted(self._games.keys())

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """
        Get CLI arguments for a specific game.

        Returns:
            List of argument definitions for argparse (empty if unknown)
        """
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def get_game_class(self, slug: str) -> Optional[Type['BaseGame']]:
        return self._game_classes.get(slug.lower())

    def create_game(self, slug: str, width: int, height: int, **kwargs) -> 'BaseGame':
        """
        Create a game instance.

        Args:
            slug: Game identifier
            width: Display width
            height: Display height
            **kwargs: Additional game-specific arguments

        Raises:
            ValueError: If game not found
        """
        game_class = self.get_game_class(slug)
        if game_class is None:
            available = ', '.join(self.list_games())
            raise ValueError(f"Unknown game: {slug}. Available: {available}")
        return game_class(width=width, height=height, **kwargs)

    def create_input_manager(self, slug: str) -> 'InputManager':
        """
        Create an InputManager reading mouse and keyboard through pygame.

        Raises:
            ValueError: If game not found
        """
        if slug.lower() not in self._games:
            raise ValueError(f"Unknown game: {slug}")

        from bullseye.input.input_manager import InputManager
        from bullseye.input.sources.pygame_source import PygameInputSource
        return InputManager(PygameInputSource())


# Singleton instance for convenience
_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get the global game registry instance."""
    global _registry
    if _registry is None:
        _registry = GameRegistry()
    return _registry
