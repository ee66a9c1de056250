"""
Archery Game Mode

Maps player input onto a GameSession and renders it.

Controls:
- Enter / click: start (or restart after game over)
- R / Backspace: abort a running game back to the title screen
- Space / click: shoot
- Left/Right or A/D: slide the bow (slide variant)
- Up/Down or W/S: move the bow (aim variant)
- Pointer: aim (aim variant)
"""
import random
from typing import Any, Dict, List, Optional

import pygame

from models import Direction, InputKind, Point2D, SessionEvent, SessionEventType
from bullseye.config import load_config, with_play_area
from bullseye.games.base_game import BaseGame
from bullseye.games.game_state import GameState
from bullseye.input.input_event import InputEvent
from bullseye.logging import get_logger
from bullseye.scheduler import Scheduler
from bullseye.session import GameSession
from games.Archery import config, game_info
from games.Archery.renderer import ArcheryRenderer

log = get_logger('archery')

KEY_DIRECTIONS = {
    'left': Direction.LEFT,
    'a': Direction.LEFT,
    'right': Direction.RIGHT,
    'd': Direction.RIGHT,
    'up': Direction.UP,
    'w': Direction.UP,
    'down': Direction.DOWN,
    's': Direction.DOWN,
}
FIRE_KEYS = {'space'}
START_KEYS = {'return', 'enter'}
RESET_KEYS = {'r', 'backspace'}


class ArcheryMode(BaseGame):
    """Archery game - hit the moving target as often as you can.

    Core mechanic: one arrow in the air at a time. Every hit scores;
    enough hits raise the level, which shrinks the target, speeds it up
    and (aim variant) fills the field with obstacles that slow arrows down.
    """

    NAME = game_info.NAME
    DESCRIPTION = game_info.DESCRIPTION
    VERSION = game_info.VERSION
    AUTHOR = game_info.AUTHOR
    ARGUMENTS = game_info.ARGUMENTS

    def __init__(
        self,
        variant: Optional[str] = None,
        preset_file: Optional[str] = None,
        duration: Optional[int] = None,
        seed: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        scheduler: Optional[Scheduler] = None,
        auto_start: bool = False,
        **kwargs: Any,
    ):
        """Initialize the Archery game.

        Args:
            variant: Preset name ('slide' or 'aim')
            preset_file: Path to a YAML preset, takes precedence over variant
            duration: Game length in seconds (preset default if None)
            seed: Random seed for target and obstacle placement
            width: Play area width (preset default if None or 0)
            height: Play area height (preset default if None or 0)
            scheduler: Timer service, mainly for tests
            auto_start: Start playing immediately instead of showing the title
        """
        overrides = {'clock': {'duration': duration}} if duration else None
        game_config = load_config(preset_file or variant or config.DEFAULT_VARIANT, overrides=overrides)

        width = width or config.SCREEN_WIDTH
        height = height or config.SCREEN_HEIGHT
        if width and height:
            game_config = with_play_area(game_config, width, height)

        self._session = GameSession(game_config, scheduler=scheduler, rng=random.Random(seed))
        self._renderer = ArcheryRenderer(self._session)
        self._session.subscribe(self._on_session_event)

        # Stats
        self._shots = 0
        self._hits = 0
        self._session_best = 0

        log.info("archery ready: preset=%s area=%dx%d",
                 game_config.name, game_config.play_area.width, game_config.play_area.height)
        if auto_start:
            self._session.start()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def stats(self) -> Dict[str, int]:
        return {
            'shots': self._shots,
            'hits': self._hits,
            'best': self._session_best,
            'games': self._session.games_played,
        }

    def _get_internal_state(self) -> GameState:
        return self._session.state

    def get_score(self) -> int:
        return self._session.score

    def _on_session_event(self, event: SessionEvent) -> None:
        if event.type == SessionEventType.STARTED:
            self._shots = 0
            self._hits = 0
        elif event.type == SessionEventType.FIRED:
            self._shots += 1
        elif event.type == SessionEventType.SCORE:
            self._hits += 1
        elif event.type == SessionEventType.GAME_OVER:
            self._session_best = max(self._session_best, event.score)

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events."""
        for event in events:
            if event.kind == InputKind.KEY:
                self._handle_key(event.key)
            elif event.kind == InputKind.CLICK:
                self._handle_click(event.position)
            elif event.kind == InputKind.POINTER:
                self._session.aim_at(event.position)

    def _handle_click(self, position: Point2D) -> None:
        if not self._session.is_playing:
            self._session.start()
            return
        self._session.aim_at(position)
        self._session.fire()

    def _handle_key(self, key: str) -> None:
        if key in START_KEYS:
            if not self._session.is_playing:
                self._session.start()
        elif key in RESET_KEYS:
            if self._session.is_playing:
                self.reset()
        elif key in FIRE_KEYS:
            self._session.fire()
        elif key in KEY_DIRECTIONS:
            self._session.move_bow(KEY_DIRECTIONS[key])

    # =========================================================================
    # Frame
    # =========================================================================

    def update(self, dt: float) -> None:
        """Let game time pass; long frames are capped."""
        self._session.advance(min(dt, config.MAX_FRAME_DT))

    def render(self, screen: pygame.Surface) -> None:
        self._renderer.render(screen, self.stats)

    def reset(self) -> None:
        self._session.reset()
