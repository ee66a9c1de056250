"""
Archery renderer - draws a GameSession with pygame shapes.

The renderer only reads session state. Hit and miss flashes are collected
from session events and aged on the session's own clock, so they freeze
together with the game.
"""
import math
from typing import Dict, List

import pygame

from models import BowControl, Point2D, SessionEvent, SessionEventType
from bullseye.games.game_state import GameState
from bullseye.session import GameSession
from games.Archery import config

HIT_EFFECT_DURATION = 0.6
MISS_EFFECT_DURATION = 0.4


class ArcheryRenderer:
    """Draws the play field, entities, HUD and state overlays."""

    def __init__(self, session: GameSession):
        self._session = session
        self._effects: List[dict] = []  # {kind, position, time, points}
        self._fonts: Dict[int, pygame.font.Font] = {}
        session.subscribe(self._on_event)

    @property
    def effects(self) -> List[dict]:
        return list(self._effects)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _on_event(self, event: SessionEvent) -> None:
        now = self._session.scheduler.now
        if event.type == SessionEventType.SCORE:
            self._effects.append({
                'kind': 'hit',
                'position': Point2D(x=event.data['x'], y=event.data['y']),
                'time': now,
                'points': event.data.get('points', 0),
            })
        elif event.type == SessionEventType.MISSED:
            self._effects.append({
                'kind': 'miss',
                'position': Point2D(x=event.data['x'], y=event.data['y']),
                'time': now,
            })
        elif event.type in (SessionEventType.STARTED, SessionEventType.RESET):
            self._effects.clear()

    def _prune_effects(self) -> None:
        now = self._session.scheduler.now
        self._effects = [
            e for e in self._effects
            if now - e['time'] < (HIT_EFFECT_DURATION if e['kind'] == 'hit' else MISS_EFFECT_DURATION)
        ]

    # =========================================================================
    # Frame
    # =========================================================================

    def render(self, screen: pygame.Surface, stats: Dict[str, int]) -> None:
        screen.fill(config.BACKGROUND_COLOR)
        area = self._session.config.play_area
        pygame.draw.rect(screen, config.FIELD_COLOR, (0, 0, area.width, area.height))

        self._prune_effects()
        self._render_obstacles(screen)
        self._render_target(screen)
        self._render_bow(screen)
        self._render_arrow(screen)
        self._render_effects(screen)
        self._render_hud(screen, stats)

        state = self._session.state
        if state == GameState.IDLE:
            self._render_title(screen)
        elif state == GameState.GAME_OVER:
            self._render_game_over(screen, stats)

    # =========================================================================
    # Entities
    # =========================================================================

    def _render_target(self, screen: pygame.Surface) -> None:
        box = self._session.target.get_bounds()
        center = (int(box.center.x), int(box.center.y))
        radius = box.width / 2
        rings = len(config.TARGET_RING_COLORS)
        for i, color in enumerate(config.TARGET_RING_COLORS):
            ring_radius = max(1, int(radius * (rings - i) / rings))
            pygame.draw.circle(screen, color, center, ring_radius)
        if config.SHOW_BOUNDS:
            pygame.draw.rect(screen, config.BOUNDS_COLOR,
                             (box.x, box.y, box.width, box.height), 1)

    def _render_bow(self, screen: pygame.Surface) -> None:
        bow = self._session.bow
        rect = pygame.Rect(int(bow.x), int(bow.y), int(bow.width), int(bow.height))
        if bow.control == BowControl.SLIDE:
            # Limb arcs upwards, string along the bottom
            pygame.draw.arc(screen, config.BOW_COLOR, rect.inflate(0, rect.height), 0, math.pi, 4)
            pygame.draw.line(screen, config.STRING_COLOR,
                             (rect.left, rect.centery), (rect.right, rect.centery), 1)
            return

        # AIM: limb arcs towards the right, plus an aim guide
        pygame.draw.arc(screen, config.BOW_COLOR, rect, -math.pi / 2, math.pi / 2, 4)
        pygame.draw.line(screen, config.STRING_COLOR,
                         (rect.centerx, rect.top), (rect.centerx, rect.bottom), 1)
        center = bow.center
        end = (center.x + math.cos(bow.angle) * bow.width,
               center.y + math.sin(bow.angle) * bow.width)
        pygame.draw.line(screen, config.STRING_COLOR, (center.x, center.y), end, 1)

    def _render_arrow(self, screen: pygame.Surface) -> None:
        arrow = self._session.arrow
        if not arrow.visible:
            return
        tail = arrow.tail()
        width = max(1, int(arrow.width))
        pygame.draw.line(screen, config.ARROW_COLOR,
                         (tail.x, tail.y), (arrow.tip.x, arrow.tip.y), width)
        pygame.draw.circle(screen, config.ARROW_COLOR,
                           (int(arrow.tip.x), int(arrow.tip.y)), width)
        if config.SHOW_BOUNDS:
            box = arrow.get_bounds()
            pygame.draw.rect(screen, config.BOUNDS_COLOR,
                             (box.x, box.y, box.width, box.height), 1)

    def _render_obstacles(self, screen: pygame.Surface) -> None:
        duration = self._session.config.obstacles.bounce_duration
        for obstacle in self._session.obstacles:
            box = obstacle.bounds
            rect = pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))
            color = config.OBSTACLE_COLOR
            if obstacle.bouncing:
                # Swell by up to 20% while the bounce winds down
                grow = 0.2 * obstacle.bounce_remaining / duration
                rect = rect.inflate(int(rect.width * grow), int(rect.height * grow))
                color = config.OBSTACLE_HIT_COLOR
            pygame.draw.rect(screen, color, rect)

    def _render_effects(self, screen: pygame.Surface) -> None:
        now = self._session.scheduler.now
        for effect in self._effects:
            age = now - effect['time']
            x, y = int(effect['position'].x), int(effect['position'].y)
            if effect['kind'] == 'hit':
                progress = age / HIT_EFFECT_DURATION
                radius = int(15 + 30 * progress)
                pygame.draw.circle(screen, config.HIT_FLASH_COLOR, (x, y), radius, 3)
                text = self._font(32).render(f"+{effect['points']}", True, config.HIT_FLASH_COLOR)
                screen.blit(text, (x - text.get_width() // 2, y - radius - 30))
            else:
                size = 12
                pygame.draw.line(screen, config.MISS_COLOR, (x - size, y - size), (x + size, y + size), 3)
                pygame.draw.line(screen, config.MISS_COLOR, (x + size, y - size), (x - size, y + size), 3)

    # =========================================================================
    # HUD and overlays
    # =========================================================================

    def _render_hud(self, screen: pygame.Surface, stats: Dict[str, int]) -> None:
        session = self._session
        font = self._font(36)
        x, y = 20, 15

        for line in (f"Score: {session.score}",
                     f"Time: {session.time_left}",
                     f"Level: {session.level}"):
            text = font.render(line, True, config.HUD_COLOR)
            screen.blit(text, (x, y))
            x += text.get_width() + 30

        best = stats.get('best', 0)
        if best > 0:
            text = self._font(28).render(f"Best: {best}", True, (100, 200, 255))
            screen.blit(text, (screen.get_width() - text.get_width() - 20, 20))

    def _overlay(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        screen.blit(overlay, (0, 0))

    def _centered(self, screen: pygame.Surface, text: str, size: int, color, y: int) -> int:
        surface = self._font(size).render(text, True, color)
        screen.blit(surface, (screen.get_width() // 2 - surface.get_width() // 2, y))
        return y + surface.get_height() + 15

    def _render_title(self, screen: pygame.Surface) -> None:
        self._overlay(screen)
        y = screen.get_height() // 2 - 80
        y = self._centered(screen, "ARCHERY", 72, (255, 230, 120), y)
        y = self._centered(screen, self._session.config.description or self._session.config.name,
                           28, (200, 200, 200), y)
        self._centered(screen, "Click or press Enter to start", 32, (150, 150, 150), y + 20)

    def _render_game_over(self, screen: pygame.Surface, stats: Dict[str, int]) -> None:
        self._overlay(screen)
        session = self._session
        y = screen.get_height() // 2 - 110
        y = self._centered(screen, "GAME OVER", 72, (255, 100, 100), y)
        y = self._centered(screen, f"Final Score: {session.score}", 48, (255, 255, 255), y)
        y = self._centered(screen, f"Level reached: {session.level}", 32, (200, 200, 200), y)
        shots = stats.get('shots', 0)
        if shots:
            y = self._centered(screen, f"Hits: {stats.get('hits', 0)} / {shots} shots",
                               32, (200, 200, 200), y)
        if session.score > 0 and session.score >= stats.get('best', 0):
            y = self._centered(screen, "NEW HIGH SCORE!", 48, (255, 255, 100), y)
        self._centered(screen, "Click or press Enter to play again", 32, (150, 150, 150), y + 20)
