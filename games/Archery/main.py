#!/usr/bin/env python3
"""Archery - Standalone entry point.

Plays the variant configured in .env (ARCHERY_VARIANT) at the preset's
own play-area size unless SCREEN_WIDTH/SCREEN_HEIGHT are set.
"""

import pygame
import sys
import os

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from bullseye.input.input_manager import InputManager
from bullseye.input.sources.pygame_source import PygameInputSource
from bullseye.logging import close_all_sinks, create_sink, register_sink
from games.Archery import config
from games.Archery.game_mode import ArcheryMode


def main():
    pygame.init()
    register_sink('session', create_sink('session'))

    game = ArcheryMode()
    area = game.session.config.play_area
    screen = pygame.display.set_mode((area.width, area.height))
    pygame.display.set_caption(f"Archery ({game.session.config.name})")
    pygame.key.set_repeat(200, 40)

    input_manager = InputManager(PygameInputSource())
    clock = pygame.time.Clock()

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
