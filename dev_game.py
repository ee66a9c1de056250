#!/usr/bin/env python3
"""
Development Mode Game Launcher

Launcher for playing and testing games with mouse and keyboard.

Uses the game registry for auto-discovery. Game-specific arguments are
dynamically loaded from each game's ARGUMENTS list.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py archery
    python dev_game.py archery --variant aim
    python dev_game.py archery --variant slide --duration 30 --seed 7

    # See game-specific options
    python dev_game.py archery --help

    # With custom resolution
    python dev_game.py archery --resolution 1920x1080
"""

import argparse
import os
import sys

import pygame

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from models import Resolution
from bullseye.games.game_state import GameState
from bullseye.logging import close_all_sinks, configure_logging, create_sink, register_sink
from games.registry import get_registry


def parse_resolution(value: str) -> Resolution:
    """Parse WIDTHxHEIGHT into a Resolution.

    Raises:
        ValueError: If the format is wrong or a dimension is not positive
            (pydantic's ValidationError is a ValueError)
    """
    width, height = value.lower().split('x')
    return Resolution(width=int(width), height=int(height))


def build_parser(registry, game_slug=None) -> argparse.ArgumentParser:
    """Build the launcher parser, including a game's own arguments."""
    available_games = registry.list_games()
    parser = argparse.ArgumentParser(
        description='Development Mode Game Launcher - play games with mouse and keyboard',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python dev_game.py --list                  # List available games
  python dev_game.py archery                 # Play Archery (slide variant)
  python dev_game.py archery --variant aim   # Aim-and-shoot variant
  python dev_game.py <game> --help           # See game-specific options
        """
    )

    parser.add_argument('game', nargs='?', choices=available_games, help='Game to play')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available games and exit')
    parser.add_argument('--resolution', '-r', type=str, default='1280x720',
                        help='Window resolution as WIDTHxHEIGHT (default: 1280x720)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level: trace, debug, info, warning, error, off')

    if game_slug:
        seen = set()
        for arg_def in registry.get_game_arguments(game_slug):
            arg_name = arg_def['name']
            if arg_name in seen:
                continue
            seen.add(arg_name)

            kwargs = {}
            if 'type' in arg_def:
                type_val = arg_def['type']
                if isinstance(type_val, str):
                    kwargs['type'] = {'str': str, 'int': int, 'float': float}.get(type_val, str)
                else:
                    kwargs['type'] = type_val
            if 'default' in arg_def:
                kwargs['default'] = arg_def['default']
            if 'help' in arg_def:
                kwargs['help'] = arg_def['help']
            if 'action' in arg_def:
                kwargs['action'] = arg_def['action']
                kwargs.pop('type', None)  # action and type are mutually exclusive
            if 'choices' in arg_def:
                kwargs['choices'] = arg_def['choices']

            parser.add_argument(arg_name, **kwargs)

    return parser


def print_game_list(registry) -> None:
    print("\nAvailable Games (Development Mode)")
    print("=" * 50)
    for slug in registry.list_games():
        info = registry.get_game_info(slug)
        print(f"\n  {slug}")
        print(f"    Name: {info.name}")
        print(f"    Description: {info.description}")
        print(f"    Version: {info.version}")
        game_args = registry.get_game_arguments(slug)
        if game_args:
            print(f"    Options: {', '.join(a['name'] for a in game_args)}")
    print()


def main(argv=None):
    """Main entry point for development game launcher."""
    registry = get_registry()

    # Phase 1: Parse just enough to identify the game
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=registry.list_games())
    pre_args, _ = pre_parser.parse_known_args(argv)

    # Phase 2: Full parser with game-specific arguments
    parser = build_parser(registry, pre_args.game)
    args = parser.parse_args(argv)

    if args.list:
        print_game_list(registry)
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    try:
        resolution = parse_resolution(args.resolution)
    except ValueError:
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 1920x1080)")
        return 1

    if args.log_level:
        configure_logging(level=args.log_level)

    skip_args = {'game', 'list', 'resolution', 'log_level'}
    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in skip_args and v is not None
    }

    try:
        game = registry.create_game(args.game, resolution.width, resolution.height, **game_kwargs)
    except (ValueError, FileNotFoundError) as e:
        print(f"ERROR: Failed to create game: {e}")
        return 1

    pygame.init()
    screen = pygame.display.set_mode((resolution.width, resolution.height))
    info = registry.get_game_info(args.game)
    pygame.display.set_caption(f"{info.name} - Development Mode")
    pygame.key.set_repeat(200, 40)
    register_sink('session', create_sink('session'))

    print("=" * 60)
    print(f"Development Mode: {info.name}")
    print("=" * 60)
    print(f"Resolution: {resolution.width}x{resolution.height}")
    if game_kwargs:
        print("Game options:")
        for k, v in game_kwargs.items():
            print(f"  --{k.replace('_', '-')}: {v}")
    print()
    print("Controls:")
    print("  - Enter or click to start")
    print("  - R or Backspace to abort a running game")
    print("  - Space or click to shoot")
    print("  - Arrow keys / WASD to move the bow")
    print("  - F to toggle fullscreen")
    print("  - ESC to quit")
    print("=" * 60)

    input_manager = registry.create_input_manager(args.game)
    clock = pygame.time.Clock()
    running = True
    last_state = game.state

    while running:
        dt = clock.tick(60) / 1000.0
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    pygame.display.toggle_fullscreen()

        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

        if game.state != last_state and game.state == GameState.GAME_OVER:
            print("\n" + "=" * 60)
            print("GAME OVER!")
            print(f"Final Score: {game.get_score()}")
            print("=" * 60)
            print("\nPress Enter to play again or ESC to quit")
        last_state = game.state

    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
