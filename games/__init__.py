"""
Bullseye games. Each subdirectory with a game_mode.py is picked up by
games.registry.
"""
