"""
Archery - Game Info

Metadata and CLI arguments for discovery by GameRegistry.
"""

NAME = "Archery"
DESCRIPTION = "Shoot arrows at a moving target before the clock runs out."
VERSION = "1.0.0"
AUTHOR = "Bullseye Team"

ARGUMENTS = [
    {
        'name': '--variant',
        'type': str,
        'default': None,
        'choices': ['slide', 'aim'],
        'help': 'Preset to play: slide (jumping target) or aim (bouncing target, obstacles)'
    },
    {
        'name': '--preset-file',
        'type': str,
        'default': None,
        'help': 'Path to a custom YAML preset (overrides --variant)'
    },
    {
        'name': '--duration',
        'type': int,
        'default': None,
        'help': 'Game length in seconds'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create an ArcheryMode instance."""
    from games.Archery.game_mode import ArcheryMode

    game_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return ArcheryMode(**game_kwargs)
