"""
Input source implementations.
"""

from bullseye.input.sources.base import InputSource, ScriptedInputSource
from bullseye.input.sources.pygame_source import PygameInputSource

__all__ = ['InputSource', 'ScriptedInputSource', 'PygameInputSource']
