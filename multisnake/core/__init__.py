"""
Core abstractions for Multisnake.

Provides abstract interfaces that all games and renderers must implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
]
