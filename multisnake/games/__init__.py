"""
Games module for Multisnake.

Import this module to populate the GameRegistry.
"""

from .registry import GameRegistry, register_game

# Import game modules to trigger registration
# Each game's __init__.py calls GameRegistry.register()
from . import snake

__all__ = [
    'GameRegistry',
    'register_game',
]
