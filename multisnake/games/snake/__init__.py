"""
Snake game module for Multisnake.

This module auto-registers the Snake game when imported. Only the pygame-free
core is imported here; the renderer is loaded by the registry on first use and
the driver is imported from ``multisnake.games.snake.driver``.
"""

from ..registry import GameRegistry
from .game import SnakeGame, Snake, Direction, Point, Pellet, GameStatus, TickResult
from .config import SnakeConfig, PlayerConfig

# Auto-register Snake game when this module is imported
GameRegistry.register(
    game_class=SnakeGame,
    renderer_class="multisnake.games.snake.renderer:SnakeRenderer",
    config_class=SnakeConfig
)

__all__ = [
    'SnakeGame',
    'Snake',
    'SnakeConfig',
    'PlayerConfig',
    'Direction',
    'GameStatus',
    'TickResult',
    'Point',
    'Pellet',
]
