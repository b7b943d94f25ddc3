"""
Game registry for Multisnake.

Central registry for discovering and instantiating games.
Games register themselves when their module is imported.
"""

import importlib
from typing import Dict, Type, List, Optional, Any, Union
from ..core.game_interface import GameInterface, GameMetadata
from ..core.renderer_interface import RendererInterface


class GameRegistry:
    """
    Central registry for all available games.

    Games register themselves using the @register_game decorator or by
    calling GameRegistry.register() directly in their __init__.py.

    A renderer may be registered as a "package.module:ClassName" string so
    that the graphics library is only imported when a renderer is created.
    """

    _games: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        game_class: Type[GameInterface],
        renderer_class: Union[Type[RendererInterface], str],
        config_class: Optional[Type] = None
    ) -> None:
        """
        Register a game with the registry.

        Args:
            game_class: The game implementation class
            renderer_class: The renderer class, or its "module:Class" import path
            config_class: Optional game-specific config class
        """
        metadata = game_class.get_metadata()
        cls._games[metadata.id] = {
            'game_class': game_class,
            'renderer_class': renderer_class,
            'config_class': config_class,
            'metadata': metadata
        }

    @classmethod
    def get_game(cls, game_id: str) -> Optional[Dict[str, Any]]:
        """
        Get game components by ID.

        Args:
            game_id: The game identifier

        Returns:
            Dictionary with game classes, or None if not found
        """
        return cls._games.get(game_id)

    @classmethod
    def list_games(cls) -> List[GameMetadata]:
        """List all registered games."""
        return [g['metadata'] for g in cls._games.values()]

    @classmethod
    def is_available(cls, game_id: str) -> bool:
        return game_id in cls._games

    @classmethod
    def _require(cls, game_id: str) -> Dict[str, Any]:
        game_data = cls._games.get(game_id)
        if not game_data:
            raise ValueError(f"Unknown game: {game_id}")
        return game_data

    @classmethod
    def create_game(cls, game_id: str, **kwargs) -> GameInterface:
        """
        Create a game instance.

        Args:
            game_id: The game identifier
            **kwargs: Arguments to pass to the game constructor

        Returns:
            Game instance

        Raises:
            ValueError: If game is not registered
        """
        return cls._require(game_id)['game_class'](**kwargs)

    @classmethod
    def create_renderer(cls, game_id: str, **kwargs) -> RendererInterface:
        """
        Create a renderer instance for a game.

        Raises:
            ValueError: If game is not registered
        """
        return cls.get_renderer_class(game_id)(**kwargs)

    @classmethod
    def get_renderer_class(cls, game_id: str) -> Type[RendererInterface]:
        """
        Get the renderer class for a game, importing it on first use.

        Raises:
            ValueError: If game is not registered
        """
        game_data = cls._require(game_id)
        renderer_class = game_data['renderer_class']
        if isinstance(renderer_class, str):
            module_name, _, class_name = renderer_class.partition(":")
            renderer_class = getattr(importlib.import_module(module_name), class_name)
            game_data['renderer_class'] = renderer_class
        return renderer_class

    @classmethod
    def get_config_class(cls, game_id: str) -> Optional[Type]:
        """
        Get the config class for a game.

        Args:
            game_id: The game identifier

        Returns:
            Config class or None
        """
        game_data = cls._games.get(game_id)
        if game_data:
            return game_data.get('config_class')
        return None

    @classmethod
    def get_metadata(cls, game_id: str) -> Optional[GameMetadata]:
        game_data = cls._games.get(game_id)
        if game_data:
            return game_data.get('metadata')
        return None

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._games.clear()


def register_game(
    renderer_class: Union[Type[RendererInterface], str],
    config_class: Optional[Type] = None
):
    """
    Decorator to register a game class.

    Usage:
        @register_game(SnakeRenderer, SnakeConfig)
        class SnakeGame(GameInterface):
            ...
    """
    def decorator(game_class: Type[GameInterface]) -> Type[GameInterface]:
        GameRegistry.register(game_class, renderer_class, config_class)
        return game_class
    return decorator
