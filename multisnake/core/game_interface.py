"""
Abstract game interface for Multisnake.

All games must implement GameInterface and provide GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    min_players: int = 1                # Minimum players
    max_players: int = 1                # Maximum players


class GameInterface(ABC):
    """
    Abstract base class for all games in Multisnake.

    Games own their rules and state. They never draw, keep time or read
    input devices; a driver calls ``advance_tick`` on a fixed interval and
    forwards key names to ``handle_key``.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def advance_tick(self) -> Any:
        """
        Advance the simulation by one discrete step.

        Returns:
            Game-specific tick result
        """
        pass

    @abstractmethod
    def handle_key(self, key: str, snake: Optional[str] = None) -> bool:
        """
        Feed a key name into the game.

        Args:
            key: Key name as reported by the input layer
            snake: Optional player to restrict the key to

        Returns:
            True if the key meant something to the game
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @property
    @abstractmethod
    def game_over(self) -> bool:
        """Whether the game has reached its terminal state."""
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
