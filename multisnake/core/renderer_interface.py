"""
Abstract renderer interface for Multisnake.

All game renderers must implement this interface for visualization.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    import pygame


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers draw a game state snapshot to a pygame surface.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state from get_state()
            surface: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass

    def get_cell_size(self) -> int:
        """
        Get the cell/unit size for grid-based games.

        Returns:
            Cell size in pixels (default 20)
        """
        return 20
