"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Tuple, Union, Sequence

from ...core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
WALL_COLOR = (70, 70, 85)

ColorSpec = Union[str, Sequence[int]]


def to_color(value: ColorSpec) -> "pygame.Color":
    """Accept a colour name ("purple") or an RGB(A) sequence."""
    if isinstance(value, (list, tuple)):
        return pygame.Color(*value)
    return pygame.Color(value)


class SnakeRenderer(RendererInterface):
    """
    Renders a multiplayer Snake snapshot using Pygame.

    Every segment and pellet is drawn as a circle centred in its cell; wall
    cells along the border are shaded. The board covers cells 0..width and
    0..height inclusive so the walls are visible.
    """

    def __init__(
        self,
        cell_size: int = 20,
        grid_width: int = 30,
        grid_height: int = 30,
        food_color: ColorSpec = "green"
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            food_color: Colour used for pellets
        """
        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._food_color = food_color
        self._offset_x = 0
        self._offset_y = 0

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (
            (self._grid_width + 1) * self._cell_size,
            (self._grid_height + 1) * self._cell_size,
        )

    def get_cell_size(self) -> int:
        return self._cell_size

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Fit the board into the given area, shrinking cells if needed."""
        self._offset_x = x
        self._offset_y = y
        cell_w = width // (self._grid_width + 1)
        cell_h = height // (self._grid_height + 1)
        self._cell_size = max(1, min(cell_w, cell_h))

    def cell_center(self, x: int, y: int) -> Tuple[int, int]:
        """Pixel centre of grid cell (x, y)."""
        return (
            self._offset_x + x * self._cell_size + self._cell_size // 2,
            self._offset_y + y * self._cell_size + self._cell_size // 2,
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Snapshot from SnakeGame.get_state()
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)
        cell = self._cell_size
        board_w = (width + 1) * cell
        board_h = (height + 1) * cell

        # Walls, then the playable interior on top
        pygame.draw.rect(
            surface, WALL_COLOR,
            pygame.Rect(self._offset_x, self._offset_y, board_w, board_h)
        )
        pygame.draw.rect(
            surface, DARK_GRAY,
            pygame.Rect(self._offset_x + cell, self._offset_y + cell,
                        (width - 1) * cell, (height - 1) * cell)
        )

        # Grid lines (subtle)
        for x in range(1, width + 1):
            start = (self._offset_x + x * cell, self._offset_y + cell)
            end = (self._offset_x + x * cell, self._offset_y + height * cell)
            pygame.draw.line(surface, GRID_COLOR, start, end)
        for y in range(1, height + 1):
            start = (self._offset_x + cell, self._offset_y + y * cell)
            end = (self._offset_x + width * cell, self._offset_y + y * cell)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        radius = max(1, cell // 2)

        food_color = to_color(self._food_color)
        for pellet in game_state.get("food", []):
            pygame.draw.circle(surface, food_color, self.cell_center(pellet["x"], pellet["y"]), radius)

        for snake in game_state.get("snakes", []):
            color = to_color(snake.get("color", "orange"))
            for segment in snake["body"]:
                pygame.draw.circle(surface, color, self.cell_center(segment["x"], segment["y"]), radius)
