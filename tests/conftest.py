"""
Pytest configuration and fixtures for Multisnake tests.

This module sets up pygame mocking to allow testing the renderer and driver
without requiring a display or actual pygame initialization.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a mock of the parts of pygame Multisnake uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 660
    mock_surface.get_height.return_value = 700
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_text = MagicMock()
    mock_text.get_width.return_value = 100
    mock_text.get_height.return_value = 30
    mock_font = MagicMock()
    mock_font.render.return_value = mock_text
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    key_names = {
        273: "up", 274: "down", 276: "left", 275: "right",
        119: "w", 97: "a", 115: "s", 100: "d", 114: "r", 27: "escape",
    }
    mock_pygame.key.name.side_effect = lambda key: key_names.get(key, "unknown")

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect / Color
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: tuple(args))
    mock_pygame.Color = MagicMock(side_effect=lambda *args: tuple(args))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any Multisnake modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def pygame_calls(mock_pygame_module):
    """The pygame mock with call history cleared."""
    mock_pygame_module.draw.reset_mock()
    mock_pygame_module.display.flip.reset_mock()
    mock_pygame_module.quit.reset_mock()
    mock_pygame_module.time.get_ticks.return_value = 0
    mock_pygame_module.event.get.return_value = []
    return mock_pygame_module


@pytest.fixture
def make_config(mock_pygame_module):
    """
    Factory for SnakeConfig objects with no food by default.

    Players are given as dicts of PlayerConfig fields.
    """
    from multisnake.games.snake.config import SnakeConfig, PlayerConfig

    def _make(players, width=30, height=30, food_count=0, **kwargs):
        return SnakeConfig(
            grid_width=width,
            grid_height=height,
            food_count=food_count,
            players=tuple(PlayerConfig(**p) for p in players),
            **kwargs
        )

    return _make


@pytest.fixture
def make_game(make_config):
    """Factory for SnakeGame instances seeded for repeatable food placement."""
    from multisnake.games.snake.game import SnakeGame

    def _make(players, seed=0, **kwargs):
        return SnakeGame(make_config(players, **kwargs), seed=seed)

    return _make


@pytest.fixture
def two_player_game(make_game):
    """Two snakes moving towards each other on row 5."""
    return make_game([
        {"name": "east", "body": ((5, 5),), "direction": "right",
         "key_bindings": {"left": "left", "right": "right", "up": "up", "down": "down"}},
        {"name": "west", "body": ((7, 5),), "direction": "left",
         "key_bindings": {"a": "left", "d": "right", "w": "up", "s": "down"}},
    ])


@pytest.fixture
def config_dir(tmp_path):
    """A config directory with defaults and a per-game override."""
    games = tmp_path / "games"
    games.mkdir()
    (tmp_path / "default.yaml").write_text(
        "logging:\n"
        "  level: WARNING\n"
        "visualization:\n"
        "  title: Test Snake\n"
        "game:\n"
        "  grid_width: 30\n"
        "  grid_height: 30\n"
        "  speed_ms: 400\n"
        "  food_count: 3\n"
    )
    (games / "snake.yaml").write_text(
        "game:\n"
        "  grid_width: 12\n"
        "  food_count: 2\n"
        "  players:\n"
        "    - name: solo\n"
        "      color: [255, 165, 0]\n"
        "      body: [[3, 3], [2, 3]]\n"
        "      direction: down\n"
        "      key_bindings: {j: left, l: right}\n"
    )
    return tmp_path
