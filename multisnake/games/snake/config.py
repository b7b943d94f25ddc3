"""
Snake game configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple, Optional


DIRECTION_NAMES = ("left", "right", "up", "down")


@dataclass(frozen=True)
class PlayerConfig:
    """Starting layout and controls for one snake.

    ``key_bindings`` accepts a mapping of key name to direction name and is
    stored as a tuple of ``(key, direction)`` pairs so the config stays
    immutable and hashable.
    """

    name: str
    color: Any = "orange"
    body: Tuple[Tuple[int, int], ...] = ((1, 1),)
    direction: str = "right"
    key_bindings: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        if not self.body:
            raise ValueError(f"Player {self.name!r} needs a starting body")
        # Normalise lists coming from YAML into tuples
        object.__setattr__(self, "body", tuple((int(x), int(y)) for x, y in self.body))
        if isinstance(self.color, list):
            object.__setattr__(self, "color", tuple(self.color))
        object.__setattr__(self, "direction", str(self.direction).lower())
        if self.direction not in DIRECTION_NAMES:
            raise ValueError(f"Player {self.name!r} has unknown direction {self.direction!r}")

        bindings = self.key_bindings
        if isinstance(bindings, dict):
            bindings = bindings.items()
        bindings = tuple((str(key), str(direction).lower()) for key, direction in bindings)
        for key, direction in bindings:
            if direction not in DIRECTION_NAMES:
                raise ValueError(
                    f"Player {self.name!r} binds {key!r} to unknown direction {direction!r}"
                )
        object.__setattr__(self, "key_bindings", bindings)

    @property
    def bindings(self) -> Dict[str, str]:
        """Key bindings as a fresh dict."""
        return dict(self.key_bindings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "color": list(self.color) if isinstance(self.color, tuple) else self.color,
            "body": [list(p) for p in self.body],
            "direction": self.direction,
            "key_bindings": self.bindings,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerConfig":
        return cls(
            name=data["name"],
            color=data.get("color", "orange"),
            body=tuple(tuple(p) for p in data.get("body", ((1, 1),))),
            direction=data.get("direction", "right"),
            key_bindings=dict(data.get("key_bindings") or {}),
        )


def default_players() -> Tuple[PlayerConfig, ...]:
    """Two players: arrow keys and WASD."""
    return (
        PlayerConfig(
            name="purple",
            color="purple",
            body=((20, 20),),
            direction="right",
            key_bindings={"left": "left", "right": "right", "up": "up", "down": "down"},
        ),
        PlayerConfig(
            name="pink",
            color="pink",
            body=((10, 10),),
            direction="right",
            key_bindings={"a": "left", "d": "right", "w": "up", "s": "down"},
        ),
    )


@dataclass(frozen=True)
class SnakeConfig:
    """Configuration for the Snake game. Immutable once built."""

    # Grid dimensions; cells on x == 0, x == grid_width, y == 0, y == grid_height are walls
    grid_width: int = 30
    grid_height: int = 30

    # Milliseconds between ticks, used by the driver only
    speed_ms: int = 400

    # Pellets kept on the board
    food_count: int = 3

    # Pixel size of one cell, used by the renderer only
    cell_size: int = 20
    food_color: Any = "green"

    players: Tuple[PlayerConfig, ...] = field(default_factory=default_players)

    def __post_init__(self):
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError(
                f"Grid must be at least 2x2, got {self.grid_width}x{self.grid_height}"
            )
        if self.speed_ms <= 0:
            raise ValueError(f"speed_ms must be positive, got {self.speed_ms}")
        if self.food_count < 0:
            raise ValueError(f"food_count must not be negative, got {self.food_count}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if isinstance(self.food_color, list):
            object.__setattr__(self, "food_color", tuple(self.food_color))

        object.__setattr__(self, "players", tuple(self.players))
        if not self.players:
            raise ValueError("At least one player is required")
        names = [p.name for p in self.players]
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique, got {names}")

        for player in self.players:
            for x, y in player.body:
                if not (0 < x < self.grid_width and 0 < y < self.grid_height):
                    raise ValueError(
                        f"Player {player.name!r} starts at ({x}, {y}), outside the "
                        f"{self.grid_width}x{self.grid_height} grid; playable cells are "
                        f"1..{self.grid_width - 1} by 1..{self.grid_height - 1}"
                    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "grid_width": self.grid_width,
            "grid_height": self.grid_height,
            "speed_ms": self.speed_ms,
            "food_count": self.food_count,
            "cell_size": self.cell_size,
            "food_color": (
                list(self.food_color) if isinstance(self.food_color, tuple) else self.food_color
            ),
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SnakeConfig":
        """Create config from dictionary."""
        data = data or {}
        players = data.get("players")
        return cls(
            grid_width=data.get("grid_width", 30),
            grid_height=data.get("grid_height", 30),
            speed_ms=data.get("speed_ms", 400),
            food_count=data.get("food_count", 3),
            cell_size=data.get("cell_size", 20),
            food_color=data.get("food_color", "green"),
            players=(
                tuple(PlayerConfig.from_dict(p) for p in players)
                if players is not None else default_players()
            ),
        )
