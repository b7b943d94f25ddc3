"""
Snake Game Core - Pure multiplayer game logic without rendering.

Snakes move one cell per tick on a walled grid, eat pellets and grow.
The game ends as soon as any snake is found crashed into a wall,
itself, or another snake.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Iterable
from enum import Enum, IntEnum
import logging
import random

from ...core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig, PlayerConfig

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """Grid offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def same_axis(self, other: "Direction") -> bool:
        """True if both directions are equal or opposite."""
        return self.is_horizontal == other.is_horizontal

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """
        Parse a direction name such as "left" or "UP".

        Raises:
            ValueError: If the name is not a direction
        """
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


class GameStatus(Enum):
    """Tick state machine states. GAME_OVER is terminal."""
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def is_out_of_bounds(self, width: int, height: int) -> bool:
        """Wall cells (x == 0, x == width, y == 0, y == height) count as out."""
        return self.x <= 0 or self.x >= width or self.y <= 0 or self.y >= height

    def offset(self, direction: Direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    @classmethod
    def random(cls, rng: random.Random, width: int, height: int) -> "Point":
        """Uniformly sample a point inside the playable interior."""
        return cls(rng.randint(1, width - 1), rng.randint(1, height - 1))

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Pellet:
    """A food pellet. Two pellets on the same cell are the same pellet."""
    pt: Point

    @classmethod
    def random(cls, rng: random.Random, width: int, height: int) -> "Pellet":
        return cls(Point.random(rng, width, height))

    def to_dict(self) -> Dict[str, int]:
        return self.pt.to_dict()


class Snake:
    """
    A player-controlled snake.

    The body is stored head first. Growth is delayed: eating a pellet adds
    two to ``pending_growth`` and the tail stays in place for that many
    subsequent truncations.
    """

    def __init__(
        self,
        body: Iterable[Point],
        direction: Direction,
        key_bindings: Optional[Dict[str, Direction]] = None,
        color: Any = "orange",
        name: str = "snake",
    ):
        """
        Initialize a snake.

        Args:
            body: Starting segments, head first
            direction: Heading used on the next move
            key_bindings: Mapping of key names to directions
            color: Rendering tag, opaque to the game logic
            name: Identifier used for key dispatch and reporting

        Raises:
            ValueError: If the body is empty
        """
        self.body: List[Point] = list(body)
        if not self.body:
            raise ValueError(f"Snake {name!r} needs at least one body segment")

        self.direction = direction
        self.key_bindings: Dict[str, Direction] = dict(key_bindings or {})
        self.color = color
        self.name = name
        self.pending_growth = 0
        self.score = 0

    @classmethod
    def from_config(cls, player: PlayerConfig) -> "Snake":
        """Build a snake from its player configuration."""
        return cls(
            body=[Point(x, y) for x, y in player.body],
            direction=Direction.from_name(player.direction),
            key_bindings={
                key: Direction.from_name(name)
                for key, name in player.key_bindings
            },
            color=player.color,
            name=player.name,
        )

    @property
    def head(self) -> Point:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __repr__(self) -> str:
        return (
            f"Snake(name={self.name!r}, head={self.head}, "
            f"direction={self.direction.name}, length={len(self.body)})"
        )

    def handle_key(self, key: str) -> bool:
        """
        Turn if the key is bound for this snake.

        Returns:
            True if the key is one of this snake's bindings
        """
        direction = self.key_bindings.get(key)
        if direction is None:
            return False
        self.request_direction_change(direction)
        return True

    def request_direction_change(self, direction: Direction) -> None:
        # Same axis covers both "keep going" and a reversal into the neck.
        if direction.same_axis(self.direction):
            return
        self.direction = direction

    def move(self) -> None:
        """Add a new head one cell ahead. Must be followed by truncate()."""
        self.body.insert(0, self.head.offset(self.direction))

    def truncate(self) -> None:
        if self.pending_growth == 0:
            self.body.pop()
        else:
            self.pending_growth -= 1

    def grow(self) -> None:
        self.pending_growth += 2
        self.score += 1

    def contains_point(self, point: Point, exclude_head: bool = False) -> bool:
        segments = self.body[1:] if exclude_head else self.body
        return point in segments

    def crashed_into_self(self) -> bool:
        return self.contains_point(self.head, exclude_head=True)

    def crashed_into_wall(self, width: int, height: int) -> bool:
        return self.head.is_out_of_bounds(width, height)

    def crashed_into(self, other: "Snake") -> bool:
        """Head touches any part of ``other``, its head included."""
        return other.contains_point(self.head)

    def eats(self, food: Iterable[Pellet]) -> Optional[Pellet]:
        """Return the pellet under the head, if any."""
        head = self.head
        for pellet in food:
            if pellet.pt == head:
                return pellet
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "color": self.color,
            "direction": self.direction.name.lower(),
            "score": self.score,
            "pending_growth": self.pending_growth,
            "body": [p.to_dict() for p in self.body],
        }


@dataclass
class TickResult:
    """Outcome of one call to SnakeGame.advance_tick()."""
    status: GameStatus
    tick: int
    crashed: List[str] = field(default_factory=list)
    eaten: List[str] = field(default_factory=list)

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


class SnakeGame(GameInterface):
    """
    Multiplayer Snake tick engine.

    Owns every snake and pellet. Collisions are evaluated against the heads
    as they stand at the start of a tick, so a crash made by one tick's
    movement is reported by the following tick.
    """

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Immutable game configuration (defaults to SnakeConfig())
            seed: Seed for food placement
            rng: Random generator to use instead of a seeded one

        Raises:
            ValueError: If a starting snake is out of bounds
        """
        self.config = config or SnakeConfig()
        self.width = self.config.grid_width
        self.height = self.config.grid_height
        self.food_count = self.config.food_count
        self.random = rng or random.Random(seed)

        self.snakes: List[Snake] = []
        self.food: List[Pellet] = []
        self.status = GameStatus.RUNNING
        self.tick_count = 0
        self.crashed: List[str] = []

        self.reset()

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Two or more snakes compete for food on one board",
            min_players=1,
            max_players=4,
        )

    def reset(self) -> Dict[str, Any]:
        """
        Rebuild snakes from the configuration and refill food.

        Returns:
            The initial snapshot
        """
        self.snakes = [Snake.from_config(player) for player in self.config.players]
        self.food = []
        self.status = GameStatus.RUNNING
        self.tick_count = 0
        self.crashed = []
        self.refill_food()

        logger.info(
            "New game on %dx%d grid with %d snake(s)",
            self.width, self.height, len(self.snakes),
        )
        return self.get_state()

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def get_snake(self, name: str) -> Snake:
        """
        Look up a snake by name.

        Raises:
            KeyError: If no snake has that name
        """
        for snake in self.snakes:
            if snake.name == name:
                return snake
        raise KeyError(name)

    def handle_key(self, key: str, snake: Optional[str] = None) -> bool:
        """
        Dispatch a key name to every snake, or only to the named one.

        Returns:
            True if at least one snake had the key bound
        """
        targets = [self.get_snake(snake)] if snake is not None else self.snakes
        handled = False
        for target in targets:
            if target.handle_key(key):
                handled = True
        return handled

    def find_crashed(self) -> List[Snake]:
        """Snakes whose current head is on a wall, themselves or another snake."""
        crashed = []
        for snake in self.snakes:
            if (
                snake.crashed_into_self()
                or snake.crashed_into_wall(self.width, self.height)
                or any(snake.crashed_into(other) for other in self.snakes if other is not snake)
            ):
                crashed.append(snake)
        return crashed

    def advance_tick(self) -> TickResult:
        """
        Execute one game tick.

        Returns:
            TickResult describing the new status, crashes and who ate
        """
        if self.game_over:
            logger.debug("advance_tick called after game over; ignoring")
            return TickResult(self.status, self.tick_count, list(self.crashed))

        crashed = self.find_crashed()
        if crashed:
            self.status = GameStatus.GAME_OVER
            self.crashed = [s.name for s in crashed]
            logger.info(
                "Game over after %d ticks: %s crashed",
                self.tick_count, ", ".join(self.crashed),
            )
            return TickResult(self.status, self.tick_count, list(self.crashed))

        # Every snake sees the food as it was before this tick.
        pre_tick_food = list(self.food)
        eaten = []
        for snake in self.snakes:
            snake.move()
            snake.truncate()
            pellet = snake.eats(pre_tick_food)
            if pellet is not None:
                self.remove_food(pellet)
                snake.grow()
                eaten.append(snake.name)
                logger.debug("%s ate pellet at (%d, %d)", snake.name, pellet.pt.x, pellet.pt.y)

        self.refill_food()
        self.tick_count += 1
        return TickResult(self.status, self.tick_count, eaten=eaten)

    def remove_food(self, pellet: Pellet) -> None:
        """Remove the pellet on the same cell, if it is still there."""
        self.food = [f for f in self.food if f != pellet]

    def is_occupied(self, point: Point) -> bool:
        return any(snake.contains_point(point) for snake in self.snakes)

    def refill_food(self) -> None:
        """Spawn pellets on free cells until food_count are on the board."""
        while len(self.food) < self.food_count:
            if not self._has_free_cell():
                logger.warning(
                    "No free cell left for food (%d/%d pellets placed)",
                    len(self.food), self.food_count,
                )
                return

            pellet = Pellet.random(self.random, self.width, self.height)
            if self.is_occupied(pellet.pt) or pellet in self.food:
                continue
            self.food.append(pellet)

    def _has_free_cell(self) -> bool:
        taken = {pellet.pt for pellet in self.food}
        for snake in self.snakes:
            taken.update(
                p for p in snake.body if not p.is_out_of_bounds(self.width, self.height)
            )
        return len(taken) < (self.width - 1) * (self.height - 1)

    def get_state(self) -> Dict[str, Any]:
        """
        Get a read-only snapshot for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "status": self.status.value,
            "tick": self.tick_count,
            "width": self.width,
            "height": self.height,
            "snakes": [snake.to_dict() for snake in self.snakes],
            "food": [pellet.to_dict() for pellet in self.food],
            "crashed": list(self.crashed),
        }

    def get_score(self) -> int:
        """Best score among all snakes."""
        return max((snake.score for snake in self.snakes), default=0)
