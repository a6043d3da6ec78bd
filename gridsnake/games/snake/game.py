"""
Snake Game Core - Tick-driven game state machine without rendering.

The driver calls tick() every frame with the elapsed time and forwards
player input through request_direction(). Once enough time has built up
the snake moves one cell, collisions are resolved according to the
configured boundary policy, and food is respawned when eaten.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Sequence, Tuple

import numpy as np

from ...core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig
from .errors import CollisionError, CollisionKind
from .food import place_food
from .geometry import Direction, Position
from .snake import Snake

logger = logging.getLogger(__name__)

# Cell codes used by Snapshot.to_grid()
EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3


class GamePhase(Enum):
    """State machine phases."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game for renderers."""
    body: Tuple[Position, ...]
    food: Position
    game_over: bool
    direction: Direction
    grid_size: int
    collision: Optional[CollisionKind] = None
    steps: int = 0

    @property
    def head(self) -> Position:
        return self.body[0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for renderers and serialization."""
        return {
            "snake": [p.to_dict() for p in self.body],
            "food": self.food.to_dict(),
            "direction": int(self.direction),
            "game_over": self.game_over,
            "collision": self.collision.value if self.collision else None,
            "steps": self.steps,
            "width": self.grid_size,
            "height": self.grid_size,
        }

    def to_grid(self) -> np.ndarray:
        """Rasterize the snapshot, see rasterize()."""
        return rasterize(self.body, self.food, self.grid_size)


def rasterize(body: Sequence[Position], food: Position, grid_size: int) -> np.ndarray:
    """
    Build a [y, x] grid of cell codes (EMPTY, BODY, HEAD, FOOD).

    Segments outside the visible grid (the hidden row and column of a wrap
    modulus larger than the grid) are left out.

    Args:
        body: Segments, head first
        food: Food position
        grid_size: Number of cells along each axis

    Returns:
        int8 array of shape (grid_size, grid_size)
    """
    grid = np.full((grid_size, grid_size), EMPTY, dtype=np.int8)

    def visible(p: Position) -> bool:
        return 0 <= p.x < grid_size and 0 <= p.y < grid_size

    if visible(food):
        grid[food.y, food.x] = FOOD
    for segment in body[1:]:
        if visible(segment):
            grid[segment.y, segment.x] = BODY
    # Head last so it wins on overlap
    if body and visible(body[0]):
        grid[body[0].y, body[0].x] = HEAD
    return grid


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell every `move_interval` seconds and grows when it
    eats food. Depending on the configuration, leaving the grid is either
    fatal or wraps around, and running into its own body may end the game.
    A finished game stays frozen until restart().
    """

    def __init__(self, config: Optional[SnakeConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            config: Game configuration (defaults to SnakeConfig())
            rng: Random source for food placement; seeded from config.seed if omitted
        """
        self.config = (config or SnakeConfig()).validate()
        self.grid_size = self.config.grid_size
        self.boundary = self.config.make_boundary()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        # Game state (built by restart)
        self.snake: Snake
        self.food: Position
        self.phase: GamePhase
        self.collision: Optional[CollisionKind]
        self.accumulated: float
        self.steps: int

        self.restart()

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return Snake game metadata."""
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Steer the snake to the food without crashing",
        )

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    def restart(self) -> None:
        """Rebuild the snake and food from the initial configuration."""
        self.snake = Snake(self.config.initial_positions(), self.config.direction)
        self.phase = GamePhase.PLAYING
        self.collision = None
        self.accumulated = 0.0
        self.steps = 0
        self._place_food()
        logger.debug("Game restarted: %r, food at %s", self.snake, self.food)

    def _place_food(self) -> None:
        """Place food at random location not on snake."""
        self.food = place_food(self.grid_size, self.snake.occupies, self.rng)

    def request_direction(self, direction: Direction) -> bool:
        """
        Turn the snake. Takes effect on the next step.

        Args:
            direction: Requested direction

        Returns:
            True if accepted, False if ignored (reversal or game over)
        """
        if self.game_over:
            return False
        return self.snake.change_direction(direction)

    def tick(self, elapsed_seconds: float) -> bool:
        """
        Accumulate frame time and move once the move interval has passed.

        At most one step is taken per call; the accumulator restarts from
        zero after each step.

        Args:
            elapsed_seconds: Time since the previous tick

        Returns:
            True if the snake moved (or died trying)
        """
        if elapsed_seconds < 0:
            raise ValueError(f"elapsed time cannot be negative: {elapsed_seconds}")
        if self.game_over:
            return False

        self.accumulated += elapsed_seconds
        if self.accumulated <= self.config.move_interval:
            return False

        self.accumulated = 0.0
        self.step()
        return True

    def step(self) -> None:
        """Move the snake one cell immediately, ignoring the timer."""
        if self.game_over:
            return

        snake = self.snake
        grow = self.boundary.wrap(snake.next_head()) == self.food
        check_self = (
            self.config.self_collision
            and len(snake) >= self.config.self_collision_min_length
        )

        self.steps += 1
        try:
            snake.advance(grow, self.boundary, check_self=check_self)
        except CollisionError as e:
            self.phase = GamePhase.GAME_OVER
            self.collision = e.kind
            logger.info("Game over after %d steps: %s (length %d)", self.steps, e, len(snake))
            return

        if grow:
            self._place_food()
            logger.debug("Food eaten, length %d, new food at %s", len(snake), self.food)

    def snapshot(self) -> Snapshot:
        """Get current game state for rendering."""
        return Snapshot(
            body=self.snake.body,
            food=self.food,
            game_over=self.game_over,
            direction=self.snake.direction,
            grid_size=self.grid_size,
            collision=self.collision,
            steps=self.steps,
        )

    def get_state(self) -> Dict[str, Any]:
        """Current state as a dictionary (see Snapshot.to_dict)."""
        return self.snapshot().to_dict()
