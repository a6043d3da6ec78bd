"""
Snake game errors.

Collisions are raised by the snake and turned into a game over by the
game state machine; they never leave SnakeGame.
"""
from enum import Enum
from typing import Optional

from .geometry import Position


class CollisionKind(Enum):
    """What the snake's head ran into."""
    WALL = "wall"
    SELF = "self"


class CollisionError(Exception):
    """The snake's head moved onto a cell that ends the game."""

    kind: CollisionKind

    def __init__(self, position: Position, message: Optional[str] = None):
        self.position = position
        super().__init__(message or f"{self.kind.value} collision at ({position.x}, {position.y})")


class WallCollision(CollisionError):
    """Head left the grid under a walled boundary."""
    kind = CollisionKind.WALL


class SelfCollision(CollisionError):
    """Head moved onto one of the snake's own segments."""
    kind = CollisionKind.SELF


class ConfigError(ValueError):
    """Invalid game configuration."""
