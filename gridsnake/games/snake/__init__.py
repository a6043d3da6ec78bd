"""
Snake game module for Grid Snake.

This module auto-registers the Snake game when imported.
"""

from ..registry import GameRegistry
from .geometry import Direction, Position, delta_for
from .errors import CollisionError, CollisionKind, WallCollision, SelfCollision, ConfigError
from .boundary import BoundaryPolicy, WalledBoundary, ToroidalBoundary, make_boundary
from .snake import Snake
from .food import place_food
from .config import SnakeConfig
from .game import SnakeGame, Snapshot, GamePhase
from .renderer import SnakeRenderer

# Auto-register Snake game when this module is imported
GameRegistry.register(
    game_class=SnakeGame,
    renderer_class=SnakeRenderer,
    config_class=SnakeConfig
)

__all__ = [
    'SnakeGame',
    'Snapshot',
    'GamePhase',
    'SnakeRenderer',
    'SnakeConfig',
    'Snake',
    'place_food',
    'Direction',
    'Position',
    'delta_for',
    'BoundaryPolicy',
    'WalledBoundary',
    'ToroidalBoundary',
    'make_boundary',
    'CollisionError',
    'CollisionKind',
    'WallCollision',
    'SelfCollision',
    'ConfigError',
]
