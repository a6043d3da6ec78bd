"""
Food placement.
"""
import random
from typing import Callable, Optional

from .geometry import Position


def place_food(
    grid_size: int,
    occupied: Callable[[Position], bool],
    rng: Optional[random.Random] = None,
) -> Position:
    """
    Pick a uniformly random free cell.

    Samples [0, grid_size) x [0, grid_size) until `occupied` rejects nothing.
    On a completely full board this never returns; the snake dies long
    before that in any real game.

    Args:
        grid_size: Number of cells along each axis
        occupied: Predicate telling whether a cell is taken (e.g. Snake.occupies)
        rng: Random source, the module-level generator if omitted

    Returns:
        A position for which occupied() is False
    """
    rng = rng or random
    while True:
        food = Position(rng.randrange(grid_size), rng.randrange(grid_size))
        if not occupied(food):
            return food
