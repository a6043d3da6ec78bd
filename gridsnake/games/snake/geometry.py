"""
Snake Geometry - Grid positions and movement directions.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit (dx, dy) step for this direction."""
        return DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self + 2) % 4)

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """
        Look up a direction by name, ignoring case.

        Args:
            name: Direction name such as "up" or "RIGHT"

        Returns:
            The matching Direction

        Raises:
            ValueError: If the name is not a direction
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


# Screen coordinates: y grows downwards
DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def delta_for(direction: Direction) -> Tuple[int, int]:
    """Return the (dx, dy) step for a direction."""
    return DELTAS[direction]


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""
    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Position":
        """Return the position offset by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def step(self, direction: Direction) -> "Position":
        """Return the neighbouring position in the given direction."""
        dx, dy = delta_for(direction)
        return self.translate(dx, dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_pair(cls, pair) -> "Position":
        """Build a position from an (x, y) pair or {"x", "y"} mapping."""
        if isinstance(pair, dict):
            return cls(int(pair["x"]), int(pair["y"]))
        x, y = pair
        return cls(int(x), int(y))
