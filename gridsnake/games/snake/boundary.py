"""
Boundary Policies - What happens when the snake's head reaches the grid edge.

Two policies are supported:
- Walled: leaving the grid is fatal
- Toroidal: coordinates wrap around so the snake re-enters on the far side
"""
from abc import ABC, abstractmethod
from typing import Optional

from .errors import ConfigError, WallCollision
from .geometry import Position


WALLED = "walled"
TOROIDAL = "toroidal"


class BoundaryPolicy(ABC):
    """
    Abstract boundary rule for an N x N grid.

    Subclasses provide the coordinate transform; apply() combines the
    transform with the bounds check.
    """

    name: str = ""

    def __init__(self, grid_size: int):
        """
        Args:
            grid_size: Number of cells along each axis
        """
        self.grid_size = grid_size

    @abstractmethod
    def wrap(self, position: Position) -> Position:
        """
        Transform a raw position into policy coordinates.

        Does not raise; positions outside a walled grid are returned as is.
        """
        pass

    def contains(self, position: Position) -> bool:
        """Check whether a position lies inside [0, N) on both axes."""
        return 0 <= position.x < self.grid_size and 0 <= position.y < self.grid_size

    def apply(self, position: Position) -> Position:
        """
        Resolve where a head moving to `position` ends up.

        Args:
            position: Raw head position (previous head + direction delta)

        Returns:
            The position after the policy transform

        Raises:
            WallCollision: If the policy treats the position as a wall hit
        """
        return self.wrap(position)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(grid_size={self.grid_size})"


class WalledBoundary(BoundaryPolicy):
    """Any coordinate outside the grid is a fatal wall collision."""

    name = WALLED

    def wrap(self, position: Position) -> Position:
        return position

    def apply(self, position: Position) -> Position:
        if not self.contains(position):
            raise WallCollision(position)
        return position


class ToroidalBoundary(BoundaryPolicy):
    """
    Coordinates wrap modulo `modulus`; wall collisions cannot happen.

    The modulus defaults to the grid size. A modulus of grid_size + 1 adds
    one hidden column and row the snake passes through before re-entering.
    """

    name = TOROIDAL

    def __init__(self, grid_size: int, modulus: Optional[int] = None):
        super().__init__(grid_size)
        self.modulus = grid_size if modulus is None else modulus
        if self.modulus < grid_size:
            raise ConfigError(
                f"wrap modulus {self.modulus} is smaller than grid size {grid_size}"
            )

    def wrap(self, position: Position) -> Position:
        # Python's % is non-negative for a positive modulus
        return Position(position.x % self.modulus, position.y % self.modulus)

    def __repr__(self) -> str:
        return f"ToroidalBoundary(grid_size={self.grid_size}, modulus={self.modulus})"


def make_boundary(kind: str, grid_size: int, modulus: Optional[int] = None) -> BoundaryPolicy:
    """
    Create a boundary policy by name.

    Args:
        kind: "walled" or "toroidal"
        grid_size: Number of cells along each axis
        modulus: Wrap modulus for the toroidal policy (ignored when walled)

    Returns:
        BoundaryPolicy instance

    Raises:
        ConfigError: If the policy name is unknown
    """
    kind = kind.strip().lower()
    if kind == WALLED:
        return WalledBoundary(grid_size)
    if kind == TOROIDAL:
        return ToroidalBoundary(grid_size, modulus)
    raise ConfigError(f"Unknown boundary policy: {kind!r}")
