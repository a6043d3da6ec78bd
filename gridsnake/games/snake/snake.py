"""
Snake - Body segments, direction and movement rules.
"""
from collections import deque
from itertools import islice
from typing import Deque, Iterable, Iterator, Tuple

from .boundary import BoundaryPolicy
from .errors import SelfCollision
from .geometry import Direction, Position, delta_for


class Snake:
    """
    The snake's body and direction of travel.

    The body is a deque with the head at index 0, so moving pushes on the
    left and drops the tail on the right.
    """

    def __init__(self, initial_body: Iterable[Position], initial_direction: Direction):
        """
        Args:
            initial_body: Segments from head to tail, consecutive cells adjacent
            initial_direction: Direction of travel

        Raises:
            ValueError: If the body is empty
        """
        self._body: Deque[Position] = deque(initial_body)
        if not self._body:
            raise ValueError("Snake body must have at least one segment")
        self.direction = Direction(initial_direction)
        # Direction of the last completed move
        self.heading = self.direction

    @property
    def head(self) -> Position:
        """The foremost segment."""
        return self._body[0]

    @property
    def tail(self) -> Position:
        """The last segment."""
        return self._body[-1]

    @property
    def body(self) -> Tuple[Position, ...]:
        """Copy of the segments, head first."""
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def change_direction(self, requested: Direction) -> bool:
        """
        Turn the snake unless the turn would reverse it.

        A request opposite to either the current direction or the heading of
        the last move is ignored, so no combination of requests between two
        moves can send the head back into the neck.

        Args:
            requested: The new direction

        Returns:
            True if the direction is now `requested`
        """
        requested = Direction(requested)
        if requested == self.direction.opposite or requested == self.heading.opposite:
            return False
        self.direction = requested
        return True

    def next_head(self) -> Position:
        """Raw position the head would move to, before any boundary rule."""
        dx, dy = delta_for(self.direction)
        return self.head.translate(dx, dy)

    def advance(self, grow: bool, boundary: BoundaryPolicy, check_self: bool = True) -> Position:
        """
        Move the snake one cell in its current direction.

        Args:
            grow: Keep the tail segment (length + 1)
            boundary: Policy applied to the new head
            check_self: Whether running into the body is fatal

        Returns:
            The new head position

        Raises:
            WallCollision: Head left a walled grid; the body is unchanged
            SelfCollision: Head landed on the body; the move has already
                been applied so the final shape can be shown
        """
        new_head = boundary.apply(self.next_head())

        self._body.appendleft(new_head)
        if not grow:
            self._body.pop()
        self.heading = self.direction

        if check_self and new_head in islice(self._body, 1, None):
            raise SelfCollision(new_head)

        return new_head

    def occupies(self, position: Position) -> bool:
        """Check if any segment is at `position`."""
        return position in self._body

    def __repr__(self) -> str:
        return f"Snake(length={len(self)}, head={self.head}, direction={self.direction.name})"
