"""
Tests for the Snake body and movement rules.
"""

import itertools

import pytest

from gridsnake.games.snake.boundary import ToroidalBoundary, WalledBoundary
from gridsnake.games.snake.errors import CollisionKind, SelfCollision, WallCollision
from gridsnake.games.snake.geometry import Direction, Position
from gridsnake.games.snake.snake import Snake


def make_snake(cells, direction=Direction.RIGHT):
    return Snake([Position(x, y) for x, y in cells], direction)


class TestSnakeBasics:
    """Tests for construction and queries."""

    def test_head_is_first_segment(self):
        snake = make_snake([(3, 2), (2, 2), (1, 2)])
        assert snake.head == Position(3, 2)
        assert snake.tail == Position(1, 2)
        assert len(snake) == 3

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake([], Direction.RIGHT)

    def test_occupies(self):
        snake = make_snake([(3, 2), (2, 2)])
        assert snake.occupies(Position(2, 2))
        assert not snake.occupies(Position(1, 2))

    def test_body_is_a_copy(self):
        """Test the exposed body cannot change the snake."""
        snake = make_snake([(3, 2), (2, 2)])
        body = snake.body
        assert body == (Position(3, 2), Position(2, 2))
        assert isinstance(body, tuple)


class TestChangeDirection:
    """Tests for the 180 degree rule."""

    @pytest.mark.parametrize("current", list(Direction))
    def test_reversal_rejected(self, current):
        snake = make_snake([(2, 2)], current)
        assert snake.change_direction(current.opposite) is False
        assert snake.direction == current

    def test_turn_accepted(self):
        snake = make_snake([(2, 2)], Direction.RIGHT)
        assert snake.change_direction(Direction.UP) is True
        assert snake.direction == Direction.UP

    def test_idempotent(self):
        """Test repeating a request has no further effect."""
        snake = make_snake([(2, 2), (1, 2)], Direction.RIGHT)
        snake.change_direction(Direction.DOWN)
        state = (snake.direction, snake.heading, snake.body)
        for _ in range(5):
            snake.change_direction(Direction.DOWN)
        assert (snake.direction, snake.heading, snake.body) == state

    def test_two_turns_cannot_reverse_before_moving(self):
        """Test Up then Left while heading Right does not reverse the snake."""
        snake = make_snake([(2, 2), (1, 2)], Direction.RIGHT)
        assert snake.change_direction(Direction.UP) is True
        assert snake.change_direction(Direction.LEFT) is False
        assert snake.direction == Direction.UP

    def test_heading_updates_after_move(self):
        """Test the second turn is allowed once the first has been taken."""
        snake = make_snake([(2, 2), (1, 2)], Direction.RIGHT)
        snake.change_direction(Direction.UP)
        snake.advance(False, WalledBoundary(5))
        assert snake.change_direction(Direction.LEFT) is True

    def test_no_request_sequence_reverses_within_a_step(self):
        """Test every pair and triple of requests keeps the step direction valid."""
        for requests in itertools.chain(
            itertools.product(Direction, repeat=2),
            itertools.product(Direction, repeat=3),
        ):
            snake = make_snake([(2, 2), (1, 2)], Direction.RIGHT)
            start = snake.heading
            for requested in requests:
                snake.change_direction(requested)
            assert snake.direction != start.opposite


class TestAdvance:
    """Tests for movement and growth."""

    @pytest.mark.parametrize("direction", list(Direction))
    @pytest.mark.parametrize("boundary", [WalledBoundary(9), ToroidalBoundary(9)])
    def test_head_moves_by_delta(self, direction, boundary):
        snake = make_snake([(4, 4)], direction)
        dx, dy = direction.delta
        new_head = snake.advance(False, boundary)
        assert new_head == Position(4 + dx, 4 + dy)
        assert snake.head == new_head

    def test_length_unchanged_without_growth(self):
        snake = make_snake([(3, 2), (2, 2), (1, 2)])
        snake.advance(False, WalledBoundary(10))
        assert snake.body == (Position(4, 2), Position(3, 2), Position(2, 2))

    def test_growth_adds_one_segment(self):
        snake = make_snake([(3, 2), (2, 2), (1, 2)])
        snake.advance(True, WalledBoundary(10))
        assert snake.body == (Position(4, 2), Position(3, 2), Position(2, 2), Position(1, 2))

    def test_wall_collision_leaves_body_untouched(self):
        """Test a head at (4,2) moving Right off a 5x5 walled grid."""
        snake = make_snake([(4, 2), (3, 2)])
        with pytest.raises(WallCollision) as exc_info:
            snake.advance(False, WalledBoundary(5))
        assert exc_info.value.kind == CollisionKind.WALL
        assert snake.body == (Position(4, 2), Position(3, 2))

    def test_toroidal_wraps(self):
        """Test a head at (4,2) moving Right wraps to (0,2) with modulus 5."""
        snake = make_snake([(4, 2), (3, 2)])
        assert snake.advance(False, ToroidalBoundary(5)) == Position(0, 2)
        assert snake.body == (Position(0, 2), Position(4, 2))

    def test_self_collision(self):
        """Test running into a non-tail segment raises after the move."""
        # Head at (2,2) moving Left into (1,2); the tail (1,1) moves away
        snake = make_snake([(2, 2), (2, 3), (1, 3), (1, 2), (1, 1)], Direction.LEFT)
        with pytest.raises(SelfCollision) as exc_info:
            snake.advance(False, WalledBoundary(5))
        assert exc_info.value.kind == CollisionKind.SELF
        assert snake.head == Position(1, 2)
        assert len(snake) == 5

    def test_following_the_tail_is_safe(self):
        """Test the head may enter the cell the tail is leaving."""
        snake = make_snake([(1, 1), (2, 1), (2, 2), (1, 2)], Direction.DOWN)
        assert snake.advance(False, WalledBoundary(5)) == Position(1, 2)

    def test_growing_into_the_tail_collides(self):
        """Test the tail stays put while growing, so entering it is fatal."""
        snake = make_snake([(1, 1), (2, 1), (2, 2), (1, 2)], Direction.DOWN)
        with pytest.raises(SelfCollision):
            snake.advance(True, WalledBoundary(5))

    def test_self_collision_check_can_be_disabled(self):
        snake = make_snake([(2, 2), (2, 3), (1, 3), (1, 2), (1, 1)], Direction.LEFT)
        snake.advance(False, WalledBoundary(5), check_self=False)
        assert snake.head == Position(1, 2)
