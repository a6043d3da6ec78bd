"""
Snake game configuration.

Everything here is fixed when a SnakeGame is constructed. Two presets
reproduce the classic rule variants:
- "walled": 20x20 arena, wall hits are fatal, self-collision once longer than 100
- "wrap": 25x25 wrap-around arena with one hidden edge row and column, no self-collision
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Any, List, Optional, Tuple

from .boundary import BoundaryPolicy, TOROIDAL, WALLED, make_boundary
from .errors import ConfigError
from .geometry import Direction, Position


@dataclass
class SnakeConfig:
    """Configuration for Snake game."""

    # Grid dimensions (square grid)
    grid_size: int = 20

    # Seconds between snake moves
    move_interval: float = 0.12

    # Boundary rule: "walled" or "toroidal"
    boundary: str = WALLED
    # Hidden rows and columns past the visible edge of a toroidal grid.
    # The wrap modulus is grid_size + wrap_hidden unless wrap_modulus is set.
    wrap_hidden: int = 0
    wrap_modulus: Optional[int] = None

    # Self-collision applies once the body has at least this many segments
    self_collision: bool = True
    self_collision_min_length: int = 0

    # Starting snake. Without an explicit body a straight snake of
    # initial_length segments is centred on the grid.
    initial_body: Optional[List[Tuple[int, int]]] = None
    initial_length: int = 3
    initial_direction: str = "right"

    # Seed for food placement, None for a random game
    seed: Optional[int] = None

    def validate(self) -> "SnakeConfig":
        """
        Check the configuration for consistency.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: On any invalid setting
        """
        if self.grid_size < 1:
            raise ConfigError(f"grid_size must be at least 1, got {self.grid_size}")
        if self.move_interval <= 0:
            raise ConfigError(f"move_interval must be positive, got {self.move_interval}")
        if not isinstance(self.boundary, str):
            raise ConfigError(f"Unknown boundary policy: {self.boundary!r}")
        self.boundary = self.boundary.strip().lower()
        if self.boundary not in (WALLED, TOROIDAL):
            raise ConfigError(f"Unknown boundary policy: {self.boundary!r}")
        if self.wrap_hidden < 0:
            raise ConfigError(f"wrap_hidden cannot be negative, got {self.wrap_hidden}")
        if self.wrap_modulus is not None and self.wrap_modulus < self.grid_size:
            raise ConfigError(
                f"wrap_modulus {self.wrap_modulus} is smaller than grid_size {self.grid_size}"
            )
        if self.self_collision_min_length < 0:
            raise ConfigError("self_collision_min_length cannot be negative")
        if self.initial_length < 1:
            raise ConfigError("initial_length must be at least 1")
        try:
            Direction.parse(self.initial_direction)
        except ValueError as e:
            raise ConfigError(str(e)) from None

        body = self.initial_positions()
        boundary = self.make_boundary()
        for segment in body:
            if not boundary.contains(segment):
                raise ConfigError(f"Initial segment {segment} lies outside the grid")
        if len(set(body)) != len(body):
            raise ConfigError("Initial body has overlapping segments")
        return self

    @property
    def direction(self) -> Direction:
        """Starting direction as an enum."""
        return Direction.parse(self.initial_direction)

    def initial_positions(self) -> List[Position]:
        """Starting body from head to tail."""
        if self.initial_body is not None:
            if not self.initial_body:
                raise ConfigError("initial_body must have at least one segment")
            return [Position.from_pair(p) for p in self.initial_body]

        # Centre the head, trail the tail behind it
        dx, dy = self.direction.delta
        head = Position(self.grid_size // 2, self.grid_size // 2)
        return [head.translate(-dx * i, -dy * i) for i in range(self.initial_length)]

    @property
    def modulus(self) -> int:
        """Effective toroidal wrap modulus."""
        if self.wrap_modulus is not None:
            return self.wrap_modulus
        return self.grid_size + self.wrap_hidden

    def make_boundary(self) -> BoundaryPolicy:
        """Build the boundary policy for this configuration."""
        return make_boundary(self.boundary, self.grid_size, self.modulus)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if self.initial_body is not None:
            data["initial_body"] = [[p.x, p.y] for p in self.initial_positions()]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """
        Create config from dictionary.

        A "preset" key selects the base preset; other keys override it.
        Unknown keys are ignored.
        """
        data = dict(data or {})
        preset = data.pop("preset", None)
        base = cls.preset(preset) if preset else cls()

        field_names = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in data.items() if k in field_names}
        if overrides.get("initial_body") is not None:
            overrides["initial_body"] = [
                (pos.x, pos.y) for pos in map(Position.from_pair, overrides["initial_body"])
            ]
        return replace(base, **overrides)

    @classmethod
    def preset(cls, name: str) -> "SnakeConfig":
        """
        Get one of the built-in rule variants.

        Args:
            name: "walled" or "wrap"

        Raises:
            ConfigError: If the preset is unknown
        """
        factory = PRESETS.get(name.strip().lower())
        if factory is None:
            raise ConfigError(f"Unknown preset: {name!r} (choose from {', '.join(PRESETS)})")
        return factory()


PRESETS = {
    "walled": lambda: SnakeConfig(
        grid_size=20,
        move_interval=0.12,
        boundary=WALLED,
        self_collision=True,
        self_collision_min_length=101,
        initial_length=1,
    ),
    "wrap": lambda: SnakeConfig(
        grid_size=25,
        move_interval=0.20,
        boundary=TOROIDAL,
        wrap_hidden=1,
        self_collision=False,
        initial_body=[(12, 10), (11, 10), (10, 10)],
    ),
}
