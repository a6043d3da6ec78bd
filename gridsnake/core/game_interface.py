"""
Abstract game interface for Grid Snake.

Games are driven by an external frame loop: the driver reports elapsed time
and decoded player intents, and reads back a snapshot for rendering.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games handle the core logic, rules, and state management.
    They never draw, poll input devices, or sleep.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def tick(self, elapsed_seconds: float) -> bool:
        """
        Advance game time.

        Args:
            elapsed_seconds: Wall-clock time since the previous call

        Returns:
            True if the game state moved forward
        """
        pass

    @abstractmethod
    def request_direction(self, direction: Any) -> bool:
        """
        Apply a player intent.

        Args:
            direction: Game-specific direction value

        Returns:
            True if the request was accepted
        """
        pass

    @abstractmethod
    def restart(self) -> None:
        """Discard the current round and start again from the initial state."""
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """
        Get a read-only view of the current state for rendering.

        Returns:
            Game-specific snapshot object with a to_dict() method
        """
        pass

    @property
    @abstractmethod
    def game_over(self) -> bool:
        """Whether the current round has ended."""
        pass
