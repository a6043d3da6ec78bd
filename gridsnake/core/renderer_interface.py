"""
Abstract renderer interface for Grid Snake.

Renderers draw a game's snapshot dictionary onto some target: a pygame
surface for the window, a rich console for the terminal.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers only read game state; they never mutate the game.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: Any) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from Snapshot.to_dict()
            surface: Render target (renderer-specific)
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in the renderer's units
        """
        pass

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """
        Set the area where this renderer should draw.

        Args:
            x: Left edge x coordinate
            y: Top edge y coordinate
            width: Width of render area
            height: Height of render area
        """
        pass

    def get_cell_size(self) -> int:
        """
        Get the cell size for grid-based games.

        Returns:
            Cell size in the renderer's units (default 1)
        """
        return 1
