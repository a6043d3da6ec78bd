"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ...core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
GAME_OVER_COLOR = (255, 100, 100)
TEXT_COLOR = (220, 220, 220)


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    Draws into any surface at an offset, so it works both for a dedicated
    window and for embedding in a larger screen.
    """

    def __init__(self, cell_size: int = 25, grid_size: int = 20):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_size: Grid width and height in cells
        """
        self._cell_size = cell_size
        self._grid_size = grid_size
        self._offset_x = 0
        self._offset_y = 0
        self._font_large: Optional[Any] = None
        self._font_small: Optional[Any] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        side = self._grid_size * self._cell_size
        return (side, side)

    def get_cell_size(self) -> int:
        """Get the current cell size."""
        return self._cell_size

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        # Adjust cell size to fit the area
        self._cell_size = max(1, min(width, height) // self._grid_size)

    def cell_rect(self, x: int, y: int, inset: int = 0) -> Tuple[int, int, int, int]:
        """
        Pixel rectangle of a grid cell.

        Args:
            x: Cell column
            y: Cell row
            inset: Pixels to shrink on every side

        Returns:
            (left, top, width, height)
        """
        return (
            self._offset_x + x * self._cell_size + inset,
            self._offset_y + y * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset,
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from Snapshot.to_dict()
            surface: Pygame surface to draw on
        """
        size = game_state.get("width", self._grid_size)
        side = size * self._cell_size

        # Draw background
        pygame.draw.rect(surface, DARK_GRAY, pygame.Rect(self._offset_x, self._offset_y, side, side))

        # Draw grid lines (subtle)
        for i in range(size + 1):
            offset = i * self._cell_size
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x + offset, self._offset_y),
                (self._offset_x + offset, self._offset_y + side),
            )
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x, self._offset_y + offset),
                (self._offset_x + side, self._offset_y + offset),
            )

        # Draw food
        food = game_state["food"]
        pygame.draw.rect(surface, FOOD_COLOR, pygame.Rect(*self.cell_rect(food["x"], food["y"], 2)),
                         border_radius=4)

        # Draw snake, tail first so the head stays on top
        snake = game_state["snake"]
        for i in range(len(snake) - 1, -1, -1):
            segment = snake[i]
            # Hidden wrap-around row/column
            if not (0 <= segment["x"] < size and 0 <= segment["y"] < size):
                continue
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, pygame.Rect(*self.cell_rect(segment["x"], segment["y"], 1)),
                             border_radius=border_radius)
            if i == 0:
                self._draw_eyes(surface, segment, game_state.get("direction", 0))

        if game_state.get("game_over"):
            self._draw_game_over(surface, side)

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: int):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + head["x"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["y"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == 0:  # RIGHT
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == 1:  # DOWN
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == 2:  # LEFT
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)

    def _draw_game_over(self, surface: pygame.Surface, side: int) -> None:
        """Dim the board and show the restart hint."""
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, 72)
            self._font_small = pygame.font.Font(None, 36)

        overlay = pygame.Surface((side, side), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surface.blit(overlay, (self._offset_x, self._offset_y))

        center_x = self._offset_x + side // 2
        center_y = self._offset_y + side // 2
        title = self._font_large.render("GAME OVER", True, GAME_OVER_COLOR)
        hint = self._font_small.render("Press R to restart", True, TEXT_COLOR)
        surface.blit(title, (center_x - title.get_width() // 2, center_y - 60))
        surface.blit(hint, (center_x - hint.get_width() // 2, center_y + 20))
