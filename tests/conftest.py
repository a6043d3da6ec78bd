"""
Pytest configuration and fixtures for Grid Snake tests.

This module sets up pygame mocking to allow testing the renderer
without requiring a display or actual pygame initialization.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a mock of the parts of pygame the renderer and scripts use."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 500
    mock_surface.get_height.return_value = 500
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_text = MagicMock()
    mock_text.get_width.return_value = 100
    mock_text.get_height.return_value = 30
    mock_font = MagicMock()
    mock_font.render.return_value = mock_text
    mock_font.size.return_value = (100, 30)  # (width, height)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.SRCALPHA = 65536
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    # Surface creation
    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


# Installed at import time so test modules can import gridsnake at the top
# level and still get the mock.
_ORIGINAL_PYGAME = sys.modules.get('pygame')
_MOCK_PYGAME = create_mock_pygame()
sys.modules['pygame'] = _MOCK_PYGAME


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture exposing the pygame mock.

    Restores the real module (if there was one) when the session ends.
    """
    yield _MOCK_PYGAME

    if _ORIGINAL_PYGAME is not None:
        sys.modules['pygame'] = _ORIGINAL_PYGAME
    else:
        sys.modules.pop('pygame', None)


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 500
    screen.get_height.return_value = 500
    screen.fill.return_value = None
    screen.blit.return_value = None
    return screen


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def small_config():
    """A 5x5 walled board with a single-segment snake in the middle."""
    from gridsnake.games.snake import SnakeConfig

    return SnakeConfig(grid_size=5, move_interval=0.1, initial_body=[(2, 2)], seed=0)


@pytest.fixture
def temp_config_file(tmp_path):
    """Write a config.yaml for the wrap-around variant into a temp dir."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "game:\n"
        "  preset: wrap\n"
        "  move_interval: 0.25\n"
        "  unknown_key: 1\n"
        "visualization:\n"
        "  cell_size: 16\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    return path
