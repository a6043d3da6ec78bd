#!/usr/bin/env python3
"""
Grid Snake - Human Play Mode

Controls:
    Arrow Keys or WASD: Move the snake
    R: Restart game
    ESC: Quit

Usage:
    python scripts/play.py                      # Settings from config.yaml
    python scripts/play.py --preset wrap        # Wrap-around arena
    python scripts/play.py --config my.yaml
"""
import sys
import os
import argparse
import logging
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from gridsnake.games.registry import GameRegistry
from gridsnake.games.snake import Direction
from gridsnake.utils.config_loader import load_config
from gridsnake.utils.logging_setup import setup_logging

logger = logging.getLogger("gridsnake.play")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Grid Snake - play as human",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--preset",
        choices=["walled", "wrap"],
        default=None,
        help="Use a built-in rule variant instead of the config file's game section"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for food placement"
    )
    return parser.parse_args()


def key_to_direction(key: int):
    """Map a pygame key to a Direction, or None."""
    if key in (pygame.K_UP, pygame.K_w):
        return Direction.UP
    if key in (pygame.K_DOWN, pygame.K_s):
        return Direction.DOWN
    if key in (pygame.K_LEFT, pygame.K_a):
        return Direction.LEFT
    if key in (pygame.K_RIGHT, pygame.K_d):
        return Direction.RIGHT
    return None


def main():
    """Main entry point for human play mode."""
    args = parse_args()

    config = load_config(args.config)
    setup_logging(config.logging)

    game = GameRegistry.create_game("snake", config=args.preset or config.game, seed=args.seed)
    game_config = game.config
    renderer = GameRegistry.create_renderer(
        "snake", game=game, cell_size=config.visualization.cell_size
    )

    pygame.init()
    screen = pygame.display.set_mode(renderer.get_preferred_size())
    pygame.display.set_caption(config.visualization.window_title)
    clock = pygame.time.Clock()

    print("\n" + "=" * 50)
    print("Grid Snake - Human Mode")
    print("=" * 50)
    print(f"Rules: {game_config.boundary}, grid {game_config.grid_size}x{game_config.grid_size}")
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    best_length = 0
    running = True

    while running:
        # Seconds since the previous frame
        elapsed = clock.tick(config.visualization.render_fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.restart()
                else:
                    direction = key_to_direction(event.key)
                    if direction is not None:
                        game.request_direction(direction)

        was_over = game.game_over
        game.tick(elapsed)

        snapshot = game.snapshot()
        if snapshot.game_over and not was_over:
            length = len(snapshot.body)
            best_length = max(best_length, length)
            print(f"Game Over! Length: {length} | Best: {best_length}")

        screen.fill((0, 0, 0))
        renderer.render(snapshot.to_dict(), screen)
        pygame.display.flip()

    pygame.quit()
    logger.info("Best length this session: %d", best_length)


if __name__ == "__main__":
    main()
