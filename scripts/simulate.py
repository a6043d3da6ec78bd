#!/usr/bin/env python3
"""
Grid Snake - Headless Simulation

Runs the game core without a window, steering the snake at random and
drawing the board in the terminal. Handy for watching the rule variants
and for smoke-testing the core.

Usage:
    python scripts/simulate.py --preset wrap --steps 300
    python scripts/simulate.py --seed 7 --delay 0
"""
import sys
import time
import argparse
import logging
import random
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridsnake.games.registry import GameRegistry
from gridsnake.games.snake import Direction, SnakeGame
from gridsnake.utils.config_loader import load_config
from gridsnake.utils.logging_setup import setup_logging
from gridsnake.visualization import LiveBoard, TerminalRenderer

logger = logging.getLogger("gridsnake.simulate")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Grid Snake - headless random-walk simulation")
    parser.add_argument("--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--preset", choices=["walled", "wrap"], default=None,
                        help="Built-in rule variant")
    parser.add_argument("--steps", type=int, default=500, help="Maximum steps to simulate")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--turn-chance", type=float, default=0.2,
                        help="Chance of requesting a random turn each step")
    parser.add_argument("--delay", type=float, default=0.05,
                        help="Seconds to pause between steps (0 for no display pacing)")
    return parser.parse_args()


def run(game: SnakeGame, steps: int, turn_chance: float, rng: random.Random, on_step=None) -> int:
    """
    Drive the game with random direction requests.

    Args:
        game: Game to drive
        steps: Maximum number of steps
        turn_chance: Probability of a direction request before each step
        rng: Random source for the steering
        on_step: Optional callback receiving each Snapshot

    Returns:
        Number of steps taken before the game ended or the limit was hit
    """
    interval = game.config.move_interval
    taken = 0
    while taken < steps and not game.game_over:
        if rng.random() < turn_chance:
            game.request_direction(rng.choice(list(Direction)))
        # One move interval plus a little, so every tick is a step
        if game.tick(interval * 1.01):
            taken += 1
            if on_step is not None:
                on_step(game.snapshot())
    return taken


def main():
    args = parse_args()

    config = load_config(args.config)
    setup_logging(config.logging)

    game = GameRegistry.create_game("snake", config=args.preset or config.game, seed=args.seed)
    game_config = game.config

    board = LiveBoard(TerminalRenderer(grid_size=game_config.grid_size,
                                       title=f"Snake ({game_config.boundary})"))

    def on_step(snapshot):
        board.update(snapshot.to_dict())
        if args.delay > 0:
            time.sleep(args.delay)

    board.start(game.get_state())
    try:
        taken = run(game, args.steps, args.turn_chance, random.Random(args.seed), on_step)
    finally:
        board.stop()

    snapshot = game.snapshot()
    logger.info(
        "Simulation finished after %d steps: length %d, %s",
        taken, len(snapshot.body),
        f"game over ({snapshot.collision.value})" if snapshot.game_over else "still alive",
    )


if __name__ == "__main__":
    main()
