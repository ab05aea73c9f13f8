"""Entry point for the Toroid Snake game."""

from __future__ import annotations

import argparse

from toroid_snake.config import (
    CELL,
    FOOD_COUNT,
    HEIGHT,
    LOG_LEVEL,
    SPEED,
    START_LENGTH,
    WIDTH,
    configure_logging,
)
from toroid_snake.game import ToroidSnake


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrapping arena.")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height")
    parser.add_argument("--cell", type=float, default=CELL, help="cell size")
    parser.add_argument(
        "--speed", type=float, default=SPEED, help="initial snake speed"
    )
    parser.add_argument(
        "--snake", type=int, default=START_LENGTH, help="initial snake length"
    )
    parser.add_argument(
        "--food", type=int, default=FOOD_COUNT, help="number of food pieces"
    )
    parser.add_argument("--seed", type=int, default=None, help="food placement seed")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)

    game = ToroidSnake(
        args.width,
        args.height,
        args.cell,
        args.speed,
        args.snake,
        args.food,
        seed=args.seed,
    )
    game.start()


if __name__ == "__main__":
    main()
