"""
Command-line interface for playing tic-tac-toe in the terminal.
"""

import argparse
import logging
from typing import List, Optional

from tic_tac_toe.api import play
from tic_tac_toe.games.rules_engine import new_game
from tic_tac_toe.utils.config import Config, DEFAULT_BOARD_SIZE, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Two-player tic-tac-toe on an N x N board"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board side length (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for choosing the starting player (default: random)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging verbosity (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(size=args.size, seed=args.seed)
    game = new_game(config.size, rng=config.make_rng())

    try:
        play(game)
    except KeyboardInterrupt:
        print("\nInterrupted - bye.")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


if __name__ == "__main__":
    main()
