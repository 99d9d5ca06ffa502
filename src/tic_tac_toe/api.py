"""
Public API for creating and playing games.

Usage:
    from tic_tac_toe import new_game

    game = new_game(3)
    status = game.apply_move(1, 1)
    print(game.board.state_string())
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple

from tic_tac_toe.core.errors import MoveError
from tic_tac_toe.core.types import GameStatus
from tic_tac_toe.games.rules_engine import RulesEngine, new_game

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
RESET_COMMANDS = {"r", "reset"}


def parse_move(raw: str) -> Tuple[int, int]:
    """Parse ``"row,col"`` into a pair of ints. Raises ValueError otherwise."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"expected 'row,col', got '{raw}'")
    return int(parts[0]), int(parts[1])


def _human_turn(
    game: RulesEngine,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> str:
    """
    Prompt until a move is applied or a command is entered.

    Returns "move", "reset" or "quit".
    """
    write(f"\n{game.current_mark} to move (row,col; r = reset, q = quit)")

    while True:
        try:
            raw = read("Move: ").strip().lower()
        except EOFError:
            return "quit"

        if raw in QUIT_COMMANDS:
            return "quit"
        if raw in RESET_COMMANDS:
            return "reset"

        try:
            row, col = parse_move(raw)
        except ValueError as e:
            write(f"Invalid input: {e}")
            continue

        try:
            game.apply_move(row, col)
            return "move"
        except MoveError as e:
            write(f"Illegal move: {e}")


def _game_over_prompt(
    game: RulesEngine,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> str:
    """After a finished game: returns "reset" or "quit"."""
    write("\n" + "=" * 40)
    write(f"GAME OVER - {game.status.describe()}")
    write("=" * 40)

    while True:
        try:
            raw = read("Play again? (r = reset, q = quit): ").strip().lower()
        except EOFError:
            return "quit"
        if raw in RESET_COMMANDS:
            return "reset"
        if raw in QUIT_COMMANDS:
            return "quit"
        write(f"Invalid input: expected r or q, got '{raw}'")


def play(
    game: RulesEngine,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameStatus:
    """
    Interactive two-player loop on the terminal.

    Parameters
    ----------
    game : RulesEngine
        The game to drive. It is mutated in place.
    read : Callable[[str], str]
        Prompt function, ``input`` by default.
    write : Callable[[str], None]
        Output function, ``print`` by default.

    Returns the status of the game when the player quits.
    """
    write(f"Starting {game.size}x{game.size} tic-tac-toe")
    write(game.board.state_string())

    while True:
        if game.is_over():
            action = _game_over_prompt(game, read, write)
        else:
            action = _human_turn(game, read, write)

        if action == "quit":
            break
        if action == "reset":
            game.reset()
            write("\nNew game.")

        write(game.board.state_string())

    logger.info("Session ended: %s", game.status.describe())
    return game.status


__all__ = [
    "new_game",
    "play",
    "parse_move",
    "RulesEngine",
]
