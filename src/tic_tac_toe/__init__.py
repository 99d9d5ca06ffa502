"""
Tic-tac-toe rules engine for N x N boards.

This package provides the board, turn management and win/draw detection
for two-player tic-tac-toe, plus a small terminal front end.

Quick Start:
    from tic_tac_toe import new_game

    game = new_game(3)
    game.apply_move(0, 0)
    print(game.board.state_string())

Modules:
    core   - Marks, game status and move errors
    games  - Board, win detection and the rules engine
    utils  - Configuration
    api    - Public API and the terminal play loop
"""

from tic_tac_toe.api import new_game, play
from tic_tac_toe.core import (
    GameStatus,
    IllegalMoveError,
    Mark,
    MoveError,
    Outcome,
    OutOfBoundsError,
)
from tic_tac_toe.games import Board, GameState, RulesEngine, has_won

__version__ = "1.0.0"

__all__ = [
    # Main API
    "new_game",
    "play",
    "RulesEngine",
    # Types
    "Board",
    "GameState",
    "GameStatus",
    "Mark",
    "Outcome",
    "has_won",
    # Errors
    "MoveError",
    "IllegalMoveError",
    "OutOfBoundsError",
]
