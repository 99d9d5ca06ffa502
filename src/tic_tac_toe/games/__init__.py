"""
Games module - board, rules and engine.
"""

from tic_tac_toe.games.board import Board
from tic_tac_toe.games.game_rules import (
    get_diagonals,
    get_rows,
    has_won,
)
from tic_tac_toe.games.game_state import GameState
from tic_tac_toe.games.rules_engine import RulesEngine, new_game

__all__ = [
    "Board",
    "GameState",
    "RulesEngine",
    "new_game",
    "has_won",
    "get_rows",
    "get_diagonals",
]
