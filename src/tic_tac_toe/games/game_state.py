"""
GameState - snapshot of a game for callers that only read it.
"""

from __future__ import annotations

from tic_tac_toe.core.types import GameStatus, Mark
from tic_tac_toe.games.board import Board


class GameState:
    """
    Lightweight game state container.

    Holds its own board copy, so mutating the engine afterwards does not
    change a snapshot already taken.
    """
    __slots__ = ('board', 'current_mark', 'status')

    def __init__(self, board: Board, current_mark: Mark, status: GameStatus):
        self.board = board
        self.current_mark = current_mark
        self.status = status

    def copy(self) -> "GameState":
        """Independent copy; the board grid is duplicated, marks and status are immutable."""
        return GameState(self.board.copy(), self.current_mark, self.status)
