"""
RulesEngine - turn order, move validation and game outcome.

Each engine owns its board; there is no module-level game. The only
nondeterminism is the starting mark, drawn from an injected ``rng`` at
construction and on every reset.
"""

from __future__ import annotations

import logging
import operator
import random
from typing import Optional

from tic_tac_toe.core.errors import IllegalMoveError, OutOfBoundsError
from tic_tac_toe.core.types import GameStatus, Mark
from tic_tac_toe.games.board import Board
from tic_tac_toe.games.game_rules import has_won
from tic_tac_toe.games.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 3


class RulesEngine:
    """
    State machine for one game:

        IN_PROGRESS --apply_move--> IN_PROGRESS | WON(mark) | DRAW
        any state   --reset------> IN_PROGRESS

    WON and DRAW accept no further moves until ``reset``.
    """

    __slots__ = ('_board', '_current', '_status', '_rng')

    def __init__(self, size: int = DEFAULT_SIZE, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._board = Board.empty(size)
        self._current = self._pick_starting_mark()
        self._status = GameStatus.in_progress()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def current_mark(self) -> Mark:
        return self._current

    @property
    def status(self) -> GameStatus:
        return self._status

    def is_over(self) -> bool:
        return self._status.is_terminal

    def snapshot(self) -> GameState:
        return GameState(self._board.copy(), self._current, self._status)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def apply_move(self, row: int, col: int) -> GameStatus:
        """
        Place the current mark at (row, col) and advance the game.

        Returns:
            The status after the move.

        Raises:
            IllegalMoveError: the game is over or the cell is occupied.
            OutOfBoundsError: (row, col) is outside the board or not integers.
        """
        if self._status.is_terminal:
            logger.debug("Rejected (%s,%s): game already over (%s)", row, col, self._status.describe())
            raise IllegalMoveError(f"Game is over: {self._status.describe()}")

        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError:
            logger.debug("Rejected (%r,%r): coordinates are not integers", row, col)
            raise OutOfBoundsError(row, col, self._board.size) from None

        if not self._board.in_bounds(row, col):
            logger.debug("Rejected (%d,%d): out of bounds", row, col)
            raise OutOfBoundsError(row, col, self._board.size)

        if not self._board.is_cell_empty(row, col):
            logger.debug("Rejected (%d,%d): cell occupied", row, col)
            raise IllegalMoveError(f"Cell ({row},{col}) is occupied")

        mark = self._current
        self._board.place(row, col, mark)
        logger.debug("%s played (%d,%d)", mark, row, col)

        # Win is checked first: a full board with a winning line is a win
        if has_won(self._board, mark):
            self._status = GameStatus.won(mark)
            logger.debug("%s wins", mark)
        elif self._board.is_full():
            self._status = GameStatus.draw()
            logger.debug("Board full, draw")
        else:
            self._current = mark.toggle()

        return self._status

    def reset(self) -> None:
        """Start over: empty board of the same size, new random starting mark."""
        self._board = Board.empty(self._board.size)
        self._current = self._pick_starting_mark()
        self._status = GameStatus.in_progress()
        logger.info("Game reset, %s to move", self._current)

    def _pick_starting_mark(self) -> Mark:
        return self._rng.choice((Mark.X, Mark.O))

    def __repr__(self) -> str:
        return (
            f"RulesEngine(size={self.size}, current_mark={self._current.name}, "
            f"status={self._status.outcome.name})"
        )


def new_game(size: int = DEFAULT_SIZE, rng: Optional[random.Random] = None) -> RulesEngine:
    """Create an independent game on a fresh size×size board."""
    return RulesEngine(size, rng=rng)
