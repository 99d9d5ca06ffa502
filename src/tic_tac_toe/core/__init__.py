"""
Core module - marks, game status and move errors.

This module provides the building blocks used by the board and the engine.
"""

from tic_tac_toe.core.errors import IllegalMoveError, MoveError, OutOfBoundsError
from tic_tac_toe.core.types import (
    CELL_STRINGS,
    EMPTY,
    GameStatus,
    Mark,
    Outcome,
    mark_from_cell,
)

__all__ = [
    # Types
    "Mark",
    "Outcome",
    "GameStatus",
    "CELL_STRINGS",
    "EMPTY",
    "mark_from_cell",
    # Errors
    "MoveError",
    "IllegalMoveError",
    "OutOfBoundsError",
]
