"""
NumPy utilities for win detection.

A win is a full line of N marks: a row, a column or one of the two
diagonals. Columns are checked by rotating the board and reusing the
row check.
"""

from __future__ import annotations

from typing import List

import numpy as np

from tic_tac_toe.core.types import Mark
from tic_tac_toe.games.board import Board


def line_held_by(line: np.ndarray, mark: Mark) -> bool:
    """
    Return True if:
    - line is nonempty
    - every value equals ``mark``
    """
    if line.size == 0:
        return False
    return bool(np.all(line == mark.value))


def get_rows(board: Board) -> List[np.ndarray]:
    """
    Row extraction.
    Slices are copied to avoid shared memory issues.
    """
    return [row.copy() for row in board.grid]


def get_diagonals(board: Board) -> List[np.ndarray]:
    """
    Main diagonal (i, i) and anti-diagonal (i, N-1-i).
    Copied so callers never hold a view into the board grid.
    """
    major = board.grid.diagonal().copy()
    minor = np.fliplr(board.grid).diagonal().copy()
    return [major, minor]


def has_row_win(board: Board, mark: Mark) -> bool:
    return any(line_held_by(row, mark) for row in get_rows(board))


def has_column_win(board: Board, mark: Mark) -> bool:
    # Columns of the board are the rows of its rotation
    return has_row_win(board.rotate_90(), mark)


def has_diagonal_win(board: Board, mark: Mark) -> bool:
    return any(line_held_by(diag, mark) for diag in get_diagonals(board))


def has_won(board: Board, mark: Mark) -> bool:
    """Return True if ``mark`` holds a complete row, column or diagonal."""
    return (
        has_row_win(board, mark)
        or has_column_win(board, mark)
        or has_diagonal_win(board, mark)
    )
