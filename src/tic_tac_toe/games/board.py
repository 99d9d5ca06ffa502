"""
Board - square N×N grid of marks.

Backed by an int8 array (see ``tic_tac_toe.core.types`` for the encoding).
The board does not enforce game rules: ``place`` overwrites blindly and
the engine is responsible for checking emptiness first.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from tic_tac_toe.core.types import CELL_DTYPE, CELL_STRINGS, EMPTY, Mark, mark_from_cell


class Board:
    """Square grid of cells, each empty or holding one Mark."""

    __slots__ = ('grid',)

    def __init__(self, grid: np.ndarray):
        self.grid = grid

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Create a size×size board with every cell empty."""
        return cls(np.zeros((size, size), dtype=CELL_DTYPE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Mark]]]) -> "Board":
        """
        Build a board from nested rows of ``Mark`` / ``None``.

        Raises ValueError if the rows do not form a square grid.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Board rows must form a square grid, got lengths {[len(r) for r in rows]}")

        grid = np.zeros((size, size), dtype=CELL_DTYPE)
        for r, row in enumerate(rows):
            for c, mark in enumerate(row):
                if mark is not None:
                    grid[r, c] = mark.value
        return cls(grid)

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) is inside the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row},{col}) is outside a {self.size}x{self.size} board")

    def cell(self, row: int, col: int) -> Optional[Mark]:
        """Return the mark at (row, col), or None if the cell is empty."""
        self._check_bounds(row, col)
        return mark_from_cell(self.grid[row, col])

    def is_cell_empty(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self.grid[row, col] == EMPTY)

    def is_full(self) -> bool:
        return not np.any(self.grid == EMPTY)

    def rows(self) -> List[List[Optional[Mark]]]:
        """Board contents as nested lists of ``Mark`` / ``None``."""
        return [[mark_from_cell(v) for v in row] for row in self.grid]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, row: int, col: int, mark: Mark) -> None:
        """Write ``mark`` into (row, col). Does not check for an existing mark."""
        self._check_bounds(row, col)
        self.grid[row, col] = mark.value

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def rotate_90(self) -> "Board":
        """
        Return a new board rotated 90° clockwise.

        Cell (i, j) lands at (j, N-1-i): reverse the row order, then transpose.
        The copy keeps the result independent of this board.
        """
        return Board(self.grid[::-1].T.copy())

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def state_string(self) -> str:
        n = self.size
        lines = ["╭" + "┬".join(["───"] * n) + "╮"]
        for i in range(n):
            row = "│ " + " │ ".join(CELL_STRINGS[int(self.grid[i, j])] for j in range(n)) + " │"
            lines.append(row)
            if i < n - 1:
                lines.append("├" + "┼".join(["───"] * n) + "┤")
        lines.append("╰" + "┴".join(["───"] * n) + "╯")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({self.grid.tolist()!r})"
