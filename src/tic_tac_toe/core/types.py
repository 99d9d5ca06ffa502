"""
Core types shared by the board and the rules engine.

Grid encoding (int8):
    0 = empty
    1 = X (first mark)
    2 = O (second mark)
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional

import numpy as np

EMPTY = 0
CELL_DTYPE = np.int8

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", 1: "X", 2: "O"}


class Mark(Enum):
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return CELL_STRINGS[self.value]

    def toggle(self) -> "Mark":
        """Return the other mark."""
        return Mark(3 - self.value)  # Toggle 1↔2

    def __str__(self) -> str:
        return self.symbol


class Outcome(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class GameStatus(NamedTuple):
    """Outcome of the game so far. ``winner`` is only set for WON."""

    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark) -> "GameStatus":
        return cls(Outcome.WON, mark)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def describe(self) -> str:
        if self.outcome is Outcome.WON:
            return f"{self.winner} wins!"
        if self.outcome is Outcome.DRAW:
            return "Draw"
        return "In progress"


def mark_from_cell(value: int) -> Optional[Mark]:
    """Decode a raw grid value, ``None`` for an empty cell."""
    if value == EMPTY:
        return None
    return Mark(int(value))
