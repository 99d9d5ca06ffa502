"""
Errors raised when the rules engine rejects a move.

A rejected move never mutates the game.
"""


class MoveError(ValueError):
    """Base class for moves the engine refuses to apply."""


class IllegalMoveError(MoveError):
    """Target cell is occupied, or the game has already ended."""


class OutOfBoundsError(MoveError):
    """Row or column lies outside the board."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"Cell ({row},{col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size
