"""
Tests for tic_tac_toe.core.types

Tests marks, game status and the cell encoding.
"""

import pytest

from tic_tac_toe.core.types import (
    CELL_STRINGS, EMPTY,
    GameStatus, Mark, Outcome,
    mark_from_cell,
)


class TestMark:
    """Mark enum tests."""

    def test_two_values(self):
        """There are exactly two marks."""
        assert set(Mark) == {Mark.X, Mark.O}

    def test_toggle(self):
        """Toggle produces the other mark."""
        assert Mark.X.toggle() is Mark.O
        assert Mark.O.toggle() is Mark.X

    def test_toggle_twice_is_identity(self):
        for mark in Mark:
            assert mark.toggle().toggle() is mark

    def test_symbols(self):
        """Marks display as X and O."""
        assert Mark.X.symbol == "X"
        assert str(Mark.O) == "O"

    def test_values_distinct_from_empty(self):
        assert all(mark.value != EMPTY for mark in Mark)


class TestCellEncoding:
    """Grid value decoding tests."""

    def test_empty_decodes_to_none(self):
        assert mark_from_cell(EMPTY) is None

    def test_marks_round_trip(self):
        for mark in Mark:
            assert mark_from_cell(mark.value) is mark

    def test_empty_cell_displays_blank(self):
        assert CELL_STRINGS[EMPTY] == " "


class TestGameStatus:
    """GameStatus tests."""

    def test_default_in_progress(self):
        """Default status is in progress with no winner."""
        status = GameStatus()
        assert status.outcome is Outcome.IN_PROGRESS
        assert status.winner is None
        assert status.is_terminal is False

    def test_won(self):
        status = GameStatus.won(Mark.O)
        assert status.outcome is Outcome.WON
        assert status.winner is Mark.O
        assert status.is_terminal

    def test_draw(self):
        status = GameStatus.draw()
        assert status.outcome is Outcome.DRAW
        assert status.winner is None
        assert status.is_terminal

    def test_equality(self):
        """Statuses compare by value."""
        assert GameStatus.won(Mark.X) == GameStatus.won(Mark.X)
        assert GameStatus.won(Mark.X) != GameStatus.won(Mark.O)
        assert GameStatus.in_progress() == GameStatus()

    def test_immutable(self):
        """GameStatus is immutable (NamedTuple)."""
        status = GameStatus.draw()
        with pytest.raises(AttributeError):
            status.winner = Mark.X

    @pytest.mark.parametrize("status, text", [
        (GameStatus.in_progress(), "In progress"),
        (GameStatus.won(Mark.X), "X wins!"),
        (GameStatus.draw(), "Draw"),
    ])
    def test_describe(self, status, text):
        assert status.describe() == text
