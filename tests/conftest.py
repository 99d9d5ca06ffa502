"""
Shared test fixtures for tic_tac_toe tests.

Design principles:
- Boards built from readable nested rows
- Seeded random sources so starting marks are deterministic
- Minimal, focused fixtures
"""

import random
from typing import Callable, List

import pytest

from tic_tac_toe.core.types import Mark
from tic_tac_toe.games.board import Board
from tic_tac_toe.games.rules_engine import RulesEngine

X, O, _ = Mark.X, Mark.O, None


class FixedChoice(random.Random):
    """Random source whose ``choice`` always returns ``mark``."""

    def __init__(self, mark: Mark):
        super().__init__(0)
        self.mark = mark

    def choice(self, seq):
        assert self.mark in seq
        return self.mark


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board.empty(3)


@pytest.fixture
def row_win_board() -> Board:
    return Board.from_rows([
        [X, X, X],
        [_, O, _],
        [_, _, O],
    ])


@pytest.fixture
def column_win_board() -> Board:
    return Board.from_rows([
        [X, O, _],
        [X, O, _],
        [X, _, O],
    ])


@pytest.fixture
def diagonal_win_board() -> Board:
    return Board.from_rows([
        [X, O, O],
        [O, X, _],
        [_, _, X],
    ])


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def x_first() -> RulesEngine:
    """3x3 game where X moves first."""
    return RulesEngine(3, rng=FixedChoice(Mark.X))


@pytest.fixture
def o_first() -> RulesEngine:
    """3x3 game where O moves first."""
    return RulesEngine(3, rng=FixedChoice(Mark.O))


@pytest.fixture
def scripted_input() -> Callable[[List[str]], Callable[[str], str]]:
    """Build a ``read`` function that returns the given lines, then EOF."""
    def make(lines: List[str]) -> Callable[[str], str]:
        it = iter(lines)

        def read(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        return read
    return make
