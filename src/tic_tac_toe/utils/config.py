"""
Configuration and defaults.
"""

import random
from typing import Optional

from tic_tac_toe.games.rules_engine import DEFAULT_SIZE


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = DEFAULT_SIZE
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        seed: Optional[int] = None,
    ):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self.seed = seed

    def make_rng(self) -> random.Random:
        """Random source for the starting mark; deterministic when seeded."""
        return random.Random(self.seed)


# Default configuration
DEFAULT_CONFIG = Config()
