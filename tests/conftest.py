"""
Shared test fixtures for tictactoe_engine tests.

Design principles:
- Fresh objects per test (matches are independent)
- Move sequences as plain (row, col) lists
"""

from typing import List, Tuple

import pytest

from tictactoe_engine.games.board import Board
from tictactoe_engine.games.match import Match


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Empty 3x3 board with X/O marks."""
    return Board(3)


# =============================================================================
# Match Fixtures
# =============================================================================

@pytest.fixture
def fresh_match() -> Match:
    """Match that has never been started."""
    return Match()


@pytest.fixture
def match() -> Match:
    """3x3 match between A (X) and B (O)."""
    m = Match()
    m.start(3, "A", "B")
    return m


# =============================================================================
# Move Sequences
# =============================================================================

@pytest.fixture
def draw_moves() -> List[Tuple[int, int]]:
    """3x3 moves in play order ending X O X / X O O / O X X."""
    return [
        (0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2),
    ]
