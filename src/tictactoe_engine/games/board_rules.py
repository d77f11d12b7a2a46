"""
NumPy line utilities for square boards.

Boards are int8 arrays where 0 is empty and k > 0 is the k-th mark.
Extracted lines are copied so callers never hold views into the grid.
"""

from __future__ import annotations

import numpy as np


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def all_match(line: np.ndarray, code: int) -> bool:
    """
    Return True if:
    - line is nonempty
    - code is a mark (not empty)
    - every value equals code
    """
    if line.size == 0 or code == 0:
        return False
    return bool(np.all(line == code))


def get_row(board: np.ndarray, r: int) -> np.ndarray:
    return board[r].copy()


def get_col(board: np.ndarray, c: int) -> np.ndarray:
    """board.T is a view; the copy removes shared memory."""
    return board.T[c].copy()


def get_main_diagonal(board: np.ndarray) -> np.ndarray:
    """cell[i][i] for all i. diagonal() is a read-only view, so copy it."""
    return board.diagonal().copy()


def get_anti_diagonal(board: np.ndarray) -> np.ndarray:
    """cell[i][width - 1 - i] for all i."""
    return np.fliplr(board).diagonal().copy()


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == 0)
