"""
Board - square grid of marks.

Uses int8 grid:
    0 = empty
    1 = marks[0] (X)
    2 = marks[1] (O)
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from tictactoe_engine.core.errors import InvalidMark, OutOfBounds
from tictactoe_engine.core.types import (
    AntiDiagonal,
    Column,
    MainDiagonal,
    Row,
    TurnStatus,
    WinningLine,
)
from tictactoe_engine.games import board_rules
from tictactoe_engine.utils.config import DEFAULT_WIDTH, EMPTY, MARKS


def is_index(value) -> bool:
    """True for Python/NumPy integers; bool is rejected."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """N x N grid mutated one cell at a time."""

    __slots__ = ('_marks', '_codes', '_grid')

    def __init__(self, width: int = DEFAULT_WIDTH, marks: Sequence[str] = MARKS):
        self._marks = tuple(marks)
        self._codes = {m: i + 1 for i, m in enumerate(self._marks)}
        self._grid = np.zeros((width, width), dtype=np.int8)

    # -- sizing ---------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._grid.shape[0]

    @property
    def area(self) -> int:
        return self.width ** 2

    @property
    def marks(self) -> Tuple[str, ...]:
        return self._marks

    @property
    def grid(self) -> np.ndarray:
        """Copy of the int8 grid."""
        return self._grid.copy()

    def resize(self, width: int) -> None:
        """Reallocate as width x width, all empty. Caller guarantees width >= 2."""
        self._grid = np.zeros((width, width), dtype=np.int8)

    # -- mutation -------------------------------------------------------------

    def mark(self, symbol: str, row: int, col: int) -> TurnStatus:
        """
        Place symbol at (row, col).

        Returns:
            ADVANCED if the cell was written,
            NOT_ADVANCED if it was already occupied (no mutation).

        Raises:
            InvalidMark: symbol is not a recognized mark
            OutOfBounds: row/col not an integer in [0, width)
        """
        code = self._codes.get(symbol) if isinstance(symbol, str) else None
        if code is None:
            raise InvalidMark(symbol, self._marks)

        if not (is_index(row) and is_index(col)
                and board_rules.in_bounds(self._grid, row, col)):
            raise OutOfBounds(row, col, self.width)

        if self._grid[row, col] != 0:
            return TurnStatus.NOT_ADVANCED

        self._grid[row, col] = code
        return TurnStatus.ADVANCED

    # -- queries --------------------------------------------------------------

    def _symbol(self, code) -> str:
        return self._marks[code - 1] if code else EMPTY

    def _symbols(self, line: np.ndarray) -> List[str]:
        return [self._symbol(int(v)) for v in line]

    def cell(self, row: int, col: int) -> str:
        if not (is_index(row) and is_index(col)
                and board_rules.in_bounds(self._grid, row, col)):
            raise OutOfBounds(row, col, self.width)
        return self._symbol(int(self._grid[row, col]))

    def cells(self) -> List[List[str]]:
        """Copy of the grid as symbols, empty cells as ''."""
        return [self._symbols(r) for r in self._grid]

    def _check_line_index(self, row, col) -> None:
        """One of row/col is the line index, the other None."""
        index = row if col is None else col
        if not (is_index(index) and 0 <= index < self.width):
            raise OutOfBounds(row, col, self.width)

    def row(self, index: int) -> List[str]:
        self._check_line_index(index, None)
        return self._symbols(board_rules.get_row(self._grid, index))

    def column(self, index: int) -> List[str]:
        self._check_line_index(None, index)
        return self._symbols(board_rules.get_col(self._grid, index))

    def main_diagonal(self) -> List[str]:
        return self._symbols(board_rules.get_main_diagonal(self._grid))

    def anti_diagonal(self) -> List[str]:
        return self._symbols(board_rules.get_anti_diagonal(self._grid))

    def line_is(self, line: WinningLine, symbol: str) -> bool:
        """True if every cell of line holds symbol."""
        code = self._codes.get(symbol)
        if code is None:
            raise InvalidMark(symbol, self._marks)

        if isinstance(line, Row):
            self._check_line_index(line.index, None)
            values = board_rules.get_row(self._grid, line.index)
        elif isinstance(line, Column):
            self._check_line_index(None, line.index)
            values = board_rules.get_col(self._grid, line.index)
        elif isinstance(line, MainDiagonal):
            values = board_rules.get_main_diagonal(self._grid)
        elif isinstance(line, AntiDiagonal):
            values = board_rules.get_anti_diagonal(self._grid)
        else:
            raise TypeError(f"Unknown line type: {type(line).__name__}")

        return board_rules.all_match(values, code)

    def is_full(self) -> bool:
        return board_rules.board_full(self._grid)

    def marked_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def empty_cells(self) -> np.ndarray:
        """Empty cell positions as array of shape (N, 2)."""
        return np.argwhere(self._grid == 0)

    def state_string(self) -> str:
        n = self.width
        lines = ["╭" + "┬".join(["───"] * n) + "╮"]
        for i in range(n):
            row = "│ " + " │ ".join(
                self._symbol(int(self._grid[i, j])) or " " for j in range(n)
            ) + " │"
            lines.append(row)
            if i < n - 1:
                lines.append("├" + "┼".join(["───"] * n) + "┤")
        lines.append("╰" + "┴".join(["───"] * n) + "╯")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(width={self.width}, marked={self.marked_count()})"
