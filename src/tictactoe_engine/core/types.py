"""
Core types shared by the board, the match and its collaborators.

- Outcome / TurnStatus / MatchPhase enums
- Player record
- Winning line variants: Row(index), Column(index), MainDiagonal, AntiDiagonal
- TurnResult record returned by Match.play_turn()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, NamedTuple, Optional, Tuple, Union


class Outcome(Enum):
    NONE = auto()
    WIN = auto()
    DRAW = auto()


class TurnStatus(Enum):
    """Whether a mark actually landed on the board."""

    NOT_ADVANCED = auto()  # click on an occupied cell
    ADVANCED = auto()


class MatchPhase(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    CONCLUDED = auto()


class Player(NamedTuple):
    """A participant: display name and the mark they place."""

    name: str
    mark: str


# ---------------------------------------------------------------------------
# Winning lines
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Row:
    index: int
    kind = "row"

    def cells(self, width: int) -> List[Tuple[int, int]]:
        return [(self.index, c) for c in range(width)]


@dataclass(frozen=True)
class Column:
    index: int
    kind = "column"

    def cells(self, width: int) -> List[Tuple[int, int]]:
        return [(r, self.index) for r in range(width)]


@dataclass(frozen=True)
class MainDiagonal:
    kind = "main_diagonal"

    def cells(self, width: int) -> List[Tuple[int, int]]:
        return [(i, i) for i in range(width)]


@dataclass(frozen=True)
class AntiDiagonal:
    kind = "anti_diagonal"

    def cells(self, width: int) -> List[Tuple[int, int]]:
        return [(i, width - 1 - i) for i in range(width)]


WinningLine = Union[Row, Column, MainDiagonal, AntiDiagonal]


# ---------------------------------------------------------------------------
# Turn result
# ---------------------------------------------------------------------------

class TurnResult(NamedTuple):
    """
    Result of a single play_turn() call.

    A NOT_ADVANCED result carries no outcome: the click landed on an
    occupied cell and nothing changed. An ADVANCED result always carries
    an outcome, and a winning line when the outcome is WIN.
    """

    status: TurnStatus
    outcome: Optional[Outcome] = None
    winning_line: Optional[WinningLine] = None
    mark: Optional[str] = None
    row: Optional[int] = None
    col: Optional[int] = None
    turn: Optional[int] = None

    @classmethod
    def not_advanced(cls, row: int, col: int) -> "TurnResult":
        return cls(TurnStatus.NOT_ADVANCED, row=row, col=col)

    @property
    def advanced(self) -> bool:
        return self.status is TurnStatus.ADVANCED

    @property
    def is_over(self) -> bool:
        return self.outcome in (Outcome.WIN, Outcome.DRAW)

    @property
    def line_kind(self) -> Optional[str]:
        return self.winning_line.kind if self.winning_line is not None else None

    @property
    def line_index(self) -> Optional[int]:
        """Row/column index of the winning line; None for diagonals."""
        return getattr(self.winning_line, "index", None)
