"""
Core module - fundamental types and the error taxonomy.
"""

from tictactoe_engine.core.types import (
    Outcome,
    TurnStatus,
    MatchPhase,
    Player,
    Row,
    Column,
    MainDiagonal,
    AntiDiagonal,
    WinningLine,
    TurnResult,
)
from tictactoe_engine.core.errors import (
    GameError,
    InvalidMark,
    OutOfBounds,
    InvalidCoordinateType,
    WrongPlayerCount,
    InvalidPlayerName,
    NoActiveMatch,
    MatchConcluded,
)

__all__ = [
    # Types
    "Outcome",
    "TurnStatus",
    "MatchPhase",
    "Player",
    "Row",
    "Column",
    "MainDiagonal",
    "AntiDiagonal",
    "WinningLine",
    "TurnResult",
    # Errors
    "GameError",
    "InvalidMark",
    "OutOfBounds",
    "InvalidCoordinateType",
    "WrongPlayerCount",
    "InvalidPlayerName",
    "NoActiveMatch",
    "MatchConcluded",
]
