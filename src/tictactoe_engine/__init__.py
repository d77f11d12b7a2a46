"""
Tic-Tac-Toe Engine - two-player full-line tic-tac-toe on N x N boards.

A player wins by filling a complete row, column or full-length diagonal
with their mark; a full board with no such line is a draw.

Quick Start:
    from tictactoe_engine import Match, Outcome

    match = Match()
    match.start(3, "Alice", "Bob")
    result = match.play_turn(0, 0)
    if result.advanced and result.outcome is Outcome.WIN:
        print(match.current_player_name, result.winning_line)

Modules:
    core   - Outcome/turn types, winning line variants, error taxonomy
    games  - Board grid and Match turn/outcome state machine
    utils  - Configuration defaults
    cli    - Terminal front end
"""

from tictactoe_engine.games import Board, Match
from tictactoe_engine.core import (
    Outcome,
    TurnStatus,
    MatchPhase,
    Player,
    Row,
    Column,
    MainDiagonal,
    AntiDiagonal,
    TurnResult,
    GameError,
    InvalidMark,
    OutOfBounds,
    InvalidCoordinateType,
    WrongPlayerCount,
    InvalidPlayerName,
    NoActiveMatch,
    MatchConcluded,
)

__version__ = "1.0.0"

__all__ = [
    # Engine
    "Board",
    "Match",
    # Types
    "Outcome",
    "TurnStatus",
    "MatchPhase",
    "Player",
    "Row",
    "Column",
    "MainDiagonal",
    "AntiDiagonal",
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
