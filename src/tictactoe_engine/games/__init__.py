"""
Games module - board and match engine.
"""

from tictactoe_engine.games.board import Board
from tictactoe_engine.games.match import Match
from tictactoe_engine.games.board_rules import (
    in_bounds,
    all_match,
    board_full,
    get_row,
    get_col,
    get_main_diagonal,
    get_anti_diagonal,
)

__all__ = [
    "Board",
    "Match",
    "in_bounds",
    "all_match",
    "board_full",
    "get_row",
    "get_col",
    "get_main_diagonal",
    "get_anti_diagonal",
]
