"""
Configuration defaults for matches and the terminal front end.
"""

from typing import Sequence, Tuple


# ---------------------------------------------------------------------------
# Marks and cells
# ---------------------------------------------------------------------------

# marks[0] always moves first
MARKS: Tuple[str, str] = ("X", "O")

EMPTY = ""


# ---------------------------------------------------------------------------
# Board size
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = 3
MIN_WIDTH = 2
MAX_WIDTH = 10  # bound enforced by the front end, not by the engine

DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")


def validate_width(width: int) -> int:
    """Front-end check for a board width inside [MIN_WIDTH, MAX_WIDTH]."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"Board width must be an integer (got {width!r})")
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ValueError(
            f"Board width must be between {MIN_WIDTH} and {MAX_WIDTH} (got {width})"
        )
    return width


def validate_player_names(names: Sequence[str]) -> Tuple[str, ...]:
    """
    Front-end checks on player names: stripped, non-empty and distinct
    (case-insensitive). The engine itself only checks count and type.
    """
    if len(names) != len(MARKS):
        raise ValueError(
            f"Exactly {len(MARKS)} player names are required (got {len(names)})"
        )
    cleaned = tuple(n.strip() for n in names)
    if any(not n for n in cleaned):
        raise ValueError("Player names must not be empty")
    lowered = [n.lower() for n in cleaned]
    if len(set(lowered)) != len(lowered):
        raise ValueError("Player names must be different")
    return cleaned


class Config:
    """Settings for a new match with sensible defaults."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        player_names: Sequence[str] = DEFAULT_PLAYER_NAMES,
    ):
        self.width = validate_width(width)
        self.player_names = validate_player_names(player_names)

    def new_match(self):
        """Create and start a Match with these settings."""
        from tictactoe_engine.games.match import Match

        match = Match()
        match.start(self.width, *self.player_names)
        return match


# Default configuration
DEFAULT_CONFIG = Config()
