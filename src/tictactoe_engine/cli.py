"""
Command-line front end: two humans play at one terminal.

All game rules live in Match; this module only parses input, renders
the board and reports results.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from tictactoe_engine.core.errors import GameError
from tictactoe_engine.core.types import Outcome
from tictactoe_engine.games.match import Match
from tictactoe_engine.utils.config import (
    DEFAULT_PLAYER_NAMES,
    DEFAULT_WIDTH,
    MAX_WIDTH,
    MIN_WIDTH,
    Config,
)

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play full-line tic-tac-toe on an N x N board"
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Board width, {MIN_WIDTH}-{MAX_WIDTH} (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated player names, first plays X (e.g., 'Alice,Bob')",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every turn",
    )
    return parser.parse_args(argv)


def parse_player_names(players_str: Optional[str]) -> Tuple[str, ...]:
    """Split the --players argument; defaults when omitted."""
    if players_str is None:
        return DEFAULT_PLAYER_NAMES
    return tuple(p for p in players_str.split(","))


def parse_move(text: str) -> Tuple[int, int]:
    """Parse 'row col' or 'row,col' (0-based)."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers 'row col', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Row and column must be integers, got {text!r}") from e


def play(match: Match, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> Optional[Outcome]:
    """
    Read moves from stdin until the match concludes or input ends.

    Returns the final outcome, or None if the players quit early.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    width = match.board_width

    def say(msg: str = "") -> None:
        print(msg, file=stdout)

    say(match.board.state_string())
    while True:
        print(f"Turn {match.current_turn}: {match.current_player_name} "
              f"({match.current_player_mark}) > ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            return None
        line = line.strip()
        if line.lower() in QUIT_WORDS:
            return None

        try:
            row, col = parse_move(line)
        except ValueError as e:
            say(str(e))
            continue

        if not (0 <= row < width and 0 <= col < width):
            say(f"Row and column must be between 0 and {width - 1}")
            continue

        result = match.play_turn(row, col)
        if not result.advanced:
            say(f"Cell ({row}, {col}) is already marked")
            continue

        say(match.board.state_string())

        if result.outcome is Outcome.WIN:
            cells = ", ".join(f"({r},{c})" for r, c in result.winning_line.cells(width))
            say(f"{match.current_player_name} ({result.mark}) wins! "
                f"Line: {result.line_kind} {cells}")
            return Outcome.WIN
        if result.outcome is Outcome.DRAW:
            say("Draw: nobody wins")
            return Outcome.DRAW


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(width=args.width, player_names=parse_player_names(args.players))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        match = config.new_match()
        play(match)
    except GameError:
        logger.exception("Engine rejected a call from the front end")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
