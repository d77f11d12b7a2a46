"""
Match - player identity, turn order and outcome evaluation on top of Board.

State machine:
    NOT_STARTED -> IN_PROGRESS -> CONCLUDED
start() from any phase yields a fresh IN_PROGRESS match.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from tictactoe_engine.core.errors import (
    InvalidCoordinateType,
    InvalidMark,
    InvalidPlayerName,
    MatchConcluded,
    NoActiveMatch,
    WrongPlayerCount,
)
from tictactoe_engine.core.types import (
    AntiDiagonal,
    Column,
    MainDiagonal,
    MatchPhase,
    Outcome,
    Player,
    Row,
    TurnResult,
    TurnStatus,
    WinningLine,
)
from tictactoe_engine.games.board import Board, is_index
from tictactoe_engine.utils.config import DEFAULT_WIDTH, EMPTY, MARKS

logger = logging.getLogger(__name__)


class Match:
    """Two-player full-line tic-tac-toe on an N x N board."""

    __slots__ = ('_marks', 'board', '_players', '_current_index', '_current_turn',
                 '_phase', '_last_result')

    def __init__(self, marks: Sequence[str] = MARKS):
        marks = tuple(marks)
        if (not all(isinstance(m, str) and m != EMPTY for m in marks)
                or len(marks) != 2 or len(set(marks)) != 2):
            raise ValueError(
                f"Exactly two distinct non-empty string marks are required (got {marks!r})"
            )

        self._marks: Tuple[str, ...] = marks
        self.board = Board(DEFAULT_WIDTH, marks)
        self._players: Tuple[Player, ...] = ()
        self._current_index = 0
        self._current_turn = 1
        self._phase = MatchPhase.NOT_STARTED
        self._last_result: Optional[TurnResult] = None

    # -- lifecycle ------------------------------------------------------------

    def _create_player(self, name: str, mark: str) -> Player:
        if not isinstance(name, str):
            raise InvalidPlayerName(name)
        if mark not in self._marks:
            raise InvalidMark(mark, self._marks)
        return Player(name, mark)

    def start(self, width: int, *names: str) -> None:
        """
        Reset everything and begin a new match.

        The board is resized before the player count is checked, so a
        WrongPlayerCount failure leaves a cleared board of the new width
        while the players stay unset.
        """
        if self._players:
            self._players = ()
            self._current_index = 0
            self._current_turn = 1
            self._phase = MatchPhase.NOT_STARTED
            self._last_result = None

        self.board.resize(width)

        if len(names) != len(self._marks):
            raise WrongPlayerCount(len(self._marks), len(names))

        players = tuple(
            self._create_player(name, mark) for name, mark in zip(names, self._marks)
        )

        self._players = players
        self._current_index = 0
        self._current_turn = 1
        self._phase = MatchPhase.IN_PROGRESS
        self._last_result = None

        logger.info("Match started: %dx%d, %s", width, width,
                    " vs ".join(f"{p.name} ({p.mark})" for p in players))

    def play_turn(self, row: int, col: int) -> TurnResult:
        """
        Place the current player's mark at (row, col).

        Returns:
            TurnResult with status NOT_ADVANCED when the cell is occupied
            (nothing changes), otherwise ADVANCED with the outcome.
        """
        if not (is_index(row) and is_index(col)):
            raise InvalidCoordinateType(row, col)
        if self._phase is MatchPhase.NOT_STARTED:
            raise NoActiveMatch("the board")
        if self._phase is MatchPhase.CONCLUDED:
            raise MatchConcluded()

        row, col = int(row), int(col)
        player = self._players[self._current_index]

        if self.board.mark(player.mark, row, col) is TurnStatus.NOT_ADVANCED:
            logger.debug("Cell (%d,%d) already marked; turn %d not advanced",
                         row, col, self._current_turn)
            return TurnResult.not_advanced(row, col)

        outcome, line = self.evaluate(player.mark, row, col)
        result = TurnResult(TurnStatus.ADVANCED, outcome, line, player.mark,
                            row, col, self._current_turn)
        self._last_result = result

        logger.debug("Turn %d: %s placed %s at (%d,%d)",
                     self._current_turn, player.name, player.mark, row, col)

        if outcome is Outcome.NONE:
            self._current_index = (self._current_index + 1) % len(self._players)
            self._current_turn += 1
        else:
            self._phase = MatchPhase.CONCLUDED
            if outcome is Outcome.WIN:
                logger.info("%s (%s) wins on %s at turn %d",
                            player.name, player.mark, line, self._current_turn)
            else:
                logger.info("Draw at turn %d", self._current_turn)

        return result

    # -- outcome --------------------------------------------------------------

    @property
    def first_turn_at_which_match_can_end(self) -> int:
        """
        Neither player can complete a line before each has placed
        width - 1 marks and the first mover places one more.
        """
        return len(self._marks) * (self.board.width - 1) + 1

    def evaluate(self, mark: str, row: int, col: int) -> Tuple[Outcome, Optional[WinningLine]]:
        """Outcome of the mark just placed at (row, col) on the current turn."""
        if self._current_turn < self.first_turn_at_which_match_can_end:
            return Outcome.NONE, None

        width = self.board.width
        candidates = [Row(row), Column(col)]
        if row == col:
            candidates.append(MainDiagonal())
        if row + col == width - 1:
            candidates.append(AntiDiagonal())

        for line in candidates:
            if self.board.line_is(line, mark):
                return Outcome.WIN, line

        if self._current_turn == self.board.area:
            return Outcome.DRAW, None

        return Outcome.NONE, None

    # -- accessors ------------------------------------------------------------

    @property
    def marks(self) -> Tuple[str, ...]:
        return self._marks

    @property
    def first_playing_mark(self) -> str:
        return self._marks[0]

    @property
    def phase(self) -> MatchPhase:
        return self._phase

    @property
    def last_result(self) -> Optional[TurnResult]:
        return self._last_result

    def _require_active(self, what: str) -> None:
        if not self._players:
            raise NoActiveMatch(what)

    @property
    def players(self) -> Tuple[Player, ...]:
        self._require_active("the players")
        return self._players

    @property
    def current_player(self) -> Player:
        self._require_active("the current player")
        return self._players[self._current_index]

    @property
    def current_player_name(self) -> str:
        return self.current_player.name

    @property
    def current_player_mark(self) -> str:
        return self.current_player.mark

    @property
    def current_player_order(self) -> int:
        """1-based position of the current player."""
        self._require_active("the current player")
        return self._current_index + 1

    @property
    def current_turn(self) -> int:
        self._require_active("the current turn")
        return self._current_turn

    @property
    def board_width(self) -> int:
        self._require_active("the board")
        return self.board.width

    @property
    def winner(self) -> Optional[Player]:
        """The player who completed a line, or None."""
        self._require_active("the winner")
        if self._last_result is not None and self._last_result.outcome is Outcome.WIN:
            return self._players[self._current_index]
        return None

    def __repr__(self) -> str:
        return (f"Match(phase={self._phase.name}, width={self.board.width}, "
                f"turn={self._current_turn})")
