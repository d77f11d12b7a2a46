"""
Tests for tictactoe_engine.core.types

Tests winning line variants and the TurnResult record.
"""

import pytest

from tictactoe_engine.core.types import (
    AntiDiagonal,
    Column,
    MainDiagonal,
    Outcome,
    Player,
    Row,
    TurnResult,
    TurnStatus,
)


class TestWinningLines:
    """Winning line variant tests."""

    @pytest.mark.parametrize("line,kind", [
        (Row(0), "row"),
        (Column(2), "column"),
        (MainDiagonal(), "main_diagonal"),
        (AntiDiagonal(), "anti_diagonal"),
    ])
    def test_kind(self, line, kind):
        assert line.kind == kind

    def test_cells(self):
        """Each variant lists exactly its own coordinates."""
        assert Row(1).cells(3) == [(1, 0), (1, 1), (1, 2)]
        assert Column(0).cells(3) == [(0, 0), (1, 0), (2, 0)]
        assert MainDiagonal().cells(4) == [(0, 0), (1, 1), (2, 2), (3, 3)]
        assert AntiDiagonal().cells(3) == [(0, 2), (1, 1), (2, 0)]

    def test_equality_and_hashing(self):
        """Variants are value objects."""
        assert Row(1) == Row(1)
        assert Row(1) != Row(2)
        assert Row(1) != Column(1)
        assert MainDiagonal() == MainDiagonal()
        assert len({Row(0), Row(0), AntiDiagonal()}) == 2

    def test_immutable(self):
        line = Row(0)
        with pytest.raises(AttributeError):
            line.index = 1


class TestTurnResult:
    """TurnResult record tests."""

    def test_not_advanced(self):
        result = TurnResult.not_advanced(1, 2)
        assert result.status is TurnStatus.NOT_ADVANCED
        assert not result.advanced
        assert result.outcome is None
        assert not result.is_over
        assert (result.row, result.col) == (1, 2)

    def test_win_row(self):
        result = TurnResult(TurnStatus.ADVANCED, Outcome.WIN, Row(0), "X", 0, 2, 5)
        assert result.advanced
        assert result.is_over
        assert result.line_kind == "row"
        assert result.line_index == 0

    def test_win_diagonal_has_no_index(self):
        result = TurnResult(TurnStatus.ADVANCED, Outcome.WIN, AntiDiagonal(), "O", 2, 0, 8)
        assert result.line_kind == "anti_diagonal"
        assert result.line_index is None

    def test_none_outcome(self):
        result = TurnResult(TurnStatus.ADVANCED, Outcome.NONE, None, "X", 0, 0, 1)
        assert not result.is_over
        assert result.line_kind is None
        assert result.line_index is None

    def test_draw_is_over(self):
        result = TurnResult(TurnStatus.ADVANCED, Outcome.DRAW, None, "X", 2, 2, 9)
        assert result.is_over


class TestPlayer:

    def test_immutable(self):
        player = Player("A", "X")
        with pytest.raises(AttributeError):
            player.name = "B"

    def test_fields(self):
        assert Player("A", "X") == ("A", "X")
        assert Player("A", "X").mark == "X"
