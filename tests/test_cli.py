"""
Tests for tictactoe_engine.cli

Tests argument parsing and the stdin-driven play loop.
"""

import io

import pytest

from tictactoe_engine.cli import main, parse_args, parse_move, parse_player_names, play
from tictactoe_engine.core.types import Outcome
from tictactoe_engine.games.match import Match
from tictactoe_engine.utils.config import DEFAULT_PLAYER_NAMES


def run(moves: str, width: int = 3):
    match = Match()
    match.start(width, "Ann", "Bo")
    out = io.StringIO()
    outcome = play(match, io.StringIO(moves), out)
    return outcome, out.getvalue(), match


class TestParsing:

    def test_defaults(self):
        args = parse_args([])
        assert args.width == 3
        assert args.players is None
        assert args.verbose is False

    def test_flags(self):
        args = parse_args(["-w", "5", "-p", "Ann,Bo", "-v"])
        assert (args.width, args.players, args.verbose) == (5, "Ann,Bo", True)

    def test_player_names(self):
        assert parse_player_names(None) == DEFAULT_PLAYER_NAMES
        assert parse_player_names("Ann,Bo") == ("Ann", "Bo")

    @pytest.mark.parametrize("text,expected", [("1 2", (1, 2)), ("0,2", (0, 2)), (" 2  0 ", (2, 0))])
    def test_parse_move(self, text, expected):
        assert parse_move(text) == expected

    @pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b"])
    def test_parse_move_rejects(self, text):
        with pytest.raises(ValueError):
            parse_move(text)


class TestPlay:
    """play() loop tests."""

    def test_win(self):
        outcome, out, match = run("0 0\n1 1\n0 1\n2 2\n0 2\n")
        assert outcome is Outcome.WIN
        assert "Ann (X) wins!" in out
        assert "row (0,0), (0,1), (0,2)" in out

    def test_draw(self):
        outcome, out, _ = run("0 0\n0 1\n0 2\n1 1\n1 0\n1 2\n2 1\n2 0\n2 2\n")
        assert outcome is Outcome.DRAW
        assert "Draw" in out

    def test_bad_input_is_reprompted(self):
        """Garbage, out-of-range and occupied cells never reach a turn."""
        outcome, out, match = run("hello\n5 5\n0 0\n0 0\nq\n")
        assert outcome is None
        assert "must be between 0 and 2" in out
        assert "already marked" in out
        assert match.current_turn == 2

    def test_eof_quits(self):
        outcome, _, match = run("1 1\n")
        assert outcome is None
        assert match.board.cell(1, 1) == "X"


class TestMain:

    def test_rejects_duplicate_names(self, capsys):
        assert main(["-p", "Ann,ann"]) == 2
        assert "different" in capsys.readouterr().err

    @pytest.mark.parametrize("players", ["Ann,Bo,Cy", "Ann"])
    def test_rejects_player_count(self, players, capsys):
        """A wrong number of names is a usage error, not an engine failure."""
        assert main(["-p", players]) == 2
        assert "player names are required" in capsys.readouterr().err

    def test_rejects_width(self, capsys):
        assert main(["-w", "1"]) == 2

    def test_plays_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n1 0\n0 1\n1 1\n0 2\n"))
        assert main(["-p", "Ann,Bo"]) == 0
        assert "Ann (X) wins!" in capsys.readouterr().out


class TestPrompt:

    def test_prompt_stays_on_input_line(self):
        """The turn prompt is not followed by a newline."""
        _, out, _ = run("q\n")
        assert out.endswith("Turn 1: Ann (X) > ")
