"""
Error taxonomy for the match engine.

Every error is raised synchronously to the immediate caller and is never
retried internally. A click on an occupied cell is NOT an error; it is
reported as TurnStatus.NOT_ADVANCED.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidMark(GameError, ValueError):
    """Symbol is not one of the recognized marks."""

    def __init__(self, mark, marks):
        self.mark = mark
        self.marks = tuple(marks)
        super().__init__(
            f"The value for mark cannot be {mark!r}. "
            f"It must be one of the following strings: {', '.join(self.marks)}."
        )


class OutOfBounds(GameError, IndexError):
    """Row and/or column lies outside [0, width)."""

    def __init__(self, row, col, width: int):
        self.row = row
        self.col = col
        self.width = width
        super().__init__(
            f"Invalid value(s) for row and/or column number "
            f"(row: {row}, column: {col}, width: {width})"
        )


class InvalidCoordinateType(GameError, TypeError):
    """Row and/or column is not an integer."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(
            f"Row and column numbers must be integers "
            f"(got {type(row).__name__} and {type(col).__name__})"
        )


class WrongPlayerCount(GameError, ValueError):
    """start() was given other than exactly one name per mark."""

    def __init__(self, expected: int, given: int):
        self.expected = expected
        self.given = given
        super().__init__(
            f"The number of players must be exactly {expected} (got {given})."
        )


class InvalidPlayerName(GameError, TypeError):
    """Player name is not a string."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Player name cannot be of type {type(name).__name__}. It must be a str."
        )


class NoActiveMatch(GameError, RuntimeError):
    """Accessor or turn used before the first start()."""

    def __init__(self, what: str = "the current player"):
        super().__init__(f"No match has been started; no information available about {what}.")


class MatchConcluded(GameError, RuntimeError):
    """play_turn() called after a win or draw, before the next start()."""

    def __init__(self):
        super().__init__("The match has concluded. Call start() to begin a new one.")
