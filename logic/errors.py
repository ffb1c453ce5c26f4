"""
Errors raised by the TicTacToe game logic.
All of them are recoverable: the engine state is untouched when one is raised.
"""


class GameError(Exception):
    """Base class for rejected game operations."""


class InvalidCoordinate(GameError):
    """Row or column outside the board (a bug in the caller)."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")


class CellOccupied(GameError):
    """The chosen cell already holds a mark."""

    def __init__(self, row: int, col: int, mark):
        self.row = row
        self.col = col
        self.mark = mark
        super().__init__(f"Cell ({row}, {col}) is already occupied by {mark.value}")


class GameAlreadyOver(GameError):
    """A move was submitted after the round ended."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Game is already over! ({outcome.describe()})")
