"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still undecided.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from .board import Board, Mark


Coordinate = Tuple[int, int]
Line = Tuple[Coordinate, Coordinate, Coordinate]


class OutcomeStatus(Enum):
    """Verdict for a board."""
    UNDECIDED = "undecided"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    A draw carries no winner; it is the "no winner" value handed to
    game-end listeners.
    """
    status: OutcomeStatus
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def undecided(cls) -> "Outcome":
        return cls(OutcomeStatus.UNDECIDED)

    @classmethod
    def win(cls, mark: Mark, line: Optional[Line] = None) -> "Outcome":
        return cls(OutcomeStatus.WIN, winner=mark, line=line)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status is not OutcomeStatus.UNDECIDED

    @property
    def is_draw(self) -> bool:
        return self.status is OutcomeStatus.DRAW

    def describe(self) -> str:
        """Human-readable summary."""
        if self.status is OutcomeStatus.WIN:
            return f"{self.winner.value} wins"
        if self.status is OutcomeStatus.DRAW:
            return "draw"
        return "in progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical player marks in a row
    (horizontally, vertically, or diagonally).

    The lines are checked in the order below and the first complete one
    decides the winner, so a board holding two complete lines always gives
    the same answer.
    """

    WINNING_LINES = [
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Diagonals
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    ]

    def check_outcome(self, board: Union[Board, np.ndarray, list]) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: A Board, or any 3x3 grid of Marks.

        Returns:
            Outcome.win(mark, line) for the first complete line,
            Outcome.draw() for a full board without one,
            Outcome.undecided() otherwise.
        """
        cells = self._as_grid(board)

        for line in self.WINNING_LINES:
            winner = self._check_line(cells, line)
            if winner is not None:
                return Outcome.win(winner, line)

        if not (cells == Mark.EMPTY).any():
            return Outcome.draw()

        return Outcome.undecided()

    def check_winner(self, board) -> Optional[Mark]:
        """Get the winning mark, or None if nobody has won."""
        return self.check_outcome(board).winner

    def check_draw(self, board) -> bool:
        """True if the board is full and nobody has won."""
        return self.check_outcome(board).is_draw

    def get_winning_line(self, board) -> Optional[Line]:
        """Get the winning line as three (row, col) positions, or None."""
        return self.check_outcome(board).line

    def _as_grid(self, board) -> np.ndarray:
        if isinstance(board, Board):
            return board.snapshot()

        cells = np.empty((Board.SIZE, Board.SIZE), dtype=object)
        cells[:, :] = [list(row) for row in board]
        return cells

    def _check_line(self, cells: np.ndarray, line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark filling all three cells, None otherwise.
        """
        rows, cols = zip(*line)
        marks = cells[list(rows), list(cols)]

        first = marks[0]
        if first is Mark.EMPTY:
            return None  # Empty cell, no winner on this line

        if (marks == first).all():
            return first

        return None


_checker = WinChecker()


def evaluate(board) -> Outcome:
    """Evaluate a board with the standard line order."""
    return _checker.check_outcome(board)
