"""
Board model for TicTacToe.
Owns the 3x3 grid of marks and the mutation of individual cells.
"""

from enum import Enum
from typing import List, Tuple

import numpy as np

from .errors import CellOccupied, InvalidCoordinate


class Mark(Enum):
    """The value held by a cell."""
    X = "X"
    O = "O"
    EMPTY = " "

    @property
    def is_player(self) -> bool:
        """True for the two player marks."""
        return self is not Mark.EMPTY

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self is Mark.X else Mark.X


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells start EMPTY. Once a cell holds a player mark it keeps it until
    the whole board is reset.
    """

    SIZE = 3

    def __init__(self):
        self._cells = self._empty_grid()

    def _empty_grid(self) -> np.ndarray:
        return np.full((self.SIZE, self.SIZE), Mark.EMPTY, dtype=object)

    def _check_coordinates(self, row, col):
        """
        Make sure (row, col) addresses a cell on the board.

        Raises:
            InvalidCoordinate: If either index is not an int in 0-2.
        """
        for index in (row, col):
            # bool is an int subclass, and numpy would wrap negatives
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                raise InvalidCoordinate(row, col)
            if not 0 <= index < self.SIZE:
                raise InvalidCoordinate(row, col)

    def get_cell(self, row: int, col: int) -> Mark:
        """
        Get the mark at a position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Mark in that cell (Mark.EMPTY if nothing was placed).
        """
        self._check_coordinates(row, col)
        return self._cells[row, col]

    def set_cell(self, row: int, col: int, mark: Mark):
        """
        Place a player's mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Mark.X or Mark.O.

        Raises:
            InvalidCoordinate: If the position is off the board.
            CellOccupied: If the cell already holds a mark.
            ValueError: If mark is not a player mark.
        """
        self._check_coordinates(row, col)

        if not isinstance(mark, Mark) or not mark.is_player:
            raise ValueError(f"Only X or O can be placed, got {mark!r}")

        current = self._cells[row, col]
        if current is not Mark.EMPTY:
            raise CellOccupied(row, col, current)

        self._cells[row, col] = mark

    def reset(self):
        """Clear every cell."""
        self._cells = self._empty_grid()

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not (self._cells == Mark.EMPTY).any()

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        rows, cols = np.nonzero(self._cells == Mark.EMPTY)
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def snapshot(self) -> np.ndarray:
        """Get an independent copy of the grid."""
        return self._cells.copy()

    def to_list(self) -> List[List[Mark]]:
        """Get the grid as nested lists (for rendering)."""
        return self._cells.tolist()

    def render(self) -> str:
        """
        Draw the board as text.

        Example:
            O|X|
            -----
             |X|
            -----
             | |O
        """
        rule = "-" * (2 * self.SIZE - 1)
        rows = ["|".join(mark.value for mark in row) for row in self._cells]
        return f"\n{rule}\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        filled = self.SIZE * self.SIZE - len(self.get_empty_cells())
        return f"Board(filled={filled})"
