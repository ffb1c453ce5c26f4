"""
Move validator for TicTacToe.
Checks a move against the rules without touching the game.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .board import Mark
from .errors import CellOccupied, GameAlreadyOver, GameError, InvalidCoordinate
from .game_session import GameSession


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        session: GameSession,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and the error that submit_move
            would raise.
        """
        if session.is_over:
            return ValidationResult(
                is_valid=False,
                error=GameAlreadyOver(session.outcome)
            )

        try:
            current = session.board.get_cell(row, col)
        except InvalidCoordinate as e:
            return ValidationResult(is_valid=False, error=e)

        if current is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=CellOccupied(row, col, current)
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: GameSession) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) positions, empty once the round is over.
        """
        if session.is_over:
            return []

        return session.board.get_empty_cells()
