"""
Game session for TicTacToe.
Ties the board, turn tracker and win checker together for one round.
"""

from enum import Enum
from typing import Callable, Optional

from .board import Board, Mark
from .config import GameConfig
from .errors import GameAlreadyOver
from .turn_tracker import TurnListener, TurnTracker
from .win_checker import Outcome, OutcomeStatus, WinChecker


GameEndListener = Callable[[Outcome], None]


class SessionState(Enum):
    """Where the round is."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameSession:
    """
    One round of TicTacToe.

    Game flow:
    1. The current player submits a move
    2. The mark is placed on the board (illegal moves are rejected)
    3. The turn passes to the other player
    4. The board is evaluated; a win or draw ends the round
    5. reset() starts a new round

    Listeners:
    - on_turn_change(mark) after every accepted move and on reset
    - on_game_end(outcome) once per round, when it is won or drawn
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        starting_mark: Optional[Mark] = None,
        on_game_end: Optional[GameEndListener] = None,
        on_turn_change: Optional[TurnListener] = None
    ):
        """
        Initialize a session with an empty board.

        Args:
            config: Game configuration (defaults to GameConfig()).
            starting_mark: Mark that moves first (defaults to config.STARTING_MARK).
            on_game_end: Called with the final Outcome when the round ends.
            on_turn_change: Called with the new mark whenever the turn changes.
        """
        self.config = config or GameConfig()
        self.on_game_end = on_game_end

        self._board = Board()
        self._turns = TurnTracker(
            starting_mark if starting_mark is not None else self.config.STARTING_MARK,
            on_change=on_turn_change
        )
        self._win_checker = WinChecker()
        self._state = SessionState.IN_PROGRESS
        self._winner: Optional[Mark] = None

    # ==================== READ ACCESS ====================

    @property
    def board(self) -> Board:
        """The board, for rendering. Mutate it only through submit_move()."""
        return self._board

    @property
    def current_turn(self) -> Mark:
        return self._turns.current()

    @property
    def starting_mark(self) -> Mark:
        return self._turns.starting_mark

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def winner(self) -> Optional[Mark]:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._state is not SessionState.IN_PROGRESS

    @property
    def outcome(self) -> Outcome:
        """Evaluate the current board (never cached)."""
        return self._win_checker.check_outcome(self._board)

    @property
    def move_count(self) -> int:
        size = self._board.SIZE
        return size * size - len(self._board.get_empty_cells())

    # ==================== MUTATION ====================

    def submit_move(self, row: int, col: int) -> Outcome:
        """
        Place the current player's mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Outcome of the board after the move.

        Raises:
            GameAlreadyOver: If the round has already been won or drawn.
            InvalidCoordinate: If the position is off the board.
            CellOccupied: If the cell already holds a mark.
        """
        if self.is_over:
            raise GameAlreadyOver(self.outcome)

        # Raises before anything changes
        self._board.set_cell(row, col, self._turns.current())
        self._turns.toggle(notify=False)

        outcome = self._win_checker.check_outcome(self._board)

        if outcome.status is OutcomeStatus.WIN:
            self._state = SessionState.WON
        elif outcome.status is OutcomeStatus.DRAW:
            self._state = SessionState.DRAW
        self._winner = outcome.winner

        if self.config.DEBUG_MODE:
            print(f"\n{self._board.render()}\n")

        # Session is consistent before any listener runs
        try:
            self._turns.notify()
        finally:
            if outcome.is_terminal and self.on_game_end is not None:
                self.on_game_end(outcome)

        return outcome

    def reset(self):
        """Start a new round: empty board, starting mark to move."""
        self._board.reset()
        self._state = SessionState.IN_PROGRESS
        self._winner = None
        self._turns.reset()

    def undo(self):
        """Take back the last move (move history is not kept yet)."""
        raise NotImplementedError("undo is not supported")
