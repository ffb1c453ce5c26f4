"""
Logic module for TicTacToe.
Handles the board, turns, win detection, rounds and scores.
"""

__version__ = "1.0.0"

from .board import Board, Mark
from .errors import GameError, InvalidCoordinate, CellOccupied, GameAlreadyOver
from .win_checker import WinChecker, Outcome, OutcomeStatus, evaluate
from .turn_tracker import TurnTracker
from .config import GameConfig
from .game_session import GameSession, SessionState
from .move_validator import MoveValidator, ValidationResult
from .score_ledger import ScoreLedger
