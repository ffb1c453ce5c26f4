"""
Score ledger for TicTacToe.
Counts wins per mark across rounds.
"""

from typing import Dict

from .board import Mark
from .win_checker import Outcome, OutcomeStatus


class ScoreLedger:
    """
    Win counts that outlive single rounds.

    record() takes the Outcome handed to game-end listeners, so it can be
    passed straight to GameSession(on_game_end=ledger.record).
    """

    def __init__(self):
        self._wins: Dict[Mark, int] = {Mark.X: 0, Mark.O: 0}
        self.draws = 0

    def record(self, outcome: Outcome):
        """
        Add a finished round to the score.

        Args:
            outcome: A win or draw Outcome.

        Raises:
            ValueError: If the outcome is still undecided.
        """
        if outcome.status is OutcomeStatus.WIN:
            self._wins[outcome.winner] += 1
        elif outcome.status is OutcomeStatus.DRAW:
            self.draws += 1
        else:
            raise ValueError("Cannot record an undecided round")

    def wins(self, mark: Mark) -> int:
        return self._wins[mark]

    @property
    def rounds_played(self) -> int:
        return sum(self._wins.values()) + self.draws

    def as_dict(self) -> Dict[str, int]:
        """Scores keyed by mark value, e.g. {"X": 1, "O": 2, "draws": 0}."""
        scores = {mark.value: count for mark, count in self._wins.items()}
        scores["draws"] = self.draws
        return scores

    def reset(self):
        """Zero every count."""
        for mark in self._wins:
            self._wins[mark] = 0
        self.draws = 0
