"""
Turn tracking for TicTacToe.
"""

from typing import Callable, Optional

from .board import Mark


TurnListener = Callable[[Mark], None]


class TurnTracker:
    """
    Keeps track of whose mark goes next.

    The optional on_change listener is called with the new mark every time
    the turn changes or is reset (e.g. to refresh a "current turn" display).
    """

    def __init__(self, starting_mark: Mark = Mark.X, on_change: Optional[TurnListener] = None):
        self._check_mark(starting_mark)
        self.starting_mark = starting_mark
        self.on_change = on_change
        self._current = starting_mark

    @staticmethod
    def _check_mark(mark):
        if not isinstance(mark, Mark) or not mark.is_player:
            raise ValueError(f"Turn must be X or O, got {mark!r}")

    def current(self) -> Mark:
        """Get the mark allowed to move next."""
        return self._current

    def toggle(self, notify: bool = True) -> Mark:
        """
        Hand the turn to the other player and return the new mark.

        Args:
            notify: If False, the listener is not called; the caller is
                expected to call notify() itself.
        """
        self._current = self._current.opposite()
        if notify:
            self.notify()
        return self._current

    def reset(self, starting_mark: Optional[Mark] = None) -> Mark:
        """
        Go back to a starting mark.

        Args:
            starting_mark: Mark to move first after this reset only.
                Defaults to the mark the tracker was created with.
        """
        if starting_mark is None:
            starting_mark = self.starting_mark
        self._check_mark(starting_mark)

        self._current = starting_mark
        self.notify()
        return self._current

    def notify(self):
        """Tell the listener about the current mark."""
        if self.on_change is not None:
            self.on_change(self._current)
