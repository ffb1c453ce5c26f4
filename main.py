"""
Console host for TicTacToe.

This script ties together:
- A game session (board, turns, win detection)
- A score ledger kept across rounds
- Text rendering of the board

Run this script to play TicTacToe for two players on one terminal!
"""

from typing import Optional

from logic.board import Mark
from logic.config import GameConfig
from logic.errors import GameError, InvalidCoordinate
from logic.game_session import GameSession
from logic.move_validator import MoveValidator
from logic.score_ledger import ScoreLedger
from logic.win_checker import Outcome


HELP_TEXT = "Enter 'row col' (e.g. '0 2') to move, 'r' to reset, 'q' to quit."


class TicTacToeConsole:
    """
    Terminal front end for a TicTacToe session.

    Game flow:
    1. The current player types a position
    2. The move is validated and submitted
    3. The board and the next turn are printed
    4. When the round ends the score is updated and shown
    5. 'r' starts a new round, 'q' quits
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the console.

        Args:
            config: Game configuration (defaults to GameConfig()).
        """
        self.config = config or GameConfig()
        self.ledger = ScoreLedger()
        self.validator = MoveValidator()
        self.session = GameSession(
            self.config,
            on_game_end=self._on_game_end,
            on_turn_change=self._on_turn_change
        )
        self.is_running = False

        # Updated by the session whenever the turn changes
        self.turn_display = self.session.current_turn.value

    def start(self):
        """Run the input loop until the player quits."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print(HELP_TEXT)
        self._show_board()

        self.is_running = True
        while self.is_running:
            try:
                command = input(f"{self.turn_display}> ")
            except EOFError:
                break
            self.is_running = self.handle_command(command)

    def handle_command(self, command: str) -> bool:
        """
        Process one line of input.

        Args:
            command: The raw text typed by the player.

        Returns:
            False if the console should stop, True otherwise.
        """
        command = command.strip().lower()

        if command in ("q", "quit"):
            return False

        if command in ("r", "reset"):
            self._reset_game()
            return True

        parts = command.replace(",", " ").split()
        if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
            print(HELP_TEXT)
            return True

        row, col = int(parts[0]), int(parts[1])
        self._play(row, col)
        return True

    def _play(self, row: int, col: int):
        result = self.validator.validate_move(self.session, row, col)
        if not result.is_valid:
            self._report(result.error)
            return

        try:
            self.session.submit_move(row, col)
        except GameError as e:
            self._report(e)
            return

        self._show_board()

    def _report(self, error: GameError):
        if isinstance(error, InvalidCoordinate):
            print(f"Warning: {error}")
        else:
            print(error)

    def _on_turn_change(self, mark: Mark):
        self.turn_display = mark.value

    def _on_game_end(self, outcome: Outcome):
        self.ledger.record(outcome)

        if outcome.winner is not None:
            print(f"\n{outcome.winner.value} WINS!")
        else:
            print("\nIt's a DRAW!")

        scores = self.ledger.as_dict()
        print(f"Score - X: {scores['X']}  O: {scores['O']}  Draws: {scores['draws']}")
        print("Type 'r' to play again.")

    def _show_board(self):
        print(f"\n{self.session.board.render()}\n")
        if not self.session.is_over:
            print(f"Current turn: {self.turn_display}")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()
        print(f"{self.session.starting_mark.value} moves first.")
        self._show_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--first",
        choices=["X", "O"],
        default=GameConfig.STARTING_MARK.value,
        help="Mark that moves first in every round"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the board after every move"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.STARTING_MARK = Mark(args.first)
    config.DEBUG_MODE = args.debug

    console = TicTacToeConsole(config)

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
