"""
Game configuration for TicTacToe.
Change these values to adjust the default game setup.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    """

    # Which mark plays first in every round
    STARTING_MARK = Mark.O

    # Print the board after every accepted move
    DEBUG_MODE = False
