"""
Game configuration for Tic Tac Toe.
All the fixed settings for markers, turn order and match length.
"""

from typing import Optional


class GameConfig:
    """
    Configuration class for game settings.
    Engines take an instance so tests can flip DEBUG_MODE per game.
    """

    # ==================== MARKERS ====================
    HUMAN_MARKER = "X"
    OPPONENT_MARKER = "O"

    # What an empty cell renders as
    EMPTY_SYMBOL = " "

    # ==================== BOARD SETTINGS ====================
    # Squares are numbered 1-9, left to right, top to bottom
    BOARD_LOCATIONS = range(1, 10)
    CENTER_LOCATION = 5

    # ==================== MATCH SETTINGS ====================
    # Who opens every round ("X" = human, "O" = opponent)
    FIRST_TO_MOVE = HUMAN_MARKER

    # Round wins needed to take the match
    WIN_TARGET = 3

    # ==================== DEBUG SETTINGS ====================
    # Print opponent decisions and engine state changes
    DEBUG_MODE = False

    def __init__(self, debug: Optional[bool] = None):
        if debug is not None:
            self.DEBUG_MODE = debug
