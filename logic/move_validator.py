"""
Move validator for Tic Tac Toe.
Checks human input before it reaches the board.
"""

from typing import List, Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    location: Optional[int] = None


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Square must be a number from 1 to 9
    2. Can only place on an empty square
    3. Round must not be over
    """

    def validate_move(self, board: Board, location: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            location: Square to place on (1-9).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if board.is_terminal():
            return ValidationResult(
                is_valid=False,
                error_message="Round is already over!"
            )

        if location not in GameConfig.BOARD_LOCATIONS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid square {location}. Must be 1-9."
            )

        occupant = board.occupant(location)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Square {location} is already taken by {occupant}."
            )

        return ValidationResult(is_valid=True, location=location)

    def parse_move(self, board: Board, text: str) -> ValidationResult:
        """
        Parse a square number typed by the player and validate it.

        Args:
            board: Current board.
            text: Raw keyboard input.

        Returns:
            ValidationResult; location is set when the move is valid.
        """
        text = text.strip()
        try:
            location = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a square number."
            )

        return self.validate_move(board, location)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all squares the human may choose.

        Returns:
            Ascending list of empty squares, empty once the round is over.
        """
        if board.is_terminal():
            return []

        return list(board.empty_locations())
