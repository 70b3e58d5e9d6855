"""
Game state management for Tic Tac Toe.
Tracks the 3x3 board, the two markers and each player's round wins.
"""

from enum import Enum
from typing import Dict, Iterator, Optional, Set, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .win_checker import WinChecker


class Marker(Enum):
    """The two symbols that can occupy a cell."""
    HUMAN = GameConfig.HUMAN_MARKER
    OPPONENT = GameConfig.OPPONENT_MARKER

    def opposite(self) -> "Marker":
        """Get the other player's marker."""
        return Marker.OPPONENT if self == Marker.HUMAN else Marker.HUMAN

    def __str__(self) -> str:
        return self.value


class GameError(Exception):
    """Base class for rule violations reported by the game core."""


class InvalidLocation(GameError, ValueError):
    """Raised when a location is outside 1-9."""

    def __init__(self, location):
        super().__init__(f"Invalid location {location!r}. Must be 1-9.")
        self.location = location


class AlreadyOccupied(GameError, ValueError):
    """Raised when placing a marker on a cell that is not empty."""

    def __init__(self, location: int, occupant: "Marker"):
        super().__init__(f"Square {location} is already occupied by {occupant}")
        self.location = location
        self.occupant = occupant


class InvalidMarker(GameError, TypeError):
    """Raised when something other than a Marker is placed."""

    def __init__(self, marker):
        super().__init__(f"Invalid marker {marker!r}. Must be a Marker.")
        self.marker = marker


class Cell:
    """
    A single square of the board.

    The location is fixed when the cell is created; only the occupant
    changes.
    """

    def __init__(self, location: int, occupant: Optional[Marker] = None):
        self._location = location
        self.occupant = occupant

    @property
    def location(self) -> int:
        return self._location

    def is_empty(self) -> bool:
        return self.occupant is None

    def clear(self):
        self.occupant = None

    def __repr__(self) -> str:
        return f"Cell({self._location}, {self.occupant!r})"


class Board:
    """
    The 3x3 Tic Tac Toe board.

    Squares are addressed 1-9:

         1 | 2 | 3
        ---+---+---
         4 | 5 | 6
        ---+---+---
         7 | 8 | 9

    Line scans (winner, winning moves) are done by WinChecker.
    """

    win_checker = WinChecker()

    def __init__(self):
        self.cells: Dict[int, Cell] = {
            location: Cell(location) for location in GameConfig.BOARD_LOCATIONS
        }

    def place(self, location: int, marker: Marker):
        """
        Put a marker on an empty square.

        Args:
            location: Square number (1-9).
            marker: The marker to place.

        Raises:
            InvalidLocation: location is not 1-9.
            InvalidMarker: marker is not a Marker.
            AlreadyOccupied: the square already holds a marker.
        """
        # bool is an int subclass, and True would address square 1
        is_int = isinstance(location, int) and not isinstance(location, bool)
        cell = self.cells.get(location) if is_int else None
        if cell is None:
            raise InvalidLocation(location)
        if not isinstance(marker, Marker):
            raise InvalidMarker(marker)
        if not cell.is_empty():
            raise AlreadyOccupied(location, cell.occupant)
        cell.occupant = marker

    def occupant(self, location: int) -> Optional[Marker]:
        """Get the marker on a square, or None if it is empty."""
        if location not in self.cells:
            raise InvalidLocation(location)
        return self.cells[location].occupant

    def empty_locations(self) -> Iterator[int]:
        """Yield the empty squares in ascending order (recomputed per call)."""
        return (location for location, cell in self.cells.items() if cell.is_empty())

    def is_full(self) -> bool:
        return next(self.empty_locations(), None) is None

    def center_available(self) -> bool:
        return self.cells[GameConfig.CENTER_LOCATION].is_empty()

    def winner(self) -> Optional[Marker]:
        """Get the marker that completed a line, or None."""
        return self.win_checker.check_winner(self)

    def has_winner(self) -> bool:
        return self.winner() is not None

    def is_terminal(self) -> bool:
        """True when the round cannot continue (a win or a full board)."""
        return self.has_winner() or self.is_full()

    def winning_moves_for(self, marker: Marker) -> Optional[Set[int]]:
        """Get the squares that would complete a line for marker, or None."""
        return self.win_checker.find_winning_moves(self, marker)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the completed line, for highlighting."""
        return self.win_checker.get_winning_line(self)

    def snapshot(self) -> Tuple[Optional[Marker], ...]:
        """
        Read-only view of the board for rendering.

        Returns:
            9 occupants, index 0 holding square 1.
        """
        return tuple(cell.occupant for cell in self.cells.values())

    def reset(self):
        """Empty every square."""
        for cell in self.cells.values():
            cell.clear()

    def copy(self) -> "Board":
        """Create an independent board with the same occupants."""
        new_board = Board()
        for location, cell in self.cells.items():
            new_board.cells[location].occupant = cell.occupant
        return new_board


@dataclass
class Player:
    """
    One side of the match.

    The marker is fixed for the player's lifetime; the score counts
    round wins in the current match.
    """
    marker: Marker
    score: int = 0

    def add_win(self):
        self.score += 1

    def reset_score(self):
        self.score = 0

    def has_reached(self, target: int) -> bool:
        return self.score >= target
