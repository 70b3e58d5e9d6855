"""
Win checker for Tic Tac Toe.
Scans the eight winning lines for a winner or a square that completes one.
"""

from typing import List, Optional, Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .game_state import Board, Marker


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 of the same marker in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in scan order
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (1, 2, 3),
        (4, 5, 6),
        (7, 8, 9),
        # Columns
        (1, 4, 7),
        (2, 5, 8),
        (3, 6, 9),
        # Diagonals
        (1, 5, 9),
        (3, 5, 7),
    ]

    def check_winner(self, board: "Board") -> Optional["Marker"]:
        """
        Check if there's a winner.

        Lines are scanned in WINNING_LINES order and the first complete
        one decides, so the result is deterministic even for boards that
        alternating play cannot produce.

        Args:
            board: The board to check.

        Returns:
            The winning Marker, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: "Board", line: Tuple[int, int, int]) -> Optional["Marker"]:
        """
        Check if a single line has a winner.

        Returns:
            The marker if all 3 squares hold it, None otherwise.
        """
        markers = [board.occupant(location) for location in line]

        if markers[0] is not None and markers[0] == markers[1] == markers[2]:
            return markers[0]

        return None

    def find_winning_moves(self, board: "Board", marker: "Marker") -> Optional[Set[int]]:
        """
        Find every square that would complete a line for a marker.

        A line counts when exactly two of its squares hold the marker and
        the third is empty.

        Args:
            board: The board to check.
            marker: Whose wins to look for.

        Returns:
            Set of square numbers, or None if there are none.
        """
        candidates = set()

        for line in self.WINNING_LINES:
            markers = [board.occupant(location) for location in line]
            if markers.count(marker) == 2 and markers.count(None) == 1:
                candidates.add(line[markers.index(None)])

        return candidates or None

    def get_winning_line(self, board: "Board") -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of square numbers, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
