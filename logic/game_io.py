"""
Interface between the game engines and whatever drives them
(console, tests, a future GUI).
"""

from typing import Optional

from .game_state import Board, Marker, Player


class GameIO:
    """
    Requests and notifications the engines exchange with the outside world.

    Subclasses must answer the three request_* calls. The notification
    hooks do nothing by default.
    """

    # ==================== REQUESTS ====================

    def request_human_move(self, board: Board) -> int:
        """
        Ask for the human's square.

        Must return a square that is currently in board.empty_locations();
        re-prompting on bad input is the implementer's job.
        """
        raise NotImplementedError

    def request_continue_round(self) -> bool:
        """Ask whether to play another round of the current match."""
        raise NotImplementedError

    def request_new_match(self) -> bool:
        """Ask whether to start a brand-new match after a grand winner."""
        raise NotImplementedError

    # ==================== NOTIFICATIONS ====================

    def round_started(self, board: Board, human: Player, opponent: Player):
        pass

    def board_changed(self, board: Board, marker: Marker, location: int):
        pass

    def round_concluded(self, board: Board, winner: Optional[Marker]):
        """winner is None for a tie."""
        pass

    def match_concluded(self, grand_winner: Optional[Marker]):
        """grand_winner is None when the match was abandoned."""
        pass
