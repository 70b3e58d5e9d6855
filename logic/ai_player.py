"""
AI player for Tic Tac Toe.
Picks the opponent's square with a four-step priority rule.
"""

import random
from typing import Optional

from .config import GameConfig
from .game_state import Board, Marker


class AIPlayer:
    """
    A scripted Tic Tac Toe opponent.

    In order, stopping at the first rule that applies:
    1. Complete one of its own lines.
    2. Block a line the human is about to complete.
    3. Take the center.
    4. Take any empty square.

    There is no look-ahead, so a human fork beats it.
    """

    # Names of the rules above, reported in last_reason
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    RANDOM = "random"

    def __init__(
        self,
        marker: Marker = Marker.OPPONENT,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            marker: Which marker the AI plays (default: OPPONENT).
            rng: Source used to break ties between equal squares. Anything
                with a random.Random style choice() works.
            config: Game settings (default: GameConfig()).
        """
        self.marker = marker
        self.rng = rng if rng is not None else random.Random()
        self.config = config if config is not None else GameConfig()

        # Which rule produced the last move (for debugging)
        self.last_reason: Optional[str] = None

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Choose a square for the AI.

        Args:
            board: Current board. It is not modified.

        Returns:
            An empty square number, or None if the board is full.
        """
        self.last_reason = None
        move = None

        own_wins = board.winning_moves_for(self.marker)
        if own_wins:
            move, self.last_reason = self._pick(own_wins), self.WIN
        else:
            threats = board.winning_moves_for(self.marker.opposite())
            if threats:
                move, self.last_reason = self._pick(threats), self.BLOCK
            elif board.center_available():
                move, self.last_reason = self.config.CENTER_LOCATION, self.CENTER
            else:
                empty = list(board.empty_locations())
                if empty:
                    move, self.last_reason = self.rng.choice(empty), self.RANDOM

        if self.config.DEBUG_MODE:
            print(f"AI ({self.marker}) picks {move} (rule: {self.last_reason})")

        return move

    def _pick(self, candidates) -> int:
        # sorted so a seeded rng gives the same square every run
        return self.rng.choice(sorted(candidates))
