"""
Round engine for Tic Tac Toe.
Alternates turns on one board until somebody wins or the board fills up.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, GameError, Marker
from .ai_player import AIPlayer
from .game_io import GameIO


class RoundState(Enum):
    """Where a round is."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_OPPONENT_MOVE = "awaiting_opponent_move"
    ROUND_OVER = "round_over"


class WrongTurnError(GameError):
    """Raised when a move is applied for the player who is not on turn."""


class RoundOverError(GameError):
    """Raised when a move is applied after the round has finished."""


@dataclass
class RoundResult:
    """
    Outcome of a finished round.
    """
    winner: Optional[Marker]                                # None on a tie
    winning_line: Optional[Tuple[int, int, int]] = None     # For highlighting
    moves_played: int = 0

    @property
    def is_tie(self) -> bool:
        return self.winner is None


class RoundEngine:
    """
    Turn state machine for a single round.

    Flow:
    1. Whoever FIRST_TO_MOVE names opens
    2. After each move the board is checked for a win or a full board
    3. If the round is not over, the turn passes to the other player
    """

    def __init__(
        self,
        board: Board,
        ai: AIPlayer,
        config: Optional[GameConfig] = None,
        human_marker: Marker = Marker.HUMAN
    ):
        """
        Initialize a round on a board.

        Args:
            board: The board to play on. The round owns it until it ends.
            ai: The opponent's move chooser.
            config: Game settings (default: GameConfig()).
            human_marker: Marker the human plays.
        """
        self.board = board
        self.ai = ai
        self.config = config if config is not None else GameConfig()
        self.human_marker = human_marker
        self.opponent_marker = human_marker.opposite()
        self.moves_played = 0

        if board.is_terminal():
            self.state = RoundState.ROUND_OVER
        elif Marker(self.config.FIRST_TO_MOVE) == self.human_marker:
            self.state = RoundState.AWAITING_HUMAN_MOVE
        else:
            self.state = RoundState.AWAITING_OPPONENT_MOVE

    @property
    def is_over(self) -> bool:
        return self.state == RoundState.ROUND_OVER

    @property
    def current_marker(self) -> Optional[Marker]:
        """Marker of the player on turn, None once the round is over."""
        if self.state == RoundState.AWAITING_HUMAN_MOVE:
            return self.human_marker
        if self.state == RoundState.AWAITING_OPPONENT_MOVE:
            return self.opponent_marker
        return None

    def apply_human_move(self, location: int):
        """
        Place the human's marker.

        The square must already be validated; an occupied or out of range
        square raises the board's error and the turn does not pass.
        """
        self._expect(RoundState.AWAITING_HUMAN_MOVE)
        self.board.place(location, self.human_marker)
        self._after_move(RoundState.AWAITING_OPPONENT_MOVE)

    def apply_opponent_move(self) -> int:
        """
        Let the AI choose and place the opponent's marker.

        Returns:
            The square the AI took.
        """
        self._expect(RoundState.AWAITING_OPPONENT_MOVE)
        location = self.ai.get_best_move(self.board)
        self.board.place(location, self.opponent_marker)
        self._after_move(RoundState.AWAITING_HUMAN_MOVE)
        return location

    def result(self) -> RoundResult:
        """
        Get the outcome of the finished round.

        Raises:
            GameError: the round is still in progress.
        """
        if not self.is_over:
            raise GameError("Round is still in progress")

        return RoundResult(
            winner=self.board.winner(),
            winning_line=self.board.winning_line(),
            moves_played=self.moves_played
        )

    def play(self, io: GameIO) -> RoundResult:
        """
        Run the round to the end.

        Args:
            io: Supplies the human's moves and is told about every move.

        Returns:
            The round's result.
        """
        while not self.is_over:
            if self.state == RoundState.AWAITING_HUMAN_MOVE:
                marker = self.human_marker
                location = io.request_human_move(self.board)
                self.apply_human_move(location)
            else:
                marker = self.opponent_marker
                location = self.apply_opponent_move()

            io.board_changed(self.board, marker, location)

        return self.result()

    def _expect(self, state: RoundState):
        if self.state == RoundState.ROUND_OVER:
            raise RoundOverError("Round is already over")
        if self.state != state:
            raise WrongTurnError(f"It is not that player's turn ({self.state.value})")

    def _after_move(self, next_state: RoundState):
        self.moves_played += 1
        new_state = RoundState.ROUND_OVER if self.board.is_terminal() else next_state

        if self.config.DEBUG_MODE:
            print(f"Round: {self.state.value} -> {new_state.value}")

        self.state = new_state
