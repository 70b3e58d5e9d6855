"""
Match engine for Tic Tac Toe.
Plays rounds, keeps score and decides who takes the match.
"""

from enum import Enum
from typing import Optional

from .config import GameConfig
from .game_state import Board, GameError, Marker, Player
from .ai_player import AIPlayer
from .game_io import GameIO
from .round_engine import RoundEngine, RoundResult


class MatchState(Enum):
    """Where a match is."""
    ROUND_IN_PROGRESS = "round_in_progress"
    AWAITING_CONTINUE = "awaiting_continue"
    MATCH_OVER = "match_over"


class MatchEngine:
    """
    Match state machine.

    Match flow:
    1. Play a round on a freshly reset board
    2. The round winner scores a point (nobody scores on a tie)
    3. First to WIN_TARGET points is the grand winner
    4. Otherwise ask whether to play on; "no" ends the match without one
    """

    def __init__(
        self,
        human: Player,
        opponent: Player,
        ai: Optional[AIPlayer] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize a match.

        Args:
            human: The human player (its score is updated in place).
            opponent: The scripted player.
            ai: Move chooser for the opponent (default: AIPlayer for
                opponent.marker).
            config: Game settings (default: GameConfig()).
        """
        if human.marker == opponent.marker:
            raise GameError("Players must use different markers")

        self.human = human
        self.opponent = opponent
        self.config = config if config is not None else GameConfig()
        self.ai = ai if ai is not None else AIPlayer(opponent.marker, config=self.config)

        self.board = Board()
        self.state = MatchState.ROUND_IN_PROGRESS
        self.grand_winner: Optional[Player] = None
        self.rounds_played = 0

    def player_for(self, marker: Marker) -> Player:
        return self.human if marker == self.human.marker else self.opponent

    def start_round(self) -> RoundEngine:
        """Create the engine for the round about to be played."""
        self._expect(MatchState.ROUND_IN_PROGRESS)
        return RoundEngine(self.board, self.ai, self.config, self.human.marker)

    def record_round(self, result: RoundResult) -> MatchState:
        """
        Score a finished round and move the match on.

        Args:
            result: Result of the round just played.

        Returns:
            The new match state.
        """
        self._expect(MatchState.ROUND_IN_PROGRESS)
        self.rounds_played += 1

        if result.winner is not None:
            self.player_for(result.winner).add_win()

        for player in (self.human, self.opponent):
            if player.has_reached(self.config.WIN_TARGET):
                self.grand_winner = player
                self._set_state(MatchState.MATCH_OVER)
                break
        else:
            self._set_state(MatchState.AWAITING_CONTINUE)

        return self.state

    def continue_match(self, play_on: bool) -> MatchState:
        """
        Apply the answer to "play another round?".

        Yes resets the board for the next round; no ends the match with no
        grand winner.
        """
        self._expect(MatchState.AWAITING_CONTINUE)

        if play_on:
            self.board.reset()
            self._set_state(MatchState.ROUND_IN_PROGRESS)
        else:
            self._set_state(MatchState.MATCH_OVER)

        return self.state

    def new_match(self):
        """Reset scores and board to begin a brand-new match."""
        self._expect(MatchState.MATCH_OVER)

        self.human.reset_score()
        self.opponent.reset_score()
        self.board.reset()
        self.grand_winner = None
        self.rounds_played = 0
        self._set_state(MatchState.ROUND_IN_PROGRESS)

    def play_match(self, io: GameIO) -> Optional[Player]:
        """
        Play rounds until the match is over.

        Returns:
            The grand winner, or None if the match was abandoned.
        """
        while self.state != MatchState.MATCH_OVER:
            round_engine = self.start_round()
            io.round_started(self.board, self.human, self.opponent)

            result = round_engine.play(io)
            self.record_round(result)
            io.round_concluded(self.board, result.winner)

            if self.state == MatchState.AWAITING_CONTINUE:
                self.continue_match(io.request_continue_round())

        io.match_concluded(self.grand_winner.marker if self.grand_winner else None)
        return self.grand_winner

    def play(self, io: GameIO):
        """
        Play matches until the player stops.

        A new match is only offered after a match that has a grand winner.
        """
        while True:
            grand_winner = self.play_match(io)
            if grand_winner is None or not io.request_new_match():
                break
            self.new_match()

    def _expect(self, state: MatchState):
        if self.state != state:
            raise GameError(f"Match is {self.state.value}, expected {state.value}")

    def _set_state(self, state: MatchState):
        if self.config.DEBUG_MODE:
            print(f"Match: {self.state.value} -> {state.value} "
                  f"(score {self.human.score}-{self.opponent.score})")
        self.state = state
