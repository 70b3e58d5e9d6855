"""
Logic module for Tic Tac Toe.
Handles the board, rules, the scripted opponent and round/match flow.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Board, Cell, Marker, Player, GameError, InvalidLocation, AlreadyOccupied, InvalidMarker
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .game_io import GameIO
from .round_engine import RoundEngine, RoundResult, RoundState, WrongTurnError, RoundOverError
from .match_engine import MatchEngine, MatchState
