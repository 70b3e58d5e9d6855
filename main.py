"""
Console front end for Tic Tac Toe.

Plays a first-to-3 match against the computer in the terminal.
Squares are numbered 1-9, left to right, top to bottom.

Run this script to play!
"""

import os
import random
import sys
from typing import Optional

from logic.config import GameConfig
from logic.game_state import Board, Marker, Player
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer
from logic.game_io import GameIO
from logic.match_engine import MatchEngine


class ConsoleIO(GameIO):
    """
    Terminal implementation of GameIO.

    Draws the board, reads moves and y/n answers from the keyboard and
    keeps asking until the answer is valid.
    """

    def __init__(self, clear_screen: bool = True, input_func=None):
        self.clear_screen = clear_screen
        self.input_func = input_func if input_func is not None else input
        self.validator = MoveValidator()

        self.human: Optional[Player] = None
        self.opponent: Optional[Player] = None

    # ==================== DISPLAY ====================

    def clear(self):
        if self.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    def display_welcome_message(self):
        print("Welcome to Tic Tac Toe!")
        print(f"First to {GameConfig.WIN_TARGET} wins takes the match.")
        print("")

    def display_goodbye_message(self):
        print("Thanks for playing Tic Tac Toe! Goodbye!")

    def display_board(self, board: Board):
        if self.human is not None:
            print(f"You're a {self.human.marker}. Computer is a {self.opponent.marker}.")
            print(f"Your score: {self.human.score}. Computer's score: {self.opponent.score}.")
            print("")
        print(draw_board(board))
        print("")

    def clear_screen_and_display_board(self, board: Board):
        self.clear()
        self.display_board(board)

    # ==================== GameIO ====================

    def round_started(self, board: Board, human: Player, opponent: Player):
        self.human = human
        self.opponent = opponent
        self.display_board(board)

    def board_changed(self, board: Board, marker: Marker, location: int):
        # Redraw once the computer has answered, so the human sees both moves
        if marker != self.human.marker:
            self.clear_screen_and_display_board(board)

    def request_human_move(self, board: Board) -> int:
        squares = ", ".join(str(loc) for loc in self.validator.get_valid_moves(board))
        print(f"Choose a square ({squares}):")

        while True:
            result = self.validator.parse_move(board, self.input_func())
            if result.is_valid:
                return result.location
            print(f"Sorry, that's not a valid choice. {result.error_message}")

    def round_concluded(self, board: Board, winner: Optional[Marker]):
        self.clear_screen_and_display_board(board)

        if winner is None:
            print("It's a tie!")
        elif winner == self.human.marker:
            print("You won!")
        else:
            print("Computer won!")

    def match_concluded(self, grand_winner: Optional[Marker]):
        if grand_winner is None:
            return
        if grand_winner == self.human.marker:
            print("The Grand Winner Is You!")
        else:
            print("The Grand Winner Is Computer!")

    def request_continue_round(self) -> bool:
        play_on = self.ask_yes_no("Would you like to play next round? (y/n)")
        if play_on:
            self.clear()
            print("Let's play again!")
        return play_on

    def request_new_match(self) -> bool:
        again = self.ask_yes_no("Would you like to start a new game? (y/n)")
        if again:
            self.clear()
            print("Let's play again!")
        return again

    def ask_yes_no(self, question: str) -> bool:
        while True:
            print(question)
            answer = self.input_func().strip().lower()
            if answer in ("y", "n"):
                return answer == "y"
            print("Sorry, must be y or n")


def draw_board(board: Board) -> str:
    """
    Render the board as text, one 5x3 block per square.
    """
    symbols = [
        GameConfig.EMPTY_SYMBOL if occupant is None else str(occupant)
        for occupant in board.snapshot()
    ]

    lines = []
    for row in range(3):
        a, b, c = symbols[row * 3:row * 3 + 3]
        lines.append("     |     |")
        lines.append(f"  {a}  |  {b}  |  {c}")
        lines.append("     |     |")
        if row < 2:
            lines.append("-----+-----+-----")
    return "\n".join(lines)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe against the computer")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's random choices (repeatable games)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the computer's reasoning and engine state changes"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the terminal between moves"
    )

    args = parser.parse_args()

    config = GameConfig(debug=args.debug)
    human = Player(Marker.HUMAN)
    opponent = Player(Marker.OPPONENT)
    ai = AIPlayer(opponent.marker, rng=random.Random(args.seed), config=config)

    io = ConsoleIO(clear_screen=not args.no_clear)
    match = MatchEngine(human, opponent, ai, config)

    io.clear()
    io.display_welcome_message()

    try:
        match.play(io)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        io.display_goodbye_message()

    return 0


if __name__ == "__main__":
    sys.exit(main())
