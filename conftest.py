"""
Shared pytest fixtures for the Tic Tac Toe tests.
"""

import pytest

from logic.game_state import Board, Marker


class FixedChoice:
    """Stand-in random source that always picks the same position."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def choice(self, seq):
        seq = list(seq)
        self.calls.append(seq)
        return seq[self.index]


@pytest.fixture
def make_board():
    """Build a board from the squares each side holds."""
    def _make(human=(), opponent=()):
        board = Board()
        for location in human:
            board.place(location, Marker.HUMAN)
        for location in opponent:
            board.place(location, Marker.OPPONENT)
        return board
    return _make


@pytest.fixture
def first_choice():
    return FixedChoice(0)


@pytest.fixture
def last_choice():
    return FixedChoice(-1)
