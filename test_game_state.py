"""
Tests for the board, cells and players.
"""

import pytest

from logic.game_state import (
    AlreadyOccupied,
    Board,
    Cell,
    GameError,
    InvalidLocation,
    InvalidMarker,
    Marker,
    Player,
)


def test_new_board_has_nine_empty_squares_in_order():
    board = Board()
    assert list(board.cells) == list(range(1, 10))
    assert list(board.empty_locations()) == list(range(1, 10))
    assert board.snapshot() == (None,) * 9
    assert not board.is_full()
    assert board.center_available()


def test_cell_location_is_read_only():
    cell = Cell(4)
    with pytest.raises(AttributeError):
        cell.location = 5
    assert cell.location == 4
    assert cell.is_empty()


def test_marker_opposite_and_symbols():
    assert Marker.HUMAN.opposite() is Marker.OPPONENT
    assert Marker.OPPONENT.opposite() is Marker.HUMAN
    assert str(Marker.HUMAN) == "X"
    assert str(Marker.OPPONENT) == "O"


def test_place_sets_occupant():
    board = Board()
    board.place(7, Marker.HUMAN)
    assert board.occupant(7) is Marker.HUMAN
    assert 7 not in list(board.empty_locations())
    assert board.snapshot()[6] is Marker.HUMAN


@pytest.mark.parametrize("location", [0, 10, -1, "5", None, 2.0, True, False])
def test_place_rejects_invalid_location(location):
    board = Board()
    with pytest.raises(InvalidLocation):
        board.place(location, Marker.HUMAN)
    assert board.snapshot() == (None,) * 9


def test_place_on_occupied_square_leaves_board_unchanged():
    board = Board()
    board.place(5, Marker.HUMAN)
    before = board.snapshot()

    with pytest.raises(AlreadyOccupied) as excinfo:
        board.place(5, Marker.OPPONENT)

    assert excinfo.value.location == 5
    assert excinfo.value.occupant is Marker.HUMAN
    assert board.snapshot() == before


def test_board_errors_share_a_base_class():
    assert issubclass(InvalidLocation, GameError)
    assert issubclass(AlreadyOccupied, GameError)
    assert issubclass(AlreadyOccupied, ValueError)


def test_empty_locations_is_recomputed_each_call(make_board):
    board = make_board(human=[1], opponent=[9])
    assert list(board.empty_locations()) == [2, 3, 4, 5, 6, 7, 8]
    board.place(2, Marker.HUMAN)
    assert list(board.empty_locations()) == [3, 4, 5, 6, 7, 8]
    assert list(board.empty_locations()) == [3, 4, 5, 6, 7, 8]


def test_is_full_iff_no_empty_squares(make_board):
    board = make_board(human=[1, 2, 5, 6, 7], opponent=[3, 4, 8])
    assert not board.is_full()
    board.place(9, Marker.OPPONENT)
    assert board.is_full()
    assert list(board.empty_locations()) == []


def test_center_available(make_board):
    assert make_board(human=[1]).center_available()
    assert not make_board(opponent=[5]).center_available()


def test_full_board_without_line_is_terminal_tie(make_board):
    # X O X
    # X O O
    # O X X
    board = make_board(human=[1, 3, 4, 8, 9], opponent=[2, 5, 6, 7])
    assert board.winner() is None
    assert not board.has_winner()
    assert board.is_full()
    assert board.is_terminal()


def test_win_is_terminal_before_board_is_full(make_board):
    board = make_board(human=[1, 2, 3], opponent=[4, 5])
    assert board.has_winner()
    assert board.is_terminal()
    assert board.winning_line() == (1, 2, 3)


def test_reset_empties_every_square(make_board):
    board = make_board(human=[1, 5, 9], opponent=[2, 3])
    board.reset()
    assert board.snapshot() == (None,) * 9
    assert not board.is_terminal()
    assert list(board.cells) == list(range(1, 10))


def test_player_score():
    player = Player(Marker.HUMAN)
    assert player.score == 0
    player.add_win()
    player.add_win()
    assert player.score == 2
    assert not player.has_reached(3)
    player.add_win()
    assert player.has_reached(3)
    player.reset_score()
    assert player.score == 0
    assert player.marker is Marker.HUMAN


@pytest.mark.parametrize("marker", ["X", "O", None, 1])
def test_place_rejects_non_marker(marker):
    board = Board()
    with pytest.raises(InvalidMarker):
        board.place(1, marker)
    assert board.snapshot() == (None,) * 9
    assert board.winner() is None


def test_copy_is_independent(make_board):
    board = make_board(human=[1, 5], opponent=[2])
    twin = board.copy()

    assert twin.snapshot() == board.snapshot()

    twin.place(9, Marker.HUMAN)
    assert twin.winner() is Marker.HUMAN
    assert board.occupant(9) is None
    assert board.winner() is None

    board.reset()
    assert twin.occupant(1) is Marker.HUMAN
