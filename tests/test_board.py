import numpy as np
import pytest

from abalone.core import (
    Board,
    BoardIndexError,
    CellState,
    ConfigurationError,
    Coordinate,
    InvalidCellError,
)
from abalone.core.board import BELGIAN_DAISY, CLASSIC, LAYOUTS, STARTING_MARBLES


def test_classic_layout_counts():
    board = Board.from_layout("classic")

    assert board.count(CellState.PLAYER_1) == 14
    assert board.count(CellState.PLAYER_2) == 14
    assert board.count(CellState.INVALID) == 20
    assert board.count(CellState.EMPTY) == 61 - 28


def test_belgian_daisy_layout_counts():
    board = Board.from_rows(BELGIAN_DAISY)

    assert board.count(CellState.PLAYER_1) == 14
    assert board.count(CellState.PLAYER_2) == 14
    # Same hexagon as the classic start.
    assert np.array_equal(
        board.cells == CellState.INVALID,
        Board.from_rows(CLASSIC).cells == CellState.INVALID,
    )


def test_corner_cells_are_invalid():
    board = Board.from_layout()

    assert board.at(0, 0) == CellState.INVALID
    assert board.at(0, 4) == CellState.PLAYER_2
    assert board.at(8, 4) == CellState.PLAYER_1
    assert board.at(8, 5) == CellState.INVALID
    assert board.at(4, 0) == CellState.EMPTY


def test_checked_access_fails_closed():
    board = Board.from_layout()

    with pytest.raises(BoardIndexError):
        board.at(9, 0)
    with pytest.raises(IndexError):
        board.at(0, -1)
    with pytest.raises(BoardIndexError):
        board.set(-1, 3, CellState.EMPTY)
    assert board.get(Coordinate(-1, 4)) == CellState.INVALID
    assert board.get(Coordinate(4, 9)) == CellState.INVALID


def test_invalid_mask_cannot_change():
    board = Board.empty()

    with pytest.raises(InvalidCellError):
        board.set(0, 0, CellState.PLAYER_1)
    with pytest.raises(InvalidCellError):
        board.set(4, 4, CellState.INVALID)
    board.set(4, 4, CellState.PLAYER_2)
    assert board.at(4, 4) == CellState.PLAYER_2


def test_unknown_layout_rejected():
    with pytest.raises(ConfigurationError):
        Board.from_layout("hexagon")
    with pytest.raises(ConfigurationError):
        Board(np.full((9, 9), CellState.EMPTY, dtype=np.int8))


def test_copy_is_independent():
    board = Board.from_layout()
    clone = board.copy()
    clone.set(4, 4, CellState.PLAYER_1)

    assert board.at(4, 4) == CellState.EMPTY
    assert board != clone
    assert board == Board.from_layout()


def test_render_matches_hexagon():
    lines = Board.from_layout().render().splitlines()

    assert len(lines) == 10
    assert lines[0] == "<i>        " + "   2" * 5
    assert lines[4] == "<e>" + "   ." * 9
    assert lines[6] == "<c>    " + "   .   .   1   1   1   .   ." + "  <8>"
    assert lines[8] == "<a>        " + "   1" * 5 + "  <6>"
    assert lines[9] == "               <1> <2> <3> <4> <5>"


@pytest.mark.parametrize("name", sorted(LAYOUTS))
def test_every_layout_starts_with_full_sides(name):
    board = Board.from_layout(name)

    assert board.count(CellState.PLAYER_1) == STARTING_MARBLES
    assert board.count(CellState.PLAYER_2) == STARTING_MARBLES


def test_empty_mask_is_not_a_named_layout():
    assert "empty" not in LAYOUTS
    with pytest.raises(ConfigurationError):
        Board.from_layout("empty")
