"""
tests/test_board.py

Тесты для Board, Coordinate и нотации клеток.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board, BoardView, CellState
from core.utils import Coordinate, coord_to_str, str_to_coord
from utils.error_handling import OffBoardError


def make_row_board() -> Board:
    """
    Доска из одного ряда с дырой посередине:

    ● ●   ○
    """
    return Board({
        Coordinate(0, 0): CellState.PEG,
        Coordinate(1, 0): CellState.PEG,
        Coordinate(3, 0): CellState.EMPTY,
    }, width=4, height=1)


# =====================================================
# Координаты
# =====================================================

def test_coordinate_equality_with_tuple():
    """Coordinate равна обычному кортежу с теми же значениями."""
    assert Coordinate(2, 3) == (2, 3)
    assert Coordinate(2, 3) != Coordinate(3, 2)
    assert hash(Coordinate(2, 3)) == hash((2, 3))


def test_notation_roundtrip():
    assert coord_to_str(Coordinate(2, 3)) == "C4"
    assert str_to_coord("C4") == Coordinate(2, 3)
    assert str_to_coord("a1") == Coordinate(0, 0)
    assert str(Coordinate(1, 3)) == "B4"


@pytest.mark.parametrize("bad", ["", "4", "CC", "C", "4C", "[1", "É1"])
def test_notation_rejects_garbage(bad):
    with pytest.raises(ValueError):
        str_to_coord(bad)


# =====================================================
# Board
# =====================================================

def test_get_returns_state_or_none():
    board = make_row_board()
    assert board.get(Coordinate(0, 0)) is CellState.PEG
    assert board.get(Coordinate(3, 0)) is CellState.EMPTY
    # Дыра в поле — это не пустая клетка
    assert board.get(Coordinate(2, 0)) is None
    assert board.get(Coordinate(10, 10)) is None


def test_set_overwrites_state():
    board = make_row_board()
    board.set(Coordinate(0, 0), CellState.EMPTY)
    assert board.get(Coordinate(0, 0)) is CellState.EMPTY


def test_set_off_board_fails_fast():
    board = make_row_board()
    before = board.snapshot()

    with pytest.raises(OffBoardError) as exc_info:
        board.set(Coordinate(2, 0), CellState.PEG)

    assert exc_info.value.coord == Coordinate(2, 0)
    assert board.snapshot() == before
    assert Coordinate(2, 0) not in board


def test_count_by_state():
    board = make_row_board()
    assert board.count_by_state(CellState.PEG) == 2
    assert board.count_by_state(CellState.EMPTY) == 1
    assert board.peg_count() == 2


def test_all_coordinates_is_restartable():
    board = make_row_board()
    first = set(board.all_coordinates())
    second = set(board.all_coordinates())
    assert first == second == {Coordinate(0, 0), Coordinate(1, 0), Coordinate(3, 0)}
    assert len(board) == 3
    assert set(board) == first


def test_snapshot_is_a_copy():
    board = make_row_board()
    snap = board.snapshot()
    board.set(Coordinate(1, 0), CellState.EMPTY)
    assert snap[Coordinate(1, 0)] is CellState.PEG


def test_board_copies_input_mapping():
    """Доска не разделяет словарь с вызывающим кодом."""
    cells = {Coordinate(0, 0): CellState.PEG}
    board = Board(cells)
    board.set(Coordinate(0, 0), CellState.EMPTY)
    assert cells[Coordinate(0, 0)] is CellState.PEG


# =====================================================
# BoardView
# =====================================================

def test_board_view_reads_through():
    board = make_row_board()
    view = BoardView(board)

    assert view.width == 4 and view.height == 1
    assert len(view) == 3
    assert Coordinate(3, 0) in view
    assert view.peg_count() == 2

    board.set(Coordinate(3, 0), CellState.PEG)
    assert view.get(Coordinate(3, 0)) is CellState.PEG
    assert view.snapshot() == board.snapshot()


def test_board_view_has_no_setter():
    view = BoardView(make_row_board())
    assert not hasattr(view, 'set')
    with pytest.raises(AttributeError):
        view.width = 10
