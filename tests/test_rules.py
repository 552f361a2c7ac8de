"""
tests/test_rules.py

Тесты для проверки прыжков, перечисления ходов и конца игры.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board, CellState
from core.move import Move, jump_midpoint
from core.rules import (
    find_move, is_legal, legal_destinations, legal_moves, legal_moves_from, is_terminal
)
from core.utils import Coordinate
from peg_io.layouts import get_layout, list_layouts
from peg_io.parser import parse_layout
from utils.error_handling import OffBoardError


def make_board(lines) -> Board:
    return Board.from_layout(parse_layout(lines))


def make_english_board() -> Board:
    return make_board(get_layout('english'))


def make_two_sided_board() -> Board:
    """
    Два хода в одну и ту же пустую клетку:

    ● ● ○ ● ●
    """
    return make_board(["5 1 0", "P P . P P"])


def make_vertical_board() -> Board:
    """
    Вертикальный прыжок снизу вверх:

    ○
    ●
    ●
    """
    return make_board(["1 3 0", ".", "P", "P"])


# =====================================================
# Геометрия
# =====================================================

def test_jump_midpoint():
    assert jump_midpoint(Coordinate(1, 3), Coordinate(3, 3)) == Coordinate(2, 3)
    assert jump_midpoint(Coordinate(3, 5), Coordinate(3, 3)) == Coordinate(3, 4)
    # Диагональ, расстояние 1 и 3, совпадение — не прыжок
    assert jump_midpoint(Coordinate(0, 0), Coordinate(2, 2)) is None
    assert jump_midpoint(Coordinate(0, 0), Coordinate(1, 0)) is None
    assert jump_midpoint(Coordinate(0, 0), Coordinate(3, 0)) is None
    assert jump_midpoint(Coordinate(0, 0), Coordinate(0, 0)) is None


# =====================================================
# Проверка хода
# =====================================================

def test_find_move_horizontal():
    board = make_two_sided_board()
    move = find_move(board, Coordinate(0, 0), Coordinate(2, 0))
    assert move == Move(Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0))
    assert str(move) == "A1 → C1"


def test_find_move_vertical():
    board = make_vertical_board()
    move = find_move(board, Coordinate(0, 0), Coordinate(0, 2))
    assert move is not None
    assert move.jumped == Coordinate(0, 1)


def test_find_move_accepts_plain_tuples():
    board = make_two_sided_board()
    move = find_move(board, (4, 0), (2, 0))
    assert move is not None
    assert isinstance(move.start, Coordinate)


def test_illegal_start_not_peg():
    board = make_two_sided_board()
    assert find_move(board, Coordinate(2, 0), Coordinate(0, 0)) is None


def test_illegal_end_not_empty():
    board = make_two_sided_board()
    assert find_move(board, Coordinate(1, 0), Coordinate(3, 0)) is None


def test_illegal_jumped_not_peg():
    board = make_board(["3 1 0", "P . ."])
    assert find_move(board, Coordinate(0, 0), Coordinate(2, 0)) is None


def test_illegal_jump_over_gap():
    """Середина вне доски — хода нет, даже если края подходят."""
    board = make_board(["3 1 0", "P   ."])
    assert find_move(board, Coordinate(0, 0), Coordinate(2, 0)) is None


def test_illegal_off_board_endpoints():
    board = make_two_sided_board()
    assert find_move(board, Coordinate(-2, 0), Coordinate(0, 0)) is None
    assert find_move(board, Coordinate(1, 0), Coordinate(-1, 0)) is None


def test_illegal_diagonal_and_distance():
    board = make_board([
        "3 3 0",
        "    .",
        "  P  ",
        "P P .",
    ])
    # Диагональ при подходящем содержимом
    assert not is_legal(board, Coordinate(0, 0), Coordinate(2, 2))
    # Расстояние 1
    assert not is_legal(board, Coordinate(1, 0), Coordinate(2, 0))
    # Нормальный прыжок для сравнения
    assert is_legal(board, Coordinate(0, 0), Coordinate(2, 0))


# =====================================================
# Перечисление ходов
# =====================================================

def test_english_initial_destinations():
    board = make_english_board()
    assert legal_destinations(board, Coordinate(1, 3)) == [Coordinate(3, 3)]
    assert legal_destinations(board, Coordinate(3, 1)) == [Coordinate(3, 3)]
    assert legal_destinations(board, Coordinate(3, 4)) == []
    assert len(legal_moves(board)) == 4


def test_destinations_from_empty_cell_is_empty():
    board = make_english_board()
    assert legal_destinations(board, Coordinate(3, 3)) == []


def test_destinations_off_board_raises():
    board = make_english_board()
    with pytest.raises(OffBoardError):
        legal_destinations(board, Coordinate(0, 0))
    with pytest.raises(OffBoardError):
        legal_moves_from(board, Coordinate(9, 9))


def test_multiple_destinations_from_one_start():
    board = make_board(["5 1 0", ". P P P ."])
    assert set(legal_destinations(board, Coordinate(2, 0))) == {Coordinate(0, 0), Coordinate(4, 0)}


@pytest.mark.parametrize("name", list_layouts())
def test_destinations_geometry(name):
    """Каждая цель в двух шагах по одной оси, середина — колышек."""
    board = make_board(get_layout(name))
    for start in board.all_coordinates():
        for end in legal_destinations(board, start):
            assert end != start
            dc, dr = end.col - start.col, end.row - start.row
            assert (abs(dc), abs(dr)) in ((2, 0), (0, 2))
            middle = Coordinate(start.col + dc // 2, start.row + dr // 2)
            assert board.get(middle) is CellState.PEG
            assert board.get(end) is CellState.EMPTY


@pytest.mark.parametrize("name", list_layouts())
def test_legal_moves_matches_destinations(name):
    board = make_board(get_layout(name))
    from_moves = {(m.start, m.end) for m in legal_moves(board)}
    from_cells = {
        (start, end)
        for start in board.all_coordinates()
        for end in legal_destinations(board, start)
    }
    assert from_moves == from_cells


# =====================================================
# Конец игры
# =====================================================

def test_single_peg_is_terminal():
    board = make_board(["3 1 0", ". P ."])
    assert is_terminal(board)
    assert legal_moves(board) == []


def test_isolated_pegs_are_terminal():
    board = make_board(["5 1 0", "P . P . P"])
    assert is_terminal(board)


def test_start_positions_are_not_terminal():
    for name in list_layouts():
        assert not is_terminal(make_board(get_layout(name))), name


def test_terminal_iff_no_destinations():
    for lines in (["5 1 0", "P P . P P"], ["5 1 0", "P . P . P"], ["1 3 0", ".", "P", "P"]):
        board = make_board(lines)
        no_moves = all(not legal_destinations(board, c) for c in board.all_coordinates())
        assert is_terminal(board) == no_moves
