"""
core/rules.py

Правила: проверка допустимости прыжка, перечисление ходов,
определение конца игры.

Соседи всегда вычисляются арифметикой координат по словарю доски,
поэтому правила одинаково работают для любой формы поля.
"""

from typing import List, Optional

from utils.error_handling import OffBoardError
from .board import Board, CellState
from .move import Move, jump_midpoint
from .utils import DIRECTIONS, Coordinate


def find_move(board: Board, start: Coordinate, end: Coordinate) -> Optional[Move]:
    """
    Проверяет прыжок start → end по текущему состоянию доски.

    Условия:
    1. start и end находятся на доске;
    2. в start стоит колышек;
    3. средняя клетка на доске и в ней колышек;
    4. end пуст.

    Returns:
        Move, если все условия выполнены, иначе None
    """
    if board.get(start) is not CellState.PEG:
        return None
    if board.get(end) is not CellState.EMPTY:
        return None
    jumped = jump_midpoint(start, end)
    if jumped is None or board.get(jumped) is not CellState.PEG:
        return None
    return Move(Coordinate(*start), jumped, Coordinate(*end))


def is_legal(board: Board, start: Coordinate, end: Coordinate) -> bool:
    return find_move(board, start, end) is not None


def legal_moves_from(board: Board, start: Coordinate) -> List[Move]:
    """
    Все допустимые ходы из клетки: пробуются ровно четыре направления.

    Raises:
        OffBoardError: если start нет на доске
    """
    if start not in board:
        raise OffBoardError(start)
    start = Coordinate(*start)
    moves = []
    for dc, dr in DIRECTIONS:
        move = find_move(board, start, start.offset(2 * dc, 2 * dr))
        if move is not None:
            moves.append(move)
    return moves


def legal_destinations(board: Board, start: Coordinate) -> List[Coordinate]:
    """Клетки, в которые можно прыгнуть из start (возможно, пусто)."""
    return [move.end for move in legal_moves_from(board, start)]


def legal_moves(board: Board) -> List[Move]:
    """Полное множество допустимых ходов по всей доске."""
    moves = []
    for coord in board.all_coordinates():
        if board.get(coord) is CellState.PEG:
            moves.extend(legal_moves_from(board, coord))
    return moves


def is_terminal(board: Board) -> bool:
    """Позиция терминальна, если ни из одной клетки нет хода."""
    for coord in board.all_coordinates():
        if board.get(coord) is CellState.PEG and legal_moves_from(board, coord):
            return False
    return True
