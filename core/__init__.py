"""
core - Ядро Peg Solitaire

Доска, правила прыжков, движок ходов с undo и случайный выбор хода.
"""

from .utils import Coordinate, DIRECTIONS, NOTATION_COLUMNS, coord_to_str, str_to_coord
from .board import Board, BoardView, CellState
from .move import Move, jump_midpoint
from .rules import (
    find_move, is_legal, legal_moves_from, legal_destinations,
    legal_moves, is_terminal
)
from .engine import MoveEngine, MoveOutcome
from .autoplay import AutoplayStats, RandomMoveSelector, play_random_game

__all__ = [
    'Coordinate', 'DIRECTIONS', 'NOTATION_COLUMNS', 'coord_to_str', 'str_to_coord',
    'Board', 'BoardView', 'CellState', 'Move', 'jump_midpoint',
    'find_move', 'is_legal', 'legal_moves_from', 'legal_destinations',
    'legal_moves', 'is_terminal',
    'MoveEngine', 'MoveOutcome',
    'AutoplayStats', 'RandomMoveSelector', 'play_random_game',
]
