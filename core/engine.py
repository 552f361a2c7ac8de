"""
core/engine.py

Применение и откат ходов, история для undo, счётчики.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from utils.error_handling import IllegalMoveError
from utils.logging import get_logger
from .board import Board, BoardView, CellState
from .move import Move
from .rules import find_move, is_terminal, legal_destinations
from .utils import Coordinate


@dataclass(frozen=True)
class MoveOutcome:
    """Результат apply/undo: ход и состояние счётчиков после него."""
    move: Move
    moves_made: int
    pegs_remaining: int
    is_terminal: bool


class MoveEngine:
    """
    Единственная точка изменения доски во время игры.

    Инварианты:
    - pegs_remaining всегда равен числу клеток PEG;
    - moves_made == initial_moves + len(history).
    """

    def __init__(self, board: Board, initial_moves: int = 0):
        self._board = board
        self._view = BoardView(board)
        self.initial_moves = initial_moves
        self._history: List[Move] = []
        self._moves_made = initial_moves
        self._pegs_remaining = board.peg_count()
        self.logger = get_logger()

    @property
    def board(self) -> BoardView:
        """Доска только для чтения; менять её можно через apply/undo."""
        return self._view

    @property
    def moves_made(self) -> int:
        return self._moves_made

    @property
    def pegs_remaining(self) -> int:
        return self._pegs_remaining

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    def counters(self) -> Tuple[int, int]:
        """(moves_made, pegs_remaining)."""
        return self._moves_made, self._pegs_remaining

    def legal_destinations(self, coord: Coordinate) -> List[Coordinate]:
        return legal_destinations(self._board, coord)

    def is_terminal(self) -> bool:
        return is_terminal(self._board)

    def apply(self, start: Coordinate, end: Coordinate) -> MoveOutcome:
        """
        Применяет прыжок start → end.

        Сначала проверка, потом изменения: ход не бывает применён частично.

        Raises:
            IllegalMoveError: если ход недопустим (доска не меняется)
        """
        move = find_move(self._board, start, end)
        if move is None:
            self.logger.info(f"Недопустимый ход {start} → {end}")
            raise IllegalMoveError(start, end)

        self._board.set(move.start, CellState.EMPTY)
        self._board.set(move.jumped, CellState.EMPTY)
        self._board.set(move.end, CellState.PEG)
        self._moves_made += 1
        self._pegs_remaining -= 1
        self._history.append(move)

        self.logger.debug(
            f"Ход {move}: ходов {self._moves_made}, колышков {self._pegs_remaining}"
        )
        return self._outcome(move)

    def undo(self) -> Optional[MoveOutcome]:
        """
        Откатывает последний ход.

        Returns:
            MoveOutcome отменённого хода или None, если история пуста
        """
        if not self._history:
            return None

        move = self._history.pop()
        self._board.set(move.start, CellState.PEG)
        self._board.set(move.jumped, CellState.PEG)
        self._board.set(move.end, CellState.EMPTY)
        self._moves_made -= 1
        self._pegs_remaining += 1

        self.logger.debug(f"Отмена {move}: колышков {self._pegs_remaining}")
        return self._outcome(move)

    def _outcome(self, move: Move) -> MoveOutcome:
        return MoveOutcome(
            move=move,
            moves_made=self._moves_made,
            pegs_remaining=self._pegs_remaining,
            is_terminal=is_terminal(self._board),
        )
