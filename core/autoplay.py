"""
core/autoplay.py

Случайный выбор хода и автоигра (режим «компьютер»).
"""

import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from utils.logging import get_logger

from .board import Board, BoardView
from .engine import MoveEngine, MoveOutcome
from .move import Move
from .rules import legal_moves


@dataclass
class AutoplayStats:
    """Итог автоигры."""
    moves: List[Move] = field(default_factory=list)
    moves_made: int = 0
    pegs_remaining: int = 0
    finished: bool = False
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Moves: {len(self.moves)}, "
            f"Pegs: {self.pegs_remaining}, "
            f"Finished: {self.finished}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class RandomMoveSelector:
    """
    Равномерный выбор среди всех допустимых ходов доски.

    Сначала перечисляется полное множество ходов, затем берётся один
    случайный — каждый ход равновероятен, независимо от того, сколько
    ходов доступно из его стартовой клетки.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def choose(self, board: Union[Board, BoardView]) -> Optional[Move]:
        """Случайный допустимый ход или None, если позиция терминальна."""
        moves = legal_moves(board)
        if not moves:
            return None
        return self.rng.choice(moves)


def play_random_game(engine: MoveEngine, selector: RandomMoveSelector,
                     max_moves: Optional[int] = None,
                     on_move: Optional[Callable[[MoveOutcome], None]] = None) -> AutoplayStats:
    """
    Играет случайными ходами до конца партии.

    Args:
        engine: движок текущей партии
        selector: источник случайных ходов
        max_moves: ограничение на число ходов (None — без ограничения)
        on_move: вызывается после каждого хода

    Returns:
        AutoplayStats
    """
    logger = get_logger()
    stats = AutoplayStats()
    start_time = time.time()

    while max_moves is None or len(stats.moves) < max_moves:
        move = selector.choose(engine.board)
        if move is None:
            stats.finished = True
            break
        outcome = engine.apply(move.start, move.end)
        stats.moves.append(move)
        if on_move is not None:
            on_move(outcome)
        if outcome.is_terminal:
            stats.finished = True
            break

    stats.moves_made, stats.pegs_remaining = engine.counters()
    stats.time_elapsed = time.time() - start_time
    logger.info(f"Автоигра завершена: {stats}")
    return stats
