"""
game.py

Игровая сессия: доска, движок и случайный выбор хода за одним фасадом.
Это весь API, который нужен фронтенду.
"""

import random
from typing import List, Optional, Sequence, Tuple, Union

from core.autoplay import AutoplayStats, RandomMoveSelector, play_random_game
from core.board import Board, BoardView
from core.engine import MoveEngine, MoveOutcome
from core.utils import Coordinate
from peg_io.layouts import get_layout
from peg_io.parser import ParsedLayout, parse_layout
from utils.logging import get_logger

LayoutSource = Union[str, Sequence[str]]


def resolve_layout(layout: LayoutSource) -> ParsedLayout:
    """
    Разбирает доску, заданную именем из каталога или текстом.

    Однострочная строка без заголовка из трёх значений считается именем доски.

    Raises:
        UnknownLayoutError: если имени нет в каталоге
        MalformedLayoutError: если описание не разбирается
    """
    if isinstance(layout, str) and '\n' not in layout and len(layout.split()) < 3:
        layout = get_layout(layout)
    return parse_layout(layout)


class Game:
    """Одна партия на одной доске."""

    def __init__(self, layout: ParsedLayout, rng: Optional[random.Random] = None):
        self.layout = layout
        self.selector = RandomMoveSelector(rng)
        self.engine = MoveEngine(Board.from_layout(layout), layout.initial_moves)

    @property
    def board(self) -> BoardView:
        """Текущая доска только для чтения."""
        return self.engine.board

    def legal_destinations(self, coord: Coordinate) -> List[Coordinate]:
        return self.engine.legal_destinations(coord)

    def apply_move(self, start: Coordinate, end: Coordinate) -> MoveOutcome:
        return self.engine.apply(start, end)

    def undo(self) -> Optional[MoveOutcome]:
        return self.engine.undo()

    def is_terminal(self) -> bool:
        return self.engine.is_terminal()

    def random_legal_move(self) -> Optional[Tuple[Coordinate, Coordinate]]:
        move = self.selector.choose(self.board)
        if move is None:
            return None
        return move.start, move.end

    def counters(self) -> Tuple[int, int]:
        """(moves_made, pegs_remaining)."""
        return self.engine.counters()

    def autoplay(self, max_moves: Optional[int] = None, on_move=None) -> AutoplayStats:
        return play_random_game(self.engine, self.selector, max_moves=max_moves, on_move=on_move)

    def restart(self) -> None:
        """Начинает партию заново на той же доске."""
        self.engine = MoveEngine(Board.from_layout(self.layout), self.layout.initial_moves)
        get_logger().debug("Партия перезапущена")


def new_game(layout: LayoutSource, rng: Optional[random.Random] = None) -> Game:
    """
    Создаёт партию.

    Args:
        layout: имя доски из каталога, многострочное описание или список строк
        rng: генератор случайных чисел для автоигры

    Raises:
        MalformedLayoutError: если описание доски не разбирается
    """
    return Game(resolve_layout(layout), rng)
