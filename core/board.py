"""
core/board.py

Доска: словарь координата → состояние клетки.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional

from utils.error_handling import OffBoardError
from .utils import Coordinate


class CellState(Enum):
    """Постоянное состояние игровой клетки."""
    PEG = 'P'
    EMPTY = '.'


class Board:
    """
    Набор игровых клеток произвольной формы.

    Отсутствие координаты означает «вне доски» — это не то же самое,
    что пустая клетка. Набор клеток фиксируется при создании,
    дальше меняются только состояния PEG/EMPTY.
    """
    __slots__ = ('_cells', 'width', 'height')

    def __init__(self, cells: Dict[Coordinate, CellState], width: int = 0, height: int = 0):
        self._cells: Dict[Coordinate, CellState] = {
            Coordinate(*coord): state for coord, state in cells.items()
        }
        self.width = width
        self.height = height

    @classmethod
    def from_layout(cls, layout) -> 'Board':
        """Создаёт Board из результата peg_io.parser.parse_layout."""
        return cls(layout.cells, layout.width, layout.height)

    def get(self, coord: Coordinate) -> Optional[CellState]:
        """Состояние клетки или None, если клетки нет на доске."""
        return self._cells.get(coord)

    def set(self, coord: Coordinate, state: CellState) -> None:
        """
        Перезаписывает состояние клетки.

        Во время партии вызывается только из MoveEngine; наружу
        отдаётся BoardView без этого метода.

        Raises:
            OffBoardError: если клетки нет на доске
        """
        if coord not in self._cells:
            raise OffBoardError(coord)
        self._cells[coord] = state

    def count_by_state(self, state: CellState) -> int:
        return sum(1 for value in self._cells.values() if value is state)

    def peg_count(self) -> int:
        return self.count_by_state(CellState.PEG)

    def all_coordinates(self) -> List[Coordinate]:
        """Все игровые клетки (порядок не важен)."""
        return list(self._cells)

    def snapshot(self) -> Dict[Coordinate, CellState]:
        """Копия текущего состояния — для сравнения позиций."""
        return dict(self._cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(list(self._cells))

    def __repr__(self) -> str:
        return f"Board({len(self._cells)} cells, {self.peg_count()} pegs)"


class BoardView:
    """
    Доска только для чтения.

    Отдаётся наружу из MoveEngine и Game: менять клетки может только
    движок, иначе счётчик колышков разойдётся с доской.
    """
    __slots__ = ('_board',)

    def __init__(self, board: Board):
        self._board = board

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    def get(self, coord: Coordinate) -> Optional[CellState]:
        return self._board.get(coord)

    def count_by_state(self, state: CellState) -> int:
        return self._board.count_by_state(state)

    def peg_count(self) -> int:
        return self._board.peg_count()

    def all_coordinates(self) -> List[Coordinate]:
        return self._board.all_coordinates()

    def snapshot(self) -> Dict[Coordinate, CellState]:
        return self._board.snapshot()

    def __contains__(self, coord: object) -> bool:
        return coord in self._board

    def __len__(self) -> int:
        return len(self._board)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._board)

    def __repr__(self) -> str:
        return f"BoardView({len(self._board)} cells, {self.peg_count()} pegs)"
