"""
peg_io/parser.py

Парсинг текстового описания доски.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

from core.board import CellState
from core.utils import Coordinate
from utils.error_handling import MalformedLayoutError

PEG_TOKEN = 'P'
EMPTY_TOKEN = '.'


@dataclass
class ParsedLayout:
    """Результат разбора: размеры, начальный счётчик ходов и клетки."""
    width: int
    height: int
    initial_moves: int
    cells: Dict[Coordinate, CellState] = field(default_factory=dict)

    @property
    def peg_count(self) -> int:
        return sum(1 for state in self.cells.values() if state is CellState.PEG)


def parse_layout(source: Union[str, Sequence[str]]) -> ParsedLayout:
    """
    Парсит текстовое описание доски.

    Формат:
        первая строка — "width height initialMoveCount";
        далее ряды сверху вниз, i-я строка (с 1) — ряд height - i;
        символ с индексом 2*x — клетка столбца x:
        'P' — колышек, '.' — пустая клетка, остальное — дыра в поле.

    Args:
        source: многострочная строка или список строк

    Returns:
        ParsedLayout

    Raises:
        MalformedLayoutError: если заголовок не содержит трёх целых чисел
    """
    lines: List[str] = source.splitlines() if isinstance(source, str) else list(source)
    if not lines:
        raise MalformedLayoutError("Пустое описание доски")

    values = lines[0].split()
    if len(values) < 3:
        raise MalformedLayoutError(
            f"Заголовок должен содержать 3 числа (width height moves), получено: {lines[0]!r}"
        )
    try:
        width, height, initial_moves = (int(v) for v in values[:3])
    except ValueError:
        raise MalformedLayoutError(f"Заголовок содержит не числа: {lines[0]!r}") from None
    if width < 0 or height < 0 or initial_moves < 0:
        raise MalformedLayoutError(f"Отрицательные значения в заголовке: {lines[0]!r}")

    layout = ParsedLayout(width, height, initial_moves)
    for i, line in enumerate(lines[1:], 1):
        line = line.rstrip('\r\n')
        row = height - i
        for x in range(0, len(line), 2):
            token = line[x]
            if token == PEG_TOKEN:
                layout.cells[Coordinate(x // 2, row)] = CellState.PEG
            elif token == EMPTY_TOKEN:
                layout.cells[Coordinate(x // 2, row)] = CellState.EMPTY

    return layout
