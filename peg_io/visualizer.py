"""
peg_io/visualizer.py

Текстовая визуализация доски, подсветка выбора и форматирование ходов.

Подсветка (выбранный колышек, возможные цели) хранится отдельно
от доски и в проверке ходов не участвует.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Sequence

from core.board import Board, CellState
from core.move import Move
from core.utils import Coordinate

PEG = '●'       # Колышек
HOLE = '○'      # Пустая клетка (можно прыгнуть)
EMPTY = ' '     # Вне доски


class Highlight(Enum):
    """Пометки фронтенда поверх состояния доски."""
    SELECTED = '◉'
    PREDICTED = '◌'


def select_highlights(selected: Coordinate,
                      destinations: Iterable[Coordinate]) -> Dict[Coordinate, Highlight]:
    """Таблица подсветки: выбранный колышек и его возможные цели."""
    highlights = {Coordinate(*selected): Highlight.SELECTED}
    for coord in destinations:
        highlights[Coordinate(*coord)] = Highlight.PREDICTED
    return highlights


def display_board(board: Board,
                  highlights: Optional[Dict[Coordinate, Highlight]] = None) -> str:
    """
    Красиво форматирует текстовое представление доски.

    Верхний ряд печатается первым, как в описании доски.

    Args:
        board: доска
        highlights: необязательная подсветка клеток

    Returns:
        Строка для вывода
    """
    highlights = highlights or {}
    coords = board.all_coordinates()
    width = max([board.width] + [c.col + 1 for c in coords])
    # Лишние ряды описания попадают в отрицательные номера
    top = max([board.height - 1] + [c.row for c in coords])
    bottom = min([0] + [c.row for c in coords])

    lines = ["   " + " ".join(chr(c + ord('A')) for c in range(width))]
    for row in range(top, bottom - 1, -1):
        cells = []
        for col in range(width):
            coord = Coordinate(col, row)
            state = board.get(coord)
            if state is None:
                cells.append(EMPTY)
            elif coord in highlights:
                cells.append(highlights[coord].value)
            else:
                cells.append(PEG if state is CellState.PEG else HOLE)
        lines.append(f"{row + 1:<2} " + " ".join(cells).rstrip())

    return "\n".join(lines)


def format_history(moves: Sequence[Move]) -> str:
    """
    Форматирует список сыгранных ходов.

    Args:
        moves: ходы в порядке применения

    Returns:
        Форматированная строка
    """
    if not moves:
        return "Ходов не было"

    lines = [f"Сыграно ходов: {len(moves)}"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move}")
    return "\n".join(lines)
