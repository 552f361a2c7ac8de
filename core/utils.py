"""
core/utils.py

Координаты, направления и нотация клеток.
"""

from typing import List, NamedTuple


class Coordinate(NamedTuple):
    """Клетка сетки: (столбец, ряд). Ряд 0 — нижний."""
    col: int
    row: int

    def offset(self, dc: int, dr: int) -> 'Coordinate':
        return Coordinate(self.col + dc, self.row + dr)

    def __str__(self) -> str:
        return coord_to_str(self)


# Направления прыжка (dc, dr): вверх, вниз, влево, вправо
DIRECTIONS: List[Coordinate] = [
    Coordinate(0, 1), Coordinate(0, -1), Coordinate(-1, 0), Coordinate(1, 0)
]

# Нотация знает только буквы A-Z
NOTATION_COLUMNS = 26


def coord_to_str(coord: Coordinate) -> str:
    """
    (col, row) → нотация (A1, C4, ...).

    Столбцы только A-Z: для col >= NOTATION_COLUMNS нотации нет.
    """
    col, row = coord
    return f"{chr(col + ord('A'))}{row + 1}"


def str_to_coord(pos: str) -> Coordinate:
    """
    Нотация → Coordinate. Столбец задаётся одной буквой A-Z.

    Raises:
        ValueError: если строка не в формате <буква><номер ряда>
    """
    pos = pos.strip()
    if len(pos) < 2 or not 'A' <= pos[0].upper() <= 'Z' or not pos[1:].isdigit():
        raise ValueError(f"Неверная нотация клетки: {pos!r}")
    col = ord(pos[0].upper()) - ord('A')
    row = int(pos[1:]) - 1
    return Coordinate(col, row)
