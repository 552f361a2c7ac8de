"""
core/move.py

Ход: откуда, через какую клетку, куда.
"""

from dataclasses import dataclass
from typing import Optional

from .utils import Coordinate, coord_to_str


@dataclass(frozen=True)
class Move:
    """Прыжок через одну клетку по горизонтали или вертикали."""
    start: Coordinate
    jumped: Coordinate
    end: Coordinate

    def __str__(self) -> str:
        return f"{coord_to_str(self.start)} → {coord_to_str(self.end)}"


def jump_midpoint(start: Coordinate, end: Coordinate) -> Optional[Coordinate]:
    """
    Середина прыжка из start в end.

    Только чистая геометрия, без учёта содержимого доски.

    Returns:
        Координата перепрыгиваемой клетки или None,
        если start и end не лежат на одной оси на расстоянии 2
    """
    dc = end[0] - start[0]
    dr = end[1] - start[1]
    if (abs(dc), abs(dr)) not in ((2, 0), (0, 2)):
        return None
    return Coordinate(start[0] + dc // 2, start[1] + dr // 2)
