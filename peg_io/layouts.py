"""
peg_io/layouts.py

Каталог стандартных досок в текстовом формате parse_layout.
"""

from typing import Dict, List

from utils.error_handling import UnknownLayoutError

LAYOUTS: Dict[str, List[str]] = {
    'french': [
        "7 7 0",
        "    P P P    ",
        "  P P P P P  ",
        "P P P . P P P",
        "P P P P P P P",
        "P P P P P P P",
        "  P P P P P  ",
        "    P P P    ",
    ],
    'german': [
        "9 9 0",
        "      P P P      ",
        "      P P P      ",
        "      P P P      ",
        "P P P P P P P P P",
        "P P P P . P P P P",
        "P P P P P P P P P",
        "      P P P      ",
        "      P P P      ",
        "      P P P      ",
    ],
    'asymmetrical': [
        "8 8 0",
        "    P P P      ",
        "    P P P      ",
        "    P P P      ",
        "P P P P P P P P",
        "P P P . P P P P",
        "P P P P P P P P",
        "    P P P      ",
        "    P P P      ",
    ],
    'english': [
        "7 7 0",
        "    P P P    ",
        "    P P P    ",
        "P P P P P P P",
        "P P P . P P P",
        "P P P P P P P",
        "    P P P    ",
        "    P P P    ",
    ],
    'diamond': [
        "9 9 0",
        "        P        ",
        "      P P P      ",
        "    P P P P P    ",
        "  P P P P P P P  ",
        "P P P P . P P P P",
        "  P P P P P P P  ",
        "    P P P P P    ",
        "      P P P      ",
        "        P        ",
    ],
    'triangular': [
        "11 7 0",
        "                     ",
        "P P P P P P P P P P P",
        "  P P P P P P P P P  ",
        "    P P P P P P P    ",
        "      P P P P P      ",
        "        P P P        ",
        "          .          ",
    ],
}

DEFAULT_LAYOUT = 'english'


def list_layouts() -> List[str]:
    """Имена досок в порядке каталога."""
    return list(LAYOUTS)


def get_layout(name: str) -> List[str]:
    """
    Текстовое описание доски по имени (без учёта регистра).

    Raises:
        UnknownLayoutError: если такой доски нет
    """
    try:
        return list(LAYOUTS[name.strip().lower()])
    except KeyError:
        raise UnknownLayoutError(name) from None
