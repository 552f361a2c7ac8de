"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Парсинг текстового описания доски
- Каталог стандартных досок
- Текстовая визуализация
"""

from .parser import ParsedLayout, parse_layout
from .layouts import LAYOUTS, DEFAULT_LAYOUT, get_layout, list_layouts
from .visualizer import Highlight, display_board, format_history, select_highlights

__all__ = [
    'ParsedLayout',
    'parse_layout',
    'LAYOUTS',
    'DEFAULT_LAYOUT',
    'get_layout',
    'list_layouts',
    'Highlight',
    'display_board',
    'format_history',
    'select_highlights',
]
