"""
peg_io - Ввод/вывод для треугольной головоломки

Экспортирует:
- Парсинг номера пустой лунки
- Схему доски и таблицу ходов
"""

from .parser import parse_hole
from .visualizer import (
    DIVIDER, PROMPT, layout_rows, format_layout, format_moves, display_board
)

__all__ = [
    'parse_hole',
    'DIVIDER',
    'PROMPT',
    'layout_rows',
    'format_layout',
    'format_moves',
    'display_board',
]
