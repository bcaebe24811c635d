"""
core - Ядро треугольной головоломки

Доска и преобразования координат.
"""

from .board import Board
from .utils import (
    DIRECTIONS, PEG, HOLE, ROWS, HOLE_COUNT, ROW_OFFSETS,
    point_to_hole, hole_to_point, is_on_board, row_length, all_points
)

__all__ = [
    'Board',
    'DIRECTIONS', 'PEG', 'HOLE', 'ROWS', 'HOLE_COUNT', 'ROW_OFFSETS',
    'point_to_hole', 'hole_to_point', 'is_on_board', 'row_length', 'all_points'
]
