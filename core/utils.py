"""
core/utils.py

Общие константы и преобразования координат треугольной доски.

Нумерация лунок:

    11  12  13  14  15
      7   8   9   10
        4   5   6
          2   3
            1
"""

from typing import List, Tuple

Position = Tuple[int, int]

# Размеры доски
ROWS = 5
HOLE_COUNT = 15

# Номер первой лунки каждого ряда (ряд 0 — верхний, 5 лунок)
ROW_OFFSETS: Tuple[int, ...] = (11, 7, 4, 2, 1)

# Направления прыжка (d_row, d_col): вверх-влево, вверх-вправо,
# вниз-вправо, вниз-влево, влево, вправо. Порядок определяет,
# какое решение будет найдено первым.
DIRECTIONS: List[Tuple[int, int]] = [
    (-2, 0), (-2, 2), (2, 0), (2, -2), (0, -2), (0, 2)
]

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая лунка


def row_length(row: int) -> int:
    """Количество лунок в ряду."""
    return ROWS - row


def is_on_board(row: int, col: int) -> bool:
    """Проверяет, находится ли позиция в пределах треугольника."""
    return 0 <= row < ROWS and 0 <= col < row_length(row)


def point_to_hole(row: int, col: int) -> int:
    """(row, col) → номер лунки 1..15."""
    return ROW_OFFSETS[row] + col


def hole_to_point(hole: int) -> Position:
    """Номер лунки → (row, col)."""
    if not 1 <= hole <= HOLE_COUNT:
        raise ValueError(f"Hole {hole} is outside 1..{HOLE_COUNT}")
    for row, offset in enumerate(ROW_OFFSETS):
        if hole >= offset:
            return row, hole - offset
    raise ValueError(f"Hole {hole} is outside 1..{HOLE_COUNT}")


def all_points() -> List[Position]:
    """Все позиции доски в порядке обхода: по рядам, слева направо."""
    return [(r, c) for r in range(ROWS) for c in range(row_length(r))]
