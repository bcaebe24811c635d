"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Sequence, Tuple

from core.board import Board
from core.utils import ROWS, ROW_OFFSETS, row_length

DIVIDER = "-" * 12
PROMPT = "Please enter the number where the peg is missing."


def layout_rows() -> List[List[int]]:
    """Номера лунок по рядам сверху вниз."""
    return [[ROW_OFFSETS[r] + c for c in range(row_length(r))] for r in range(ROWS)]


def _draw(rows: List[List[str]]) -> str:
    # Каждая ячейка занимает 4 символа, ряд сдвинут на 2 пробела
    lines = []
    for r, row in enumerate(rows):
        line = " " * (2 * r) + "".join(f"{cell:<4}" for cell in row)
        lines.append(line.rstrip())
    return "\n".join(lines)


def format_layout() -> str:
    """
    Схема нумерации лунок:

        11  12  13  14  15
          7   8   9   10
            4   5   6
              2   3
                1
    """
    return _draw([[str(h) for h in row] for row in layout_rows()])


def format_moves(moves: Sequence[Tuple[int, int]]) -> str:
    """
    Таблица ходов: разделитель, затем по строке на ход и разделитель после каждого.
    """
    lines = [DIVIDER]
    for from_hole, to_hole in moves:
        lines.append(f"| {from_hole:<2} -> {to_hole:>2} |")
        lines.append(DIVIDER)
    return "\n".join(lines)


def display_board(board: Board) -> str:
    """Текущая позиция в той же раскладке, что и схема нумерации."""
    return _draw(board.to_matrix())
