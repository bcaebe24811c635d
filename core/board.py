"""
core/board.py

Треугольная доска на 15 лунок: рваный список рядов из bool.
"""

from typing import Iterable, List, Optional, Tuple

from .utils import (
    DIRECTIONS, PEG, HOLE, ROWS, Position,
    all_points, hole_to_point, is_on_board, row_length
)

Jump = Tuple[int, int, int, int]


class Board:
    """
    Изменяемое представление доски.

    cells[r][c] == True — в лунке стоит колышек. Ряд r содержит 5 - r лунок.
    Поиск меняет доску на месте и откатывает ход через undo_move().
    """
    __slots__ = ('cells',)

    def __init__(self, empty_hole: Optional[int] = None):
        self.cells: List[List[bool]] = [
            [True] * row_length(r) for r in range(ROWS)
        ]
        if empty_hole is not None:
            self.flip(empty_hole)

    @classmethod
    def from_pegs(cls, holes: Iterable[int]) -> 'Board':
        """Создаёт доску, где колышки стоят только в указанных лунках."""
        board = cls()
        for row in board.cells:
            for c in range(len(row)):
                row[c] = False
        for hole in holes:
            r, c = hole_to_point(hole)
            board.cells[r][c] = True
        return board

    def flip(self, hole: int) -> None:
        """Инвертирует состояние лунки."""
        r, c = hole_to_point(hole)
        self.cells[r][c] = not self.cells[r][c]

    def has_peg(self, row: int, col: int) -> bool:
        return self.cells[row][col]

    def peg_count(self) -> int:
        return sum(sum(row) for row in self.cells)

    def peg_positions(self) -> List[Position]:
        """Позиции колышков по рядам сверху вниз, слева направо."""
        return [(r, c) for r, c in all_points() if self.cells[r][c]]

    def is_valid_move(self, row: int, col: int, dr: int, dc: int) -> bool:
        """
        Проверка допустимости прыжка из (row, col) в направлении (dr, dc).

        Наличие колышка в исходной лунке не проверяется.
        """
        r2, c2 = row + dr, col + dc
        if not is_on_board(r2, c2):
            return False
        return self.cells[row + dr // 2][col + dc // 2] and not self.cells[r2][c2]

    def apply_move(self, row: int, col: int, dr: int, dc: int) -> None:
        """Выполняет прыжок на месте."""
        self.cells[row][col] = False
        self.cells[row + dr // 2][col + dc // 2] = False
        self.cells[row + dr][col + dc] = True

    def undo_move(self, row: int, col: int, dr: int, dc: int) -> None:
        """Откатывает прыжок, сделанный apply_move()."""
        self.cells[row + dr][col + dc] = False
        self.cells[row + dr // 2][col + dc // 2] = True
        self.cells[row][col] = True

    def get_all_moves(self) -> List[Jump]:
        """Все допустимые прыжки в порядке перебора."""
        moves = []
        for r, c in self.peg_positions():
            for dr, dc in DIRECTIONS:
                if self.is_valid_move(r, c, dr, dc):
                    moves.append((r, c, dr, dc))
        return moves

    def copy(self) -> 'Board':
        board = Board()
        board.cells = [list(row) for row in self.cells]
        return board

    def to_matrix(self) -> List[List[str]]:
        """Конвертирует в матрицу символов PEG / HOLE."""
        return [[PEG if cell else HOLE for cell in row] for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.peg_count()} pegs)"
