"""
solvers/backtracking.py

DFS с откатом ходов на одной изменяемой доске.
"""

import time
from typing import List, Optional

from .base import BaseSolver, Move, SolverStats
from core.board import Board
from core.utils import DIRECTIONS, point_to_hole
from utils.error_handling import validate_board, validate_hole


class BacktrackingSolver(BaseSolver):
    """
    Рекурсивный поиск в глубину с откатом.

    Особенности:
    - Доска меняется на месте, тупиковый ход откатывается
    - Колышки перебираются по рядам сверху вниз, слева направо
    - Направления перебираются в порядке DIRECTIONS
    - Возвращается первое найденное решение
    """

    def solve(self, empty_hole: int) -> Optional[List[Move]]:
        """
        Решает головоломку со стартовой пустой лункой.

        Args:
            empty_hole: номер пустой лунки 1..15

        Returns:
            Список ходов (from_hole, to_hole) или None если решение не найдено

        Raises:
            InvalidHoleError: номер вне 1..15, поиск не запускается
        """
        self.stats = SolverStats()
        validate_hole(empty_hole)
        return self.search(Board(empty_hole))

    def search(self, board: Board) -> Optional[List[Move]]:
        """
        Ищет решение для позиции board.

        Решение — последовательность из peg_count - 1 ходов (13 для
        стандартного старта). Доска после успешного поиска остаётся
        в финальном состоянии.
        """
        validate_board(board)
        self.stats = SolverStats()
        target = board.peg_count() - 1

        self._log(f"Starting backtracking (pegs={board.peg_count()})")
        start = time.perf_counter()
        sequence = self._search(board, [], target)
        self.stats.time_elapsed = time.perf_counter() - start

        if len(sequence) != target:
            self._log("No solution found")
            self._log(f"Stats: {self.stats}")
            return None

        self.stats.solution_length = len(sequence)
        self._log(f"Solution found: {len(sequence)} moves")
        self._log(f"Stats: {self.stats}")
        return sequence

    def _search(self, board: Board, sequence: List[Move], target: int) -> List[Move]:
        """
        Рекурсивный шаг.

        Возвращает sequence: длины target при успехе, иначе в том же
        виде, в каком она пришла.
        """
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(sequence))

        if len(sequence) == target:
            return sequence

        for row, col in board.peg_positions():
            for dr, dc in DIRECTIONS:
                if not board.is_valid_move(row, col, dr, dc):
                    continue

                board.apply_move(row, col, dr, dc)
                sequence.append((point_to_hole(row, col), point_to_hole(row + dr, col + dc)))

                self._search(board, sequence, target)
                if len(sequence) == target:
                    return sequence

                # Тупик
                board.undo_move(row, col, dr, dc)
                sequence.pop()
                self.stats.backtracks += 1

        return sequence


def solve(empty_hole: int, verbose: bool = False) -> Optional[List[Move]]:
    """Решает головоломку новым BacktrackingSolver."""
    return BacktrackingSolver(verbose=verbose).solve(empty_hole)
