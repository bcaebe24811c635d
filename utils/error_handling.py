"""
utils/error_handling.py

Исключения и проверки входных данных.
"""

from typing import Any

from core.utils import HOLE_COUNT, ROWS, row_length
from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidHoleError(SolverError, ValueError):
    """Номер лунки вне 1..15 или не число."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class InvalidMoveError(SolverError):
    """Недопустимый ход при проверке решения."""
    pass


class NoSolutionError(SolverError):
    """Ошибка отсутствия решения."""
    pass


def validate_hole(hole: Any) -> int:
    """
    Проверяет номер пустой лунки.

    Raises:
        InvalidHoleError: если это не целое число в диапазоне 1..15
    """
    if isinstance(hole, bool) or not isinstance(hole, int):
        raise InvalidHoleError(f"Номер лунки должен быть целым числом, получено {hole!r}")
    if not 1 <= hole <= HOLE_COUNT:
        raise InvalidHoleError(f"Номер лунки {hole} вне диапазона 1..{HOLE_COUNT}")
    return hole


def validate_board(board) -> bool:
    """
    Валидирует доску.

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    cells = getattr(board, 'cells', None)
    if cells is None or len(cells) != ROWS:
        raise InvalidBoardError(f"Доска должна содержать {ROWS} рядов")

    for r, row in enumerate(cells):
        if len(row) != row_length(r):
            raise InvalidBoardError(f"Ряд {r} должен содержать {row_length(r)} лунок")

    if board.peg_count() < 1:
        raise InvalidBoardError("Доска должна содержать хотя бы один колышек")

    return True


def safe_solve(solver, hole: int, default: Any = None):
    """
    Безопасное выполнение solve с обработкой ошибок решателя.

    Args:
        solver: решатель
        hole: номер пустой лунки
        default: значение по умолчанию при ошибке

    Returns:
        Решение или default
    """
    try:
        return solver.solve(hole)
    except SolverError as e:
        get_logger().error(f"Ошибка решателя {solver.__class__.__name__}: {e}")
        return default
