"""
solutions/verify.py

Проверка последовательностей ходов на треугольной доске.
"""

from typing import Iterable, List, Optional, Tuple

from core.board import Board
from core.utils import DIRECTIONS, HOLE_COUNT, hole_to_point, point_to_hole
from utils.error_handling import InvalidMoveError, validate_hole


Move = Tuple[int, int]


def _direction(from_hole: int, to_hole: int) -> Optional[Tuple[int, int]]:
    """Направление прыжка из DIRECTIONS или None."""
    if not (1 <= from_hole <= HOLE_COUNT and 1 <= to_hole <= HOLE_COUNT):
        return None
    fr, fc = hole_to_point(from_hole)
    tr, tc = hole_to_point(to_hole)
    delta = (tr - fr, tc - fc)
    return delta if delta in DIRECTIONS else None


def jumped_hole(from_hole: int, to_hole: int) -> Optional[int]:
    """
    Лунка, через которую прыгает колышек.

    Returns:
        Номер средней лунки или None, если пара не является прыжком
    """
    delta = _direction(from_hole, to_hole)
    if delta is None:
        return None
    fr, fc = hole_to_point(from_hole)
    return point_to_hole(fr + delta[0] // 2, fc + delta[1] // 2)


def apply_moves(board: Board, moves: Iterable[Move]) -> Board:
    """
    Применяет ходы к доске на месте.

    Raises:
        InvalidMoveError: если ход выходит за доску или недопустим
    """
    for i, (from_hole, to_hole) in enumerate(moves, 1):
        delta = _direction(from_hole, to_hole)
        if delta is None:
            raise InvalidMoveError(f"Ход {i}: {from_hole} -> {to_hole} не является прыжком")

        r, c = hole_to_point(from_hole)
        if not board.has_peg(r, c):
            raise InvalidMoveError(f"Ход {i}: в лунке {from_hole} нет колышка")
        if not board.is_valid_move(r, c, *delta):
            raise InvalidMoveError(f"Ход {i}: {from_hole} -> {to_hole} недопустим")

        board.apply_move(r, c, *delta)
    return board


def verify_solution(empty_hole: int, moves: List[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход — прыжок в одном из шести направлений;
    - в исходной и средней лунке есть колышки, целевая пуста;
    - после всех ходов остаётся ровно один колышек.
    """
    validate_hole(empty_hole)
    try:
        board = apply_moves(Board(empty_hole), moves)
    except InvalidMoveError:
        return False
    return board.peg_count() == 1
