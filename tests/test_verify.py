"""
tests/test_verify.py

Тесты для:
- jumped_hole (геометрия прыжков)
- apply_moves / verify_solution (проверка решений)
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board
from solutions.verify import apply_moves, jumped_hole, verify_solution
from solvers import solve
from utils.error_handling import InvalidHoleError, InvalidMoveError


@pytest.mark.parametrize("from_hole,to_hole,expected", [
    (11, 13, 12),   # вправо
    (13, 11, 12),   # влево
    (11, 4, 7),     # вниз-вправо
    (13, 4, 8),     # вниз-влево
    (4, 13, 8),     # вверх-вправо
    (1, 6, 3),      # вверх-вправо от вершины
    (6, 1, 3),      # вниз-влево к вершине
    (4, 11, 7),     # вверх-влево
])
def test_jumped_hole(from_hole, to_hole, expected):
    assert jumped_hole(from_hole, to_hole) == expected


@pytest.mark.parametrize("from_hole,to_hole", [
    (11, 12),   # соседние лунки
    (1, 15),    # далеко
    (11, 15),   # через две лунки
    (0, 2),     # вне доски
    (13, 16),
])
def test_jumped_hole_not_a_jump(from_hole, to_hole):
    assert jumped_hole(from_hole, to_hole) is None


def test_verify_solution_valid():
    assert verify_solution(13, solve(13)) is True


def test_verify_solution_occupied_target():
    """Ход в занятую лунку отклоняется."""
    assert verify_solution(13, [(11, 4)]) is False


def test_verify_solution_incomplete():
    """Корректный, но неполный список ходов не является решением."""
    assert verify_solution(13, [(11, 13)]) is False


def test_verify_solution_empty_source():
    """Повторный ход из уже пустой лунки отклоняется."""
    moves = [(11, 13), (11, 13)]
    assert verify_solution(13, moves) is False


def test_verify_solution_invalid_hole():
    with pytest.raises(InvalidHoleError):
        verify_solution(0, [])


def test_apply_moves_raises_on_illegal_move():
    with pytest.raises(InvalidMoveError):
        apply_moves(Board(13), [(11, 12)])


def test_apply_moves_mutates_board():
    board = apply_moves(Board(13), [(11, 13), (4, 11)])

    assert board.peg_count() == 12
    assert board == Board.from_pegs([h for h in range(1, 16) if h not in (12, 7, 4)])
