"""
solutions - Проверка решений.
"""

from .verify import jumped_hole, apply_moves, verify_solution

__all__ = [
    'jumped_hole',
    'apply_moves',
    'verify_solution',
]
