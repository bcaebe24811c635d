"""
solvers - Решатели треугольной головоломки

Экспортирует:
- BacktrackingSolver: DFS с откатом ходов на месте
- solve: решение с новым решателем
"""

from .base import BaseSolver, SolverStats, Move
from .backtracking import BacktrackingSolver, solve

__all__ = [
    'BaseSolver',
    'SolverStats',
    'Move',
    'BacktrackingSolver',
    'solve',
]
