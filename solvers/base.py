"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple

from core.board import Board
from utils.logging import get_logger

Move = Tuple[int, int]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Backtracks: {self.backtracks}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют search() для готовой доски; solve() строит
    доску по номеру пустой лунки.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, empty_hole: int) -> Optional[List[Move]]:
        """
        Решает головоломку со стартовой пустой лункой.

        Returns:
            Список ходов (from_hole, to_hole) или None
        """
        pass

    @abstractmethod
    def search(self, board: Board) -> Optional[List[Move]]:
        """Ищет решение для произвольной позиции."""
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог, если verbose=True."""
        if self.verbose:
            self.logger.info(f"[{self.__class__.__name__}] {message}")
