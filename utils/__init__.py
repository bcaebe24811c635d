"""
utils - Логирование и обработка ошибок.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidHoleError, InvalidBoardError, InvalidMoveError,
    NoSolutionError, validate_hole, validate_board, safe_solve
)

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidHoleError', 'InvalidBoardError', 'InvalidMoveError',
    'NoSolutionError', 'validate_hole', 'validate_board', 'safe_solve',
]
