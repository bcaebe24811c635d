#!/usr/bin/env python3
"""
main.py

Точка входа для решателя треугольной головоломки.

Использование:
    python main.py               # схема доски и запрос номера пустой лунки
    python main.py 13            # номер пустой лунки аргументом
    python main.py 5 --stats     # со статистикой поиска
"""

import sys
import argparse
import logging

from core.board import Board
from peg_io import PROMPT, parse_hole, format_layout, format_moves, display_board
from solutions.verify import apply_moves
from solvers import BacktrackingSolver
from utils.error_handling import InvalidHoleError
from utils.logging import get_logger, setup_file_logging

INVALID_INPUT = "Invalid Input!"
NO_SOLUTION = "No solution found."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle peg solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                 # ввод номера с клавиатуры
  python main.py 13              # пустая лунка 13
  python main.py 1 --show-board  # с финальной позицией
        """
    )
    parser.add_argument(
        'hole', nargs='?',
        help='Номер пустой лунки (1..15); если не задан, читается из stdin'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог поиска в stderr'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )
    parser.add_argument(
        '--show-board', action='store_true',
        help='Показать финальную позицию'
    )
    parser.add_argument(
        '--stats', action='store_true',
        help='Показать статистику поиска'
    )
    return parser


def read_hole(args) -> int:
    """Номер пустой лунки из аргумента или stdin."""
    print(format_layout())
    if args.hole is not None:
        return parse_hole(args.hole)

    print()
    print(PROMPT)
    try:
        line = input()
    except EOFError:
        line = ''
    return parse_hole(line)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.INFO)
    if args.log_file:
        setup_file_logging(args.log_file)

    try:
        hole = read_hole(args)
    except InvalidHoleError as e:
        logger.info(f"Rejected input: {e}")
        print(INVALID_INPUT)
        return 0

    solver = BacktrackingSolver(verbose=args.verbose or bool(args.log_file))
    solution = solver.solve(hole)

    if solution is None:
        print(NO_SOLUTION)
        return 1

    print(format_moves(solution))

    if args.show_board:
        print()
        print(display_board(apply_moves(Board(hole), solution)))

    if args.stats:
        print()
        print(f"Stats: {solver.stats}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
