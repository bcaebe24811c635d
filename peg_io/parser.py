"""
peg_io/parser.py

Парсинг входных данных.
"""

from utils.error_handling import InvalidHoleError, validate_hole


def parse_hole(text: str) -> int:
    """
    Читает номер пустой лунки из строки ввода.

    Берётся первый токен строки, как при чтении одного числа.

    Raises:
        InvalidHoleError: пустой ввод, не число или номер вне 1..15
    """
    tokens = (text or '').split()
    if not tokens:
        raise InvalidHoleError("Пустой ввод")
    try:
        hole = int(tokens[0])
    except ValueError:
        raise InvalidHoleError(f"Не число: {tokens[0]!r}") from None
    return validate_hole(hole)
