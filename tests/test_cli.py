"""
tests/test_cli.py

Тесты CLI, парсинга ввода и форматирования вывода.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

import pytest

import main
from peg_io import PROMPT, format_layout, format_moves, parse_hole
from solvers import solve
from utils.error_handling import InvalidHoleError
from utils.logging import get_logger

LAYOUT = [
    "11  12  13  14  15",
    "  7   8   9   10",
    "    4   5   6",
    "      2   3",
    "        1",
]


def test_format_layout():
    assert format_layout() == "\n".join(LAYOUT)


def test_format_moves():
    expected = "\n".join([
        "------------",
        "| 1  ->  6 |",
        "------------",
        "| 13 ->  4 |",
        "------------",
    ])
    assert format_moves([(1, 6), (13, 4)]) == expected


def test_format_moves_empty():
    assert format_moves([]) == "------------"


@pytest.mark.parametrize("text,expected", [
    ("13", 13),
    (" 7 \n", 7),
    ("1 15", 1),
    ("15", 15),
])
def test_parse_hole(text, expected):
    assert parse_hole(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "4.5", "0", "16", "-1"])
def test_parse_hole_invalid(text):
    with pytest.raises(InvalidHoleError):
        parse_hole(text)


def test_main_with_argument(capsys):
    assert main.main(["13"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == LAYOUT
    assert PROMPT not in lines

    table = lines[5:]
    assert len(table) == 1 + 2 * 13
    assert table[0] == "------------"
    assert "\n".join(table) == format_moves(solve(13))
    for line in table[1::2]:
        assert len(line) == 12
        assert line.startswith("| ") and line.endswith(" |")


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))

    assert main.main([]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == LAYOUT
    assert lines[5] == ""
    assert lines[6] == PROMPT
    assert "\n".join(lines[7:]) == format_moves(solve(5))


@pytest.mark.parametrize("text", ["16\n", "0\n", "-1\n", "abc\n", ""])
def test_main_invalid_input(capsys, monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    assert main.main([]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Invalid Input!"
    assert "------------" not in lines


def test_main_invalid_argument(capsys):
    assert main.main(["99"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Invalid Input!"


def test_main_show_board(capsys):
    assert main.main(["1", "--show-board"]) == 0

    out = capsys.readouterr().out
    assert out.count("●") == 1, "Должен остаться один колышек"
    assert out.count("○") == 14


def test_main_stats(capsys):
    assert main.main(["4", "--stats"]) == 0
    assert "Stats: Nodes:" in capsys.readouterr().out


def test_main_log_file(tmp_path, capsys):
    log_file = tmp_path / "solver.log"
    logger = get_logger().logger
    handlers_before = list(logger.handlers)
    level_before = logger.level

    try:
        assert main.main(["2", "--log-file", str(log_file)]) == 0
        assert "Solution found: 13 moves" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[:]:
            if handler not in handlers_before:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(level_before)
