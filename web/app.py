"""
web/app.py

Flask JSON API для решателя треугольной головоломки.
"""

import os
import sys
import time
from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from peg_io import parse_hole, layout_rows
from solutions.verify import jumped_hole, verify_solution
from solvers import BacktrackingSolver
from utils.error_handling import InvalidHoleError, validate_hole, safe_solve
from utils.logging import get_logger

app = Flask(__name__)
logger = get_logger()


def _invalid_input(message='Invalid Input!'):
    return jsonify({'success': False, 'error': message}), 400


def _solve_response(hole: int):
    """Решает головоломку и собирает JSON-ответ."""
    solver = BacktrackingSolver(verbose=False)

    start_time = time.time()
    solution = safe_solve(solver, hole)
    elapsed = time.time() - start_time

    if solution is None:
        return jsonify({
            'success': False,
            'error': 'No solution found',
            'hole': hole,
            'time': round(elapsed, 3),
        })

    moves = []
    for from_hole, to_hole in solution:
        moves.append({
            'from': from_hole,
            'jumped': jumped_hole(from_hole, to_hole),
            'to': to_hole,
            'notation': f"{from_hole} -> {to_hole}"
        })

    logger.info(f"Solve request: hole={hole}, moves={len(moves)}, time={elapsed:.3f}s")
    return jsonify({
        'success': True,
        'hole': hole,
        'moves': moves,
        'move_count': len(moves),
        'time': round(elapsed, 3),
        'stats': solver.stats.to_dict()
    })


@app.route('/api/layout', methods=['GET'])
def get_layout():
    """Нумерация лунок по рядам сверху вниз."""
    return jsonify({'rows': layout_rows()})


@app.route('/api/solve/<hole>', methods=['GET'])
def solve_hole(hole):
    try:
        number = parse_hole(hole)
    except InvalidHoleError:
        return _invalid_input()
    return _solve_response(number)


@app.route('/api/solve', methods=['POST'])
def solve():
    """
    API для решения головоломки.

    Входные данные:
    {
        "hole": 13   // номер пустой лунки
    }
    """
    data = request.get_json(silent=True) or {}
    try:
        hole = validate_hole(data.get('hole'))
    except InvalidHoleError:
        return _invalid_input()
    return _solve_response(hole)


@app.route('/api/validate', methods=['POST'])
def validate():
    """
    Проверка последовательности ходов.

    Входные данные:
    {
        "hole": 13,
        "moves": [[from, to], ...]
    }
    """
    data = request.get_json(silent=True) or {}
    try:
        hole = validate_hole(data.get('hole'))
    except InvalidHoleError:
        return _invalid_input()

    raw_moves = data.get('moves')
    if not isinstance(raw_moves, list):
        return _invalid_input('moves must be a list of [from, to] pairs')

    moves = []
    for move in raw_moves:
        if (not isinstance(move, list) or len(move) != 2
                or not all(isinstance(h, int) and not isinstance(h, bool) for h in move)):
            return _invalid_input('moves must be a list of [from, to] pairs')
        moves.append((move[0], move[1]))

    return jsonify({
        'valid': verify_solution(hole, moves),
        'move_count': len(moves)
    })


if __name__ == '__main__':
    print("=" * 50)
    print("Triangle Peg Solver - Web API")
    print("=" * 50)
    print("\nOpen http://localhost:5000/api/layout in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)
