#!/usr/bin/env python3
"""
Cross-check the computer's Nim-sum tier against a brute-force game solver.

For every position reachable from the starting rows:
  * the brute-force (normal play) result must be a win exactly when the
    Nim-sum is non-zero
  * xor_move must return a move exactly when the Nim-sum is non-zero, and
    that move must leave a position the solver scores as lost for the mover
Prints a JSON summary with counts and the first mismatches.

Usage:
  python tools/crosscheck.py                 # rows 1,3,5,7
  python tools/crosscheck.py --rows 2,4,6,8
"""
from __future__ import annotations

import argparse
import itertools
import json
import os
import sys
from functools import lru_cache
from typing import Dict, List, Tuple

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import game  # type: ignore  # noqa: E402

Position = Tuple[int, ...]


@lru_cache(maxsize=None)
def solve(rows: Position) -> bool:
    """True if the player to move wins under normal play (taking the last object wins)."""
    for i, r in enumerate(rows):
        for n in range(1, r + 1):
            child = rows[:i] + (r - n,) + rows[i + 1:]
            if not solve(child):
                return True
    return False


def crosscheck(initial: List[int]) -> Dict[str, object]:
    checked = 0
    mismatches: List[Dict[str, object]] = []
    for rows in itertools.product(*(range(r + 1) for r in initial)):
        state = game.GameState(initial)
        state.rows = list(rows)
        checked += 1
        wins = solve(tuple(rows))
        move = game.xor_move(state)
        problem = None
        if wins != (state.nim_sum() != 0):
            problem = 'solver disagrees with nim-sum'
        elif (move is not None) != wins:
            problem = 'xor_move presence wrong'
        elif move is not None and solve(tuple(game.rows_after(state, move))):
            problem = 'xor_move leaves a winning position'
        if problem is not None:
            mismatches.append({'rows': list(rows), 'move': move, 'problem': problem})
    return {
        'initial': initial,
        'checked': checked,
        'mismatches': len(mismatches),
        'sample': mismatches[:5],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description='Brute-force check of the Nim-sum strategy')
    parser.add_argument('--rows', default='1,3,5,7', help='Starting rows to enumerate below')
    args = parser.parse_args()
    try:
        initial = game.parse_rows(args.rows)
    except game.ConfigError as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(2)
    summary = crosscheck(initial)
    print(json.dumps(summary, indent=2))
    if summary['mismatches']:
        sys.exit(1)


if __name__ == '__main__':
    main()
