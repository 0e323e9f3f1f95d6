#!/usr/bin/env python3
"""
Play many games between the computer and an opponent and tally the winners.

The opponent is either the computer itself or a player that removes one
object from a random row. Useful to see how often each seat wins from a
given start.

Usage:
  python tools/selfplay.py --games 1000 --opponent random
  python tools/selfplay.py --games 200 --opponent ai --random-first
"""
from __future__ import annotations

import argparse
import json
import os
import random
import sys
from collections import Counter
from typing import Dict, List, Optional

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import game  # type: ignore  # noqa: E402


def run(initial: List[int], games: int, opponent: str, random_first: bool = False,
        seed: Optional[int] = None) -> Dict[str, object]:
    rng = random.Random(seed)
    wins: Counter = Counter()
    lengths: List[int] = []

    def random_player(state, player, last_move):
        return game.random_move(state, rng)

    if opponent == 'random':
        other = game.Player.human('random')
    else:
        other = game.Player.computer()
    players = [other, game.Player.computer()] if random_first else [game.Player.computer(), other]

    for _ in range(games):
        state = game.GameState(initial)
        result = game.TurnLoop(state, players, ask_human=random_player, rng=rng).run()
        seat = 'first' if result.winner is players[0] else 'second'
        wins[seat] += 1
        lengths.append(len(result.history))
    return {
        'initial': list(initial),
        'games': games,
        'players': [str(p) for p in players],
        'wins': dict(wins),
        'avg_moves': (sum(lengths) / len(lengths)) if lengths else 0.0,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description='Computer self-play statistics')
    parser.add_argument('--rows', default='1,3,5,7', help='Starting rows')
    parser.add_argument('--games', type=int, default=200, help='Number of games to play')
    parser.add_argument('--opponent', choices=['ai', 'random'], default='random')
    parser.add_argument('--random-first', action='store_true', help='Let the opponent move first')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed')
    args = parser.parse_args()
    try:
        initial = game.parse_rows(args.rows)
    except game.ConfigError as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(2)
    print(json.dumps(run(initial, args.games, args.opponent, args.random_first, args.seed), indent=2))


if __name__ == '__main__':
    main()
