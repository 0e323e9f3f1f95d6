from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from .board import Move
from .parse import ConfigError, parse_move, parse_rows
from .players import Player, parse_player
from .state import GameState
from .turns import GameResult, TurnLoop

logger = logging.getLogger(__name__)

QUIT_WORDS = ('q', 'quit', 'exit')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Nim against a human or the computer')
    parser.add_argument('--rows', default=os.getenv('NIM_ROWS', '1,3,5,7'),
                        help='Comma-separated starting row sizes (default: 1,3,5,7)')
    parser.add_argument('--player1', default='human', help="First player's name, or 'ai' for the computer")
    parser.add_argument('--player2', default='ai', help="Second player's name, or 'ai' for the computer")
    parser.add_argument('--text', action='store_true', help='Line-based play instead of the cursor interface')
    parser.add_argument('--seed', type=int, default=None, help="RNG seed for the computer's random moves")
    parser.add_argument('--verbose', action='store_true', help='Log AI decisions and moves')
    parser.add_argument('--log-file', default=None, help='Write log output to this file')
    return parser


def _configure_logging(verbose: bool, log_file: Optional[str]) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    fmt = '%(asctime)s %(levelname)s %(name)s: %(message)s'
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=fmt)
    else:
        logging.basicConfig(stream=sys.stderr, level=level, format=fmt)


def prompt_human_move(state: GameState, player: Player, last_move: Optional[Move]) -> Optional[Move]:
    """Line-based move entry; re-asks until the input parses. EOF or 'q' aborts."""
    print(state.pretty())
    while True:
        try:
            text = input(f'{player}, enter your move as row,count (q to quit): ').strip()
        except EOFError:
            return None
        if text.lower() in QUIT_WORDS:
            return None
        move = parse_move(text)
        if move is not None:
            return move
        print('Could not parse. Try again.')


def _report_illegal(player: Player, move: Move) -> None:
    print(f'Illegal move {move[0]},{move[1]}. Try again.')


def _announce_move(player: Player, move: Move, state: GameState) -> None:
    if player.is_computer:
        print(f'{player} takes {move[1]} from row {move[0]}')


def play_text(state: GameState, players: List[Player], rng: Optional[random.Random] = None) -> GameResult:
    loop = TurnLoop(
        state,
        players,
        ask_human=prompt_human_move,
        rng=rng,
        on_move=_announce_move,
        on_illegal=_report_illegal,
    )
    return loop.run()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.log_file)

    try:
        rows = parse_rows(args.rows)
    except ConfigError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2

    state = GameState(rows)
    players = [parse_player(args.player1), parse_player(args.player2)]
    rng = random.Random(args.seed)
    logger.debug('starting game rows=%s players=%s', rows, [str(p) for p in players])

    if args.text or all(p.is_computer for p in players):
        result = play_text(state, players, rng)
    else:
        from .terminal import play_curses
        result = play_curses(state, players, rng)

    print(state.pretty())
    if result.winner is not None:
        print(f'{result.winner} has won!')
    else:
        print('Aborting.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
