from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .board import Move
from .moves import nonempty_rows
from .state import GameState

logger = logging.getLogger(__name__)

ENDGAME_ROWS = 4


@dataclass(frozen=True)
class AIDecision:
    """A computer move and the strategy tier that produced it."""
    move: Move
    tier: str  # 'endgame', 'xor' or 'random'


def winning_move(state: GameState) -> Optional[Move]:
    """Special cases for the end game, matched against the four largest rows.

    Needs at least four rows; with fewer the tier is skipped.
    """
    if len(state.rows) < ENDGAME_ROWS:
        return None
    # sorted() is stable, so equal rows keep their index order.
    ranked = sorted(enumerate(state.rows), key=lambda item: -item[1])
    (i, x), (_, a), (_, b), (_, c) = ranked[:ENDGAME_ROWS]

    if a == 1 and b == 1 and c == 0 and x > 1:
        take = x - 1
    elif a == 2 and b == 0 and x > 2:
        take = x - 2
    elif a == 1 and b == 0:
        take = x
    elif a == 0:
        take = x - 1
    else:
        return None
    if take <= 0:
        return None
    return (i, take)


def xor_move(state: GameState) -> Optional[Move]:
    """Move that brings the Nim-sum back to zero, if the position allows one."""
    total = state.nim_sum()
    if total == 0:
        return None
    for i, row in enumerate(state.rows):
        target = row ^ total
        if target < row:
            return (i, row - target)
    # A non-zero Nim-sum always has a row holding its highest bit.
    raise RuntimeError(f"no reducible row for nim-sum {total} in {state.rows}")


def random_move(state: GameState, rng: Optional[random.Random] = None) -> Move:
    """Remove one object from a random non-empty row."""
    candidates = nonempty_rows(state.rows)
    if not candidates:
        raise ValueError("no objects left to take")
    chooser = rng if rng is not None else random
    return (chooser.choice(candidates), 1)


def plan_move(state: GameState, rng: Optional[random.Random] = None) -> AIDecision:
    """Tries the end game cases, then the Nim-sum strategy, then a random single take."""
    move = winning_move(state)
    if move is not None:
        decision = AIDecision(move, 'endgame')
    else:
        move = xor_move(state)
        if move is not None:
            decision = AIDecision(move, 'xor')
        else:
            decision = AIDecision(random_move(state, rng), 'random')
    logger.debug("ai: rows=%s nim_sum=%d tier=%s move=%s",
                 state.rows, state.nim_sum(), decision.tier, decision.move)
    return decision


def auto_move(state: GameState, rng: Optional[random.Random] = None) -> Move:
    """Calculates the computer's move for the current position."""
    return plan_move(state, rng).move
