from __future__ import annotations

from typing import List, Sequence

from .board import Move, Row
from .state import GameState


def is_legal(state: GameState, move: Move) -> bool:
    """Checks a move against the current rows without applying it."""
    row, count = move
    return 0 <= row < len(state.rows) and 0 < count <= state.rows[row]


def legal_moves(state: GameState) -> List[Move]:
    """All legal moves, ordered by row then count."""
    return [(i, n) for i, r in enumerate(state.rows) for n in range(1, r + 1)]


def rows_after(state: GameState, move: Move) -> List[Row]:
    """The rows a legal move would leave behind."""
    if not is_legal(state, move):
        raise ValueError(f"illegal move {move} for rows {state.rows}")
    row, count = move
    out = list(state.rows)
    out[row] -= count
    return out


def nonempty_rows(rows: Sequence[Row]) -> List[int]:
    return [i for i, r in enumerate(rows) if r > 0]
