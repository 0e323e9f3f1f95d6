from __future__ import annotations

from typing import Iterable, List, Tuple

from .board import MAX_ROW, Row, nim_sum, pretty


class GameState:
    """Pile counts of a running game together with their starting values.

    `rows` is only ever changed through `apply_move`; an illegal move leaves
    the state untouched.
    """

    def __init__(self, pile_sizes: Iterable[Row]) -> None:
        sizes = [int(x) for x in pile_sizes]
        if not sizes:
            raise ValueError("a game needs at least one row")
        for size in sizes:
            if size < 0 or size > MAX_ROW:
                raise ValueError(f"row size {size} out of range 0..{MAX_ROW}")
        self.initial: Tuple[Row, ...] = tuple(sizes)
        self.rows: List[Row] = list(sizes)

    def apply_move(self, row: int, count: int) -> bool:
        """Removes `count` objects from `row`; returns whether the move was legal."""
        if not 0 <= row < len(self.rows):
            return False
        if count <= 0 or self.rows[row] < count:
            return False
        self.rows[row] -= count
        return True

    def check_lose(self) -> bool:
        """True once no row holds more than one object and exactly one row holds one."""
        if any(r > 1 for r in self.rows):
            return False
        return sum(1 for r in self.rows if r == 1) == 1

    def nim_sum(self) -> int:
        return nim_sum(self.rows)

    def total(self) -> int:
        return sum(self.rows)

    def is_empty(self) -> bool:
        return all(r == 0 for r in self.rows)

    def copy(self) -> 'GameState':
        other = GameState(self.initial)
        other.rows = list(self.rows)
        return other

    def pretty(self) -> str:
        return pretty(self.rows, self.initial)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.rows == other.rows and self.initial == other.initial

    def __repr__(self) -> str:
        return f"GameState(rows={self.rows!r}, initial={list(self.initial)!r})"

    def __str__(self) -> str:
        return self.pretty()
