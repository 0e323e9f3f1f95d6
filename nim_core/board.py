from __future__ import annotations

from functools import reduce
from typing import Iterable, List, Sequence, Tuple

Row = int  # objects left in one pile, 0..MAX_ROW
Move = Tuple[int, int]  # (row index, count to remove)

MAX_ROW = 255
DEFAULT_ROWS: Tuple[Row, ...] = (1, 3, 5, 7)


def nim_sum(rows: Iterable[Row]) -> int:
    """Bitwise XOR of all pile counts."""
    return reduce(lambda acc, r: acc ^ r, rows, 0)


def pretty(rows: Sequence[Row], initial: Sequence[Row]) -> str:
    """Generates a human-readable picture of the piles, one numbered line per row."""
    width = max(initial) if initial else 0
    lines: List[str] = []
    for i, (row, start) in enumerate(zip(rows, initial)):
        padding = " " * (width - start)
        bars = "| " * row
        dots = ". " * (start - row)
        lines.append(f"{i} {padding}{bars}{dots}")
    lines.append("-" * 15)
    return "\n".join(lines)
