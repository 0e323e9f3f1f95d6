from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .board import Move, Row

FULL = "◉ "
EMPTY = "◎ "


@dataclass(frozen=True)
class RowView:
    """How one row is drawn: left padding then the four object classes in order."""
    padding: int
    remaining: int        # still on the board, not part of the candidate
    selected: int         # still on the board, part of the highlighted candidate
    last_removed: int     # taken by the previous move
    removed_earlier: int  # taken before that


@dataclass(frozen=True)
class Snapshot:
    rows: Tuple[Row, ...]
    initial: Tuple[Row, ...]
    highlighted: Optional[Move] = None
    last_move: Optional[Move] = None


def row_views(
    rows: Sequence[Row],
    initial: Sequence[Row],
    highlighted: Optional[Move] = None,
    last_move: Optional[Move] = None,
) -> List[RowView]:
    """Splits every row into its drawing classes. Pure function of its arguments."""
    width = max(initial) if initial else 0
    views: List[RowView] = []
    for i, (row, start) in enumerate(zip(rows, initial)):
        selected = highlighted[1] if highlighted is not None and highlighted[0] == i else 0
        selected = min(selected, row)
        last = last_move[1] if last_move is not None and last_move[0] == i else 0
        last = min(last, start - row)
        views.append(RowView(
            padding=width - start,
            remaining=row - selected,
            selected=selected,
            last_removed=last,
            removed_earlier=start - row - last,
        ))
    return views


def snapshot_views(snap: Snapshot) -> List[RowView]:
    return row_views(snap.rows, snap.initial, snap.highlighted, snap.last_move)


def render_text(views: Sequence[RowView]) -> List[str]:
    """Plain-text lines for the views.

    Without colours the selected objects show as `x` and the last move as `o`
    so all four classes stay distinguishable.
    """
    lines: List[str] = []
    for v in views:
        lines.append(
            " " * v.padding
            + FULL * v.remaining
            + "x " * v.selected
            + "o " * v.last_removed
            + EMPTY * v.removed_earlier
        )
    return lines
