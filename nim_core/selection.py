from __future__ import annotations

import enum
from typing import Callable, Iterable, Optional

from .board import Move
from .state import GameState


class SelectionEvent(enum.Enum):
    PREV_ROW = 'prev'
    NEXT_ROW = 'next'
    INCREASE = 'more'
    DECREASE = 'less'
    CONFIRM = 'confirm'
    CANCEL = 'cancel'


class SelectionController:
    """Turns cursor input into a candidate move for one human turn.

    The state is a (row, count) pair that always describes a legal move:
    the cursor skips empty rows and the count stays within 1..rows[row].
    The game state is only read, never changed.
    """

    def __init__(
        self,
        state: GameState,
        on_change: Optional[Callable[['SelectionController'], None]] = None,
    ) -> None:
        first = next((i for i, r in enumerate(state.rows) if r > 0), None)
        if first is None:
            raise ValueError("no row left to select")
        self.state = state
        self.row = first
        self.count = 1
        self.committed: Optional[Move] = None
        self.cancelled = False
        self.on_change = on_change

    @property
    def candidate(self) -> Move:
        return (self.row, self.count)

    @property
    def done(self) -> bool:
        return self.cancelled or self.committed is not None

    def _step_row(self, step: int) -> None:
        n = len(self.state.rows)
        row = self.row
        while True:
            row = (row + step) % n
            if self.state.rows[row] != 0:
                break
        self.row = row
        self.count = 1

    def handle(self, event: SelectionEvent) -> bool:
        """Applies one input event; returns whether the candidate changed."""
        if self.done:
            return False
        before = self.candidate
        if event is SelectionEvent.PREV_ROW:
            self._step_row(-1)
        elif event is SelectionEvent.NEXT_ROW:
            self._step_row(1)
        elif event is SelectionEvent.INCREASE:
            self.count = min(self.count + 1, self.state.rows[self.row])
        elif event is SelectionEvent.DECREASE:
            self.count = max(self.count - 1, 1)
        elif event is SelectionEvent.CONFIRM:
            self.committed = self.candidate
            return False
        elif event is SelectionEvent.CANCEL:
            self.cancelled = True
            return False
        changed = self.candidate != before
        if changed and self.on_change is not None:
            self.on_change(self)
        return changed

    def run(self, events: Iterable[Optional[SelectionEvent]]) -> Optional[Move]:
        """Feeds events until the move is confirmed or cancelled.

        `None` entries (poll timeouts, unmapped keys) are skipped. Running out
        of events counts as a cancel.
        """
        for event in events:
            if event is None:
                continue
            self.handle(event)
            if self.done:
                break
        if self.committed is None:
            self.cancelled = True
        return self.committed
