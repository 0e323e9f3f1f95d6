from __future__ import annotations

import curses
import os
import random
from typing import Any, Dict, Iterator, Optional, Sequence

from .board import Move
from .players import Player
from .render import EMPTY, FULL, row_views
from .selection import SelectionController, SelectionEvent
from .state import GameState
from .turns import GameResult, TurnLoop

POLL_MS = 100
ESC_DELAY_MS = 25

# Up/down walk the rows, left grows the candidate and right shrinks it.
KEYMAP: Dict[int, SelectionEvent] = {
    curses.KEY_UP: SelectionEvent.PREV_ROW,
    curses.KEY_DOWN: SelectionEvent.NEXT_ROW,
    curses.KEY_LEFT: SelectionEvent.INCREASE,
    curses.KEY_RIGHT: SelectionEvent.DECREASE,
    curses.KEY_ENTER: SelectionEvent.CONFIRM,
    10: SelectionEvent.CONFIRM,
    13: SelectionEvent.CONFIRM,
    27: SelectionEvent.CANCEL,
}

SELECTED_PAIR = 1
LAST_MOVE_PAIR = 2


def key_to_event(key: int) -> Optional[SelectionEvent]:
    return KEYMAP.get(key)


class CursesDisplay:
    """Draws the piles and reads cursor keys for the human player."""

    def __init__(self, stdscr: Any, state: GameState) -> None:
        self.stdscr = stdscr
        self.state = state
        self.last_move: Optional[Move] = None
        self._selected_attr = curses.A_REVERSE
        self._last_attr = curses.A_BOLD
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(SELECTED_PAIR, curses.COLOR_RED, -1)
            curses.init_pair(LAST_MOVE_PAIR, curses.COLOR_BLUE, -1)
            self._selected_attr = curses.color_pair(SELECTED_PAIR)
            self._last_attr = curses.color_pair(LAST_MOVE_PAIR)
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        stdscr.keypad(True)
        stdscr.timeout(POLL_MS)

    def draw(self, highlighted: Optional[Move] = None, message: str = '') -> None:
        scr = self.stdscr
        scr.erase()
        views = row_views(self.state.rows, self.state.initial, highlighted, self.last_move)
        for y, v in enumerate(views):
            scr.move(y, v.padding)
            scr.addstr(FULL * v.remaining)
            scr.addstr(FULL * v.selected, self._selected_attr)
            scr.addstr(EMPTY * v.last_removed, self._last_attr)
            scr.addstr(EMPTY * v.removed_earlier)
        if message:
            scr.addstr(len(views) + 1, 0, message)
        scr.refresh()

    def _events(self) -> Iterator[Optional[SelectionEvent]]:
        while True:
            key = self.stdscr.getch()
            if key == -1:
                yield None  # poll timeout
                continue
            yield key_to_event(key)

    def get_user_move(self, state: GameState, player: Player, last_move: Optional[Move]) -> Optional[Move]:
        self.last_move = last_move
        prompt = f"{player}: arrows select, Enter takes, Esc quits"
        controller = SelectionController(
            state, on_change=lambda c: self.draw(c.candidate, prompt),
        )
        self.draw(controller.candidate, prompt)
        return controller.run(self._events())

    def record(self, player: Player, move: Move, state: GameState) -> None:
        self.last_move = move


def play_curses(state: GameState, players: Sequence[Player], rng: Optional[random.Random] = None) -> GameResult:
    """Runs a whole game on the alternate screen and returns once it ends."""

    def _session(stdscr: Any) -> GameResult:
        display = CursesDisplay(stdscr, state)
        loop = TurnLoop(
            state,
            players,
            ask_human=display.get_user_move,
            rng=rng,
            on_move=display.record,
        )
        return loop.run()

    # A bare Esc is otherwise held back for a full second.
    os.environ.setdefault("ESCDELAY", str(ESC_DELAY_MS))
    return curses.wrapper(_session)
