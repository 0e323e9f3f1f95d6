from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .ai import auto_move
from .board import Move
from .players import Player
from .state import GameState

logger = logging.getLogger(__name__)

# (state, player to move, last committed move) -> move, or None to abort.
HumanMoveSource = Callable[[GameState, Player, Optional[Move]], Optional[Move]]


@dataclass
class GameResult:
    state: GameState
    winner: Optional[Player] = None
    aborted: bool = False
    history: List[Tuple[Player, Move]] = field(default_factory=list)

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1][1] if self.history else None


class TurnLoop:
    """Alternates two players over one GameState until someone wins or a human aborts."""

    def __init__(
        self,
        state: GameState,
        players: Sequence[Player],
        ask_human: Optional[HumanMoveSource] = None,
        rng: Optional[random.Random] = None,
        on_move: Optional[Callable[[Player, Move, GameState], None]] = None,
        on_illegal: Optional[Callable[[Player, Move], None]] = None,
    ) -> None:
        if len(players) != 2:
            raise ValueError("Nim is played by exactly two players")
        if ask_human is None and not all(p.is_computer for p in players):
            raise ValueError("a human player needs a move source")
        self.state = state
        self.players = tuple(players)
        self.ask_human = ask_human
        self.rng = rng
        self.on_move = on_move
        self.on_illegal = on_illegal
        self.last_move: Optional[Move] = None

    def get_move(self, player: Player) -> Optional[Move]:
        """Single dispatch point over the player kind."""
        if player.is_computer:
            return auto_move(self.state, self.rng)
        assert self.ask_human is not None
        return self.ask_human(self.state, player, self.last_move)

    def play_turn(self, player: Player) -> Optional[Move]:
        """Asks `player` until a legal move is applied; None means the player aborted."""
        while True:
            move = self.get_move(player)
            if move is None:
                return None
            if self.state.apply_move(*move):
                self.last_move = move
                return move
            if player.is_computer:
                raise RuntimeError(f"computer chose illegal move {move} for rows {self.state.rows}")
            logger.info("rejected illegal move %s from %s", move, player)
            if self.on_illegal is not None:
                self.on_illegal(player, move)

    def run(self) -> GameResult:
        result = GameResult(state=self.state)
        if self.state.is_empty():
            raise ValueError("cannot play on an empty board")
        turn = 0
        while True:
            player = self.players[turn % 2]
            move = self.play_turn(player)
            if move is None:
                logger.info("%s aborted the game", player)
                result.aborted = True
                return result
            result.history.append((player, move))
            logger.debug("%s took %d from row %d -> %s", player, move[1], move[0], self.state.rows)
            if self.on_move is not None:
                self.on_move(player, move, self.state)
            if self.state.check_lose():
                result.winner = player
                return result
            if self.state.is_empty():
                # The mover took the very last object.
                result.winner = self.players[(turn + 1) % 2]
                return result
            turn += 1
