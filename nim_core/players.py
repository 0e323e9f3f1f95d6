from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HUMAN = 'human'
COMPUTER = 'computer'
AI_TOKEN = 'ai'


@dataclass(frozen=True)
class Player:
    """Either a named human or the computer; nothing else is stored."""
    kind: str
    name: Optional[str] = None

    @classmethod
    def human(cls, name: str) -> 'Player':
        return cls(HUMAN, name)

    @classmethod
    def computer(cls) -> 'Player':
        return cls(COMPUTER)

    @property
    def is_computer(self) -> bool:
        return self.kind == COMPUTER

    def __str__(self) -> str:
        return 'AI' if self.is_computer else str(self.name)


def parse_player(token: str) -> Player:
    """`ai` in any case selects the computer; any other string names a human."""
    if token.strip().lower() == AI_TOKEN:
        return Player.computer()
    return Player.human(token)
