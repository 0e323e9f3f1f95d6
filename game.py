from __future__ import annotations

# Facade module that re-exports the Nim core.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under nim_core/*.

from nim_core.board import DEFAULT_ROWS, MAX_ROW, Move, Row, nim_sum, pretty  # noqa: F401
from nim_core.state import GameState  # noqa: F401
from nim_core.moves import is_legal, legal_moves, nonempty_rows, rows_after  # noqa: F401
from nim_core.ai import (  # noqa: F401
    AIDecision,
    auto_move,
    plan_move,
    random_move,
    winning_move,
    xor_move,
)
from nim_core.selection import SelectionController, SelectionEvent  # noqa: F401
from nim_core.players import Player, parse_player  # noqa: F401
from nim_core.turns import GameResult, TurnLoop  # noqa: F401
from nim_core.render import RowView, Snapshot, render_text, row_views, snapshot_views  # noqa: F401
from nim_core.parse import ConfigError, parse_move, parse_rows  # noqa: F401


def main() -> int:
    # CLI driver delegated to nim_core.cli
    from nim_core.cli import main as _main
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
