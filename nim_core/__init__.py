"""
Nim core Python package.

Pure game logic for the terminal Nim game, split into small modules so the
front ends (curses, line prompt, Flask app) stay thin.
Modules:
- board.py: Row, Move, nim_sum, text rendering of a position
- state.py: GameState
- moves.py: legality helpers
- ai.py: tiered computer strategy
- selection.py: cursor-driven move selection
- players.py, turns.py: players and the turn loop
- render.py, terminal.py, parse.py, cli.py: I/O collaborators
"""
