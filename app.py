from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    ConfigError,
    GameState,
    Move,
    SelectionController,
    SelectionEvent,
    legal_moves,
    parse_rows,
    plan_move,
    render_text,
    row_views,
)

DEFAULT_ROWS = os.getenv("NIM_ROWS", "1,3,5,7")

app = Flask(__name__)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "rows": [int(r) for r in s.rows],
        "initial": [int(r) for r in s.initial],
    }


def _json_to_state(obj: Dict[str, Any]) -> GameState:
    initial = [int(x) for x in obj["initial"]]
    rows = [int(x) for x in obj.get("rows", initial)]
    if len(rows) != len(initial):
        raise ValueError("rows and initial differ in length")
    state = GameState(initial)
    for i, (r, start) in enumerate(zip(rows, initial)):
        if r < 0 or r > start:
            raise ValueError(f"row {i} holds {r}, outside 0..{start}")
    state.rows = rows
    return state


def _json_to_move(obj: Any) -> Optional[Move]:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        return None
    return (int(obj[0]), int(obj[1]))


def _load_state(body: Dict[str, Any]) -> GameState:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return _json_to_state(s_in)


def _bad_state(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


def _outcome(state: GameState, move: Move) -> Dict[str, Any]:
    return {
        "ok": True,
        "move": list(move),
        "state": state_to_json(state),
        "lost": state.check_lose(),
        "emptied": state.is_empty(),
    }


# ---------- Core Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    rows_in = body.get("rows", DEFAULT_ROWS)
    try:
        if isinstance(rows_in, list):
            rows_in = ",".join(str(x) for x in rows_in)
        rows = parse_rows(str(rows_in))
    except ConfigError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    state = GameState(rows)
    selection = SelectionController(state)
    return jsonify({
        "ok": True,
        "state": state_to_json(state),
        "nimSum": state.nim_sum(),
        "selection": list(selection.candidate),
    })


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _load_state(body)
        move = _json_to_move(body.get("move"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    if move is None or not state.apply_move(*move):
        return jsonify({"ok": False, "error": "Illegal move", "legalMoves": legal_moves(state)}), 400
    return jsonify(_outcome(state, move))


@app.post("/api/ai")
def api_ai() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    if state.is_empty():
        return jsonify({"ok": False, "error": "No objects left to take"}), 400
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
        return jsonify({"ok": False, "error": f"seed must be an integer or string, got {seed!r}"}), 400
    rng = random.Random(seed) if seed is not None else None
    decision = plan_move(state, rng)
    if not state.apply_move(*decision.move):
        return jsonify({"ok": False, "error": f"AI produced illegal move {decision.move}"}), 500
    out = _outcome(state, decision.move)
    out["tier"] = decision.tier
    return jsonify(out)


@app.post("/api/select")
def api_select() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _load_state(body)
        controller = SelectionController(state)
        current = _json_to_move(body.get("selection"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    try:
        event = SelectionEvent(body.get("event"))
    except ValueError:
        names = [e.value for e in SelectionEvent]
        return jsonify({"ok": False, "error": f"unknown event, expected one of {names}"}), 400
    if current is not None:
        row, count = current
        if not 0 <= row < len(state.rows) or not 1 <= count <= state.rows[row]:
            return jsonify({"ok": False, "error": f"selection {list(current)} is not a legal move"}), 400
        controller.row, controller.count = row, count
    controller.handle(event)
    return jsonify({
        "ok": True,
        "selection": list(controller.candidate),
        "committed": list(controller.committed) if controller.committed else None,
        "cancelled": controller.cancelled,
    })


@app.post("/api/render")
def api_render() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = _load_state(body)
        highlighted = _json_to_move(body.get("selection"))
        last_move = _json_to_move(body.get("lastMove"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    views = row_views(state.rows, state.initial, highlighted, last_move)
    view_dicts: List[Dict[str, int]] = [
        {
            "padding": v.padding,
            "remaining": v.remaining,
            "selected": v.selected,
            "lastRemoved": v.last_removed,
            "removedEarlier": v.removed_earlier,
        }
        for v in views
    ]
    return jsonify({"ok": True, "lines": render_text(views), "views": view_dicts})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
