from __future__ import annotations

import logging
import os
import sys
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    DEFAULT_SYMBOLS,
    GameSnapshot,
    MemoryGame,
    MemoryGameError,
    Scheduler,
    format_clock,
    load_config,
)

logger = logging.getLogger(__name__)

CONFIG = load_config()

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# In-process game registry. The engine is single-threaded, so every access
# goes through _GAMES_LOCK.
_GAMES: "OrderedDict[str, MemoryGame]" = OrderedDict()
_GAMES_LOCK = threading.Lock()


def _make_game() -> MemoryGame:
    return MemoryGame(scheduler=Scheduler(), config=CONFIG)


def _register(game: MemoryGame) -> str:
    game_id = uuid.uuid4().hex
    _GAMES[game_id] = game
    while len(_GAMES) > CONFIG.max_games:
        old_id, _ = _GAMES.popitem(last=False)
        logger.info("evicted game %s", old_id)
    return game_id


def _lookup(body: Dict[str, Any]) -> Optional[MemoryGame]:
    game_id = body.get("gameId")
    if not isinstance(game_id, str):
        return None
    game = _GAMES.get(game_id)
    if game is not None:
        _GAMES.move_to_end(game_id)
        # Apply reverts and clock ticks that came due since the last request.
        game.sync()
    return game


def _parse_int(value: Any) -> Tuple[Optional[int], bool]:
    """Returns (value, ok). Accepts ints and integer strings, rejects bools."""
    if value is None:
        return None, True
    if isinstance(value, bool):
        return None, False
    try:
        return int(str(value).strip()), True
    except ValueError:
        return None, False


# ---------- JSON projection ----------

def state_to_json(s: GameSnapshot) -> Dict[str, Any]:
    cards = []
    for view in s.cards:
        entry: Dict[str, Any] = {"position": int(view.position), "state": view.state}
        if view.symbol_id is not None:
            entry["symbol"] = view.symbol_id
            entry["face"] = view.face
        cards.append(entry)
    return {
        "board": {"size": int(s.size), "cards": cards},
        "moves": int(s.moves),
        "elapsedSeconds": int(s.elapsed_seconds),
        "clock": format_clock(s.elapsed_seconds),
        "matchedPairs": int(s.matched_pairs),
        "totalPairs": int(s.total_pairs),
        "phase": s.phase,
        "won": bool(s.won),
        "generation": int(s.generation),
    }


def _not_found() -> Any:
    return jsonify({"ok": False, "error": "unknown gameId"}), 404


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.get("/api/symbols")
def api_symbols() -> Any:
    return jsonify({"ok": True, "symbols": [{"id": s.id, "face": s.face} for s in DEFAULT_SYMBOLS]})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    size, ok_size = _parse_int(body.get("size"))
    seed, ok_seed = _parse_int(body.get("seed"))
    if not ok_size:
        return jsonify({"ok": False, "error": f"bad size: {body.get('size')!r}"}), 400
    if not ok_seed:
        return jsonify({"ok": False, "error": f"bad seed: {body.get('seed')!r}"}), 400
    game = _make_game()
    try:
        snap = game.start(size, seed=seed)
    except MemoryGameError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with _GAMES_LOCK:
        game_id = _register(game)
    logger.info("new game %s (%dx%d)", game_id, snap.size, snap.size)
    return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(snap)})


@app.post("/api/reveal")
def api_reveal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    position, ok = _parse_int(body.get("position"))
    if not ok or position is None:
        return jsonify({"ok": False, "error": f"bad position: {body.get('position')!r}"}), 400
    with _GAMES_LOCK:
        game = _lookup(body)
        if game is None:
            return _not_found()
        applied = game.on_reveal(position)
        snap = game.snapshot()
    return jsonify({"ok": True, "applied": applied, "state": state_to_json(snap)})


@app.post("/api/stop")
def api_stop() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    with _GAMES_LOCK:
        game = _lookup(body)
        if game is None:
            return _not_found()
        snap = game.stop()
    return jsonify({"ok": True, "state": state_to_json(snap)})


@app.post("/api/reset")
def api_reset() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    with _GAMES_LOCK:
        game = _lookup(body)
        if game is None:
            return _not_found()
        snap = game.reset()
    return jsonify({"ok": True, "state": state_to_json(snap)})


@app.post("/api/state")
def api_state() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    with _GAMES_LOCK:
        game = _lookup(body)
        if game is None:
            return _not_found()
        snap = game.snapshot()
    return jsonify({"ok": True, "state": state_to_json(snap)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
