from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from toruslife.cli import debug_enabled, env_int
from toruslife.life import Board, Game, alive_cells, board, gameover, population, render, resize, step_game
from toruslife.patterns import PATTERNS, centered

DEFAULT_WIDTH = env_int("TORUSLIFE_WIDTH", 20)
DEFAULT_HEIGHT = env_int("TORUSLIFE_HEIGHT", 10)
MAX_GENERATIONS = 1000
MAX_CELLS = 250_000

app = Flask(__name__)


def _check_size(width: int, height: int) -> None:
    if width * height > MAX_CELLS:
        raise ValueError(f"{width}x{height} is more than {MAX_CELLS} cells")


def _request_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400


def _board_to_json(b: Board) -> Dict[str, Any]:
    width, height = b.size
    return {
        "width": int(width),
        "height": int(height),
        "alive": [[int(x), int(y)] for (x, y) in alive_cells(b)],
    }


def _json_to_board(obj: Dict[str, Any]) -> Board:
    width = int(obj["width"])
    height = int(obj["height"])
    _check_size(width, height)
    alive: List[Tuple[int, int]] = [(int(x), int(y)) for x, y in obj.get("alive", [])]
    return board(width, height, alive)


def _game_to_json(g: Game) -> Dict[str, Any]:
    return {
        "time": g.time,
        "board": _board_to_json(g.board),
        "population": population(g.board),
        "gameover": gameover(g.board),
        "picture": render(g.board),
    }


@app.post("/api/new")
def api_new() -> Any:
    body = _request_body()
    if body is None:
        return _bad_body()
    try:
        width = int(body.get("width", DEFAULT_WIDTH))
        height = int(body.get("height", DEFAULT_HEIGHT))
        _check_size(width, height)
        name = body.get("pattern")
        if name is not None:
            if name not in PATTERNS:
                return jsonify({"ok": False, "error": f"unknown pattern: {name}", "patterns": sorted(PATTERNS)}), 400
            cells = centered(name, width, height)
        else:
            cells = [(int(x), int(y)) for x, y in body.get("alive", [])]
        b = board(width, height, cells)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad board: {e}"}), 400
    return jsonify({"ok": True, "game": _game_to_json(Game(0, b))})


@app.post("/api/step")
def api_step() -> Any:
    body = _request_body()
    if body is None:
        return _bad_body()
    try:
        b = _json_to_board(body["board"])
        generations = int(body.get("generations", 1))
        start = int(body.get("time", 0))
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad board: {e}"}), 400
    if not 0 <= generations <= MAX_GENERATIONS:
        return jsonify({"ok": False, "error": f"generations must be between 0 and {MAX_GENERATIONS}"}), 400

    game = Game(start, b)
    for _ in range(generations):
        game = step_game(game)
    if debug_enabled():
        print(f"[life] stepped to t={game.time} population={population(game.board)}")
    return jsonify({"ok": True, "game": _game_to_json(game)})


@app.post("/api/resize")
def api_resize() -> Any:
    body = _request_body()
    if body is None:
        return _bad_body()
    try:
        b = _json_to_board(body["board"])
        dw = int(body.get("dw", 0))
        dh = int(body.get("dh", 0))
        start = int(body.get("time", 0))
        width, height = b.size
        _check_size(width + dw, height + dh)
        resized = resize(dw, dh, b)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad board: {e}"}), 400
    return jsonify({"ok": True, "game": _game_to_json(Game(start, resized))})


@app.get("/api/patterns")
def api_patterns() -> Any:
    return jsonify({"ok": True, "patterns": sorted(PATTERNS)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug)
