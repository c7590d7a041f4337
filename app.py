# app.py — JSON service over the puzzle engine
from __future__ import annotations

import time
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from defaults import default_grid
from grid import Grid
from io_files import FormatError, format_grid, parse_grid
from progress import as_json as progress_json
from render import render_text
from rules import is_won
from solver.backtracking import count_solutions, solve

app = Flask(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@app.after_request
def _no_cache_progress(resp):
    if request.path == "/progress":
        resp.headers["Cache-Control"] = "no-store, max-age=0"
        resp.headers["Pragma"] = "no-cache"
        resp.headers["Expires"] = "0"
    return resp


def _fmt_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    m, s = divmod(int(seconds), 60)
    if m == 0:
        return f"{s}s"
    h, m = divmod(m, 60)
    if h == 0:
        return f"{m}m {s}s"
    return f"{h}h {m}m {s}s"


def _grid_from_request() -> Grid:
    """Accept the save format as JSON ``{"grid": "..."}``, form field ``grid``, or raw body."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        text = payload.get("grid")
    elif request.mimetype in _FORM_TYPES:
        text = request.form.get("grid")
    else:
        text = request.get_data(as_text=True)
    if not isinstance(text, str) or not text.strip():
        raise FormatError("no grid in request")
    return parse_grid(text)


def _grid_payload(g: Grid) -> Dict[str, Any]:
    return {
        "rows": g.rows,
        "cols": g.cols,
        "wrapping": g.wrapping,
        "grid": format_grid(g),
        "board": render_text(g),
        "won": is_won(g),
    }


def _bad_request(err: FormatError) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": f"Bad grid: {err}"}), 400


@app.route("/default")
def default():
    return jsonify(_grid_payload(default_grid()))


@app.route("/solve", methods=["POST"])
def solve_route():
    try:
        g = _grid_from_request()
    except FormatError as e:
        return _bad_request(e)

    t0 = time.time()
    ok = solve(g)
    out = _grid_payload(g)
    out.update({"ok": ok, "elapsed_str": _fmt_elapsed(time.time() - t0)})
    if not ok:
        out["reason"] = "The game has no solutions"
    return jsonify(out)


@app.route("/count", methods=["POST"])
def count_route():
    try:
        g = _grid_from_request()
    except FormatError as e:
        return _bad_request(e)

    t0 = time.time()
    n = count_solutions(g)
    return jsonify({"ok": True, "count": n, "elapsed_str": _fmt_elapsed(time.time() - t0)})


@app.route("/progress")
def progress():
    return jsonify(progress_json())


if __name__ == "__main__":
    app.run(debug=False)
