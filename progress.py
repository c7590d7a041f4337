from __future__ import annotations

import json
import logging
import os
import time
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from config import CFG

# ------------------------------
# Lock-protected state of the latest solver run
# ------------------------------

PROGRESS_LOCK = threading.Lock()


def _state_file_path() -> Path:
    configured = os.environ.get("PROGRESS_STATE_FILE")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent / "logs" / "progress_state.json"


STATE_FILE = _state_file_path()
STATE_FILE_TMP = STATE_FILE.with_name(STATE_FILE.name + ".tmp")
_LAST_STATE_MTIME: float = 0.0


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("net.solver_runs")
    if logger.handlers or not CFG.LOG_SOLVER:
        return logger

    log_path = Path(__file__).resolve().parent / "logs" / "solver_runs.log"
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    except OSError:
        # Run logging is optional; an unwritable log directory leaves it off.
        logger.handlers.clear()
    return logger


RUN_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(RUN_LOGGER.handlers)


def _fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    return f"{float(seconds):.3f}s"


def _emit_log(event: str, **fields: Any) -> None:
    if not _log_enabled():
        return
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    if extras:
        RUN_LOGGER.info("%s | %s", event, " ".join(extras))
    else:
        RUN_LOGGER.info("%s", event)


def _persist_locked() -> None:
    global _LAST_STATE_MTIME
    try:
        STATE_FILE.parent.mkdir(parents=True, exist_ok=True)
        with STATE_FILE_TMP.open("w", encoding="utf-8") as fh:
            json.dump(PROGRESS, fh, ensure_ascii=False, separators=(",", ":"))
        STATE_FILE_TMP.replace(STATE_FILE)
        try:
            _LAST_STATE_MTIME = STATE_FILE.stat().st_mtime
        except OSError:
            _LAST_STATE_MTIME = time.time()
    except OSError:
        # Persistence must never break a solver run.
        pass


def _load_persisted_locked(force: bool = False) -> None:
    global _LAST_STATE_MTIME
    try:
        stat = STATE_FILE.stat()
    except OSError:
        return
    if not force and stat.st_mtime <= _LAST_STATE_MTIME:
        return
    try:
        with STATE_FILE.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError):
        return
    if not isinstance(data, dict):
        return
    for key in PROGRESS.keys():
        if key in data:
            PROGRESS[key] = data[key]
    _LAST_STATE_MTIME = stat.st_mtime


PROGRESS: Dict[str, Any] = {
    "status": "Idle",          # Idle | Solving | Solved | NoSolution | Counted
    "mode": "",                # solve | count
    "grid": "",                # e.g. "5 × 5 (wrapping)"
    "nodes": 0,                # orientations tried so far
    "solutions": 0,            # complete winning assignments found
    "elapsed_start": None,     # t0 (float) when the run started
    "elapsed": 0.0,            # seconds snapshot
    "message": "",             # optional note
    "done": False,             # run completed
    "ok": None,                # success flag if known
    "run_id": 0,               # monotonically increasing identifier
}

# ------------------------------
# Helpers
# ------------------------------

def _now() -> float:
    return time.time()

def _fmt_elapsed(seconds: float) -> str:
    seconds = max(0.0, float(seconds))
    if seconds < 60:
        return f"{seconds:.1f}s"
    m, s = divmod(int(seconds), 60)
    if m < 60:
        return f"{m}m {s}s"
    h, m = divmod(m, 60)
    return f"{h}h {m}m"

def _touch_elapsed_locked() -> None:
    t0 = PROGRESS.get("elapsed_start")
    if t0 is not None:
        PROGRESS["elapsed"] = _now() - float(t0)

def grid_label(rows: int, cols: int, wrapping: bool) -> str:
    label = f"{rows} × {cols}"
    return label + " (wrapping)" if wrapping else label

# ------------------------------
# Run lifecycle
# ------------------------------

def reset() -> None:
    with PROGRESS_LOCK:
        new_run_id = int(PROGRESS.get("run_id") or 0) + 1
        PROGRESS.update({
            "status": "Idle",
            "mode": "",
            "grid": "",
            "nodes": 0,
            "solutions": 0,
            "elapsed_start": None,
            "elapsed": 0.0,
            "message": "",
            "done": False,
            "ok": None,
            "run_id": new_run_id,
        })
        _persist_locked()

def start_run(mode: str, grid: str) -> None:
    reset()
    with PROGRESS_LOCK:
        PROGRESS["status"] = "Solving"
        PROGRESS["mode"] = mode
        PROGRESS["grid"] = grid
        PROGRESS["elapsed_start"] = _now()
        _emit_log("Run started", mode=mode, grid=grid, run=PROGRESS["run_id"])
        _persist_locked()

def set_nodes(n: int, solutions: Optional[int] = None) -> None:
    with PROGRESS_LOCK:
        PROGRESS["nodes"] = max(0, int(n))
        if solutions is not None:
            PROGRESS["solutions"] = max(0, int(solutions))
        _touch_elapsed_locked()
        _persist_locked()

def set_done(ok: bool, *, status: str, nodes: int = 0, solutions: int = 0,
             message: Optional[str] = None) -> None:
    """Mark the current run finished and write its summary line to the run log."""
    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        PROGRESS["status"] = status
        PROGRESS["ok"] = bool(ok)
        PROGRESS["done"] = True
        PROGRESS["nodes"] = max(0, int(nodes))
        PROGRESS["solutions"] = max(0, int(solutions))
        if message is not None:
            PROGRESS["message"] = str(message)
        PROGRESS["elapsed_start"] = None
        _emit_log(
            "Run finished",
            mode=PROGRESS.get("mode"),
            grid=PROGRESS.get("grid"),
            status=status,
            nodes=PROGRESS["nodes"],
            solutions=PROGRESS["solutions"],
            duration=_fmt_seconds(PROGRESS.get("elapsed")),
            message=PROGRESS.get("message"),
        )
        _persist_locked()

# ------------------------------
# Snapshots for the service
# ------------------------------

def snapshot() -> Dict[str, Any]:
    with PROGRESS_LOCK:
        _load_persisted_locked()
        _touch_elapsed_locked()
        return {
            "status": PROGRESS["status"],
            "mode": PROGRESS["mode"],
            "grid": PROGRESS["grid"],
            "nodes": PROGRESS["nodes"],
            "solutions": PROGRESS["solutions"],
            "elapsed": PROGRESS["elapsed"],
            "elapsed_str": _fmt_elapsed(PROGRESS["elapsed"]),
            "message": PROGRESS["message"],
            "done": PROGRESS["done"],
            "ok": PROGRESS["ok"],
            "run_id": PROGRESS["run_id"],
        }

def as_json() -> Dict[str, Any]:
    return snapshot()


with PROGRESS_LOCK:
    _load_persisted_locked(force=True)
