"""
main.py — Algorithm Step Visualizer JSON API
=============================================
The web server an external renderer talks to.  It computes whole traces up
front and afterwards only moves an index through them; drawing stays on the
client.

Routes:
  GET  /api/algorithms         – registry cards (labels, pseudocode, defaults),
                                 optionally ?tag=shortest-path
  POST /api/run                – build fresh inputs, compute a full trace
  POST /api/reset              – same algorithm and options, new random inputs
  GET  /api/state              – playback state + metrics
  GET  /api/step               – current step (or ?index=N, clamped)
  GET  /api/trace              – the complete trace and its inputs
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N (clamped)
  POST /api/step/rewind        – back to step 0, paused
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – let the playback timer advance if due
  POST /api/compare            – Dijkstra vs A* on one weighted scenario

State management:
  Runs live in the in-process RUNS dict keyed by a uuid kept in the Flask
  session.  RUNS holds at most MAX_RUNS entries; the least recently started
  or reset run is evicted first.  A reset builds the new Recorder completely
  before replacing the old one, so a client never reads a half-built trace.
"""

import dataclasses
import logging
import random
import secrets
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session

from algorithms import algorithms_by_tag, get_algorithm, list_algorithms
from engine import Recorder, Stepper, compare, step_to_dict

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Run storage
# ---------------------------------------------------------------------------
@dataclass
class Run:
    algo_key: str
    options:  Dict[str, Any]
    rng:      random.Random
    recorder: Recorder
    stepper:  Stepper = field(default_factory=Stepper)


MAX_RUNS = 256

RUNS: "OrderedDict[str, Run]" = OrderedDict()


def _store(run_id: str, run: Run) -> None:
    RUNS[run_id] = run
    RUNS.move_to_end(run_id)
    while len(RUNS) > MAX_RUNS:
        evicted, _ = RUNS.popitem(last=False)
        logger.info("evicted run %s (limit %d)", evicted, MAX_RUNS)


def _make_rng(seed: Any) -> random.Random:
    if isinstance(seed, bool) or not isinstance(seed, (int, str, type(None))):
        raise TypeError("seed must be an integer or a string")
    return random.Random(seed) if seed is not None else random.Random()


def _error(message: str, status: int = 400):
    logger.warning("rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), status


def _current_run() -> Optional[Run]:
    run_id = session.get("run_id")
    if not run_id:
        return None
    return RUNS.get(run_id)


def _record(algo_key: str, options: Dict[str, Any], rng: random.Random) -> Run:
    recorder = Recorder(rng=rng)
    recorder.run(algo_key, **options)
    run = Run(algo_key=algo_key, options=options, rng=rng, recorder=recorder)
    run.stepper.load(recorder.steps)
    run.stepper.set_speed_value(recorder.info.delay_ms / 1000)
    return run


def _state(run: Run) -> Dict[str, Any]:
    stepper = run.stepper
    return {
        "algo_key":     run.algo_key,
        "state":        stepper.state.value,
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "speed":        stepper.speed,
        "metrics":      dataclasses.asdict(run.recorder.metrics),
    }


def _step_payload(run: Run) -> Dict[str, Any]:
    payload = _state(run)
    payload["step"] = step_to_dict(run.stepper.current_step)
    return payload


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    tag = request.args.get("tag")
    algos = algorithms_by_tag(tag) if tag else list_algorithms()
    return jsonify([a.to_dict() for a in algos])


# ---------------------------------------------------------------------------
# API: Run / Reset
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = request.get_json(silent=True) or {}
    algo_key = data.get("algo", "bubble_sort")
    options = data.get("options", {})
    if get_algorithm(algo_key) is None:
        return _error(f"Unknown algorithm: {algo_key}")
    if not isinstance(options, dict):
        return _error("options must be an object")

    try:
        rng = _make_rng(data.get("seed"))
        run = _record(algo_key, options, rng)
    except (ValueError, TypeError, RuntimeError) as e:
        return _error(str(e))

    old_id = session.get("run_id")
    if old_id:
        RUNS.pop(old_id, None)
    run_id = str(uuid.uuid4())
    _store(run_id, run)
    session["run_id"] = run_id

    payload = _step_payload(run)
    payload["inputs"] = run.recorder.inputs
    return jsonify(payload)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    try:
        fresh = _record(run.algo_key, run.options, run.rng)
    except (ValueError, TypeError, RuntimeError) as e:
        return _error(str(e))
    _store(session["run_id"], fresh)

    payload = _step_payload(fresh)
    payload["inputs"] = fresh.recorder.inputs
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: State & Trace
# ---------------------------------------------------------------------------
@app.route("/api/state", methods=["GET"])
def api_state():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    return jsonify(_state(run))


@app.route("/api/step", methods=["GET"])
def api_step():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    index = request.args.get("index", type=int)
    if index is None:
        index = run.stepper.current_idx
    index = max(0, min(index, run.stepper.total_steps - 1))
    return jsonify({"index": index, "step": step_to_dict(run.stepper.steps[index])})


@app.route("/api/trace", methods=["GET"])
def api_trace():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    return jsonify(run.recorder.export())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    if not run.stepper.next_step():
        return _error("Already at last step")
    return jsonify(_step_payload(run))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    if not run.stepper.prev_step():
        return _error("Already at first step")
    return jsonify(_step_payload(run))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    data = request.get_json(silent=True) or {}
    idx = data.get("index", 0)
    if isinstance(idx, bool) or not isinstance(idx, int):
        return _error("index must be an integer")
    run.stepper.goto_step(idx)
    return jsonify(_step_payload(run))


@app.route("/api/step/rewind", methods=["POST"])
def api_step_rewind():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    run.stepper.rewind()
    return jsonify(_step_payload(run))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    run.stepper.toggle_play()
    return jsonify(_state(run))


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    run = _current_run()
    if run is None:
        return _error("No run in progress", 404)
    advanced = run.stepper.tick()
    payload = _step_payload(run)
    payload["advanced"] = advanced
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = request.get_json(silent=True) or {}
    options = data.get("options", {})
    if not isinstance(options, dict):
        return _error("options must be an object")

    try:
        rng = _make_rng(data.get("seed"))
        left, right = Recorder(rng=rng), Recorder(rng=rng)
        left.run("dijkstra", **options)
        right.run("astar", scenario=left.scenario, heuristic=data.get("heuristic", "euclidean"))
    except (ValueError, TypeError, RuntimeError) as e:
        return _error(str(e))

    result = compare(left, right)
    return jsonify({
        "scenario": left.inputs,
        "comparison": dataclasses.asdict(result),
    })


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Algorithm Step Visualizer API on http://127.0.0.1:5000")
    app.run(debug=True)
