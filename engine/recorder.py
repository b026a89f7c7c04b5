"""
recorder.py — Run Recorder & Analytics
========================================
Builds fresh inputs for an algorithm, records its complete trace, then
computes the analytics the UI shows next to the playback.

Usage:
    rec = Recorder()
    rec.run("dijkstra")              # new random graph + full trace
    rec.metrics                      # the analytics card
    rec.export()                     # JSON-ready snapshot for the API

Every run draws new random inputs (array, graph, endpoints, population),
so repeated resets differ in values but never in invariants.  Pass a seeded
`random.Random` to the Recorder for reproducible runs.

Comparison Mode:
    Run Dijkstra and A* on the SAME weighted scenario, then
    compare(rec1, rec2) → ComparisonResult.
"""

import dataclasses
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.genetic import random_population
from graph import (
    WeightedScenario,
    build_random_chain_adjacency,
    build_ring_adjacency,
    build_weighted_scenario,
    edge_weight,
    random_array,
)

logger = logging.getLogger(__name__)

GRAPH_SHAPES = {
    "ring":         lambda size, rng: build_ring_adjacency(size),
    "random_chain": build_random_chain_adjacency,
}


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str             = ""
    algo_label:      str             = ""
    total_steps:     int             = 0
    wall_time_ms:    float           = 0.0
    nodes_visited:   int             = 0
    iteration_count: Optional[int]   = None
    path_length:     int             = 0      # number of edges on the final path
    path_cost:       Optional[int]   = None   # total weight, None when unreachable
    best_fitness:    Optional[float] = None   # genetic algorithm, last generation


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:      str = ""
    winner_iterations: str = ""
    winner_path:       str = ""   # cheaper path, or "tie"


def step_to_dict(step: Any) -> Dict[str, Any]:
    """Serialise any snapshot dataclass into plain dicts and tuples."""
    return dataclasses.asdict(step)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps    : Full trace of the last run.
        inputs   : The inputs that trace was computed from.
        metrics  : RunMetrics of the last run.
        info     : AlgoInfo of the last run.
        scenario : Weighted scenario of the last Dijkstra / A* run, else None.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.steps:   List[Any]            = []
        self.inputs:  Dict[str, Any]       = {}
        self.metrics: Optional[RunMetrics] = None
        self.info:    Optional[AlgoInfo]   = None
        self.scenario: Optional[WeightedScenario] = None
        self._rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(
        self,
        algo_key: str,
        scenario: Optional[WeightedScenario] = None,
        **options: Any,
    ) -> RunMetrics:
        """Build inputs, compute the whole trace, compute metrics."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        allowed = set(info.defaults) | ({"values"} if info.kind == "sort" else set())
        unknown = set(options) - allowed
        if unknown:
            raise ValueError(f"Unknown option(s) for {algo_key}: {', '.join(sorted(unknown))}")
        settings = {**info.defaults, **options}

        start_time = time.monotonic()
        inputs, call_args, scenario = self._build_inputs(info, settings, scenario)
        steps = info.fn(**call_args)
        wall_ms = (time.monotonic() - start_time) * 1000

        # swap everything in only once the new trace is complete
        self.info    = info
        self.inputs  = inputs
        self.steps   = steps
        self.scenario = scenario
        self.metrics = self._compute_metrics(wall_ms)

        logger.info(
            "%s: %d steps in %.2f ms", info.key, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self.info.key if self.info else "",
            "inputs":   self.inputs,
            "metrics":  dataclasses.asdict(self.metrics) if self.metrics else {},
            "steps":    [step_to_dict(s) for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _build_inputs(self, info: AlgoInfo, settings: Dict[str, Any], scenario):
        kind = info.kind
        rng = self._rng

        if kind == "sort":
            values = settings.get("values")
            if values is None:
                values = random_array(settings["size"], settings["max_number"], rng)
            values = [int(v) for v in values]
            return {"values": values}, {"values": values}, None

        if kind == "graph":
            shape = settings["graph"]
            if shape not in GRAPH_SHAPES:
                raise ValueError(f"Unknown graph shape: {shape}")
            adjacency = GRAPH_SHAPES[shape](settings["node_count"], rng)
            start = settings["start"]
            inputs = {"adjacency": adjacency, "start": start, "graph": shape}
            return inputs, {"adjacency": adjacency, "start": start}, None

        if kind in ("weighted", "heuristic"):
            if scenario is None:
                scenario = build_weighted_scenario(
                    node_count=settings["node_count"],
                    connection_distance=settings["connection_distance"],
                    outer_radius=settings["outer_radius"],
                    inner_radius=settings["inner_radius"],
                    rng=rng,
                )
            inputs = scenario.to_dict()
            call_args = {"adjacency": scenario.adjacency, "start": scenario.start, "end": scenario.end}
            if kind == "heuristic":
                call_args["positions"] = scenario.positions
                call_args["heuristic"] = settings["heuristic"]
                inputs["heuristic"] = settings["heuristic"]
            return inputs, call_args, scenario

        if kind == "evolution":
            population = random_population(settings["population_size"], rng)
            generations = settings["generations"]
            inputs = {
                "population_size": len(population),
                "generations": generations,
            }
            return inputs, {"initial_population": population, "generations": generations, "rng": rng}, None

        raise ValueError(f"Unsupported algorithm kind: {kind}")

    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self.info
        last = self.steps[-1] if self.steps else None
        metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
        )
        if last is None:
            return metrics

        if hasattr(last, "visited"):
            metrics.nodes_visited = sum(last.visited)
        if hasattr(last, "path_edges"):
            metrics.iteration_count = last.iteration_count
            metrics.path_length = len(last.path_edges)
            metrics.path_cost = self._path_cost(last)
        if hasattr(last, "best_fitness"):
            metrics.best_fitness = last.best_fitness
        return metrics

    def _path_cost(self, last) -> Optional[int]:
        scenario = self.scenario
        if scenario is None:
            return None
        if not last.path_edges and scenario.start != scenario.end:
            return None
        return sum(edge_weight(scenario.adjacency, u, v) for u, v in last.path_edges)


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        if l_val is None:
            return r.algo_label
        if r_val is None:
            return l.algo_label
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_iterations=winner(l.iteration_count, r.iteration_count),
        winner_path=winner(l.path_cost, r.path_cost),
    )
