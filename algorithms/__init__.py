"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, kind, delay_ms, defaults, …),
        …
    }

`kind` tells the recorder which inputs to build before calling `fn`:
    "sort"      – fn(values)
    "graph"     – fn(adjacency, start)
    "weighted"  – fn(adjacency, start, end)
    "heuristic" – fn(adjacency, positions, start, end, heuristic)
    "evolution" – fn(initial_population, generations, rng)

`defaults` are the per-algorithm settings a fresh run uses unless the
caller overrides them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from algorithms.bubble_sort    import generate_bubble_sort_steps,       PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import generate_selection_sort_steps,    PSEUDOCODE as _sel_pc
from algorithms.bfs            import generate_bfs_steps,               PSEUDOCODE as _bfs_pc
from algorithms.dijkstra       import generate_dijkstra_steps,          PSEUDOCODE as _dij_pc
from algorithms.astar          import generate_astar_steps,             PSEUDOCODE as _ast_pc
from algorithms.genetic        import generate_genetic_algorithm_steps, PSEUDOCODE as _ga_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                     # registry key, e.g. "bfs"
    label:            str                     # human label, e.g. "Breadth-First Search"
    fn:               Callable                # eager step generator
    pseudocode:       List[str]               # lines for the side-panel
    kind:             str                     # sort, graph, weighted, heuristic or evolution
    delay_ms:         int                     # playback interval between steps
    defaults:         Dict[str, Any] = field(default_factory=dict)
    tags:             List[str]      = field(default_factory=list)
    complexity_time:  str            = ""
    complexity_space: str            = ""
    description:      str            = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "kind":             self.kind,
            "delay_ms":         self.delay_ms,
            "defaults":         dict(self.defaults),
            "tags":             list(self.tags),
            "pseudocode":       list(self.pseudocode),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", fn=generate_bubble_sort_steps,
        pseudocode=_bubble_pc, kind="sort", delay_ms=200,
        defaults={"size": 10, "max_number": 500},
        tags=["sorting", "stable"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent out-of-order pairs. Stops after a pass with no swaps.",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", fn=generate_selection_sort_steps,
        pseudocode=_sel_pc, kind="sort", delay_ms=200,
        defaults={"size": 10, "max_number": 500},
        tags=["sorting"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly moves the smallest remaining value to the front.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=generate_bfs_steps,
        pseudocode=_bfs_pc, kind="graph", delay_ms=600,
        defaults={"node_count": 10, "graph": "ring", "start": 0},
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer, recording the order nodes are discovered.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=generate_dijkstra_steps,
        pseudocode=_dij_pc, kind="weighted", delay_ms=200,
        defaults={"node_count": 10, "connection_distance": 0.4,
                  "outer_radius": 0.5, "inner_radius": 0.3},
        tags=["weighted", "shortest-path"],
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Finalises the closest unvisited node each round. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=generate_astar_steps,
        pseudocode=_ast_pc, kind="heuristic", delay_ms=200,
        defaults={"node_count": 10, "connection_distance": 0.35,
                  "outer_radius": 0.5, "inner_radius": 0.3, "heuristic": "euclidean"},
        tags=["weighted", "shortest-path", "heuristic"],
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Dijkstra guided by straight-line distance to the goal. Stops at the goal.",
    ),

    "genetic": AlgoInfo(
        key="genetic", label="Genetic Algorithm", fn=generate_genetic_algorithm_steps,
        pseudocode=_ga_pc, kind="evolution", delay_ms=100,
        defaults={"population_size": 50, "generations": 20},
        tags=["evolutionary", "stochastic"],
        complexity_time="O(G · N log N)", complexity_space="O(G · N)",
        description="Selection, averaging crossover and small mutations climb f(x) = 4x(1-x).",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
