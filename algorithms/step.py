"""
step.py — Algorithm Step Snapshots
===================================
Every algorithm runs to completion once and leaves behind an ordered list
of snapshots.  A snapshot is a frozen-in-time picture of everything the
renderer needs for one frame:

    • Sorting   – the whole array + the pair of indices being compared
    • BFS       – visited flags, the node being processed, discovery order
    • Dijkstra  – distances, finalised flags, current node, final path
    • A*        – g-scores, closed flags, current node, final path
    • Genetic   – generation number, population, best fitness

Design decisions:
  - Snapshots are frozen dataclasses holding tuples.  The generator works on
    one mutable buffer and copies it into a new snapshot at each recorded
    instant, so nothing it does later can reach an earlier frame.
  - Unreached distances are `None`, not a huge integer, so no arithmetic is
    ever done on a sentinel.
  - `current_node == -1` (NO_NODE) and `compared_indices == (-1, -1)` mark
    "nothing in focus", which is how the terminal frames look.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from graph.edge import edge_key

NO_NODE = -1
NO_COMPARISON: Tuple[int, int] = (-1, -1)

Distance = Optional[int]
PathEdges = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class SortStep:
    array:            Tuple[int, ...]
    compared_indices: Tuple[int, int]

    @property
    def is_final(self) -> bool:
        return self.compared_indices == NO_COMPARISON


@dataclass(frozen=True)
class BFSStep:
    visited:      Tuple[bool, ...]
    current_node: int
    visit_order:  Tuple[int, ...]


@dataclass(frozen=True)
class DijkstraStep:
    """
    Attributes:
        distances       : Best known distance per node, None while unreached.
        visited         : True once a node's distance is final.
        current_node    : Node just finalised / being relaxed from, or -1.
        path_edges      : (low, high) pairs on the shortest path, terminal step only.
        iteration_count : Main-loop iteration that finalised the destination,
                          terminal step only.
    """

    distances:       Tuple[Distance, ...]
    visited:         Tuple[bool, ...]
    current_node:    int
    path_edges:      PathEdges     = ()
    iteration_count: Optional[int] = None


@dataclass(frozen=True)
class AStarStep:
    """Same layout as DijkstraStep, with g-scores and the closed set."""

    g_scores:        Tuple[Distance, ...]
    visited:         Tuple[bool, ...]
    current_node:    int
    path_edges:      PathEdges     = ()
    iteration_count: Optional[int] = None


@dataclass(frozen=True)
class Individual:
    x:       float
    fitness: float


@dataclass(frozen=True)
class GenerationStep:
    generation:   int
    population:   Tuple[Individual, ...]
    best_fitness: float


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------
def check_node(node: int, node_count: int, name: str = "node") -> None:
    """Fail fast on an out-of-range node index."""
    if not 0 <= node < node_count:
        raise ValueError(f"{name} index {node} out of range for {node_count} node(s)")


def reconstruct_path_edges(
    parent: Sequence[Optional[int]],
    start: int,
    end: int,
) -> PathEdges:
    """
    Walk parent pointers from `end` back towards `start`.

    Stops at the first node without a parent, so an unreachable destination
    yields an empty (or partial) path rather than an error.
    """
    edges = []
    cur = end
    while cur != start:
        p = parent[cur]
        if p is None:
            break
        edges.append(edge_key(p, cur))
        cur = p
    return tuple(edges)
