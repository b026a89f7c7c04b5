"""
astar.py — A* Search
=====================
A* over a weighted adjacency list with node positions for the heuristic.

The open set is a plain set scanned linearly for the smallest f = g + h.
Candidates are scanned in ascending index order with a strict `<`, so ties
on f always go to the lowest node index and the trace is reproducible.

Built-in heuristics (all take node, end, positions → float):
  • euclidean – straight-line distance between normalised positions (default)
  • manhattan – |Δx| + |Δy|
  • zero      – h = 0, which turns A* into Dijkstra

Edge weights are random integers unrelated to geometry, so the Euclidean
heuristic is only admissible when the weights happen to dominate it.  The
visualisation accepts that looseness.

Records:
  1. Initial g-scores, nothing closed
  2. Each node picked from the open set  →  CURRENT, BEFORE the goal test
  3. Each improved neighbour             →  CURRENT still the expanded node
  4. Terminal frame                      →  reconstructed path + iteration count

Unlike Dijkstra, A* stops as soon as the destination is picked.
"""

import math
from typing import Callable, Dict, Generator, List, Optional, Sequence, Set

from algorithms.step import (
    NO_NODE,
    AStarStep,
    Distance,
    check_node,
    reconstruct_path_edges,
)
from graph.edge import WeightedEdge
from graph.layout import Position


# ---------------------------------------------------------------------------
# Heuristics
# ---------------------------------------------------------------------------
def euclidean(node: int, end: int, positions: Sequence[Position]) -> float:
    (x1, y1), (x2, y2) = positions[node], positions[end]
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)

def manhattan(node: int, end: int, positions: Sequence[Position]) -> float:
    (x1, y1), (x2, y2) = positions[node], positions[end]
    return abs(x2 - x1) + abs(y2 - y1)

def zero(node: int, end: int, positions: Sequence[Position]) -> float:
    return 0.0

Heuristic = Callable[[int, int, Sequence[Position]], float]

HEURISTICS: Dict[str, Heuristic] = {
    "euclidean": euclidean,
    "manhattan": manhattan,
    "zero":      zero,
}


PSEUDOCODE: List[str] = [
    "def AStar(graph, start, end, h):",            # 0
    "    g[start] ← 0",                            # 1
    "    f[start] ← h(start, end)",                # 2
    "    open ← {start}",                          # 3
    "    while open is not empty:",                # 4
    "        node ← argmin f over open",           # 5
    "        if node == end: break",               # 6
    "        open.remove(node); closed.add(node)", # 7
    "        for (nbr, w) in adj(node):",          # 8
    "            if nbr in closed: continue",      # 9
    "            tentative ← g[node] + w",         # 10
    "            if tentative < g[nbr]:",          # 11
    "                g[nbr] ← tentative",          # 12
    "                f[nbr] ← g[nbr] + h(nbr)",    # 13
    "                parent[nbr] ← node",          # 14
    "                open.add(nbr)",               # 15
    "    return path(parent, end)",                # 16
]


def _lowest_f(open_set: Set[int], f: Sequence[float]) -> int:
    best, best_f = NO_NODE, math.inf
    for node in sorted(open_set):
        if f[node] < best_f:
            best, best_f = node, f[node]
    return best


def astar(
    adjacency: Sequence[Sequence[WeightedEdge]],
    positions: Sequence[Position],
    start: int,
    end: int,
    heuristic: str = "euclidean",
) -> Generator[AStarStep, None, None]:
    """
    Args:
        adjacency : Weighted edges per node.
        positions : Normalised (x, y) per node, same length as adjacency.
        start     : Start node index.
        end       : Destination node index.
        heuristic : Key into HEURISTICS.
    """
    n = len(adjacency)
    if len(positions) != n:
        raise ValueError(f"{len(positions)} positions for {n} node(s)")
    if heuristic not in HEURISTICS:
        raise ValueError(f"Unknown heuristic: {heuristic}")
    if n == 0:
        yield AStarStep(g_scores=(), visited=(), current_node=NO_NODE)
        return
    check_node(start, n, "start")
    check_node(end, n, "end")

    h_fn = HEURISTICS[heuristic]
    g: List[Distance] = [None] * n
    f: List[float] = [math.inf] * n
    visited = [False] * n
    parent: List[Optional[int]] = [None] * n
    open_set: Set[int] = {start}

    g[start] = 0
    f[start] = h_fn(start, end, positions)

    def snapshot(current: int) -> AStarStep:
        return AStarStep(g_scores=tuple(g), visited=tuple(visited), current_node=current)

    yield snapshot(NO_NODE)

    best_iteration: Optional[int] = None
    iteration = 0
    while open_set:
        current = _lowest_f(open_set, f)
        yield snapshot(current)
        iteration += 1
        if current == end:
            best_iteration = iteration
            break

        open_set.remove(current)
        visited[current] = True

        g_cur = g[current]
        for edge in adjacency[current]:
            nbr = edge.target
            if visited[nbr] or g_cur is None:
                continue
            tentative = g_cur + edge.weight
            if g[nbr] is None or tentative < g[nbr]:
                g[nbr] = tentative
                f[nbr] = tentative + h_fn(nbr, end, positions)
                parent[nbr] = current
                open_set.add(nbr)
                yield snapshot(current)

    yield AStarStep(
        g_scores=tuple(g),
        visited=tuple(visited),
        current_node=NO_NODE,
        path_edges=reconstruct_path_edges(parent, start, end),
        iteration_count=best_iteration,
    )


def generate_astar_steps(
    adjacency: Sequence[Sequence[WeightedEdge]],
    positions: Sequence[Position],
    start: int,
    end: int,
    heuristic: str = "euclidean",
) -> List[AStarStep]:
    return list(astar(adjacency, positions, start, end, heuristic))
