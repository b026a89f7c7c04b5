"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Array-based Dijkstra: every iteration scans all unvisited nodes for the
smallest distance (O(V²), fine for a dozen nodes on screen).  Ties go to the
lowest index because the scan runs in index order with a strict `<`.

Records:
  1. Initial distances, nothing finalised
  2. Each node finalised          →  CURRENT = that node
  3. Each successful relaxation   →  CURRENT still the node relaxed from
  4. Terminal frame               →  reconstructed path + iteration count

The loop does not stop when the destination is finalised; it keeps going
until every reachable node is final, as textbook Dijkstra does.  The
iteration in which the destination was finalised is reported separately.

Correctness note: weights must be non-negative.  The weighted builders only
produce weights in 1..15.
"""

from typing import Generator, List, Optional, Sequence

from algorithms.step import (
    NO_NODE,
    DijkstraStep,
    Distance,
    check_node,
    reconstruct_path_edges,
)
from graph.edge import WeightedEdge


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start, end):",            # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[start] ← 0",                         # 2
    "    repeat |V| times:",                       # 3
    "        u ← unvisited node with min dist",    # 4
    "        if none: break",                      # 5
    "        visited[u] ← true",                   # 6
    "        for (v, w) in adj(u):",               # 7
    "            if not visited[v] and dist[u] < ∞:",  # 8
    "                if dist[u] + w < dist[v]:",   # 9
    "                    dist[v] ← dist[u] + w",   # 10
    "                    parent[v] ← u",           # 11
    "    return path(parent, end)",                # 12
]


def _closest_unvisited(dist: Sequence[Distance], visited: Sequence[bool]) -> int:
    best, best_dist = NO_NODE, None
    for j, d in enumerate(dist):
        if visited[j] or d is None:
            continue
        if best_dist is None or d < best_dist:
            best, best_dist = j, d
    return best


def dijkstra(
    adjacency: Sequence[Sequence[WeightedEdge]],
    start: int,
    end: int,
) -> Generator[DijkstraStep, None, None]:
    n = len(adjacency)
    if n == 0:
        yield DijkstraStep(distances=(), visited=(), current_node=NO_NODE)
        return
    check_node(start, n, "start")
    check_node(end, n, "end")

    dist: List[Distance] = [None] * n
    visited = [False] * n
    parent: List[Optional[int]] = [None] * n
    dist[start] = 0

    def snapshot(current: int) -> DijkstraStep:
        return DijkstraStep(distances=tuple(dist), visited=tuple(visited), current_node=current)

    yield snapshot(NO_NODE)

    best_iteration: Optional[int] = None
    for i in range(n):
        u = _closest_unvisited(dist, visited)
        if u == NO_NODE:
            break

        visited[u] = True
        if u == end and best_iteration is None:
            best_iteration = i + 1
        yield snapshot(u)

        du = dist[u]
        for edge in adjacency[u]:
            v = edge.target
            if visited[v] or du is None:
                continue
            new_dist = du + edge.weight
            if dist[v] is None or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                yield snapshot(u)

    yield DijkstraStep(
        distances=tuple(dist),
        visited=tuple(visited),
        current_node=NO_NODE,
        path_edges=reconstruct_path_edges(parent, start, end),
        iteration_count=best_iteration,
    )


def generate_dijkstra_steps(
    adjacency: Sequence[Sequence[WeightedEdge]],
    start: int,
    end: int,
) -> List[DijkstraStep]:
    return list(dijkstra(adjacency, start, end))
