"""
builders.py — Adjacency Builders
=================================
Factory functions for the handful of graph shapes the algorithms need.

  • build_ring_adjacency            – fixed cycle 0-1-…-(n-1)-0 (BFS demo)
  • build_random_chain_adjacency    – random spanning chain, maybe closed
                                      into a cycle (degree ≤ 2, connected)
  • build_nearby_weighted_adjacency – proximity graph over positions with
                                      random integer weights (Dijkstra / A*)
  • build_weighted_scenario         – layout + proximity graph + a connected
                                      start / end pair, regenerated until valid

Every randomised builder takes an explicit `random.Random`.  Pass a seeded
one for reproducible graphs; leave it out and a fresh unseeded generator is
used so every reset draws a new graph.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from graph.edge import Adjacency, WeightedEdge, neighbours
from graph.layout import Position, concentric_circle_layout, distance

logger = logging.getLogger(__name__)

MIN_WEIGHT = 1
MAX_WEIGHT = 15

# two coordinate deltas closer to zero than this are treated as axis-aligned
DIAGONAL_EPSILON = 0.001
DIAGONAL_RATIO = (0.8, 1.2)


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")


# ---------------------------------------------------------------------------
# Unweighted builders
# ---------------------------------------------------------------------------
def build_ring_adjacency(size: int) -> List[List[int]]:
    """Connect i to (i + 1) mod n in both directions."""
    _check_size(size)
    adjacency: List[List[int]] = [[] for _ in range(size)]
    for i in range(size):
        nxt = (i + 1) % size
        adjacency[i].append(nxt)
        adjacency[nxt].append(i)
    return adjacency


def build_random_chain_adjacency(
    size: int,
    rng: Optional[random.Random] = None,
) -> List[List[int]]:
    """
    Random connected graph with every degree ≤ 2.

    Consecutive entries of a random permutation are linked into a chain.
    One coin flip then decides whether the two chain ends are also linked,
    turning the chain into a cycle.  The ends are only linked when both
    still have degree < 2 and are not already neighbours (sizes 1 and 2).
    """
    _check_size(size)
    rng = _rng(rng)
    adjacency: List[List[int]] = [[] for _ in range(size)]
    if size == 0:
        return adjacency

    order = list(range(size))
    rng.shuffle(order)
    for a, b in zip(order, order[1:]):
        adjacency[a].append(b)
        adjacency[b].append(a)

    first, last = order[0], order[-1]
    closed = (
        rng.random() < 0.5
        and first != last
        and last not in adjacency[first]
        and len(adjacency[first]) < 2
        and len(adjacency[last]) < 2
    )
    if closed:
        adjacency[first].append(last)
        adjacency[last].append(first)
    logger.debug("random chain over %d nodes, closed=%s", size, closed)
    return adjacency


# ---------------------------------------------------------------------------
# Weighted proximity graph
# ---------------------------------------------------------------------------
def _is_diagonal(dx: float, dy: float) -> bool:
    if abs(dx) <= DIAGONAL_EPSILON or abs(dy) <= DIAGONAL_EPSILON:
        return False
    ratio = abs(dx / dy)
    return DIAGONAL_RATIO[0] <= ratio <= DIAGONAL_RATIO[1]


def _link(adjacency: List[List[WeightedEdge]], i: int, j: int, weight: int) -> None:
    adjacency[i].append(WeightedEdge(target=j, weight=weight))
    adjacency[j].append(WeightedEdge(target=i, weight=weight))


def build_nearby_weighted_adjacency(
    positions: Sequence[Position],
    max_distance: float = 0.3,
    rng: Optional[random.Random] = None,
) -> List[List[WeightedEdge]]:
    """
    Link every pair of nodes closer than `max_distance`.

    Axis-ish pairs are linked straight away.  Pairs lying on a rough 45°
    diagonal (|dx/dy| in [0.8, 1.2]) are not: each node only remembers its
    nearest diagonal partner, and afterwards an edge is added for each
    remembered (i, j) with i < j.  A partner that picked somebody else is
    therefore dropped, which keeps grid-like layouts free of crossing X's.
    """
    rng = _rng(rng)
    n = len(positions)
    adjacency: List[List[WeightedEdge]] = [[] for _ in range(n)]
    best_diagonal: Dict[int, Tuple[int, float]] = {}

    for i in range(n):
        for j in range(i + 1, n):
            d = distance(positions[i], positions[j])
            if d > max_distance:
                continue
            dx = positions[i][0] - positions[j][0]
            dy = positions[i][1] - positions[j][1]
            if _is_diagonal(dx, dy):
                if i not in best_diagonal or d < best_diagonal[i][1]:
                    best_diagonal[i] = (j, d)
                if j not in best_diagonal or d < best_diagonal[j][1]:
                    best_diagonal[j] = (i, d)
            else:
                _link(adjacency, i, j, rng.randint(MIN_WEIGHT, MAX_WEIGHT))

    for i, (j, _) in best_diagonal.items():
        if i < j:
            _link(adjacency, i, j, rng.randint(MIN_WEIGHT, MAX_WEIGHT))
    return adjacency


# ---------------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------------
def reachable(adjacency: Adjacency, start: int) -> List[bool]:
    """Flags of every node reachable from `start` (works for both adjacency flavours)."""
    seen = [False] * len(adjacency)
    seen[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nbr in neighbours(adjacency, node):
            if not seen[nbr]:
                seen[nbr] = True
                queue.append(nbr)
    return seen


def is_connected(adjacency: Adjacency, start: int, end: int) -> bool:
    return reachable(adjacency, start)[end]


def is_fully_connected(adjacency: Adjacency) -> bool:
    if not adjacency:
        return True
    return all(reachable(adjacency, 0))


# ---------------------------------------------------------------------------
# Weighted scenario — what a Dijkstra / A* reset produces
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class WeightedScenario:
    positions: Tuple[Position, ...]
    adjacency: Tuple[Tuple[WeightedEdge, ...], ...]
    start: int
    end: int

    def to_dict(self) -> dict:
        return {
            "positions": [list(p) for p in self.positions],
            "adjacency": [[e.to_dict() for e in edges] for edges in self.adjacency],
            "start": self.start,
            "end": self.end,
        }


def build_weighted_scenario(
    node_count: int = 10,
    connection_distance: float = 0.4,
    outer_radius: float = 0.5,
    inner_radius: float = 0.3,
    rng: Optional[random.Random] = None,
    max_attempts: int = 1000,
) -> WeightedScenario:
    """
    Draw a concentric layout, its proximity graph and two distinct random
    endpoints, retrying until the end node is reachable from the start.
    """
    if node_count < 2:
        raise ValueError(f"need at least 2 nodes for a start/end pair, got {node_count}")
    rng = _rng(rng)

    positions = concentric_circle_layout(node_count, outer_radius, inner_radius)
    for attempt in range(1, max_attempts + 1):
        adjacency = build_nearby_weighted_adjacency(positions, connection_distance, rng)
        start = rng.randrange(node_count)
        end = rng.randrange(node_count)
        while end == start:
            end = rng.randrange(node_count)
        if is_connected(adjacency, start, end):
            logger.debug(
                "weighted scenario: %d nodes, start=%d end=%d after %d attempt(s)",
                node_count, start, end, attempt,
            )
            return WeightedScenario(
                positions=tuple(positions),
                adjacency=tuple(tuple(edges) for edges in adjacency),
                start=start,
                end=end,
            )
    raise RuntimeError(
        f"no connected start/end pair after {max_attempts} attempts "
        f"(node_count={node_count}, connection_distance={connection_distance})"
    )


def random_array(
    size: int,
    max_number: int = 100,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """`size` random integers in [0, max_number]."""
    _check_size(size)
    rng = _rng(rng)
    return [rng.randint(0, max_number) for _ in range(size)]
