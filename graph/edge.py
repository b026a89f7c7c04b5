"""
edge.py — Weighted Edge
========================
The one edge shape the weighted algorithms need.

Design decisions:
  - An edge is stored on its tail node's adjacency list and only carries the
    `target` index and a positive integer `weight`.  Builders always add the
    mirror edge to the other endpoint, so the adjacency list as a whole
    describes an undirected weighted graph.
  - Path edges are reported as `(low, high)` index pairs so the renderer can
    match them against the undirected edge set without caring about
    traversal direction.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union


@dataclass(frozen=True)
class WeightedEdge:
    target: int
    weight: int

    def to_dict(self) -> dict:
        return {"target": self.target, "weight": self.weight}


# an adjacency list is either plain neighbour indices or weighted edges
Adjacency = Sequence[Sequence[Union[int, WeightedEdge]]]


def edge_key(u: int, v: int) -> Tuple[int, int]:
    """Undirected edge identity: lower index first."""
    return (u, v) if u < v else (v, u)


def neighbour_of(entry: Union[int, WeightedEdge]) -> int:
    if isinstance(entry, WeightedEdge):
        return entry.target
    return entry


def neighbours(adjacency: Adjacency, node: int) -> List[int]:
    return [neighbour_of(e) for e in adjacency[node]]


def degree(adjacency: Adjacency, node: int) -> int:
    return len(adjacency[node])


def edge_weight(adjacency: Sequence[Sequence[WeightedEdge]], u: int, v: int) -> int:
    """Weight of the first u→v edge.  Raises KeyError when u and v are not adjacent."""
    for e in adjacency[u]:
        if e.target == v:
            return e.weight
    raise KeyError(f"no edge {u}-{v}")
