"""
graph/
-----
Graph inputs for the traversal algorithms.  Public API:

    from graph import WeightedEdge, build_ring_adjacency, concentric_circle_layout
"""

from graph.edge     import WeightedEdge, edge_key, edge_weight, degree, neighbours
from graph.layout   import circle_layout, concentric_circle_layout, distance
from graph.builders import (
    build_ring_adjacency,
    build_random_chain_adjacency,
    build_nearby_weighted_adjacency,
    build_weighted_scenario,
    WeightedScenario,
    is_connected,
    is_fully_connected,
    random_array,
)

__all__ = [
    "WeightedEdge", "edge_key", "edge_weight", "degree", "neighbours",
    "circle_layout", "concentric_circle_layout", "distance",
    "build_ring_adjacency",
    "build_random_chain_adjacency",
    "build_nearby_weighted_adjacency",
    "build_weighted_scenario",
    "WeightedScenario",
    "is_connected",
    "is_fully_connected",
    "random_array",
]
