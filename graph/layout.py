"""
layout.py — Node Layouts
=========================
Pure functions producing normalised (x, y) positions, one per node,
index-aligned with the adjacency list they are drawn with.
"""

import math
from typing import List, Tuple

Position = Tuple[float, float]


def circle_layout(
    node_count: int,
    center_x: float = 0.5,
    center_y: float = 0.5,
    radius: float = 0.4,
) -> List[Position]:
    """Evenly spaced positions on one circle, node 0 at angle 0."""
    if node_count < 0:
        raise ValueError(f"node_count must be >= 0, got {node_count}")
    positions = []
    for i in range(node_count):
        angle = 2 * math.pi * i / node_count
        positions.append((
            center_x + radius * math.cos(angle),
            center_y + radius * math.sin(angle),
        ))
    return positions


def concentric_circle_layout(
    size: int,
    outer_radius: float = 0.45,
    inner_radius: float = 0.25,
) -> List[Position]:
    """
    Two concentric rings centred on (0.5, 0.5).

    The outer ring takes the larger half (ceil(size / 2)) of the nodes and
    comes first in index order.  The inner ring is rotated by half a slot so
    its nodes sit between the outer ones.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    outer_count = size - size // 2
    inner_count = size - outer_count

    positions = circle_layout(outer_count, radius=outer_radius)
    for i in range(inner_count):
        angle = 2 * math.pi * i / inner_count + math.pi / inner_count
        positions.append((
            0.5 + inner_radius * math.cos(angle),
            0.5 + inner_radius * math.sin(angle),
        ))
    return positions


def distance(a: Position, b: Position) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
