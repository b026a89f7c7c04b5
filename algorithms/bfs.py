"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over an unweighted adjacency list.  Records:
  1. Initialisation     →  start marked visited, CURRENT = start
  2. Each edge examined →  a "considering" frame BEFORE the visited test,
                           still showing the node being expanded
  3. Each discovery     →  a second frame with CURRENT = the new neighbour
  4. Queue exhausted    →  final frame with no current node

Two frames per discovered edge is deliberate: the renderer animates the
"look at neighbour" and "colour neighbour" moments separately.
"""

from collections import deque
from typing import Generator, List, Sequence

from algorithms.step import NO_NODE, BFSStep, check_node


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                      # 0
    "    visited ← {start}",                       # 1
    "    queue ← [start]",                         # 2
    "    while queue is not empty:",               # 3
    "        node ← queue.dequeue()",              # 4
    "        for neighbour in adj(node):",         # 5
    "            if neighbour not visited:",       # 6
    "                visited.add(neighbour)",      # 7
    "                queue.enqueue(neighbour)",    # 8
    "    return visit order",                      # 9
]


def bfs(
    adjacency: Sequence[Sequence[int]],
    start: int = 0,
) -> Generator[BFSStep, None, None]:
    """
    Args:
        adjacency : Neighbour indices per node; visited in list order.
        start     : Node to search from.

    Yields:
        BFSStep – one per recorded event, terminal step last.
    """
    n = len(adjacency)
    if n == 0:
        yield BFSStep(visited=(), current_node=NO_NODE, visit_order=())
        return
    check_node(start, n, "start")

    visited = [False] * n
    order: List[int] = []
    queue = deque([start])

    visited[start] = True
    order.append(start)
    yield BFSStep(visited=tuple(visited), current_node=start, visit_order=tuple(order))

    while queue:
        current = queue.popleft()
        for nbr in adjacency[current]:
            yield BFSStep(visited=tuple(visited), current_node=current, visit_order=tuple(order))

            if not visited[nbr]:
                visited[nbr] = True
                queue.append(nbr)
                order.append(nbr)
                yield BFSStep(visited=tuple(visited), current_node=nbr, visit_order=tuple(order))

    yield BFSStep(visited=tuple(visited), current_node=NO_NODE, visit_order=tuple(order))


def generate_bfs_steps(adjacency: Sequence[Sequence[int]], start: int = 0) -> List[BFSStep]:
    return list(bfs(adjacency, start))
