"""Tests for the Dijkstra and A* step generators."""

import random

import pytest

from algorithms.astar import euclidean, generate_astar_steps, manhattan
from algorithms.dijkstra import generate_dijkstra_steps
from algorithms.step import NO_NODE
from graph import WeightedEdge, build_weighted_scenario, edge_weight


def _undirected(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append(WeightedEdge(v, w))
        adjacency[v].append(WeightedEdge(u, w))
    return adjacency


@pytest.fixture
def triangle():
    """0-1 (5), 1-2 (3), 0-2 (10): the two-hop route is cheaper."""
    return _undirected(3, [(0, 1, 5), (1, 2, 3), (0, 2, 10)])


LINE_POSITIONS = [(0.0, 0.0), (0.5, 0.0), (1.0, 0.0)]


def _cost(adjacency, path_edges):
    return sum(edge_weight(adjacency, u, v) for u, v in path_edges)


class TestDijkstra:

    def test_triangle_distances_and_path(self, triangle) -> None:
        steps = generate_dijkstra_steps(triangle, 0, 2)
        final = steps[-1]
        assert final.distances == (0, 5, 8)
        assert set(final.path_edges) == {(0, 1), (1, 2)}
        assert final.iteration_count == 3
        assert final.current_node == NO_NODE

    def test_triangle_trace(self, triangle) -> None:
        steps = generate_dijkstra_steps(triangle, 0, 2)
        assert [s.current_node for s in steps] == [NO_NODE, 0, 0, 0, 1, 1, 2, NO_NODE]
        assert steps[0].distances == (0, None, None)
        assert steps[3].distances == (0, 5, 10)
        assert steps[5].distances == (0, 5, 8)

    def test_path_details_only_in_terminal_step(self, triangle) -> None:
        steps = generate_dijkstra_steps(triangle, 0, 2)
        for step in steps[:-1]:
            assert step.path_edges == ()
            assert step.iteration_count is None

    def test_continues_after_destination(self, triangle) -> None:
        final = generate_dijkstra_steps(triangle, 0, 1)[-1]
        assert final.iteration_count == 2
        assert final.visited == (True, True, True)

    def test_ties_go_to_lowest_index(self) -> None:
        adjacency = _undirected(3, [(0, 2, 4), (0, 1, 4)])
        steps = generate_dijkstra_steps(adjacency, 0, 2)
        finalised = [s.current_node for s in steps if s.current_node != NO_NODE]
        assert finalised.index(1) < finalised.index(2)

    def test_unreachable_destination(self) -> None:
        adjacency = _undirected(3, [(0, 1, 2)])
        final = generate_dijkstra_steps(adjacency, 0, 2)[-1]
        assert final.distances == (0, 2, None)
        assert final.path_edges == ()
        assert final.iteration_count is None

    def test_start_equals_end(self, triangle) -> None:
        final = generate_dijkstra_steps(triangle, 1, 1)[-1]
        assert final.path_edges == ()
        assert final.iteration_count == 1

    def test_empty_graph(self) -> None:
        assert len(generate_dijkstra_steps([], 0, 0)) == 1

    @pytest.mark.parametrize("start,end", [(-1, 0), (0, 3), (3, 0)])
    def test_out_of_range(self, triangle, start, end) -> None:
        with pytest.raises(ValueError):
            generate_dijkstra_steps(triangle, start, end)


class TestAStar:

    def test_triangle(self, triangle) -> None:
        steps = generate_astar_steps(triangle, LINE_POSITIONS, 0, 2)
        final = steps[-1]
        assert final.g_scores == (0, 5, 8)
        assert set(final.path_edges) == {(0, 1), (1, 2)}
        assert final.iteration_count == 3
        assert final.visited == (True, True, False)

    def test_triangle_trace(self, triangle) -> None:
        steps = generate_astar_steps(triangle, LINE_POSITIONS, 0, 2)
        assert [s.current_node for s in steps] == [NO_NODE, 0, 0, 0, 1, 1, 2, NO_NODE]
        assert steps[0].g_scores == (0, None, None)

    def test_stops_at_destination(self) -> None:
        # node 2 is never expanded once node 1 (the goal) is picked
        adjacency = _undirected(3, [(0, 1, 1), (0, 2, 5)])
        final = generate_astar_steps(adjacency, LINE_POSITIONS, 0, 1)[-1]
        assert final.iteration_count == 2
        assert final.visited == (True, False, False)

    def test_ties_go_to_lowest_index(self) -> None:
        adjacency = _undirected(3, [(0, 2, 1), (0, 1, 1)])
        positions = [(0.5, 0.5)] * 3
        steps = generate_astar_steps(adjacency, positions, 0, 2)
        picked = [s.current_node for s in steps if s.current_node != NO_NODE]
        assert picked.index(1) < picked.index(2)

    def test_unreachable_destination(self) -> None:
        adjacency = _undirected(3, [(0, 1, 2)])
        final = generate_astar_steps(adjacency, LINE_POSITIONS, 0, 2)[-1]
        assert final.g_scores == (0, 2, None)
        assert final.path_edges == ()
        assert final.iteration_count is None

    def test_positions_must_match(self, triangle) -> None:
        with pytest.raises(ValueError):
            generate_astar_steps(triangle, LINE_POSITIONS[:2], 0, 2)

    def test_unknown_heuristic(self, triangle) -> None:
        with pytest.raises(ValueError):
            generate_astar_steps(triangle, LINE_POSITIONS, 0, 2, heuristic="chebyshev")

    def test_euclidean(self) -> None:
        assert euclidean(0, 1, [(0.0, 0.0), (0.3, 0.4)]) == pytest.approx(0.5)

    def test_manhattan(self) -> None:
        assert manhattan(0, 1, [(0.0, 0.0), (0.3, 0.4)]) == pytest.approx(0.7)

    def test_zero_heuristic_on_triangle(self, triangle) -> None:
        final = generate_astar_steps(triangle, LINE_POSITIONS, 0, 2, heuristic="zero")[-1]
        assert final.g_scores == generate_dijkstra_steps(triangle, 0, 2)[-1].distances
        assert set(final.path_edges) == {(0, 1), (1, 2)}

    def test_out_of_range(self, triangle) -> None:
        with pytest.raises(ValueError):
            generate_astar_steps(triangle, LINE_POSITIONS, 0, 5)


class TestShortestPathProperties:

    def test_astar_matches_dijkstra_cost(self) -> None:
        # weights ≥ 1 always dominate edge lengths ≤ 0.4, so h is admissible
        for seed in range(25):
            s = build_weighted_scenario(node_count=12, rng=random.Random(seed))
            dij = generate_dijkstra_steps(s.adjacency, s.start, s.end)[-1]
            ast = generate_astar_steps(s.adjacency, s.positions, s.start, s.end)[-1]
            assert dij.distances[s.end] == ast.g_scores[s.end]
            assert _cost(s.adjacency, dij.path_edges) == dij.distances[s.end]
            assert _cost(s.adjacency, ast.path_edges) == ast.g_scores[s.end]

    def test_path_edges_lower_index_first(self) -> None:
        for seed in range(10):
            s = build_weighted_scenario(rng=random.Random(seed))
            for final in (
                generate_dijkstra_steps(s.adjacency, s.start, s.end)[-1],
                generate_astar_steps(s.adjacency, s.positions, s.start, s.end)[-1],
            ):
                assert final.path_edges
                assert all(u < v for u, v in final.path_edges)

    def test_deterministic(self) -> None:
        s = build_weighted_scenario(rng=random.Random(7))
        assert generate_dijkstra_steps(s.adjacency, s.start, s.end) == \
            generate_dijkstra_steps(s.adjacency, s.start, s.end)
        assert generate_astar_steps(s.adjacency, s.positions, s.start, s.end) == \
            generate_astar_steps(s.adjacency, s.positions, s.start, s.end)

    def test_zero_heuristic_expands_like_dijkstra(self) -> None:
        for seed in range(15):
            s = build_weighted_scenario(rng=random.Random(seed))
            dij = generate_dijkstra_steps(s.adjacency, s.start, s.end)[-1]
            ast = generate_astar_steps(s.adjacency, s.positions, s.start, s.end, heuristic="zero")[-1]
            assert ast.g_scores[s.end] == dij.distances[s.end]
            for node, closed in enumerate(ast.visited):
                if closed:
                    assert ast.g_scores[node] == dij.distances[node]

    def test_manhattan_finds_cheapest_path(self) -> None:
        # |dx| + |dy| ≤ √2 · 0.4 stays below the minimum weight of 1
        for seed in range(15):
            s = build_weighted_scenario(rng=random.Random(seed))
            dij = generate_dijkstra_steps(s.adjacency, s.start, s.end)[-1]
            ast = generate_astar_steps(s.adjacency, s.positions, s.start, s.end, heuristic="manhattan")[-1]
            assert ast.g_scores[s.end] == dij.distances[s.end]
            assert _cost(s.adjacency, ast.path_edges) == dij.distances[s.end]
