"""Tests for the bubble sort and selection sort step generators."""

import random

import pytest

from algorithms.bubble_sort import generate_bubble_sort_steps
from algorithms.selection_sort import generate_selection_sort_steps
from algorithms.step import NO_COMPARISON

GENERATORS = [generate_bubble_sort_steps, generate_selection_sort_steps]


class TestBubbleSort:

    def test_already_sorted_single_pass(self) -> None:
        steps = generate_bubble_sort_steps([1, 2, 3])
        assert len(steps) == 3
        assert [s.compared_indices for s in steps] == [(0, 1), (1, 2), NO_COMPARISON]
        assert steps[-1].array == (1, 2, 3)

    def test_snapshot_taken_before_swap(self) -> None:
        steps = generate_bubble_sort_steps([3, 1, 2])
        assert [s.array for s in steps] == [(3, 1, 2), (1, 3, 2), (1, 2, 3), (1, 2, 3)]
        assert [s.compared_indices for s in steps] == [(0, 1), (1, 2), (0, 1), NO_COMPARISON]

    def test_reverse_input_runs_every_pass(self) -> None:
        steps = generate_bubble_sort_steps([4, 3, 2, 1])
        # 3 + 2 + 1 comparisons, no early exit possible
        assert len(steps) == 7

    def test_only_last_step_is_final(self) -> None:
        steps = generate_bubble_sort_steps([5, 4, 9, 1])
        assert steps[-1].is_final
        assert not any(s.is_final for s in steps[:-1])


class TestSelectionSort:

    def test_min_index_moves_within_a_pass(self) -> None:
        steps = generate_selection_sort_steps([3, 2, 1])
        assert [s.compared_indices for s in steps] == [(0, 1), (1, 2), (1, 2), NO_COMPARISON]
        assert steps[-1].array == (1, 2, 3)

    def test_swap_happens_after_pass(self) -> None:
        steps = generate_selection_sort_steps([3, 1, 2])
        assert steps[0].array == (3, 1, 2)
        assert steps[1].array == (3, 1, 2)
        assert steps[2].array == (1, 3, 2)

    def test_comparison_count(self) -> None:
        steps = generate_selection_sort_steps([5, 1, 4, 2, 3])
        assert len(steps) == 4 + 3 + 2 + 1 + 1


@pytest.mark.parametrize("generate", GENERATORS)
class TestSortingProperties:

    def test_empty_input_gives_final_step_only(self, generate) -> None:
        steps = generate([])
        assert len(steps) == 1
        assert steps[0].array == ()
        assert steps[0].is_final

    def test_single_element(self, generate) -> None:
        steps = generate([7])
        assert [s.array for s in steps] == [(7,)]

    def test_sorted_and_conserved(self, generate) -> None:
        rng = random.Random(3)
        for _ in range(25):
            values = [rng.randint(0, 20) for _ in range(rng.randint(0, 12))]
            steps = generate(values)
            assert list(steps[-1].array) == sorted(values)
            for step in steps:
                assert sorted(step.array) == sorted(values)

    def test_input_not_mutated(self, generate) -> None:
        values = [4, 2, 3, 1]
        generate(values)
        assert values == [4, 2, 3, 1]

    def test_deterministic(self, generate) -> None:
        assert generate([9, 3, 7, 3, 1]) == generate([9, 3, 7, 3, 1])
