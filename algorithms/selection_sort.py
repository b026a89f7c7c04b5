"""
selection_sort.py — Selection Sort
===================================
Grows a sorted prefix by swapping the minimum of the unsorted suffix into
place.  Each comparison is recorded as (min_index, j) with min_index as it
stands at that moment, so the left index moves whenever a new minimum turns
up inside the same pass.
"""

from typing import Generator, List, Sequence

from algorithms.step import NO_COMPARISON, SortStep


PSEUDOCODE: List[str] = [
    "def SelectionSort(a):",                       # 0
    "    for i in 0 .. n-2:",                      # 1
    "        min ← i",                             # 2
    "        for j in i+1 .. n-1:",                # 3
    "            compare a[min], a[j]",            # 4
    "            if a[j] < a[min]: min ← j",       # 5
    "        if min ≠ i: swap(a[i], a[min])",      # 6
    "    return a",                                # 7
]


def selection_sort(values: Sequence[int]) -> Generator[SortStep, None, None]:
    array = list(values)
    n = len(array)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            yield SortStep(array=tuple(array), compared_indices=(min_index, j))
            if array[j] < array[min_index]:
                min_index = j
        if min_index != i:
            array[i], array[min_index] = array[min_index], array[i]
    yield SortStep(array=tuple(array), compared_indices=NO_COMPARISON)


def generate_selection_sort_steps(values: Sequence[int]) -> List[SortStep]:
    return list(selection_sort(values))
