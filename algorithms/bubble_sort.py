"""
bubble_sort.py — Bubble Sort
=============================
Adjacent-swap sort with early exit.  One snapshot is recorded per
comparison, taken BEFORE the swap so the frame shows the pair as it was
compared, and one final snapshot with no comparison shows the sorted array.

For an already sorted input of length n this is n-1 comparisons + 1 final.
"""

from typing import Generator, List, Sequence

from algorithms.step import NO_COMPARISON, SortStep


PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",                          # 0
    "    for i in 0 .. n-1:",                      # 1
    "        swapped ← false",                     # 2
    "        for j in 0 .. n-i-2:",                # 3
    "            compare a[j], a[j+1]",            # 4
    "            if a[j] > a[j+1]:",               # 5
    "                swap(a[j], a[j+1])",          # 6
    "                swapped ← true",              # 7
    "        if not swapped: break",               # 8
    "    return a",                                # 9
]


def bubble_sort(values: Sequence[int]) -> Generator[SortStep, None, None]:
    array = list(values)
    n = len(array)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            yield SortStep(array=tuple(array), compared_indices=(j, j + 1))
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                swapped = True
        if not swapped:
            break
    yield SortStep(array=tuple(array), compared_indices=NO_COMPARISON)


def generate_bubble_sort_steps(values: Sequence[int]) -> List[SortStep]:
    return list(bubble_sort(values))
