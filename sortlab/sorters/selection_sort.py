"""
Selection Sort
==============
O(n^2) comparisons, at most n - 1 swaps.  Not stable: swapping the minimum
to the front can jump it over equal values.
"""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def selection_sort(arr: MutableSequence[T]) -> None:
    """Sort arr in place by repeatedly moving the minimum of the unsorted suffix to its front."""
    n = len(arr)
    for i in range(n - 1):
        # arr[:i] is sorted and holds the i smallest values
        min_index = i
        for j in range(i + 1, n):
            if arr[j] < arr[min_index]:
                min_index = j

        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]
