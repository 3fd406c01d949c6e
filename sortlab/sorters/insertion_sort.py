"""
Insertion Sort
==============
Four variants of stable, adaptive insertion sort.  They produce identical
output and differ only in how an element is moved into the sorted prefix:

- swap:   bubble the element down with adjacent swaps
- shift:  hold the element aside, shift larger values right, drop it in
- binary: binary-search the insertion point, then rotate the block
- rotate: bisect_right for the insertion point, then rotate the block
"""

from __future__ import annotations

from bisect import bisect_right
from typing import MutableSequence, TypeVar

from sortlab.search import insertion_point_in_range

T = TypeVar("T")


def insertion_sort_swap(arr: MutableSequence[T]) -> None:
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j - 1] > arr[j]:
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            j -= 1


def insertion_sort_shift(arr: MutableSequence[T]) -> None:
    for i in range(1, len(arr)):
        item = arr[i]
        j = i - 1

        # leaves a hole at j + 1 after each shift
        while j >= 0 and arr[j] > item:
            arr[j + 1] = arr[j]
            j -= 1

        arr[j + 1] = item


def _rotate_into_place(arr: MutableSequence[T], target: int, source: int) -> None:
    """Move arr[source] to arr[target] (target <= source), shifting the block between right by one."""
    item = arr[source]
    for k in range(source, target, -1):
        arr[k] = arr[k - 1]
    arr[target] = item


def insertion_sort_binary(arr: MutableSequence[T]) -> None:
    """Insertion sort that finds each insertion point with a binary search of the sorted prefix."""
    for i in range(1, len(arr)):
        # already in place relative to the sorted prefix
        if not arr[i] < arr[i - 1]:
            continue

        target = insertion_point_in_range(arr, arr[i], 0, i - 1)
        _rotate_into_place(arr, target, i)


def insertion_sort_rotate(arr: MutableSequence[T]) -> None:
    """Upper bound of each element within the prefix, then rotate it there."""
    for i in range(1, len(arr)):
        _rotate_into_place(arr, bisect_right(arr, arr[i], 0, i), i)
