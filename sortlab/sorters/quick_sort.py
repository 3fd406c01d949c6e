"""
Quick Sort
==========
In-place, unstable quicksort with two interchangeable partition schemes.

- Hoare: pivot is the middle element, two cursors scan towards each other
  and swap out-of-place pairs.
- Lomuto: pivot is the last element, a single cursor collects every value
  smaller than the pivot at the front of the range.

Pending ranges live on an explicit stack instead of the call stack.  The
smaller side of every split is processed first, so the stack holds at most
O(log n) ranges even when Lomuto degrades to O(n^2) on sorted input.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")

Range = Tuple[int, int]


def hoare_partition(arr: MutableSequence[T], left: int, right: int) -> int:
    """
    Partition arr[left..right] around its middle value.

    Returns the split index j: every value in [left, j] is <= pivot and
    every value in [j + 1, right] is >= pivot.  left <= j < right.
    """
    pivot = arr[(left + right) // 2]
    i = left - 1
    j = right + 1

    while True:
        # The guards never fire while the pivot value sits inside the range;
        # they keep both scans inside [left, right] should that change.
        i += 1
        while i < right and arr[i] < pivot:
            i += 1

        j -= 1
        while j > left and arr[j] > pivot:
            j -= 1

        if i >= j:
            return j

        arr[i], arr[j] = arr[j], arr[i]


def lomuto_partition(arr: MutableSequence[T], left: int, right: int) -> int:
    """
    Partition arr[left..right] around its last value.

    Returns the final index of the pivot; values before it are smaller,
    values after it are greater or equal.
    """
    pivot = arr[right]
    store = left

    for i in range(left, right):
        if arr[i] < pivot:
            arr[i], arr[store] = arr[store], arr[i]
            store += 1

    # arr[store..right-1] are all >= pivot, so the pivot lands between the parts
    arr[store], arr[right] = arr[right], arr[store]
    return store


def _hoare_split(arr: MutableSequence[T], left: int, right: int) -> Tuple[Range, Range]:
    split = hoare_partition(arr, left, right)
    return (left, split), (split + 1, right)


def _lomuto_split(arr: MutableSequence[T], left: int, right: int) -> Tuple[Range, Range]:
    split = lomuto_partition(arr, left, right)
    # the pivot is already in place, leave it out of both parts
    return (left, split - 1), (split + 1, right)


def _quick_sort(
    arr: MutableSequence[T],
    left: int,
    right: Optional[int],
    split: Callable[[MutableSequence[T], int, int], Tuple[Range, Range]],
) -> None:
    if right is None:
        right = len(arr) - 1

    pending: List[Range] = [(left, right)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue

        first, second = split(arr, lo, hi)
        if first[1] - first[0] < second[1] - second[0]:
            pending.append(second)
            pending.append(first)
        else:
            pending.append(first)
            pending.append(second)


def quick_sort_hoare(
    arr: MutableSequence[T], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort arr[left..right] (inclusive, whole sequence by default) in place using Hoare partitioning."""
    _quick_sort(arr, left, right, _hoare_split)


def quick_sort_lomuto(
    arr: MutableSequence[T], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort arr[left..right] (inclusive, whole sequence by default) in place using Lomuto partitioning."""
    _quick_sort(arr, left, right, _lomuto_split)


def quick_sort(arr: MutableSequence[T]) -> None:
    """Sort the whole sequence in place.  Uses the Hoare scheme."""
    quick_sort_hoare(arr)
