"""
Merge Sort
==========
Stable, in-place (from the caller's point of view) merge sort.

Recursively sorts both halves of a range, then merges them through a
scratch copy owned by a single merge step.  Recursion depth is
O(log n), so the call stack is used directly.

The implementation handles any mutable sequence whose elements support `<=`.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def merge_sort(
    arr: MutableSequence[T],
    left: int = 0,
    right: Optional[int] = None,
) -> None:
    """
    Sort arr[left..right] in ascending order, in place.

    Parameters
    ----------
    arr : mutable sequence
        Items to sort (usually a list).
    left, right : int, optional
        Inclusive bounds of the range to sort.  Defaults to the whole
        sequence.
    """
    if right is None:
        right = len(arr) - 1
    if left >= right:
        return

    mid = (left + right) // 2
    merge_sort(arr, left, mid)
    merge_sort(arr, mid + 1, right)
    merge(arr, left, mid, right)


def merge(arr: MutableSequence[T], left: int, mid: int, right: int) -> None:
    """
    Merge the sorted runs arr[left..mid] and arr[mid+1..right] (stable).

    The scratch buffer is a local copy of the range; it goes away when
    this call returns.
    """
    scratch: List[T] = list(arr[left:right + 1])
    size_left = mid - left + 1
    size = len(scratch)

    i = 0              # next unread item of the left run
    j = size_left      # next unread item of the right run
    k = left           # next write position in arr

    while i < size_left and j < size:
        if scratch[i] <= scratch[j]:   # stable: equal elements keep left-first order
            arr[k] = scratch[i]
            i += 1
        else:
            arr[k] = scratch[j]
            j += 1
        k += 1

    # Flush remaining tail
    while i < size_left:
        arr[k] = scratch[i]
        i += 1
        k += 1
    while j < size:
        arr[k] = scratch[j]
        j += 1
        k += 1
