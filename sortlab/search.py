"""
Searching
=========
Binary search and insertion-point search over ascending sequences.

Both expect the searched range to be sorted already; that precondition is
the caller's job and is not checked.  Range bounds are checked, and a bad
range fails fast with InvalidRange.
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from sortlab.sort_errors import InvalidRange

T = TypeVar("T")

NOT_FOUND = -1


def binary_search(
    seq: Sequence[T],
    value: T,
    lo: int = 0,
    hi: Optional[int] = None,
) -> int:
    """
    Find value in the ascending range seq[lo..hi] (inclusive).

    Returns the index of a matching element, or NOT_FOUND.  With duplicates,
    whichever match the probes hit first is returned.

    Raises InvalidRange when hi < lo or the range falls outside seq.
    """
    if hi is None:
        if not seq:
            return NOT_FOUND
        hi = len(seq) - 1

    if hi < lo:
        raise InvalidRange(lo, hi)
    if lo < 0 or hi >= len(seq):
        raise InvalidRange(
            lo, hi, f"range [{lo}, {hi}] is outside a sequence of length {len(seq)}"
        )

    left, right = lo, hi
    while left <= right:
        mid = (left + right) // 2
        probe = seq[mid]
        if value < probe:
            right = mid - 1
        elif value > probe:
            left = mid + 1
        else:
            return mid

    return NOT_FOUND


def insertion_point_in_range(seq: Sequence[T], value: T, lo: int, hi: int) -> int:
    """
    Index in [lo, hi + 1] where value would be inserted into seq[lo..hi].

    This is the position of the first element strictly greater than value,
    so equal elements stay in front of the inserted one (stable insertion).
    """
    if hi < lo or seq[hi] <= value:
        return hi + 1

    left, right = lo, hi
    mid = (left + right) // 2

    # seq[hi] > value, so the answer is always inside [left, right]
    while left < right:
        if seq[mid] > value:
            if mid == lo or seq[mid - 1] <= value:
                break
            right = mid - 1
        else:
            left = mid + 1
        mid = (left + right) // 2

    return mid


def insertion_point(seq: Sequence[T], value: T) -> int:
    """
    Index in [0, len(seq)] where value would be inserted to keep seq sorted.

    Same answer as bisect.bisect_right:
        insertion_point([1, 3, 5, 7, 9], 4)  -> 2
        insertion_point([1, 3, 5, 7, 9], 10) -> 5
    """
    return insertion_point_in_range(seq, value, 0, len(seq) - 1)
