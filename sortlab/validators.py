"""
Sort Validators
===============
Read-only checks used to verify sorting results.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence


def is_ascending(seq: Sequence) -> bool:
    """
    True if no adjacent pair is inverted (non-decreasing order).
    Empty and single-element sequences are ascending.
    """
    for i in range(1, len(seq)):
        if seq[i] < seq[i - 1]:
            return False
    return True


def first_inversion_index(seq: Sequence) -> Optional[int]:
    """
    Index i of the first pair with seq[i] > seq[i + 1], or None.
    Handy for error messages when is_ascending fails.
    """
    for i in range(len(seq) - 1):
        if seq[i + 1] < seq[i]:
            return i
    return None


def is_permutation(a: Sequence, b: Sequence) -> bool:
    """True if a and b hold the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)
