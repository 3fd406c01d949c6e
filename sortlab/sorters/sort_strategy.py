"""
Sort Strategy
=============
Single entry point over every sorting routine in the package.  Callers pick
a strategy explicitly instead of toggling call sites.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, MutableSequence, Optional, TypeVar, Union

from sortlab.sorters.insertion_sort import (
    insertion_sort_binary,
    insertion_sort_rotate,
    insertion_sort_shift,
    insertion_sort_swap,
)
from sortlab.sorters.merge_sort import merge_sort
from sortlab.sorters.quick_sort import quick_sort_hoare, quick_sort_lomuto
from sortlab.sorters.selection_sort import selection_sort

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SortStrategy(Enum):
    HOARE_QUICKSORT = "hoare_quicksort"
    LOMUTO_QUICKSORT = "lomuto_quicksort"
    MERGE_SORT = "merge_sort"
    SELECTION_SORT = "selection_sort"
    INSERTION_SORT_SWAP = "insertion_sort_swap"
    INSERTION_SORT_SHIFT = "insertion_sort_shift"
    INSERTION_SORT_BINARY = "insertion_sort_binary"
    INSERTION_SORT_ROTATE = "insertion_sort_rotate"

    @classmethod
    def from_name(cls, name: str) -> "SortStrategy":
        """Look a strategy up by value (``"merge_sort"``) or member name (``"MERGE_SORT"``)."""
        key = name.strip()
        for strategy in cls:
            if key == strategy.value or key.upper() == strategy.name:
                return strategy
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"unknown sort strategy {name!r} (expected one of: {valid})")

    @property
    def sorter(self) -> Callable[[MutableSequence], None]:
        return _SORTERS[self]

    @property
    def stable(self) -> bool:
        """Whether equal elements keep their relative order."""
        return self in _STABLE

    def sort(self, arr: MutableSequence[T]) -> None:
        logger.debug("Sorting %d items with %s", len(arr), self.value)
        self.sorter(arr)


_SORTERS: Dict[SortStrategy, Callable[[MutableSequence], None]] = {
    SortStrategy.HOARE_QUICKSORT: quick_sort_hoare,
    SortStrategy.LOMUTO_QUICKSORT: quick_sort_lomuto,
    SortStrategy.MERGE_SORT: merge_sort,
    SortStrategy.SELECTION_SORT: selection_sort,
    SortStrategy.INSERTION_SORT_SWAP: insertion_sort_swap,
    SortStrategy.INSERTION_SORT_SHIFT: insertion_sort_shift,
    SortStrategy.INSERTION_SORT_BINARY: insertion_sort_binary,
    SortStrategy.INSERTION_SORT_ROTATE: insertion_sort_rotate,
}

_STABLE: FrozenSet[SortStrategy] = frozenset({
    SortStrategy.MERGE_SORT,
    SortStrategy.INSERTION_SORT_SWAP,
    SortStrategy.INSERTION_SORT_SHIFT,
    SortStrategy.INSERTION_SORT_BINARY,
    SortStrategy.INSERTION_SORT_ROTATE,
})


def sort(
    arr: MutableSequence[T],
    strategy: Optional[Union[SortStrategy, str]] = None,
) -> None:
    """Sort arr in place.  strategy may be a SortStrategy or its name; Hoare quicksort by default."""
    if strategy is None:
        strategy = SortStrategy.HOARE_QUICKSORT
    elif isinstance(strategy, str):
        strategy = SortStrategy.from_name(strategy)
    strategy.sort(arr)
