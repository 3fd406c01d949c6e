"""
sortlab
=======
In-place sorting and searching algorithms with a seeded shuffle for
building test input.
"""

from sortlab.generators.shuffle import consecutive_array, shuffle
from sortlab.search import NOT_FOUND, binary_search, insertion_point
from sortlab.sort_errors import InvalidRange
from sortlab.sorters import (
    SortStrategy,
    insertion_sort_binary,
    insertion_sort_rotate,
    insertion_sort_shift,
    insertion_sort_swap,
    merge_sort,
    quick_sort,
    quick_sort_hoare,
    quick_sort_lomuto,
    selection_sort,
    sort,
)
from sortlab.validators import is_ascending

__version__ = "0.1.0"

__all__ = [
    "SortStrategy",
    "sort",
    "quick_sort",
    "quick_sort_hoare",
    "quick_sort_lomuto",
    "merge_sort",
    "selection_sort",
    "insertion_sort_swap",
    "insertion_sort_shift",
    "insertion_sort_binary",
    "insertion_sort_rotate",
    "binary_search",
    "insertion_point",
    "NOT_FOUND",
    "is_ascending",
    "shuffle",
    "consecutive_array",
    "InvalidRange",
]
