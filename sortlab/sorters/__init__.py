from sortlab.sorters.insertion_sort import (
    insertion_sort_binary,
    insertion_sort_rotate,
    insertion_sort_shift,
    insertion_sort_swap,
)
from sortlab.sorters.merge_sort import merge, merge_sort
from sortlab.sorters.quick_sort import (
    hoare_partition,
    lomuto_partition,
    quick_sort,
    quick_sort_hoare,
    quick_sort_lomuto,
)
from sortlab.sorters.selection_sort import selection_sort
from sortlab.sorters.sort_strategy import SortStrategy, sort

__all__ = [
    "SortStrategy",
    "sort",
    "quick_sort",
    "quick_sort_hoare",
    "quick_sort_lomuto",
    "hoare_partition",
    "lomuto_partition",
    "merge_sort",
    "merge",
    "selection_sort",
    "insertion_sort_swap",
    "insertion_sort_shift",
    "insertion_sort_binary",
    "insertion_sort_rotate",
]
