"""
Demo Driver
===========
Builds a consecutive array, shuffles it with a seed, sorts a copy with the
chosen strategy and reports whether the result is ascending.

Run:  python -m sortlab --algorithm merge_sort --size 20 --seed greedisgood
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from sortlab.generators.shuffle import consecutive_array, shuffle
from sortlab.search import binary_search, insertion_point
from sortlab.settings import resolve_array_size, resolve_seed, resolve_strategy_name
from sortlab.sorters.sort_strategy import SortStrategy
from sortlab.validators import is_ascending

logger = logging.getLogger(__name__)


@dataclass
class DriverResult:
    """Everything one demo run produced."""
    strategy: SortStrategy
    seed: str
    shuffled: List[int]
    sorted_values: List[int]
    ascending: bool


def format_array(seq: Sequence) -> str:
    return " ".join(str(e) for e in seq)


def run(
    strategy: Optional[SortStrategy] = None,
    size: Optional[int] = None,
    seed: Optional[str] = None,
) -> DriverResult:
    """generate -> shuffle -> copy -> sort -> validate"""
    if strategy is None:
        strategy = SortStrategy.from_name(resolve_strategy_name())
    size = resolve_array_size(size)
    seed = resolve_seed(seed)

    arr = consecutive_array(size)
    shuffle(arr, seed)

    # sort a copy so the shuffled input stays available for printing
    work = list(arr)
    strategy.sort(work)
    ascending = is_ascending(work)
    if not ascending:
        logger.warning("%s produced unsorted output for seed %r", strategy.value, seed)

    return DriverResult(
        strategy=strategy,
        seed=seed,
        shuffled=arr,
        sorted_values=work,
        ascending=ascending,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortlab",
        description="Shuffle a consecutive array, sort it and check the result",
    )
    parser.add_argument("--algorithm", "-a", type=str, default=None,
                        help="Sort strategy name (see --list)")
    parser.add_argument("--size", "-n", type=int, default=None,
                        help="Array size (env SORTLAB_ARRAY_SIZE, default 10)")
    parser.add_argument("--seed", "-s", type=str, default=None,
                        help="Shuffle seed (env SORTLAB_SEED)")
    parser.add_argument("--search", type=int, default=None, metavar="VALUE",
                        help="Binary search the sorted array for VALUE")
    parser.add_argument("--insertion-point", type=int, default=None, metavar="VALUE",
                        help="Print where VALUE would be inserted in the sorted array")
    parser.add_argument("--list", action="store_true",
                        help="List available strategies and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for strategy in SortStrategy:
            print(f"{strategy.value:<24} {'stable' if strategy.stable else 'unstable'}")
        return 0

    if args.size is not None and args.size < 0:
        parser.error("--size must be >= 0")

    try:
        strategy = SortStrategy.from_name(resolve_strategy_name(args.algorithm))
    except ValueError as e:
        parser.error(str(e))

    result = run(strategy=strategy, size=args.size, seed=args.seed)

    print(format_array(result.shuffled))
    print(format_array(result.sorted_values))
    print("true" if result.ascending else "false")

    if args.search is not None:
        print(f"binary_search({args.search}) = {binary_search(result.sorted_values, args.search)}")
    if args.insertion_point is not None:
        print(f"insertion_point({args.insertion_point}) = "
              f"{insertion_point(result.sorted_values, args.insertion_point)}")

    return 0 if result.ascending else 1
