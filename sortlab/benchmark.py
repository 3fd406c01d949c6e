"""
Benchmark Engine
================
Times every sort strategy on the same shuffled fixtures and counts the
element reads/writes each one performs.
"""

from __future__ import annotations

import csv
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sortlab.generators.shuffle import Seed, consecutive_array, shuffle
from sortlab.instrumentation import InstrumentedList
from sortlab.sorters.sort_strategy import SortStrategy
from sortlab.validators import is_ascending, is_permutation

logger = logging.getLogger(__name__)

FIELDNAMES = ["size", "strategy", "stable", "time_ms", "reads", "writes", "sorted"]


def run_strategy(strategy: SortStrategy, fixture: Sequence[int], repeats: int = 3) -> Dict[str, Any]:
    """
    Sort copies of fixture with one strategy.
    Returns a row with the mean wall time over `repeats` runs plus the
    access counts of one instrumented run.
    """
    elapsed = 0.0
    ok = True
    for _ in range(max(1, repeats)):
        work = list(fixture)
        start = time.perf_counter()
        strategy.sort(work)
        elapsed += time.perf_counter() - start
        ok = ok and is_ascending(work) and is_permutation(work, fixture)

    counted = InstrumentedList(fixture)
    strategy.sort(counted)

    if not ok:
        logger.error("%s failed to sort %d items", strategy.value, len(fixture))

    return {
        "size": len(fixture),
        "strategy": strategy.value,
        "stable": strategy.stable,
        "time_ms": elapsed / max(1, repeats) * 1000.0,
        "reads": counted.reads,
        "writes": counted.writes,
        "sorted": ok,
    }


def run_benchmark(
    sizes: Iterable[int],
    strategies: Optional[Iterable[SortStrategy]] = None,
    repeats: int = 3,
    seed: Seed = "greedisgood",
) -> List[Dict[str, Any]]:
    """One row per (size, strategy); every strategy sees the same fixture for a size."""
    chosen = list(strategies) if strategies is not None else list(SortStrategy)
    rows: List[Dict[str, Any]] = []

    for size in sizes:
        fixture = consecutive_array(size)
        shuffle(fixture, seed)
        for strategy in chosen:
            logger.info("size=%d strategy=%s", size, strategy.value)
            rows.append(run_strategy(strategy, fixture, repeats))

    return rows


def write_csv(rows: List[Dict[str, Any]], path: str) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)


def format_summary(rows: List[Dict[str, Any]]) -> str:
    """Fixed-width table of the benchmark rows."""
    lines = [
        f"{'Size':>7} | {'Strategy':<24} | {'Time (ms)':>10} | {'Reads':>10} | {'Writes':>10} | OK",
        "-" * 80,
    ]
    for r in rows:
        lines.append(
            f"{r['size']:>7} | {r['strategy']:<24} | {r['time_ms']:>10.3f} | "
            f"{r['reads']:>10} | {r['writes']:>10} | {'yes' if r['sorted'] else 'NO'}"
        )
    return "\n".join(lines)
