"""
Sort Chart Generator
====================
Benchmarks every sort strategy over a range of sizes and renders charts.
Run:  python generate_sort_charts.py --quick
Output: sort_charts/ folder with 3 PNG files.
"""

import argparse
import logging
import os
from collections import defaultdict
from typing import Any, Dict, List

import numpy as np

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from sortlab.benchmark import run_benchmark
from sortlab.settings import resolve_seed
from sortlab.sorters.sort_strategy import SortStrategy

# ---------------------------------------------------------------
# Color Palette & Styling
# ---------------------------------------------------------------
COLORS = {
    SortStrategy.HOARE_QUICKSORT.value:       "#FF6B6B",
    SortStrategy.LOMUTO_QUICKSORT.value:      "#F783AC",
    SortStrategy.MERGE_SORT.value:            "#51CF66",
    SortStrategy.SELECTION_SORT.value:        "#FCC419",
    SortStrategy.INSERTION_SORT_SWAP.value:   "#339AF0",
    SortStrategy.INSERTION_SORT_SHIFT.value:  "#22B8CF",
    SortStrategy.INSERTION_SORT_BINARY.value: "#845EF7",
    SortStrategy.INSERTION_SORT_ROTATE.value: "#CC5DE8",
}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 12,
        "axes.titlesize": 16,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 9,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def group_by_strategy(rows: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Rows per strategy, ordered by size."""
    grouped = defaultdict(list)
    for r in rows:
        grouped[r["strategy"]].append(r)
    for entries in grouped.values():
        entries.sort(key=lambda r: r["size"])
    return dict(grouped)


def _style_axes(ax):
    ax.grid(zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


# ---------------------------------------------------------------
# Chart Generators
# ---------------------------------------------------------------
def chart_1_time_vs_size(rows, out_dir):
    """Line chart: mean sort time against array size, log scale."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for name, entries in group_by_strategy(rows).items():
        sizes = np.array([e["size"] for e in entries])
        times = np.array([e["time_ms"] for e in entries])
        # log axis cannot show zero
        ax.plot(sizes, np.maximum(times, 1e-3), marker="o", label=name,
                color=COLORS.get(name), linewidth=2, zorder=3)

    ax.set_yscale("log")
    ax.set_xlabel("Array size")
    ax.set_ylabel("Mean time (ms, log scale)")
    ax.set_title("Sort Time by Array Size", pad=15)
    ax.legend(loc="upper left")
    _style_axes(ax)

    path = os.path.join(out_dir, "1_time_vs_size.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 1: Time vs Size")
    return path


def chart_2_writes_vs_size(rows, out_dir):
    """Line chart: element writes against array size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for name, entries in group_by_strategy(rows).items():
        sizes = np.array([e["size"] for e in entries])
        writes = np.array([e["writes"] for e in entries])
        ax.plot(sizes, writes, marker="s", label=name,
                color=COLORS.get(name), linewidth=2, zorder=3)

    ax.set_xlabel("Array size")
    ax.set_ylabel("Element writes")
    ax.set_title("Writes Performed by Each Strategy", pad=15)
    ax.legend(loc="upper left")
    _style_axes(ax)

    path = os.path.join(out_dir, "2_writes_vs_size.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 2: Writes vs Size")
    return path


def chart_3_access_breakdown(rows, out_dir):
    """Grouped bars: reads and writes per strategy at the largest size."""
    largest = max(r["size"] for r in rows)
    entries = [r for r in rows if r["size"] == largest]
    names = [e["strategy"] for e in entries]
    x = np.arange(len(names))
    width = 0.38

    fig, ax = plt.subplots(figsize=(11, 6))
    ax.bar(x - width / 2, [e["reads"] for e in entries], width,
           label="reads", color="#339AF0", alpha=0.9, zorder=3)
    ax.bar(x + width / 2, [e["writes"] for e in entries], width,
           label="writes", color="#FF6B6B", alpha=0.9, zorder=3)

    ax.set_xticks(x)
    ax.set_xticklabels([n.replace("_", "\n") for n in names], fontsize=9)
    ax.set_ylabel("Element accesses")
    ax.set_title(f"Reads and Writes at n = {largest}", pad=15)
    ax.legend(loc="upper right")
    _style_axes(ax)

    path = os.path.join(out_dir, "3_access_breakdown.png")
    fig.savefig(path)
    plt.close(fig)
    print("  Chart 3: Access Breakdown")
    return path


def generate_charts(rows, out_dir):
    os.makedirs(out_dir, exist_ok=True)
    setup_style()
    return [
        chart_1_time_vs_size(rows, out_dir),
        chart_2_writes_vs_size(rows, out_dir),
        chart_3_access_breakdown(rows, out_dir),
    ]


def main():
    parser = argparse.ArgumentParser(description="Generate Sort Benchmark Charts")
    parser.add_argument("--sizes", type=int, nargs="+", default=None,
                        help="Array sizes (default: 50..1000)")
    parser.add_argument("--repeats", type=int, default=3,
                        help="Timed runs per strategy and size (default: 3)")
    parser.add_argument("--seed", type=str, default=None, help="Shuffle seed")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fewer sizes for faster testing")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Output folder (default: ./sort_charts)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    out_dir = args.output_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                              "sort_charts")
    if args.sizes:
        sizes = args.sizes
    elif args.quick:
        sizes = [50, 100, 200]
    else:
        sizes = [50, 100, 250, 500, 750, 1000]

    print(f"  Sizes         : {sizes}")
    print(f"  Repeats       : {args.repeats}")
    print(f"  Output folder : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    rows = run_benchmark(sizes, repeats=args.repeats, seed=resolve_seed(args.seed))

    print("\nPhase 2/2: Generating Charts...")
    generate_charts(rows, out_dir)

    print(f"\nAll charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
