import argparse
import logging
import sys

from sortlab.benchmark import format_summary, run_benchmark, write_csv
from sortlab.settings import resolve_seed
from sortlab.sorters.sort_strategy import SortStrategy


def main():
    parser = argparse.ArgumentParser(description="Benchmark sortlab strategies")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 500, 1000], help="Array sizes")
    parser.add_argument("--strategies", type=str, nargs="+", default=None,
                        help="Strategy names (default: all)")
    parser.add_argument("--repeats", type=int, default=3, help="Timed runs per strategy and size")
    parser.add_argument("--seed", type=str, default=None, help="Shuffle seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress")

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        strategies = ([SortStrategy.from_name(s) for s in args.strategies]
                      if args.strategies else list(SortStrategy))
    except ValueError as e:
        parser.error(str(e))

    seed = resolve_seed(args.seed)
    print(f"Starting Benchmark: sizes={args.sizes}, {len(strategies)} strategies, seed={seed!r}")

    rows = run_benchmark(args.sizes, strategies, repeats=args.repeats, seed=seed)
    write_csv(rows, args.output)
    print(f"Results saved to {args.output}")

    print("\nSummary:")
    print(format_summary(rows))

    return 0 if all(r["sorted"] for r in rows) else 1


if __name__ == "__main__":
    sys.exit(main())
