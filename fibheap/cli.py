"""
Fibonacci heap Command-Line Interface (CLI)

Subcommands:
- sort: heap-sort numbers given as arguments or read from stdin
- benchmark: time every heap operation and write the results to CSV

Usage examples:
    python -m fibheap sort 5 3 8 1
    echo "5 3 8 1" | python -m fibheap sort
    python -m fibheap benchmark --output results.csv --base-input 100 --steps 8
"""

import argparse
import sys

from . import benchmark
from .datastructures import FibonacciHeap
from .logger import init_logger, set_level

logger = init_logger(__name__)


def _number(text):
    """argparse type accepting ints and floats, keeping ints exact."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Print numbers in ascending order by draining a Fibonacci heap."""
    numbers = args.numbers
    if not numbers:
        try:
            numbers = [_number(tok) for tok in sys.stdin.read().split()]
        except argparse.ArgumentTypeError as exc:
            args.parser.error(str(exc))

    heap = FibonacciHeap((n, n) for n in numbers)
    logger.debug("Sorting %d numbers", len(heap))
    while not heap.is_empty():
        print(heap.delete_min().element)
    return 0


def cmd_benchmark(args):
    """Run the operation benchmarks and write them to CSV."""
    try:
        rows = benchmark.run_benchmarks(
            args.output,
            base_input=args.base_input,
            steps=args.steps,
            iterations=args.iterations,
        )
    except ValueError as exc:
        args.parser.error(str(exc))
    print(f"Wrote {len(rows)} benchmark rows to {args.output}")
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m fibheap", description="Fibonacci heap CLI")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=None,
        help="Logging level (default: FIBHEAP_LOG_LEVEL or INFO)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Sort numbers with a Fibonacci heap")
    s.add_argument("numbers", nargs="*", type=_number, help="Numbers to sort (default: read stdin)")
    s.set_defaults(func=cmd_sort, parser=s)

    s = sub.add_parser("benchmark", help="Benchmark heap operations")
    s.add_argument("--output", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--steps", type=int, default=benchmark.DEFAULT_STEPS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_benchmark, parser=s)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m fibheap`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_level(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
