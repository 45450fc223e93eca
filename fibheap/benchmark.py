"""Timing and space benchmarks for :class:`FibonacciHeap` operations.

Each operation is run over randomly generated priorities whose count doubles
at every step; mean and standard deviation of the wall time and the average
memory footprint are written to a CSV file.

Usage:
    python -m fibheap benchmark --output fib_heap_performance.csv
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import FibonacciHeap, FibonacciNode
from .logger import init_logger

logger = init_logger(__name__)

# Defaults, overridable from the CLI.
DEFAULT_OUTPUT_CSV = "fib_heap_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_STEPS = 12
DEFAULT_ITERATIONS = 5
DEFAULT_SPACE_ITERATIONS = 3

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

Row = Tuple[int, str, float, float, float]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_priorities(size: int) -> List[int]:
    """Generate a list of random integer priorities of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation: Callable[[List[int]], FibonacciHeap], input_size: int,
                           iterations: int = DEFAULT_ITERATIONS) -> Tuple[float, float]:
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_priorities(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def heap_nodes(heap: FibonacciHeap) -> List[FibonacciNode]:
    """Collect every node reachable from the root list (depth first)."""
    nodes: List[FibonacciNode] = []
    if heap._min is None:
        return nodes
    stack = [heap._min]
    while stack:
        start = stack.pop()
        node = start
        while True:
            nodes.append(node)
            if node.child is not None:
                stack.append(node.child)
            node = node.right
            if node is start:
                break
    return nodes


def measure_space_efficiency(operation: Callable[[List[int]], FibonacciHeap], input_size: int,
                             iterations: int = DEFAULT_SPACE_ITERATIONS) -> float:
    """Return average memory used by the heap left behind by *operation* (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_priorities(input_size)
        heap = operation(data)
        total_size = sys.getsizeof(heap)
        for node in heap_nodes(heap):
            total_size += sys.getsizeof(node) + sys.getsizeof(node.priority)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data: List[int]) -> FibonacciHeap:
    heap: FibonacciHeap[int] = FibonacciHeap()
    for i, priority in enumerate(data):
        heap.insert(i, priority)
    return heap


def bench_find_min(data: List[int]) -> FibonacciHeap:
    heap = bench_insert(data)
    for _ in range(min(3, len(data))):
        heap.find_min()
    return heap


def bench_delete_min(data: List[int]) -> FibonacciHeap:
    heap = bench_insert(data)
    while not heap.is_empty():
        heap.delete_min()
    return heap


def bench_decrease_key(data: List[int]) -> FibonacciHeap:
    heap: FibonacciHeap[int] = FibonacciHeap()
    handles = [heap.insert(i, priority) for i, priority in enumerate(data)]
    # One extraction builds trees so that later decreases actually cut.
    if handles:
        heap.delete_min()
    for handle in handles:
        if handle.live:
            heap.decrease_key(handle, handle.priority - 1000001)
    while not heap.is_empty():
        heap.delete_min()
    return heap


def bench_merge(data: List[int]) -> FibonacciHeap:
    half = len(data) // 2
    first = bench_insert(data[:half])
    second = bench_insert(data[half:])
    return FibonacciHeap.merge(first, second)


OPERATIONS: Dict[str, Callable[[List[int]], FibonacciHeap]] = {
    "insert": bench_insert,
    "find_min": bench_find_min,
    "delete_min": bench_delete_min,
    "decrease_key": bench_decrease_key,
    "merge": bench_merge,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str = DEFAULT_OUTPUT_CSV, base_input: int = DEFAULT_BASE_INPUT,
                   steps: int = DEFAULT_STEPS, iterations: int = DEFAULT_ITERATIONS) -> List[Row]:
    """Run exponential performance tests for FibonacciHeap operations.

    Returns the rows that were written to *output_file*.
    """
    if base_input < 1 or steps < 1 or iterations < 1:
        raise ValueError("base_input, steps and iterations must all be >= 1")

    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows: List[Row] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size, min(iterations, DEFAULT_SPACE_ITERATIONS))
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                rows.append((size, op_name, avg_time, std_time, avg_space))
                logger.info(
                    "%-12s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows
