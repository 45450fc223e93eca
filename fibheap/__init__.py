"""Fibonacci heap priority queue with O(1) amortized decrease-key."""

from .datastructures import (
    EmptyHeapError,
    FibonacciHeap,
    FibonacciHeapError,
    FibonacciNode,
    InvalidPriorityError,
    StaleHandleError,
)

__version__ = "0.1.0"

__all__ = [
    "FibonacciHeap",
    "FibonacciNode",
    "FibonacciHeapError",
    "EmptyHeapError",
    "InvalidPriorityError",
    "StaleHandleError",
]
