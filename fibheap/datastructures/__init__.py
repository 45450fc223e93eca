from .errors import EmptyHeapError, FibonacciHeapError, InvalidPriorityError, StaleHandleError
from .fibonacci_heap import FibonacciHeap, FibonacciNode

__all__ = [
    "FibonacciHeap",
    "FibonacciNode",
    "FibonacciHeapError",
    "EmptyHeapError",
    "InvalidPriorityError",
    "StaleHandleError",
]
