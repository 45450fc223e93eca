"""Exceptions raised by :class:`FibonacciHeap` precondition checks.

Every check runs before the heap is touched, so a raised error always
leaves the heap exactly as it was.
"""


class FibonacciHeapError(Exception):
    """Base class for heap errors."""


class EmptyHeapError(FibonacciHeapError, IndexError):
    """The operation needs a minimum element but the heap is empty."""


class InvalidPriorityError(FibonacciHeapError, ValueError):
    """``decrease_key`` was asked to raise a priority."""


class StaleHandleError(FibonacciHeapError, ValueError):
    """The handle's element has already been removed from the heap."""
