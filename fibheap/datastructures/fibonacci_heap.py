"""Fibonacci heap priority queue.

A Fibonacci heap is a forest of heap-ordered trees whose roots sit on a
circular doubly-linked list. Work is deferred as long as possible:

- ``insert`` and ``merge`` only splice circular lists together (O(1)).
- ``delete_min`` promotes the children of the removed root and then
  *consolidates* the root list so that no two roots share a degree
  (O(log n) amortized).
- ``decrease_key`` cuts a node that violates heap order out to the root list
  and *cascades* the cut through already-marked ancestors (O(1) amortized).

Handles returned by :meth:`FibonacciHeap.insert` are the nodes themselves.
A handle stays valid until its node is removed by ``delete_min``/``delete``;
after that it is flagged as not live and is rejected with
:class:`StaleHandleError`.

The structure is not thread-safe. Callers sharing a heap across threads must
serialize every call, ``merge`` included since it empties both inputs.
"""

from __future__ import annotations
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from ..logger import init_logger
from .errors import EmptyHeapError, InvalidPriorityError, StaleHandleError

T = TypeVar("T")

logger = init_logger(__name__)


class FibonacciNode(Generic[T]):
    """A heap node, also used as the caller's handle to its element."""

    __slots__ = ("element", "_priority", "degree", "marked", "parent", "child", "left", "right", "live")

    def __init__(self, element: T, priority: float) -> None:
        self.element = element
        self._priority = priority
        self.degree = 0
        self.marked = False
        self.parent: Optional[FibonacciNode[T]] = None
        self.child: Optional[FibonacciNode[T]] = None
        # A lone node is a one-element circular list.
        self.left: FibonacciNode[T] = self
        self.right: FibonacciNode[T] = self
        self.live = True

    @property
    def priority(self) -> float:
        """Current priority; only :meth:`FibonacciHeap.decrease_key` lowers it."""
        return self._priority

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"FibonacciNode({self.element!r}, priority={self._priority!r})"


def _merge_lists(
    first: Optional[FibonacciNode[T]], second: Optional[FibonacciNode[T]]
) -> Optional[FibonacciNode[T]]:
    """Splice two disjoint circular lists into one and return the smaller head.

    Either argument may be ``None`` (an empty list). When both are given they
    are assumed to point at the minimum of their own list, so the returned
    node is the minimum of the combined list. Ties go to ``second``.
    """
    if first is None:
        return second
    if second is None:
        return first

    first_right = first.right
    first.right = second.right
    first.right.left = first
    second.right = first_right
    second.right.left = second

    return first if first._priority < second._priority else second


class FibonacciHeap(Generic[T]):
    """Min-priority queue backed by a Fibonacci heap.

    Elements are opaque payloads ordered by a separate numeric priority.
    """

    __slots__ = ("_min", "_count")

    def __init__(self, it: Optional[Iterable[Tuple[T, float]]] = None) -> None:
        self._min: Optional[FibonacciNode[T]] = None
        self._count = 0
        if it is not None:
            for element, priority in it:
                self.insert(element, priority)

    # -----------------------------
    # Public API
    # -----------------------------
    def size(self) -> int:
        """Number of elements in the heap."""
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def find_min(self) -> FibonacciNode[T]:
        """Return the handle of the minimum-priority element (O(1)).

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        minimum = self._min
        if minimum is None:
            raise EmptyHeapError("find_min on empty heap")
        return minimum

    def insert(self, element: T, priority: float) -> FibonacciNode[T]:
        """Insert *element* with *priority* and return its handle (O(1)).

        Priorities must be totally ordered; a NaN priority leaves the heap
        order undefined.
        """
        node = FibonacciNode(element, priority)
        self._min = _merge_lists(self._min, node)
        self._count += 1
        return node

    @staticmethod
    def merge(first: "FibonacciHeap[T]", second: "FibonacciHeap[T]") -> "FibonacciHeap[T]":
        """Combine two heaps into a new one in O(1).

        Both inputs are consumed: they are left as valid, empty heaps and the
        handles obtained from them now belong to the returned heap.

        Raises:
            ValueError: if *first* and *second* are the same heap.
        """
        if first is second:
            raise ValueError("cannot merge a heap with itself")

        merged: FibonacciHeap[T] = FibonacciHeap()
        merged._min = _merge_lists(first._min, second._min)
        merged._count = first._count + second._count
        logger.debug("Merged heaps of size %d and %d", first._count, second._count)

        first._min = second._min = None
        first._count = second._count = 0
        return merged

    def decrease_key(self, node: FibonacciNode[T], new_priority: float) -> None:
        """Lower the priority of *node* to *new_priority* (O(1) amortized).

        Priorities must be totally ordered, so NaN is rejected.

        Raises:
            StaleHandleError: if *node* was already removed from the heap.
            EmptyHeapError: if this heap is empty, e.g. after being consumed
                by :meth:`merge`.
            InvalidPriorityError: if *new_priority* is NaN or greater than
                the node's current priority.
        """
        if not node.live:
            raise StaleHandleError("handle refers to an element no longer in the heap")
        minimum = self._min
        if minimum is None:
            raise EmptyHeapError("decrease_key on empty heap")
        if new_priority != new_priority:
            raise InvalidPriorityError("new priority must not be NaN")
        if new_priority > node._priority:
            raise InvalidPriorityError(
                f"new priority {new_priority!r} is greater than current priority {node._priority!r}"
            )
        node._priority = new_priority

        parent = node.parent
        if parent is not None and new_priority <= parent._priority:
            self._cut(node)
        if new_priority <= minimum._priority:
            self._min = node

    def delete_min(self) -> FibonacciNode[T]:
        """Remove and return the handle of the minimum element (O(log n) amortized).

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        minimum = self._min
        if minimum is None:
            raise EmptyHeapError("delete_min from empty heap")
        self._count -= 1

        if minimum.right is minimum:
            self._min = None
        else:
            minimum.left.right = minimum.right
            minimum.right.left = minimum.left
            self._min = minimum.right

        # Children are promoted to roots.
        child = minimum.child
        if child is not None:
            node = child
            while True:
                node.parent = None
                node.marked = False
                node = node.right
                if node is child:
                    break

        self._min = _merge_lists(self._min, child)
        if self._min is not None:
            self._consolidate()

        minimum.child = None
        minimum.left = minimum.right = minimum
        minimum.degree = 0
        minimum.live = False
        return minimum

    def delete(self, node: FibonacciNode[T]) -> None:
        """Remove *node* from the heap (O(log n) amortized).

        Raises:
            StaleHandleError: if *node* was already removed from the heap.
            EmptyHeapError: if the heap is empty.
        """
        if not node.live:
            raise StaleHandleError("handle refers to an element no longer in the heap")
        if self._count == 0:
            raise EmptyHeapError("delete from empty heap")
        self.decrease_key(node, float("-inf"))
        self.delete_min()

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _cut(self, node: FibonacciNode[T]) -> None:
        """Move *node* to the root list, cascading through marked ancestors."""
        parent = node.parent
        while parent is not None:
            if node.right is node:
                parent.child = None
            else:
                node.left.right = node.right
                node.right.left = node.left
                if parent.child is node:
                    parent.child = node.right
            parent.degree -= 1

            node.left = node.right = node
            node.parent = None
            node.marked = False
            self._min = _merge_lists(self._min, node)

            # Roots are never marked; an unmarked parent absorbs the loss.
            if parent.parent is None:
                break
            if not parent.marked:
                parent.marked = True
                break
            node, parent = parent, parent.parent

    def _consolidate(self) -> None:
        """Link roots of equal degree until every root degree is distinct."""
        roots: List[FibonacciNode[T]] = []
        start = self._min
        if start is None:
            return
        node = start
        while True:
            roots.append(node)
            node = node.right
            if node is start:
                break

        table: List[Optional[FibonacciNode[T]]] = []
        for current in roots:
            while True:
                while current.degree >= len(table):
                    table.append(None)
                other = table[current.degree]
                if other is None:
                    table[current.degree] = current
                    break
                table[current.degree] = None

                if other._priority < current._priority:
                    smaller, larger = other, current
                else:
                    smaller, larger = current, other

                larger.left.right = larger.right
                larger.right.left = larger.left
                larger.left = larger.right = larger

                smaller.child = _merge_lists(smaller.child, larger)
                larger.parent = smaller
                larger.marked = False
                smaller.degree += 1
                current = smaller

        new_min: Optional[FibonacciNode[T]] = None
        survivors = 0
        for root in table:
            if root is None:
                continue
            survivors += 1
            if new_min is None or root._priority < new_min._priority:
                new_min = root
        self._min = new_min
        logger.debug("Consolidated %d roots into %d", len(roots), survivors)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._count > 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        if self._min is None:
            return "FibonacciHeap(size=0)"
        return f"FibonacciHeap(size={self._count}, min={self._min!r})"
