from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import EmptyContainerError

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    item: Optional[T]
    next: Optional[_Node[T]] = None


class LinkedQueue(Generic[T]):
    """
    First-in-first-out queue backed by a chain of linked nodes.

    Both ends are referenced directly, so enqueue, dequeue and front are
    O(1). Items come out in exactly the order they went in.

    Traversals of :class:`walkgraph.graph.Graph` use it twice: as the BFS
    frontier and as the container for the visitation order they return.
    """

    __slots__ = ("_first", "_last", "_count")

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._count = 0
        if items is not None:
            for item in items:
                self.enqueue(item)

    def enqueue(self, item: T) -> None:
        """Add ``item`` to the back of the queue."""
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front item; raises EmptyContainerError if empty."""
        node = self._front_node()
        item = node.item
        node.item = None  # release the reference held by the detached node
        self._first = node.next
        if self._first is None:
            self._last = None
        self._count -= 1
        return item  # type: ignore[return-value]

    def front(self) -> T:
        """Return the front item without removing it."""
        return self._front_node().item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._first is None

    def clear(self) -> None:
        self._first = None
        self._last = None
        self._count = 0

    def drain(self) -> List[T]:
        """Dequeue everything, returning the items in FIFO order."""
        items: List[T] = []
        while not self.is_empty():
            items.append(self.dequeue())
        return items

    def _front_node(self) -> _Node[T]:
        if self._first is None:
            raise EmptyContainerError()
        return self._first

    # ------------------------------------------------------------------ #
    # Container protocol
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._first is not None

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.item  # type: ignore[misc]
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue([{', '.join(repr(item) for item in self)}])"


__all__ = ["LinkedQueue"]
