"""First-in, first-out queues: one backed by an array, one by linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class QueueUnderflowError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""

    def __init__(self, message: str = "queue is empty") -> None:
        super().__init__(message)


class ArrayQueue(Generic[T]):
    """Queue stored in an array with a moving front index.

    Consumed slots at the front are reclaimed once they make up half the array.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._front = 0

    def _compact(self) -> None:
        if self._front and self._front * 2 >= len(self._items):
            del self._items[: self._front]
            self._front = 0

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back."""
        self._items.append(element)

    def dequeue(self) -> T:
        """Remove and return the front element."""
        if self._front == len(self._items):
            raise QueueUnderflowError()
        element = self._items[self._front]
        self._items[self._front] = None
        self._front += 1
        self._compact()
        return element

    def front(self) -> T:
        """Return the front element without removing it."""
        if self._front == len(self._items):
            raise QueueUnderflowError()
        return self._items[self._front]

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({self._items[self._front:]!r})"


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedQueue(Generic[T]):
    """Queue stored as a singly linked list with front and rear pointers."""

    def __init__(self) -> None:
        self._front: Optional[_Node[T]] = None
        self._rear: Optional[_Node[T]] = None
        self._size = 0

    def enqueue(self, element: T) -> None:
        """Add ``element`` at the back."""
        node = _Node(element)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front element."""
        if self._front is None:
            raise QueueUnderflowError()
        node = self._front
        self._front = node.next
        self._size -= 1
        if self._size == 0:
            self._rear = None
        return node.data

    def front(self) -> T:
        """Return the front element without removing it."""
        if self._front is None:
            raise QueueUnderflowError()
        return self._front.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = []
        node = self._front
        while node is not None:
            items.append(node.data)
            node = node.next
        return f"LinkedQueue({items!r})"