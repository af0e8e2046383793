"""Last-in, first-out stacks: one backed by a growable array, one by linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 10


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""

    def __init__(self, message: str = "stack is empty") -> None:
        super().__init__(message)


class ArrayStack(Generic[T]):
    """Stack stored in a contiguous array whose capacity doubles when full."""

    def __init__(self) -> None:
        self._items: list[Any] = [None] * _INITIAL_CAPACITY
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return len(self._items)

    def _grow(self) -> None:
        self._items.extend([None] * len(self._items))

    def push(self, element: T) -> None:
        """Put ``element`` on top of the stack."""
        if self._size == len(self._items):
            self._grow()
        self._items[self._size] = element
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element."""
        if self._size == 0:
            raise StackUnderflowError()
        self._size -= 1
        element = self._items[self._size]
        self._items[self._size] = None
        return element

    def top(self) -> T:
        """Return the top element without removing it."""
        if self._size == 0:
            raise StackUnderflowError()
        return self._items[self._size - 1]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ArrayStack({self._items[:self._size]!r})"


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedStack(Generic[T]):
    """Stack stored as a singly linked list with the top at the head."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, element: T) -> None:
        """Put ``element`` on top of the stack."""
        self._head = _Node(element, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top element."""
        if self._head is None:
            raise StackUnderflowError()
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top element without removing it."""
        if self._head is None:
            raise StackUnderflowError()
        return self._head.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = []
        node = self._head
        while node is not None:
            items.append(node.data)
            node = node.next
        return f"LinkedStack(top->{items!r})"