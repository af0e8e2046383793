"""Singly linked list with a lock per node, traversed hand over hand."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("lock", "data", "next")

    def __init__(self, data: Any = None) -> None:
        self.lock = threading.Lock()
        self.data = data
        self.next: Optional[_Node[T]] = None


class ThreadSafeList(Generic[T]):
    """List supporting concurrent traversal, search and removal.

    Each node has its own lock; a traversal holds at most two locks at once, so
    threads working on different parts of the list do not block each other.
    """

    def __init__(self) -> None:
        self._head: _Node[T] = _Node()

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the front."""
        node: _Node[T] = _Node(value)
        with self._head.lock:
            node.next = self._head.next
            self._head.next = node

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value from front to back."""
        current = self._head
        current.lock.acquire()
        while (nxt := current.next) is not None:
            nxt.lock.acquire()
            current.lock.release()
            try:
                func(nxt.data)
            except BaseException:
                nxt.lock.release()
                raise
            current = nxt
        current.lock.release()

    def find_first_if(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first value satisfying ``predicate``, or ``None``."""
        current = self._head
        current.lock.acquire()
        try:
            while (nxt := current.next) is not None:
                nxt.lock.acquire()
                current.lock.release()
                current = nxt
                if predicate(nxt.data):
                    return nxt.data
            return None
        finally:
            current.lock.release()

    def remove_if(self, predicate: Callable[[T], bool]) -> None:
        """Remove every value satisfying ``predicate``."""
        current = self._head
        current.lock.acquire()
        try:
            while (nxt := current.next) is not None:
                nxt.lock.acquire()
                try:
                    matched = predicate(nxt.data)
                except BaseException:
                    nxt.lock.release()
                    raise
                if matched:
                    current.next = nxt.next
                    nxt.lock.release()
                else:
                    current.lock.release()
                    current = nxt
        finally:
            current.lock.release()