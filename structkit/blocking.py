"""Unbounded FIFO queue that is safe to share between threads."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """FIFO queue guarded by a lock, with a blocking and a non-blocking pop."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._items: Deque[T] = deque()

    def push(self, value: T) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._lock:
            self._items.append(value)
            self._not_empty.notify()

    def wait_and_pop(self) -> T:
        """Block until an item is available, then remove and return it."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def try_pop(self) -> T:
        """Remove and return the front item; raise ``queue.Empty`` if there is none."""
        with self._lock:
            if not self._items:
                raise queue.Empty("queue is empty")
            return self._items.popleft()

    def empty(self) -> bool:
        """Return whether the queue currently holds no items."""
        with self._lock:
            return not self._items

    def copy(self) -> "ThreadSafeQueue[T]":
        """Return a new queue holding the same items in the same order."""
        duplicate: ThreadSafeQueue[T] = ThreadSafeQueue()
        with self._lock:
            duplicate._items.extend(self._items)
        return duplicate

    def __repr__(self) -> str:
        with self._lock:
            return f"ThreadSafeQueue({list(self._items)!r})"