"""Go-style channel between producer and consumer threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class ChannelClosed(Exception):
    """Raised when sending on a closed channel or receiving from a drained closed one."""


class Channel(Generic[T]):
    """Bounded channel; a capacity of zero lets at most one value wait for a receiver."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._can_send = threading.Condition(self._lock)
        self._can_receive = threading.Condition(self._lock)

    @property
    def capacity(self) -> int:
        """Number of values the channel buffers."""
        return self._capacity

    @property
    def closed(self) -> bool:
        """Whether ``close`` has been called."""
        with self._lock:
            return self._closed

    def _has_room(self) -> bool:
        if self._closed:
            return True
        if self._capacity == 0:
            return not self._items
        return len(self._items) < self._capacity

    def send(self, value: T) -> None:
        """Block until there is room, then enqueue ``value``."""
        with self._can_send:
            self._can_send.wait_for(self._has_room)
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(value)
            self._can_receive.notify()

    def receive(self) -> T:
        """Block until a value is available and return it."""
        with self._can_receive:
            self._can_receive.wait_for(lambda: bool(self._items) or self._closed)
            if not self._items:
                raise ChannelClosed("receive on closed and empty channel")
            value = self._items.popleft()
            self._can_send.notify()
            return value

    def close(self) -> None:
        """Close the channel and wake every waiting sender and receiver."""
        with self._lock:
            self._closed = True
            self._can_send.notify_all()
            self._can_receive.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return