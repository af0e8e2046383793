"""Hash table split into independently locked buckets."""

from __future__ import annotations

import threading
from contextlib import ExitStack
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_DEFAULT_BUCKETS = 19


class _Bucket(Generic[K, V]):
    """A list of key/value pairs guarded by its own lock."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.entries: list[list[Any]] = []

    def _find(self, key: K) -> Optional[list[Any]]:
        return next((entry for entry in self.entries if entry[0] == key), None)

    def value_for(self, key: K, default: Any) -> Any:
        with self.lock:
            entry = self._find(key)
            return default if entry is None else entry[1]

    def add_or_update(self, key: K, value: V) -> None:
        with self.lock:
            entry = self._find(key)
            if entry is None:
                self.entries.append([key, value])
            else:
                entry[1] = value

    def remove(self, key: K) -> None:
        with self.lock:
            entry = self._find(key)
            if entry is not None:
                self.entries.remove(entry)


class LookupTable(Generic[K, V]):
    """Thread-safe mapping where each bucket has its own lock.

    Operations on keys that fall into different buckets never block each other.
    """

    def __init__(
        self,
        num_buckets: int = _DEFAULT_BUCKETS,
        hasher: Callable[[Any], int] = hash,
    ) -> None:
        if num_buckets < 1:
            raise ValueError("num_buckets must be at least 1")
        self._buckets: list[_Bucket[K, V]] = [_Bucket() for _ in range(num_buckets)]
        self._hasher = hasher

    def _bucket(self, key: K) -> _Bucket[K, V]:
        return self._buckets[self._hasher(key) % len(self._buckets)]

    def value_for(self, key: K, default: Any = None) -> Any:
        """Return the value stored for ``key``, or ``default`` if there is none."""
        return self._bucket(key).value_for(key, default)

    def add_or_update(self, key: K, value: V) -> None:
        """Store ``value`` for ``key``, replacing any previous value."""
        self._bucket(key).add_or_update(key, value)

    def remove(self, key: K) -> None:
        """Remove ``key`` if it is present."""
        self._bucket(key).remove(key)

    def snapshot(self) -> dict:
        """Return a consistent copy of every entry, ordered by key."""
        with ExitStack() as stack:
            for bucket in self._buckets:
                stack.enter_context(bucket.lock)
            pairs = [(key, value) for bucket in self._buckets for key, value in bucket.entries]
        return dict(sorted(pairs, key=lambda pair: pair[0]))