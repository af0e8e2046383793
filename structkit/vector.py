"""Growable sequence with explicit capacity management."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@total_ordering
class Vector(Generic[T]):
    """Sequence that tracks a reserved capacity and grows it by doubling.

    Capacity starts equal to the number of items given; it never shrinks except
    through ``shrink_to_fit``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, count: int, value: Optional[T] = None) -> "Vector[T]":
        """Return a vector of ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        return cls([value] * count)  # type: ignore[list-item]

    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Ensure room for at least ``n`` items, at least doubling when growing."""
        if n <= self._capacity:
            return
        self._capacity = max(n, self._capacity * 2)

    def resize(self, n: int, value: Optional[T] = None) -> None:
        """Truncate to ``n`` items, or pad with ``value`` up to ``n`` items."""
        if n < 0:
            raise ValueError("size must not be negative")
        size = len(self._items)
        if n < size:
            del self._items[n:]
        elif n > size:
            self.reserve(n)
            self._items.extend([value] * (n - size))  # type: ignore[list-item]

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        self._capacity = len(self._items)

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._items.clear()

    def empty(self) -> bool:
        """Return whether the vector holds no items."""
        return not self._items

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("vector index out of range")
        return index

    def at(self, index: int) -> T:
        """Return the item at ``index``; negative or too large indices raise."""
        if index < 0 or index >= len(self._items):
            raise IndexError("vector::at")
        return self._items[index]

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return Vector(self._items[index])
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._check_index(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def front(self) -> T:
        """Return the first item."""
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> T:
        """Return the last item."""
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def push_back(self, value: T) -> None:
        """Append ``value``, growing the capacity when it is used up."""
        size = len(self._items)
        if size + 1 >= self._capacity:
            self.reserve(size + 1)
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def erase(self, index: int) -> int:
        """Remove the item at ``index`` and return the index that now follows it."""
        if not 0 <= index < len(self._items):
            raise IndexError("erase position out of range")
        del self._items[index]
        return index

    def erase_range(self, first: int, last: int) -> int:
        """Remove items in ``[first, last)`` and return ``first``."""
        if not 0 <= first <= last <= len(self._items):
            raise IndexError("erase range out of range")
        del self._items[first:last]
        return first

    def insert(self, index: int, value: T) -> int:
        """Insert ``value`` before ``index`` and return ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        self.reserve(len(self._items) + 1)
        self._items.insert(index, value)
        return index

    def insert_many(self, index: int, values: Iterable[T]) -> int:
        """Insert ``values`` before ``index`` in order and return ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        new = list(values)
        if not new:
            return index
        self.reserve(len(self._items) + len(new))
        self._items[index:index] = new
        return index

    def assign(self, values: Iterable[T]) -> None:
        """Replace the contents with ``values``."""
        new = list(values)
        self.clear()
        self.reserve(len(new))
        self._items.extend(new)

    def swap(self, other: "Vector[T]") -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def __copy__(self) -> "Vector[T]":
        return Vector(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "Vector[T]") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items < other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"