"""Running work on background threads and quicksort in sequential and parallel forms."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

_MAX_PARALLEL_DEPTH = 8


def run_detached(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
    """Start ``func(*args, **kwargs)`` on a daemon thread and return its future."""
    future: Future = Future()

    def runner() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = func(*args, **kwargs)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=runner, daemon=True).start()
    return future


def _split(items: list[T]) -> tuple[T, list[T], list[T]]:
    pivot, rest = items[0], items[1:]
    lower = [item for item in rest if item < pivot]
    higher = [item for item in rest if not item < pivot]
    return pivot, lower, higher


def sequential_quick_sort(items: Iterable[T]) -> list[T]:
    """Return a new ascending list, partitioning around the first element."""
    values = list(items)
    if not values:
        return values
    pivot, lower, higher = _split(values)
    return sequential_quick_sort(lower) + [pivot] + sequential_quick_sort(higher)


def _parallel_sort(values: list[T], depth: int) -> list[T]:
    if not values:
        return values
    if depth >= _MAX_PARALLEL_DEPTH:
        return sequential_quick_sort(values)
    pivot, lower, higher = _split(values)
    new_lower = run_detached(_parallel_sort, lower, depth + 1)
    new_higher = _parallel_sort(higher, depth + 1)
    return new_lower.result() + [pivot] + new_higher


def parallel_quick_sort(items: Iterable[T]) -> list[T]:
    """Like ``sequential_quick_sort`` but sorts lower partitions on other threads."""
    return _parallel_sort(list(items), 0)