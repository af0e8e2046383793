"""Fixed-size pool of worker threads executing submitted callables."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, Deque

_DEFAULT_THREADS = 5


class ThreadPool:
    """Pool of worker threads pulling tasks from a shared queue.

    Tasks still queued when the pool stops are cancelled.
    """

    def __init__(self, num_threads: int = _DEFAULT_THREADS) -> None:
        self._size = max(1, num_threads)
        self._idle = self._size
        self._stopped = False
        self._lock = threading.Lock()
        self._wakeup = threading.Condition(self._lock)
        self._tasks: Deque[tuple[Future, Callable[[], Any]]] = deque()
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(self._size)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._wakeup:
                self._wakeup.wait_for(lambda: self._stopped or bool(self._tasks))
                if self._stopped or not self._tasks:
                    return
                future, call = self._tasks.popleft()
                self._idle -= 1
            try:
                if future.set_running_or_notify_cancel():
                    try:
                        result = call()
                    except BaseException as exc:
                        future.set_exception(exc)
                    else:
                        future.set_result(result)
            finally:
                with self._lock:
                    self._idle += 1

    def commit(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._wakeup:
            if self._stopped:
                raise RuntimeError("thread pool is stopped")
            self._tasks.append((future, lambda: func(*args, **kwargs)))
            self._wakeup.notify()
        return future

    def idle_count(self) -> int:
        """Number of workers not currently running a task."""
        with self._lock:
            return self._idle

    def stop(self) -> None:
        """Stop the workers, cancel queued tasks and wait for running ones."""
        with self._wakeup:
            self._stopped = True
            pending = list(self._tasks)
            self._tasks.clear()
            self._wakeup.notify_all()
        for future, _ in pending:
            future.cancel()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()