"""Fixed-size worker pool returning futures."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

__all__ = ["ThreadPool"]


class ThreadPool:
    """Runs queued callables on ``size`` worker threads.

    Closing the pool lets workers finish every task already queued.
    """

    def __init__(self, size: int) -> None:
        self._tasks: deque = deque()
        self._cond = threading.Condition()
        self._stop = False
        self._workers = [threading.Thread(target=self._run, daemon=True) for _ in range(size)]
        for worker in self._workers:
            worker.start()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def enqueue(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._tasks.append((future, fn, args, kwargs))
            self._cond.notify()
        return future

    def pool_size(self) -> int:
        return len(self._workers)

    def close(self) -> None:
        """Stop accepting work, drain the queue and join the workers."""
        with self._cond:
            self._stop = True
            self._cond.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()