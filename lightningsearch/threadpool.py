"""A fixed-size pool of worker threads that run queued tasks."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

__all__ = ["ThreadPool"]


class ThreadPool:
    """Runs submitted callables on a fixed set of worker threads.

    Shutting down lets the workers finish every task already queued;
    after that no new task is accepted.
    """

    def __init__(self, num_workers: int) -> None:
        if num_workers < 0:
            raise ValueError("num_workers must not be negative")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._terminating = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(num_workers)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def num_workers(self) -> int:
        return len(self._workers)

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        Raises RuntimeError once the pool is shutting down.
        """
        future: Future = Future()
        with self._condition:
            if self._terminating:
                raise RuntimeError(
                    "Cannot queue new tasks; the thread pool is terminating"
                )
            self._tasks.append((future, fn, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let queued ones finish and join the workers."""
        with self._condition:
            self._terminating = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._terminating or self._tasks)
                if not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # handed to whoever waits on the future
                future.set_exception(exc)
            else:
                future.set_result(result)