"""Multi-threaded search of directory trees."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Iterator, Optional

from .query import SearchQuery
from .threadpool import ThreadPool

__all__ = ["SearchEngine", "BATCH_SIZE"]

BATCH_SIZE = 64

_log = logging.getLogger(__name__)


def _warn(error: OSError) -> None:
    _log.warning("error %s while enumerating directory", error.errno)


def _regular_files(root: Path) -> Iterator[Path]:
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_warn):
        for name in filenames:
            path = Path(dirpath) / name
            if path.is_file():
                yield path


class SearchEngine:
    """Runs a search query on a pool of worker threads.

    Directories are enumerated by one task each; the files found are handed
    in batches to search tasks that apply the query's filters and tell the
    observers about every match.
    """

    def __init__(self, query: SearchQuery, num_workers: Optional[int] = None) -> None:
        self.query = query
        workers = num_workers if num_workers is not None else (os.cpu_count() or 1)
        self._pool = ThreadPool(max(1, workers))
        self._condition = threading.Condition()
        self._pending = 0
        self._files_to_search = 0
        self._files_searched = 0
        self._matches = 0

    def perform_search(self) -> None:
        """Start searching every directory of the query."""
        for directory in self.query.directories:
            self._spawn_enumerate_worker(Path(directory))

    @property
    def pending_operations(self) -> int:
        """Number of enumeration and search tasks not yet finished."""
        with self._condition:
            return self._pending

    @property
    def total_files_to_search(self) -> int:
        """Number of files enumerated so far."""
        with self._condition:
            return self._files_to_search

    @property
    def total_files_searched(self) -> int:
        """Number of files compared with the filters so far."""
        with self._condition:
            return self._files_searched

    @property
    def total_matches(self) -> int:
        """Number of files that passed every filter so far."""
        with self._condition:
            return self._matches

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no operation is pending; return False on timeout."""
        with self._condition:
            return self._condition.wait_for(lambda: self._pending == 0, timeout)

    def close(self) -> None:
        """Let queued work finish and stop the worker threads."""
        self._pool.shutdown()

    def __enter__(self) -> SearchEngine:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _begin_operation(self) -> None:
        with self._condition:
            self._pending += 1

    def _end_operation(self) -> None:
        with self._condition:
            self._pending -= 1
            if self._pending == 0:
                self._condition.notify_all()

    def _submit(self, fn, *args) -> None:
        self._begin_operation()
        try:
            self._pool.submit(fn, *args)
        except BaseException:
            self._end_operation()
            raise

    def _spawn_enumerate_worker(self, root: Path) -> None:
        self._submit(self._enumerate, root)

    def _spawn_search_worker(self, batch: list[Path]) -> None:
        self._submit(self._search, batch)

    def _enumerate(self, root: Path) -> None:
        try:
            batch: list[Path] = []
            for path in _regular_files(root):
                batch.append(path)
                with self._condition:
                    self._files_to_search += 1
                if len(batch) > BATCH_SIZE:
                    self._spawn_search_worker(batch)
                    batch = []
            if batch:
                self._spawn_search_worker(batch)
        finally:
            self._end_operation()

    def _search(self, batch: list[Path]) -> None:
        try:
            for path in batch:
                with self._condition:
                    self._files_searched += 1
                if self._matches_all_filters(path):
                    with self._condition:
                        self._matches += 1
                    self._notify_observers(path)
        finally:
            self._end_operation()

    def _matches_all_filters(self, path: Path) -> bool:
        return all(f.filter_file(path) for f in list(self.query.filters))

    def _notify_observers(self, path: Path) -> None:
        for observer in list(self.query.result_observers):
            observer.on_file_matched(path)