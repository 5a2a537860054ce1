"""List models behind the filter list and the search results."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .filters import Filter
from .query import SearchObserver

__all__ = ["FilterListModel", "SearchResultModel"]


class FilterListModel:
    """An ordered list of filters, one row for each filter."""

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        self._filters: list[Filter] = list(filters)

    def add_filter(self, filter: Optional[Filter]) -> None:
        """Append a filter; None is ignored."""
        if filter is None:
            return
        self._filters.append(filter)

    def remove_filter_at(self, row: int) -> None:
        """Remove the filter in ``row``; rows out of range are ignored."""
        if 0 <= row < len(self._filters):
            del self._filters[row]

    def filter_at(self, row: int) -> Optional[Filter]:
        """Return the filter in ``row``, or None if there is no such row."""
        if 0 <= row < len(self._filters):
            return self._filters[row]
        return None

    def extract_filters(self) -> list[Filter]:
        """Return every filter and leave the model empty."""
        filters, self._filters = self._filters, []
        return filters

    def row_count(self) -> int:
        return len(self._filters)

    def data(self, row: int) -> Optional[str]:
        """Return the text shown for ``row``, or None if there is no such row."""
        filter = self.filter_at(row)
        return None if filter is None else filter.text()

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(list(self._filters))


class SearchResultModel(SearchObserver):
    """A table of matched files with a file-name column and a path column.

    Matches may arrive from worker threads; the model is safe to use from
    several threads at once.
    """

    HEADERS = ("Filename", "Path")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: list[Path] = []

    def on_file_matched(self, path: Path) -> None:
        with self._lock:
            self._results.append(Path(path))

    def row_count(self) -> int:
        with self._lock:
            return len(self._results)

    def column_count(self) -> int:
        return len(self.HEADERS)

    def header_data(self, section: int) -> Optional[str]:
        """Return the title of column ``section``, or None for other columns."""
        if 0 <= section < len(self.HEADERS):
            return self.HEADERS[section]
        return None

    def data(self, row: int, column: int) -> Optional[str]:
        """Return the file name (column 0) or full path (column 1) of a row."""
        with self._lock:
            if not 0 <= row < len(self._results):
                return None
            path = self._results[row]
        if column == 0:
            return path.name
        if column == 1:
            return str(path)
        return None

    def results(self) -> list[Path]:
        """Return a copy of the matched paths in the order they arrived."""
        with self._lock:
            return list(self._results)

    def clear(self) -> None:
        with self._lock:
            self._results.clear()