"""Search queries and the observers that receive their results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from .filters import Filter

__all__ = ["SearchObserver", "SearchQuery"]


class SearchObserver(ABC):
    """Receives files that match a search."""

    @abstractmethod
    def on_file_matched(self, path: Path) -> None:
        """Called for each matching file; may be called from worker threads."""


@dataclass
class SearchQuery:
    """The directories to search, the filters to apply and who to tell about matches."""

    directories: list[Path] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)
    result_observers: list[SearchObserver] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.directories = [Path(d) for d in self.directories]
        self.filters = list(self.filters)
        self.result_observers = list(self.result_observers)

    def add_result_observer(self, observer: SearchObserver) -> None:
        """Add an observer; it will be called from worker threads."""
        self.result_observers.append(observer)