"""Filters that decide whether a file belongs in the search results."""

from __future__ import annotations

import enum
import io
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .searchers import RegexSearcher, StreamSearcher, TextSearcher

__all__ = ["Filter", "NameFilter", "ContentsFilter", "CombineMode", "CombinedFilter"]

PathLike = Union[str, "os.PathLike[str]"]

_CASE_SENSITIVE = "case sensitive"
_CASE_INSENSITIVE = "case insensitive"
_REGEX_MODE = "use regex"


def _make_searcher(
    match_text: str, case_insensitive: bool, whole_match: bool, is_regex: bool
) -> StreamSearcher:
    if is_regex:
        try:
            return RegexSearcher(match_text, case_insensitive, whole_match)
        except re.error as err:
            raise ValueError(f"invalid regular expression: {match_text!r}") from err
    return TextSearcher(match_text, case_insensitive, whole_match)


class Filter(ABC):
    """Decides whether a file is included in a search."""

    @abstractmethod
    def filter_file(self, path: PathLike) -> bool:
        """Return True if the file passes this filter."""

    @abstractmethod
    def text(self) -> str:
        """Describe the filter and its options."""


class _SearcherFilter(Filter):
    """Shared setup for filters driven by a stream searcher."""

    def __init__(
        self,
        match_text: str,
        case_insensitive: bool = False,
        whole_match: bool = False,
        is_regex: bool = False,
    ) -> None:
        self.match_text = match_text
        self.case_insensitive = case_insensitive
        self.whole_match = whole_match
        self.is_regex = is_regex
        self._searcher = _make_searcher(
            match_text, case_insensitive, whole_match, is_regex
        )

    def _describe(self, matches_label: str, contains_label: str) -> str:
        label = matches_label if self.whole_match else contains_label
        if self.is_regex:
            option = _REGEX_MODE
        else:
            option = _CASE_INSENSITIVE if self.case_insensitive else _CASE_SENSITIVE
        return f"{label} ({option})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.match_text!r}, "
            f"case_insensitive={self.case_insensitive}, "
            f"whole_match={self.whole_match}, is_regex={self.is_regex})"
        )


class NameFilter(_SearcherFilter):
    """Filters files by the last component of their path."""

    def filter_file(self, path: PathLike) -> bool:
        return self._searcher.search_text(io.StringIO(Path(path).name))

    def text(self) -> str:
        return self._describe("Name matches", "Name contains")


class ContentsFilter(_SearcherFilter):
    """Filters files by their text contents."""

    def filter_file(self, path: PathLike) -> bool:
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as stream:
                return self._searcher.search_text(stream)
        except OSError:
            # A file that cannot be opened never matches.
            return False

    def text(self) -> str:
        return self._describe("File content matches", "File contains")


class CombineMode(enum.Enum):
    """How a combined filter joins the results of its filters."""

    AND = "and"
    OR = "or"


class CombinedFilter(Filter):
    """Joins several filters with AND or OR; with no filters every file passes."""

    def __init__(self, mode: CombineMode) -> None:
        self.mode = mode
        self.filters: list[Filter] = []

    def add_filter(self, filter: Filter) -> None:
        self.filters.append(filter)

    def filter_file(self, path: PathLike) -> bool:
        if not self.filters:
            return True
        results = (f.filter_file(path) for f in self.filters)
        if self.mode is CombineMode.AND:
            return all(results)
        return any(results)

    def text(self) -> str:
        return "Multiple filters"