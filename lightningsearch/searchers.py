"""Searchers that look for a match string or regular expression in a text stream."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TextIO

from .stringutil import lower

__all__ = ["StreamSearcher", "TextSearcher", "RegexSearcher"]

DEFAULT_MAX_BUFFER_SIZE = 1_000_000


def _is_readable(stream: TextIO) -> bool:
    return not getattr(stream, "closed", False)


class StreamSearcher(ABC):
    """Something that decides whether a text stream matches."""

    @abstractmethod
    def search_text(self, stream: TextIO) -> bool:
        """Return True if the stream matches this searcher's criteria."""


class TextSearcher(StreamSearcher):
    """Plain-text search through a stream, read in chunks.

    With ``whole_match`` the whole stream is compared with the match text;
    otherwise the match text only has to occur somewhere in it.
    """

    def __init__(
        self,
        match_text: str,
        case_insensitive: bool = False,
        whole_match: bool = False,
        max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE,
    ) -> None:
        if max_buffer_size <= 0:
            raise ValueError("max_buffer_size must be positive")
        self.case_insensitive = case_insensitive
        self.whole_match = whole_match
        self.max_buffer_size = max_buffer_size
        # Lowered once here so that chunks only need lowering per search.
        self.match_text = lower(match_text) if case_insensitive else match_text

    def _normalise(self, chunk: str) -> str:
        return lower(chunk) if self.case_insensitive else chunk

    def _chunks(self, stream: TextIO):
        while chunk := stream.read(self.max_buffer_size):
            yield chunk

    def search_text(self, stream: TextIO) -> bool:
        if not _is_readable(stream):
            return False
        if self.whole_match:
            return self._match_chunks(stream)
        return self._search_chunks(stream)

    def _search_chunks(self, stream: TextIO) -> bool:
        # Keep the end of the previous chunk so matches straddling a chunk
        # boundary are still found.
        overlap = len(self.match_text)
        tail = ""
        for chunk in self._chunks(stream):
            window = tail + self._normalise(chunk)
            if self.match_text in window:
                return True
            tail = window[-overlap:] if overlap else ""
        return False

    def _match_chunks(self, stream: TextIO) -> bool:
        # Every chunk has to equal the matching slice of the match text.
        position = 0
        for chunk in self._chunks(stream):
            end = position + len(chunk)
            if end > len(self.match_text):
                return False
            if self._normalise(chunk) != self.match_text[position:end]:
                return False
            position = end
        return True


class RegexSearcher(StreamSearcher):
    """Regular-expression search over the whole contents of a stream."""

    def __init__(
        self,
        pattern: str,
        case_insensitive: bool = False,
        whole_match: bool = False,
    ) -> None:
        self.pattern = pattern
        self.case_insensitive = case_insensitive
        self.whole_match = whole_match
        flags = re.IGNORECASE if case_insensitive else 0
        self._regex = re.compile(pattern, flags)

    def search_text(self, stream: TextIO) -> bool:
        if not _is_readable(stream):
            return False
        contents = stream.read()
        if self.whole_match:
            return self._regex.fullmatch(contents) is not None
        return self._regex.search(contents) is not None