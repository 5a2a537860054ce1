"""Case conversion helpers that keep the length of the text unchanged."""

from __future__ import annotations

from typing import Callable

__all__ = ["lower", "upper"]


def _convert(text: str, convert: Callable[[str], str]) -> str:
    result = convert(text)
    if len(result) == len(text):
        return result
    # Some characters expand when their case changes (for example "ß" in
    # upper case).  Those are left as they are, so every character maps to
    # exactly one character.
    return "".join(
        converted if len(converted := convert(char)) == 1 else char
        for char in text
    )


def lower(text: str) -> str:
    """Return ``text`` in lower case, one character for each character."""
    return _convert(text, str.lower)


def upper(text: str) -> str:
    """Return ``text`` in upper case, one character for each character."""
    return _convert(text, str.upper)