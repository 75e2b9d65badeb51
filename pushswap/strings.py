"""String searching, comparison and splitting helpers."""

from __future__ import annotations

from typing import Union

Text = Union[str, bytes]


def split(text: str, separator: str) -> list[str]:
    """Return the non-empty pieces of ``text`` between occurrences of ``separator``."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``text``.

    The terminator "\\0" is found at ``len(text)``; None means not found.
    """
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``text``, with "\\0" at ``len(text)``."""
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _code_at(text: Text, position: int) -> int:
    if position >= len(text):
        return 0
    item = text[position]
    return item if isinstance(item, int) else ord(item)


def strncmp(first: Text, second: Text, length: int) -> int:
    """Compare at most ``length`` characters, stopping at a terminator.

    Returns the difference of the first differing character codes, or 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    for position in range(length):
        left = _code_at(first, position)
        right = _code_at(second, position)
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly inside ``haystack[:length]``.

    An empty needle is found at 0; None means not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index