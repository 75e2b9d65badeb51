"""Substring extraction, joining, trimming and bounded copying of text."""

from __future__ import annotations

from typing import Callable, MutableSequence


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``source``, so a
    truncation shows as a length not smaller than ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = source[:size - 1] if size else ""
    return copied, len(source)


def strlcat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the destination length nothing is
    appended and the length reported is ``len(source) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(destination):
        return destination, len(source) + size
    room = size - len(destination) - 1
    return destination + source[:room], len(destination) + len(source)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character of ``text`` in place.

    A value returned by ``func`` replaces the character; None leaves it.
    """
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement