"""Validation and conversion of the command-line numbers that fill stack a."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.chars import INT_MAX, INT_MIN, atol, is_digit
from pushswap.strings import split

ARG_MAX = 1024
MAX_TOKEN_LENGTH = 11

_SIGNS = "+-"


class InputError(ValueError):
    """Raised when the program's arguments are not a valid list of integers."""


def _token_is_well_formed(token: str) -> bool:
    if not token:
        return False
    for position, char in enumerate(token):
        following = token[position + 1:position + 2]
        if char in _SIGNS:
            if position > 0 or not following or following in _SIGNS:
                return False
        elif not is_digit(char):
            return False
    return True


def is_well_formed(tokens: Sequence[str]) -> bool:
    """Return True when every token is digits with at most one leading sign.

    An empty sequence is not well formed.
    """
    return bool(tokens) and all(_token_is_well_formed(token) for token in tokens)


def to_int(token: str) -> int:
    """Convert a well-formed token to an int that fits in 32 bits.

    Raises InputError for tokens longer than 11 characters or out of range.
    """
    if len(token) > MAX_TOKEN_LENGTH:
        raise InputError(f"{token!r} is too long to be an int")
    value = atol(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"{token!r} does not fit in an int")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True when some value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the initial contents of stack a.

    A single argument is split on spaces; several arguments are taken one
    number each. Raises InputError for malformed, oversized or too many
    numbers. Duplicates are not checked here.
    """
    if len(args) == 1:
        tokens = split(args[0], " ")
        if not tokens:
            raise InputError("no numbers given")
    else:
        tokens = list(args)
    if not is_well_formed(tokens) or len(tokens) > ARG_MAX:
        raise InputError("arguments are not a list of integers")
    return [to_int(token) for token in tokens]