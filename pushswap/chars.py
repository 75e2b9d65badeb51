"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import TypeVar

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_WHITESPACE = frozenset(" \t\r\n\v\f")

CharT = TypeVar("CharT", int, str)


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharT, shift: int, low: str, high: str) -> CharT:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharT) -> CharT:
    """Return the upper-case form of an ASCII lower-case letter, other input unchanged."""
    return _convert(c, -32, "a", "z")


def to_lower(c: CharT) -> CharT:
    """Return the lower-case form of an ASCII upper-case letter, other input unchanged."""
    return _convert(c, 32, "A", "Z")


def _sign_and_digits(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return the sign and the digit run."""
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < len(text) and "0" <= text[position] <= "9":
        position += 1
    return sign, text[start:position]


def _wrap_int(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text`` as a 32-bit int.

    Values that overflow a 64-bit accumulator give -1 when positive and 0 when
    negative; other values outside the 32-bit range wrap around.
    """
    sign, digits = _sign_and_digits(text)
    number = 0
    for digit in digits:
        number = number * 10 + int(digit)
        if number > LONG_MAX:
            return 0 if sign == -1 else -1
    return _wrap_int(number * sign)


def atol(text: str) -> int:
    """Read a leading decimal integer from ``text``, saturating at the 64-bit limits."""
    sign, digits = _sign_and_digits(text)
    number = 0
    for digit in digits:
        value = int(digit)
        if number > (LONG_MAX - value) // 10:
            return LONG_MAX if sign == 1 else LONG_MIN
        number = number * 10 + value
    return number * sign


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)