"""Formatted output with a small printf and helpers that write text to a stream."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from pushswap.chars import itoa

_UINT_MODULUS = 2**32
_ULONG_MODULUS = 2**64
_INT_MIN = -(2**31)


def _stream_or_stdout(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an int, got {type(arg).__name__}")
    return arg


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_as_int(arg, "c") % 256)


def _string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a str, got {type(arg).__name__}")
    return arg


def _signed(arg: Any) -> str:
    value = _as_int(arg, "d")
    return str((value - _INT_MIN) % _UINT_MODULUS + _INT_MIN)


def _unsigned(arg: Any) -> str:
    return str(_as_int(arg, "u") % _UINT_MODULUS)


def _hex(spec: str) -> Callable[[Any], str]:
    def convert(arg: Any) -> str:
        return hex_digits(_as_int(arg, spec) % _UINT_MODULUS, spec)

    return convert


def _pointer(arg: Any) -> str:
    if arg is None:
        return address(0)
    return address(_as_int(arg, "p") % _ULONG_MODULUS)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex("x"),
    "X": _hex("X"),
}


def hex_digits(number: int, specifier: str = "x") -> str:
    """Return ``number`` in hexadecimal; lower case for 'x', upper case otherwise."""
    if number < 0:
        raise ValueError("hexadecimal output needs a non-negative number")
    text = f"{number:x}"
    return text if specifier == "x" else text.upper()


def address(pointer: int | None) -> str:
    """Return a pointer value as printed by %p: "0x0" for null, else 0x and hex."""
    if not pointer:
        return "0x0"
    return "0x" + hex_digits(pointer, "x")


def render(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    Raises ValueError for an unknown conversion or a trailing lone '%', and
    TypeError when there are too few arguments. Extra arguments are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    characters = iter(fmt)
    for char in characters:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(characters, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            raise ValueError(f"unknown conversion '%{spec}'")
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(converter(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream_or_stdout(stream).write(c)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _stream_or_stdout(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _stream_or_stdout(stream).write(f"{text}\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit integer in decimal to ``stream``."""
    _stream_or_stdout(stream).write(itoa(number))