"""Byte-buffer helpers working on bytearray-like objects."""

from __future__ import annotations

UINT_MAX = 0xFFFFFFFF


def _require(buffer_length: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length > buffer_length:
        raise ValueError(f"{what} holds {buffer_length} bytes, {length} requested")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` and return it."""
    _require(len(buffer), length, "buffer")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(destination: bytearray, source: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``source`` to the start of ``destination``."""
    _require(len(source), length, "source")
    _require(len(destination), length, "destination")
    destination[:length] = bytes(source[:length])
    return destination


def memmove(buffer: bytearray, destination: int, source: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``source`` to ``destination``.

    The regions may overlap; the copy behaves as if through a temporary.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _require(len(buffer) - source, length, "source region")
    _require(len(buffer) - destination, length, "destination region")
    buffer[destination:destination + length] = bytes(buffer[source:source + length])
    return buffer


def memchr(data: bytes, value: int, length: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` within ``length`` bytes."""
    _require(len(data), length, "data")
    offset = bytes(data[:length]).find(value & 0xFF)
    return None if offset < 0 else offset


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Return the difference of the first differing bytes, or 0 if equal."""
    _require(len(first), length, "first")
    _require(len(second), length, "second")
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the request exceeds the 32-bit size limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count and UINT_MAX // size < count:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)