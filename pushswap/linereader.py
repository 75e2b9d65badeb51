"""Line-by-line reading from file descriptors with a small read buffer."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 5
MAX_FD = 10240

_NEWLINE = b"\n"


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is read ``buffer_size`` bytes at a time and kept until a full line is
    available. Each line keeps its trailing newline; the last line of the
    input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()

    def __repr__(self) -> str:
        return f"LineReader(fd={self.fd}, buffer_size={self.buffer_size})"

    def _fill(self) -> None:
        while _NEWLINE not in self._stash:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted.

        A failing read discards any buffered data and raises OSError.
        """
        try:
            self._fill()
        except OSError:
            self._stash.clear()
            raise
        if not self._stash:
            return None
        end = self._stash.find(_NEWLINE)
        end = len(self._stash) if end < 0 else end + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, keeping separate buffered data per descriptor.

    Returns None at end of input, after which the descriptor's buffer is
    released. Raises ValueError for a descriptor outside 0..MAX_FD-1 and
    OSError when reading fails.
    """
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor {fd} is outside 0..{MAX_FD - 1}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd, BUFFER_SIZE)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line