import os

import pytest

from pushswap.linereader import MAX_FD, LineReader, get_next_line

DATA = b"first line\nsecond\n\nlast without newline"
EXPECTED = ["first line\n", "second\n", "\n", "last without newline"]


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(DATA)
    return path


def _open(path):
    return os.open(path, os.O_RDONLY)


def test_read_line_returns_lines_then_none(data_file):
    fd = _open(data_file)
    try:
        reader = LineReader(fd, 5)
        lines = [reader.read_line() for _ in EXPECTED]
        assert lines == EXPECTED
        assert reader.read_line() is None
        assert reader.read_line() is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 5, 7, 64, 10000])
def test_buffer_size_does_not_change_lines(data_file, size):
    fd = _open(data_file)
    try:
        assert list(LineReader(fd, size)) == EXPECTED
    finally:
        os.close(fd)


def test_lines_join_back_to_input(data_file):
    fd = _open(data_file)
    try:
        assert "".join(LineReader(fd, 3)).encode() == DATA
    finally:
        os.close(fd)


def test_empty_input_gives_none(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    fd = _open(path)
    try:
        assert LineReader(fd, 5).read_line() is None
    finally:
        os.close(fd)


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    os.write(write_end, b"alpha\nbeta\n")
    os.close(write_end)
    try:
        assert list(LineReader(read_end, 4)) == ["alpha\n", "beta\n"]
    finally:
        os.close(read_end)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0, 0)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1, 5)


def test_closed_fd_raises(data_file):
    fd = _open(data_file)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd, 5).read_line()


def test_get_next_line_sequence(data_file):
    fd = _open(data_file)
    try:
        lines = [get_next_line(fd) for _ in EXPECTED]
        assert lines == EXPECTED
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


def test_get_next_line_keeps_fds_apart(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"a1\na2\n")
    second.write_bytes(b"b1\nb2\n")
    fd_a, fd_b = _open(first), _open(second)
    try:
        assert get_next_line(fd_a) == "a1\n"
        assert get_next_line(fd_b) == "b1\n"
        assert get_next_line(fd_a) == "a2\n"
        assert get_next_line(fd_b) == "b2\n"
        assert get_next_line(fd_a) is None
        assert get_next_line(fd_b) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


@pytest.mark.parametrize("fd", [-1, MAX_FD])
def test_get_next_line_fd_out_of_range(fd):
    with pytest.raises(ValueError):
        get_next_line(fd)


def test_get_next_line_closed_fd(data_file):
    fd = _open(data_file)
    os.close(fd)
    with pytest.raises(OSError):
        get_next_line(fd)