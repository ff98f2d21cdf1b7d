import os

import pytest

from minitalk.fdio import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_put_char_str(pipe):
    put_char_fd("a", pipe[1])
    assert _drain(pipe) == b"a"


def test_put_char_int_is_one_byte(pipe):
    put_char_fd(ord("Z"), pipe[1])
    assert _drain(pipe) == b"Z"


def test_put_char_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char_fd("ab", pipe[1])


def test_put_str(pipe):
    put_str_fd("hello", pipe[1])
    assert _drain(pipe) == b"hello"


def test_put_endl(pipe):
    put_endl_fd("line", pipe[1])
    assert _drain(pipe) == b"line\n"


@pytest.mark.parametrize("n", [0, 7, -5678, 2147483647])
def test_put_nbr(pipe, n):
    put_nbr_fd(n, pipe[1])
    assert int(_drain(pipe)) == n


def test_put_nbr_minimum(pipe):
    put_nbr_fd(-2147483648, pipe[1])
    assert _drain(pipe) == b"-2147483648"


def test_put_nbr_out_of_range(pipe):
    with pytest.raises(OverflowError):
        put_nbr_fd(2**31, pipe[1])


def test_sequence_of_writes(pipe):
    put_str_fd("n=", pipe[1])
    put_nbr_fd(42, pipe[1])
    put_char_fd("!", pipe[1])
    assert _drain(pipe) == b"n=42!"