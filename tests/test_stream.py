import pytest

from tcpsend.stream import ByteStream


def test_write_is_limited_by_capacity():
    stream = ByteStream(4)
    assert stream.write(b"abcdef") == 4
    assert stream.buffer_size() == 4
    assert stream.remaining_capacity() == 0
    assert stream.write(b"x") == 0


def test_read_returns_bytes_in_order():
    stream = ByteStream(100)
    stream.write(b"abc")
    stream.write(b"def")
    assert stream.read(2) == b"ab"
    assert stream.read(10) == b"cdef"
    assert stream.buffer_empty()


def test_reading_frees_capacity():
    stream = ByteStream(4)
    stream.write(b"abcd")
    stream.read(3)
    assert stream.remaining_capacity() == 3
    assert stream.write(b"efgh") == 3
    assert stream.read(4) == b"defg"


def test_eof_needs_end_and_empty_buffer():
    stream = ByteStream(10)
    stream.write(b"hi")
    assert not stream.eof()
    stream.end_input()
    assert not stream.eof()
    stream.read(2)
    assert stream.eof()


def test_counters_track_totals():
    stream = ByteStream(3)
    stream.write(b"abcde")
    stream.read(1)
    stream.write(b"xy")
    assert stream.bytes_written == 4
    assert stream.bytes_read == 1


def test_negative_read_rejected():
    with pytest.raises(ValueError):
        ByteStream(5).read(-1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ByteStream(-1)