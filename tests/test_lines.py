import io

import pytest

from skyness.lines import LineReader


SAMPLE = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 128, 4096])
def test_lines_match_splitlines(size):
    reader = LineReader(io.StringIO(SAMPLE), size)
    assert list(reader) == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, 128])
def test_bytes_stream_round_trip(size):
    data = SAMPLE.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])


def test_read_line_returns_none_at_end():
    reader = LineReader(io.StringIO("a\n"), 4)
    assert reader.read_line() == "a\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_nothing():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(LineReader(io.BytesIO(b""))) == []


def test_trailing_newline_gives_no_empty_line():
    data = "x\ny\n"
    assert list(LineReader(io.StringIO(data), 3)) == ["x\n", "y\n"]


def test_line_longer_than_buffer_is_whole():
    data = "z" * 1000 + "\nend"
    lines = list(LineReader(io.StringIO(data), 16))
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("abc"), size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream(), 8)
    with pytest.raises(OSError):
        reader.read_line()