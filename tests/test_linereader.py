import io

import pytest

from termtetris.linereader import LineReader


def test_reads_lines_in_order():
    reader = LineReader(io.StringIO("4 3 2\n*\n**\n"))
    assert reader.read_line() == "4 3 2"
    assert reader.read_line() == "*"
    assert reader.read_line() == "**"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("first\nlast"))
    assert list(reader) == ["first", "last"]


def test_empty_lines_preserved():
    text = "a\n\nb\n"
    assert list(LineReader(io.StringIO(text))) == text.splitlines()


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


@pytest.mark.parametrize("read_size", [1, 2, 3, 7, 64])
def test_chunk_size_does_not_change_result(read_size):
    text = "line one\nsecond\n\n* * *\nend"
    assert list(LineReader(io.StringIO(text), read_size)) == text.splitlines()


def test_binary_stream():
    data = b"2 2 1\n**\n**\n"
    assert list(LineReader(io.BytesIO(data))) == data.splitlines()


def test_invalid_read_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)