"""
Тесты для построчных источников.
"""

import io

import pytest

from word_scanner.components.line_source import FileLineSource, IterableLineSource
from word_scanner.errors import SourceNotFoundError, SourceReadError


def test_file_lines_strip_terminators(tmp_path):
    path = tmp_path / "righe.txt"
    path.write_bytes("prima\r\nseconda\nterza\rquarta".encode("utf-8"))

    source = FileLineSource(path)

    assert list(source.lines()) == ["prima", "seconda", "terza", "quarta"]
    assert source.name == str(path)


def test_file_encoding(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("perché città".encode("latin-1"))

    assert list(FileLineSource(path, encoding="latin-1").lines()) == ["perché città"]


def test_missing_file(tmp_path):
    source = FileLineSource(tmp_path / "assente.txt")

    with pytest.raises(SourceNotFoundError) as exc_info:
        list(source.lines())

    assert exc_info.value.source.endswith("assente.txt")


def test_directory_is_not_a_source(tmp_path):
    with pytest.raises(SourceNotFoundError):
        list(FileLineSource(tmp_path).lines())


def test_iterable_source_uses_stream_name():
    stream = io.StringIO("uno\ndue\n")
    stream.name = "memoria"

    source = IterableLineSource(stream)

    assert source.name == "memoria"
    assert list(source.lines()) == ["uno", "due"]


def test_iterable_source_read_error():
    def broken():
        yield "uno"
        raise OSError("guasto")

    lines = IterableLineSource(broken()).lines()
    assert next(lines) == "uno"
    with pytest.raises(SourceReadError) as exc_info:
        next(lines)

    assert exc_info.value.line_number == 1
    assert isinstance(exc_info.value.__cause__, OSError)
