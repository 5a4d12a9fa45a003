import io

import pytest

from runcollapse.errors import InvalidArgumentError
from runcollapse.parse import parse_sequence, read_sequence


def test_parse_separate_tokens():
    assert parse_sequence(["1", "1", "-2"]) == [1, 1, -2]


def test_parse_mixed_separators():
    assert parse_sequence(["1,1 2", " 3,,4 ", ""]) == [1, 1, 2, 3, 4]


def test_parse_rejects_non_integer():
    with pytest.raises(InvalidArgumentError, match="'x'"):
        parse_sequence(["1", "x"])


def test_parse_rejects_float():
    with pytest.raises(InvalidArgumentError):
        parse_sequence(["1.5"])


def test_read_sequence_file(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("1 1\n2,2\n\n3\n")
    assert read_sequence(path) == [1, 1, 2, 2, 3]


def test_read_sequence_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4 5\n"))
    assert read_sequence("-") == [4, 4, 5]


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_read_sequence_refuses_interactive_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", _Terminal("1 2\n"))
    with pytest.raises(InvalidArgumentError, match="no values given"):
        read_sequence("-")


def test_read_sequence_undecodable_file(tmp_path):
    path = tmp_path / "values.bin"
    path.write_bytes(b"\xff\xfe 1\n")
    with pytest.raises(InvalidArgumentError, match="cannot decode"):
        read_sequence(path)
