"""
Test how linesort splits text into lines
"""

import io

import pytest

from linesort.errors import SourceOpenFailed
from linesort.lines import is_blank, iter_lines, read_source, trim_line


class ListStore:
    """Collect accepted lines in arrival order"""

    def __init__(self):
        self.lines = list()

    def accept(self, line):
        self.lines.append(line)


def lines_of(chars, **kwargs):
    return list(iter_lines(io.StringIO(chars), **kwargs))


def test_splits_lines_and_drops_terminators():
    assert lines_of("a\nb\n") == ["a", "b"]
    assert lines_of("a\nb") == ["a", "b"]
    assert lines_of("") == []
    assert lines_of("\n\n") == ["", ""]


def test_trim_strips_whitespace_and_control_chars():
    assert trim_line(" \t a b \x07\r") == "a b"
    assert trim_line("\x00\x1b") == ""
    assert lines_of("  x  \n\ty\t\n", trim=True) == ["x", "y"]


def test_is_blank():
    assert is_blank("")
    assert is_blank(" \t\x0b\x01")
    assert not is_blank(" . ")


def test_skip_blank_with_trim_drops_spaces_and_tabs():
    chars = "a\n \t  \nb\n"
    assert lines_of(chars, trim=True, skip_blank=True) == ["a", "b"]


def test_trim_without_skip_blank_keeps_empty_line():
    chars = "a\n \t  \nb\n"
    assert lines_of(chars, trim=True) == ["a", "", "b"]


def test_skip_blank_without_trim_keeps_padding_of_other_lines():
    chars = " a \n   \n"
    assert lines_of(chars, skip_blank=True) == [" a "]


def test_long_line_is_accepted_once():
    chars = "short\n" + ("x" * 25) + "\nafter\n"
    lines = lines_of(chars, buffer_size=10)
    assert lines == ["short", "x" * 10, "after"]


def test_line_exactly_one_buffer_long_is_accepted_once():
    chars = ("y" * 10) + "\nz\n"
    assert lines_of(chars, buffer_size=10) == ["y" * 10, "z"]


def test_long_last_line_without_terminator_is_accepted_once():
    chars = "a\n" + ("q" * 33)
    assert lines_of(chars, buffer_size=8) == ["a", "q" * 8]


def test_read_source_reads_and_closes_a_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("b\r\na\n", encoding="utf-8")

    store = ListStore()
    read_source(str(path), store=store)

    assert store.lines == ["b", "a"]


def test_read_source_decodes_utf16(tmp_path):
    path = tmp_path / "in16.txt"
    path.write_text("éa\nb\n", encoding="utf-16")

    store = ListStore()
    read_source(str(path), store=store, encoding="utf-16")

    assert store.lines == ["éa", "b"]


def test_read_source_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\n")

    store = ListStore()
    read_source(str(path), store=store)

    assert store.lines == ["ok", "�"]


def test_read_source_raises_when_open_fails(tmp_path):
    missing = str(tmp_path / "missing.txt")

    store = ListStore()
    with pytest.raises(SourceOpenFailed) as excinfo:
        read_source(missing, store=store)

    assert excinfo.value.source == missing
    assert missing in str(excinfo.value)
    assert store.lines == []


def test_read_source_reads_stdin_for_dash(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"two\none\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    store = ListStore()
    read_source("-", store=store)

    assert store.lines == ["two", "one"]
    assert not stdin.closed


def test_read_source_replaces_undecodable_stdin_bytes(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"ok\n\xff\n"), encoding="utf-8", errors="strict")
    monkeypatch.setattr("sys.stdin", stdin)

    store = ListStore()
    read_source("-", store=store)

    assert store.lines == ["ok", "�"]
