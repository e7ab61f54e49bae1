# topmark:header:start
#
#   project      : DiagKit
#   file         : test_text_utils.py
#   file_relpath : tests/utils/test_text_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for byte-level line and UTF-16 helpers."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from diagkit.utils.text import (
    find_line_start,
    line_start_offsets,
    rune_offsets,
    split_lines,
    utf8_char_at,
    utf16_offset_from_byte,
)
from tests.conftest import parametrize


@parametrize(
    "content, expected",
    [
        (b"", [b""]),
        (b"a", [b"a"]),
        (b"a\nb", [b"a", b"b"]),
        (b"a\r\nb\rc\n", [b"a", b"b", b"c", b""]),
        (b"\n\n", [b"", b"", b""]),
    ],
)
def test_split_lines(content: bytes, expected: list[bytes]) -> None:
    """All three terminators split; a trailing terminator leaves an empty line."""
    assert split_lines(content) == expected


def test_line_start_offsets_agree_with_find_line_start() -> None:
    """Indexed and scanned line starts match."""
    content = b"one\r\ntwo\rthree\nfour"
    offsets = line_start_offsets(content)
    assert offsets == [0, 5, 9, 15]
    for n, off in enumerate(offsets, start=1):
        assert find_line_start(content, n) == off


@parametrize("line", [0, -1, 5])
def test_find_line_start_out_of_range(line: int) -> None:
    """Lines outside the content have no start."""
    assert find_line_start(b"a\nb\nc", line) is None


@parametrize(
    "content, size, units",
    [
        (b"a", 1, 1),
        ("é".encode(), 2, 1),
        ("€".encode(), 3, 1),
        ("😀".encode(), 4, 2),
        (b"\xff", 1, 1),
        (b"\xe2\x82", 1, 1),
        (b"\xc0\xaf", 1, 1),
        (b"\xed\xa0\x80", 1, 1),
    ],
)
def test_utf8_char_at(content: bytes, size: int, units: int) -> None:
    """Valid sequences decode whole; invalid or truncated ones count as one byte."""
    assert utf8_char_at(content, 0, len(content)) == (size, units)


def test_rune_offsets() -> None:
    """Character starts skip continuation bytes."""
    assert rune_offsets("a😀b".encode()) == [0, 1, 5]


@parametrize(
    "target, expected",
    [(0, 0), (1, 1), (2, 1), (3, 1), (4, 1), (5, 3), (6, 4), (99, 4)],
)
def test_utf16_offset_from_byte(target: int, expected: int) -> None:
    """Astral characters count as two units; partial characters are not counted."""
    assert utf16_offset_from_byte("a😀b".encode(), 0, target) == expected


def test_utf16_offset_from_byte_second_line() -> None:
    """Offsets are relative to the given line start."""
    content = "xx\né😀z".encode()
    start = 3
    assert utf16_offset_from_byte(content, start, start) == 0
    assert utf16_offset_from_byte(content, start, start + 2) == 1
    assert utf16_offset_from_byte(content, start, start + 6) == 3


@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=40))
def test_utf16_offset_matches_python_encoding(text: str) -> None:
    """For valid text, the unit count of the full line equals its UTF-16 length."""
    data = text.encode("utf-8")
    assert utf16_offset_from_byte(data, 0, len(data)) == len(text.encode("utf-16-le")) // 2
