# topmark:header:start
#
#   project      : DiagKit
#   file         : text.py
#   file_relpath : src/diagkit/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-level text helpers shared by the renderer and the source registry.

All helpers work on raw UTF-8 ``bytes`` and recognise the same three line
terminators: ``\\r\\n``, bare ``\\r`` and ``\\n``. Invalid UTF-8 never raises:
each undecodable byte counts as one character.
"""

from __future__ import annotations

import re
from typing import Final

LINE_BREAK_RE: Final[re.Pattern[bytes]] = re.compile(rb"\r\n|\r|\n")


def split_lines(content: bytes) -> list[bytes]:
    """Split ``content`` on any line terminator.

    A final line without terminator is kept; content ending with a terminator
    yields a trailing empty line.
    """
    return LINE_BREAK_RE.split(content)


def line_start_offsets(content: bytes) -> list[int]:
    """Return the byte offset at which each line starts (index 0 is line 1)."""
    offsets: list[int] = [0]
    offsets.extend(m.end() for m in LINE_BREAK_RE.finditer(content))
    return offsets


def find_line_start(content: bytes, line: int) -> int | None:
    """Return the byte offset of 1-based ``line`` by scanning, or None if out of range."""
    if line < 1:
        return None
    if line == 1:
        return 0
    for n, m in enumerate(LINE_BREAK_RE.finditer(content), start=2):
        if n == line:
            return m.end()
    return None


def _is_continuation(b: int) -> bool:
    return 0x80 <= b <= 0xBF


def utf8_char_at(content: bytes, pos: int, end: int) -> tuple[int, int]:
    """Decode the character starting at ``pos`` (not reading at or past ``end``).

    Returns:
        tuple[int, int]: ``(size, utf16_units)``. ``size`` is the encoded length
        in bytes; ``utf16_units`` is 2 for characters outside the Basic
        Multilingual Plane and 1 otherwise. Invalid or truncated sequences
        decode as a single byte with one unit.
    """
    b0: int = content[pos]
    if b0 < 0x80:
        return 1, 1
    if 0xC2 <= b0 <= 0xDF:
        size = 2
    elif 0xE0 <= b0 <= 0xEF:
        size = 3
    elif 0xF0 <= b0 <= 0xF4:
        size = 4
    else:
        return 1, 1
    if pos + size > end:
        return 1, 1
    b1: int = content[pos + 1]
    # Reject overlong forms, surrogates and code points beyond U+10FFFF.
    if (
        (b0 == 0xE0 and b1 < 0xA0)
        or (b0 == 0xED and b1 > 0x9F)
        or (b0 == 0xF0 and b1 < 0x90)
        or (b0 == 0xF4 and b1 > 0x8F)
    ):
        return 1, 1
    if not all(_is_continuation(content[pos + k]) for k in range(1, size)):
        return 1, 1
    return size, 2 if size == 4 else 1


def rune_offsets(content: bytes) -> list[int]:
    """Return the byte offset at which each character of ``content`` starts."""
    offsets: list[int] = []
    pos, end = 0, len(content)
    while pos < end:
        offsets.append(pos)
        size, _ = utf8_char_at(content, pos, end)
        pos += size
    return offsets


def utf16_offset_from_byte(content: bytes, line_start: int, target_byte: int) -> int:
    """Count UTF-16 code units between ``line_start`` and ``target_byte``.

    A target that falls inside a multi-byte character resolves to the start of
    that character (the partial character is not counted).

    Args:
        content (bytes): Full source content.
        line_start (int): Byte offset where the line starts.
        target_byte (int): Byte offset to convert.

    Returns:
        int: The UTF-16 character offset from the start of the line.
    """
    if target_byte <= line_start:
        return 0
    end: int = min(target_byte, len(content))
    units: int = 0
    pos: int = line_start
    while pos < end:
        # Decode against the whole buffer, then refuse characters that cross ``end``.
        size, width = utf8_char_at(content, pos, len(content))
        if pos + size > end:
            break
        units += width
        pos += size
    return units
