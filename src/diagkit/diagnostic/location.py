# topmark:header:start
#
#   project      : DiagKit
#   file         : location.py
#   file_relpath : src/diagkit/diagnostic/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source locations attached to issues.

Sections:
    * SourceId: identity of a source unit (canonical file path or synthetic id).
    * Position: 1-based line/column plus an optional 0-based byte offset.
    * Span: half-open source range between two positions.
    * RelatedInfo: a secondary location with an explanatory message.

Positions count columns in code points (not bytes). A byte offset of ``-1``
means "unknown"; a position whose line and column are both zero is the zero
position and never reports a byte offset, whatever the stored integer.

Nothing in this module touches the filesystem: canonicalization of file paths
is purely lexical.
"""

from __future__ import annotations

import posixpath
import unicodedata
from dataclasses import dataclass, field
from typing import Final
from urllib.parse import quote

from diagkit.constants import NO_LOCATION_TEXT, UNKNOWN_LOCATION_TEXT

UNKNOWN_BYTE: Final[int] = -1

# Standard related-information messages
MSG_PREVIOUS_DEFINITION: Final[str] = "previous definition here"
MSG_IMPORTED_FROM: Final[str] = "imported from here"
MSG_DECLARED_HERE: Final[str] = "declared here"
MSG_REQUIRED_BY: Final[str] = "required by this constraint"
MSG_REFERENCED_FROM: Final[str] = "referenced from here"
MSG_DEFINED_HERE: Final[str] = "defined here"

# Characters left unescaped in the path component of a file URI
_URI_PATH_SAFE: Final[str] = "/:@$&+,;="


def looks_like_absolute_path(identifier: str) -> bool:
    """Return True if ``identifier`` looks like a POSIX, drive-letter or UNC absolute path."""
    if not identifier:
        return False
    if identifier[0] == "/":
        return True
    if len(identifier) >= 3 and identifier[0].isascii() and identifier[0].isalpha():
        if identifier[1] == ":" and identifier[2] in "/\\":
            return True
    return identifier.startswith("\\\\")


def canonicalize_absolute_path(path: str) -> str:
    """Return the canonical, forward-slash, NFC-normalized form of an absolute path.

    Raises:
        ValueError: If ``path`` is empty or not absolute.
    """
    if not path:
        raise ValueError("empty path")
    slashed: str = unicodedata.normalize("NFC", path).replace("\\", "/")
    if not looks_like_absolute_path(slashed):
        raise ValueError(f"path {path!r} is not absolute")
    if slashed.startswith("//"):
        raise ValueError(f"UNC path {path!r} is not supported; use a local mount point")
    drive: str = ""
    if slashed[0] != "/":
        # Drive-letter path ("C:/..."): keep the drive, clean the rest
        drive, slashed = slashed[:2], slashed[2:]
    return drive + posixpath.normpath(slashed)


@dataclass(frozen=True, slots=True)
class SourceId:
    """Identity of a source unit.

    A source is either *file-backed* (``identifier`` is a canonical absolute
    path) or *synthetic* (an arbitrary label such as ``test://unit/a.schema``
    or ``<stdin>``). The default instance is the zero source.

    Attributes:
        identifier: The canonical path or the synthetic label.
        file_backed: Whether ``identifier`` is a canonical file path.
    """

    identifier: str = ""
    file_backed: bool = False

    @classmethod
    def synthetic(cls, identifier: str) -> SourceId:
        """Create a validated synthetic source identifier.

        Raises:
            ValueError: If the identifier is empty or looks like an absolute path
                (which could collide with a file-backed source).
        """
        if not identifier:
            raise ValueError("synthetic source identifier must not be empty")
        if looks_like_absolute_path(identifier):
            raise ValueError(
                f"synthetic source identifier {identifier!r} looks like an absolute path; "
                "use a scheme prefix (e.g. test://, inline:)"
            )
        return cls(identifier=identifier)

    @classmethod
    def from_absolute_path(cls, path: str) -> SourceId:
        """Create a file-backed source identifier from an absolute path (lexically)."""
        return cls(identifier=canonicalize_absolute_path(path), file_backed=True)

    def __str__(self) -> str:
        return self.identifier

    def is_zero(self) -> bool:
        """Return True for the unset source."""
        return self.identifier == ""

    def to_uri(self) -> str:
        """Return an editor-protocol URI for this source.

        File-backed sources become percent-encoded ``file://`` URIs; synthetic
        identifiers are returned unchanged.
        """
        if not self.file_backed:
            return self.identifier
        path: str = self.identifier if self.identifier.startswith("/") else "/" + self.identifier
        return "file://" + quote(path, safe=_URI_PATH_SAFE)


@dataclass(frozen=True, slots=True)
class Position:
    """A point in a source unit.

    Attributes:
        line: 1-based line number (0 = unknown).
        column: 1-based column in code points (0 = unknown).
        byte: 0-based byte offset, ``-1`` when unknown.
    """

    line: int = 0
    column: int = 0
    byte: int = UNKNOWN_BYTE

    @classmethod
    def unknown(cls) -> Position:
        """Return the canonical unknown position."""
        return cls(0, 0, UNKNOWN_BYTE)

    def is_zero(self) -> bool:
        """Return True if both line and column are zero."""
        return self.line == 0 and self.column == 0

    def is_known(self) -> bool:
        """Return True if both line and column are set."""
        return self.line > 0 and self.column > 0

    def has_byte(self) -> bool:
        """Return True if the byte offset is genuinely known.

        A zero position never has a byte offset, even when ``byte`` is 0.
        """
        return self.byte >= 0 and not self.is_zero()

    def before(self, other: Position) -> bool:
        """Return True if this position precedes ``other`` (both must be known)."""
        if not self.is_known() or not other.is_known():
            return False
        return (self.line, self.column) < (other.line, other.column)

    def __str__(self) -> str:
        if self.is_zero():
            return UNKNOWN_LOCATION_TEXT
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range ``[start, end)`` within one source unit.

    A point span has ``start == end``. The default instance is the zero span.
    """

    source: SourceId = field(default_factory=SourceId)
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    @classmethod
    def point(cls, source: SourceId, line: int, column: int) -> Span:
        """Create a point span without byte offset."""
        pos = Position(line, column, UNKNOWN_BYTE)
        return cls(source, pos, pos)

    @classmethod
    def point_with_byte(cls, source: SourceId, line: int, column: int, byte: int) -> Span:
        """Create a point span carrying a byte offset."""
        pos = Position(line, column, byte)
        return cls(source, pos, pos)

    @classmethod
    def range(
        cls,
        source: SourceId,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
    ) -> Span:
        """Create a range span without byte offsets.

        Raises:
            ValueError: If the end lies before the start.
        """
        start = Position(start_line, start_column, UNKNOWN_BYTE)
        end = Position(end_line, end_column, UNKNOWN_BYTE)
        if end.before(start):
            raise ValueError(f"span end {end} before start {start}")
        return cls(source, start, end)

    @classmethod
    def range_with_bytes(
        cls,
        source: SourceId,
        start: tuple[int, int, int],
        end: tuple[int, int, int],
    ) -> Span:
        """Create a range span from ``(line, column, byte)`` triples.

        Raises:
            ValueError: If the end lies before the start (by byte offset when both
                are known, else by line/column).
        """
        s = Position(*start)
        e = Position(*end)
        if s.has_byte() and e.has_byte():
            if e.byte < s.byte:
                raise ValueError(f"span end byte {e.byte} before start byte {s.byte}")
        elif e.before(s):
            raise ValueError(f"span end {e} before start {s}")
        return cls(source, s, e)

    def is_zero(self) -> bool:
        """Return True for the unset span."""
        return self.source.is_zero() and self.start.is_zero() and self.end.is_zero()

    def is_point(self) -> bool:
        """Return True if start and end are identical."""
        return self.start == self.end

    def is_valid(self) -> bool:
        """Return True if the span has a source, a known start and (for ranges) a known end."""
        if self.source.is_zero() or not self.start.is_known():
            return False
        return self.is_point() or self.end.is_known()

    def __str__(self) -> str:
        if self.is_zero():
            return NO_LOCATION_TEXT
        if self.is_point():
            return f"{self.source}:{self.start}"
        return (
            f"{self.source}:{self.start.line}:{self.start.column}"
            f"-{self.end.line}:{self.end.column}"
        )


def span_sort_key(span: Span) -> tuple[str, int, int, int, int]:
    """Return the ordering key of a span: source, start (line, column), end (line, column).

    Byte offsets do not participate in ordering.
    """
    return (
        span.source.identifier,
        span.start.line,
        span.start.column,
        span.end.line,
        span.end.column,
    )


def compare_spans(a: Span, b: Span) -> int:
    """Three-way comparison of two spans by `span_sort_key`."""
    ka, kb = span_sort_key(a), span_sort_key(b)
    return (ka > kb) - (ka < kb)


@dataclass(frozen=True, slots=True)
class RelatedInfo:
    """A secondary location that helps explain an issue.

    Attributes:
        span: Where the related element is (may be the zero span).
        message: What the location means (e.g. ``"previous definition here"``).
    """

    span: Span = field(default_factory=Span)
    message: str = ""

    def is_valid(self) -> bool:
        """Return True if the entry carries a valid span or a message."""
        return self.span.is_valid() or self.message != ""

    def __str__(self) -> str:
        if self.span.is_zero():
            return self.message
        if not self.message:
            return str(self.span)
        return f"{self.span}: {self.message}"
