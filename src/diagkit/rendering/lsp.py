# topmark:header:start
#
#   project      : DiagKit
#   file         : lsp.py
#   file_relpath : src/diagkit/rendering/lsp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language Server Protocol diagnostic shapes and position conversion.

LSP positions are 0-based lines and UTF-16 code-unit characters, whereas
DiagKit positions are 1-based lines and rune columns with an optional byte
offset. Exact conversion needs the byte offset plus source content; without
them, `LspByteFallback` decides between dropping the position (``omit``) and
approximating it as ``column - 1`` (``approximate``, exact for BMP text only).

Conversion strategy for a single position:
    1. Byte offset known and a `LineIndexProvider` answers the line start:
       count UTF-16 units from the line start to the byte offset.
    2. Byte offset known and content available: scan the content for the
       line start, then count (requires the offset to lie on or after it).
    3. Otherwise apply the fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from diagkit.config.logging import get_logger
from diagkit.core.enum_mixins import KeyedStrEnum
from diagkit.diagnostic.severity import Severity
from diagkit.diagnostic.sources import LineIndexProvider
from diagkit.utils.text import find_line_start, utf16_offset_from_byte

if TYPE_CHECKING:
    from diagkit.config.logging import DiagkitLogger
    from diagkit.diagnostic.issue import Issue
    from diagkit.diagnostic.location import Position, RelatedInfo, Span
    from diagkit.diagnostic.sources import SourceProvider

logger: DiagkitLogger = get_logger(__name__)


class LspByteFallback(KeyedStrEnum):
    """Behavior when a position cannot be converted exactly."""

    OMIT = ("omit", "Drop the diagnostic or related entry")
    APPROXIMATE = ("approximate", "Use column - 1 as the character offset", ("approx",))


class LspSeverity(IntEnum):
    """LSP ``DiagnosticSeverity`` values."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


_SEVERITY_TO_LSP: dict[Severity, LspSeverity] = {
    Severity.FATAL: LspSeverity.ERROR,
    Severity.ERROR: LspSeverity.ERROR,
    Severity.WARNING: LspSeverity.WARNING,
    Severity.INFO: LspSeverity.INFORMATION,
    Severity.HINT: LspSeverity.HINT,
}


def severity_to_lsp(severity: Severity | int) -> LspSeverity:
    """Map a DiagKit severity to its LSP value (unknown values map to ERROR)."""
    if not Severity.is_defined(severity):
        return LspSeverity.ERROR
    return _SEVERITY_TO_LSP[Severity(severity)]


@dataclass(frozen=True, slots=True)
class LspPosition:
    """0-based line and UTF-16 character offset."""

    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        """Return the LSP JSON shape."""
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True, slots=True)
class LspRange:
    """Start/end pair of `LspPosition`."""

    start: LspPosition
    end: LspPosition

    def to_dict(self) -> dict[str, object]:
        """Return the LSP JSON shape."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class LspLocation:
    """Document URI plus range."""

    uri: str
    range: LspRange

    def to_dict(self) -> dict[str, object]:
        """Return the LSP JSON shape."""
        return {"uri": self.uri, "range": self.range.to_dict()}


@dataclass(frozen=True, slots=True)
class LspRelatedInformation:
    """LSP ``DiagnosticRelatedInformation``."""

    location: LspLocation
    message: str

    def to_dict(self) -> dict[str, object]:
        """Return the LSP JSON shape."""
        return {"location": self.location.to_dict(), "message": self.message}


@dataclass(frozen=True, slots=True)
class LspDiagnostic:
    """LSP ``Diagnostic``.

    ``code`` and ``relatedInformation`` are omitted from the JSON shape when empty.
    """

    range: LspRange
    severity: LspSeverity
    code: str
    source: str
    message: str
    related_information: tuple[LspRelatedInformation, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return the LSP JSON shape."""
        out: dict[str, object] = {
            "range": self.range.to_dict(),
            "severity": int(self.severity),
        }
        if self.code:
            out["code"] = self.code
        out["source"] = self.source
        out["message"] = self.message
        if self.related_information:
            out["relatedInformation"] = [r.to_dict() for r in self.related_information]
        return out


class LspConverter:
    """Convert issues into `LspDiagnostic` values.

    Args:
        provider: Optional source content provider, used for exact UTF-16 offsets.
        fallback: What to do when a position lacks the data for exact conversion.
        source_name: Value of the diagnostic ``source`` field.
    """

    def __init__(
        self,
        provider: SourceProvider | None,
        *,
        fallback: LspByteFallback,
        source_name: str,
    ) -> None:
        self.provider: SourceProvider | None = provider
        self.fallback: LspByteFallback = fallback
        self.source_name: str = source_name

    def utf16_character(self, span: Span, pos: Position) -> int | None:
        """Return the UTF-16 character offset of ``pos``, or None when it cannot be converted."""
        if pos.byte >= 0 and self.provider is not None:
            content: bytes | None = None
            if isinstance(self.provider, LineIndexProvider):
                line_start: int | None = self.provider.line_start_byte(span.source, pos.line)
                if line_start is not None:
                    content = self.provider.content(span)
                    if content is not None:
                        return utf16_offset_from_byte(content, line_start, pos.byte)

            if content is None:
                content = self.provider.content(span)
            if content is not None:
                scanned: int | None = find_line_start(content, pos.line)
                if scanned is not None and pos.byte >= scanned:
                    return utf16_offset_from_byte(content, scanned, pos.byte)

        if self.fallback == LspByteFallback.APPROXIMATE:
            return pos.column - 1
        logger.trace("Cannot convert %s in %s to UTF-16; omitting", pos, span.source)
        return None

    def position(self, span: Span, pos: Position) -> LspPosition | None:
        """Convert one position of ``span``."""
        character: int | None = self.utf16_character(span, pos)
        if character is None:
            return None
        return LspPosition(line=max(pos.line - 1, 0), character=character)

    def range(self, span: Span) -> LspRange | None:
        """Convert a span; None if its start is unknown or cannot be converted.

        An end that is unknown or cannot be converted collapses to the start.
        """
        if span.is_zero() or not span.start.is_known():
            return None
        start: LspPosition | None = self.position(span, span.start)
        if start is None:
            return None
        end: LspPosition | None = None
        if span.end.is_known():
            end = self.position(span, span.end)
        return LspRange(start=start, end=end if end is not None else start)

    def related(self, rel: RelatedInfo) -> LspRelatedInformation | None:
        """Convert a related entry; None when it has no usable span."""
        rng: LspRange | None = self.range(rel.span)
        if rng is None:
            return None
        return LspRelatedInformation(
            location=LspLocation(uri=rel.span.source.to_uri(), range=rng),
            message=rel.message,
        )

    def diagnostic(self, issue: Issue) -> LspDiagnostic | None:
        """Convert an issue; None when it has no usable span."""
        if not issue.has_span():
            return None
        rng: LspRange | None = self.range(issue.span)
        if rng is None:
            return None
        related: list[LspRelatedInformation] = []
        for rel in issue.related:
            converted: LspRelatedInformation | None = self.related(rel)
            if converted is not None:
                related.append(converted)
        return LspDiagnostic(
            range=rng,
            severity=severity_to_lsp(issue.severity),
            code=issue.code.value,
            source=self.source_name,
            message=issue.message,
            related_information=tuple(related),
        )
