# topmark:header:start
#
#   project      : DiagKit
#   file         : schemas.py
#   file_relpath : src/diagkit/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed wire schemas for the JSON issue format.

Each dataclass mirrors one JSON object of the stable wire format and exposes
``to_dict()`` returning plain, JSON-friendly values with keys in wire order.
Optional fields are *omitted* when unset; they are never emitted as ``null``
or as empty strings/arrays.

Wire shapes:
    ```text
    Issue:    { span?, sourceName?, path?, severity, code, message, hint?, related?, details? }
    Span:     { source, start, end }
    Position: { line, column, byte? }   # byte omitted unless genuinely known
    Related:  { message, span? }
    Detail:   { key, value }
    Result:   { issues, limit?, limitReached?, droppedCount? }  # limit keys only when reached
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diagkit.diagnostic.detail import Detail
    from diagkit.diagnostic.issue import Issue
    from diagkit.diagnostic.location import Position, RelatedInfo, Span
    from diagkit.diagnostic.result import Result


@dataclass(frozen=True, slots=True)
class WirePosition:
    """Wire form of a `Position`; ``byte`` is None when the offset is not known."""

    line: int
    column: int
    byte: int | None = None

    @classmethod
    def from_position(cls, pos: Position) -> WirePosition:
        """Build from a position; the byte offset is kept only if `Position.has_byte`."""
        return cls(line=pos.line, column=pos.column, byte=pos.byte if pos.has_byte() else None)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of this position."""
        out: dict[str, int] = {"line": self.line, "column": self.column}
        if self.byte is not None:
            out["byte"] = self.byte
        return out


@dataclass(frozen=True, slots=True)
class WireSpan:
    """Wire form of a non-zero `Span`."""

    source: str
    start: WirePosition
    end: WirePosition

    @classmethod
    def from_span(cls, span: Span) -> WireSpan | None:
        """Build from a span; return None for the zero span."""
        if span.is_zero():
            return None
        return cls(
            source=str(span.source),
            start=WirePosition.from_position(span.start),
            end=WirePosition.from_position(span.end),
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this span."""
        return {
            "source": self.source,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class WireRelated:
    """Wire form of a `RelatedInfo` entry."""

    message: str
    span: WireSpan | None = None

    @classmethod
    def from_related(cls, rel: RelatedInfo) -> WireRelated:
        """Build from a related-information entry."""
        return cls(message=rel.message, span=WireSpan.from_span(rel.span))

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this entry."""
        out: dict[str, object] = {"message": self.message}
        if self.span is not None:
            out["span"] = self.span.to_dict()
        return out


@dataclass(frozen=True, slots=True)
class WireDetail:
    """Wire form of a `Detail` pair."""

    key: str
    value: str

    @classmethod
    def from_detail(cls, d: Detail) -> WireDetail:
        """Build from a detail pair."""
        return cls(key=d.key, value=d.value)

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly dict of this detail."""
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True, slots=True)
class WireIssue:
    """Wire form of an `Issue`."""

    severity: str
    code: str
    message: str
    span: WireSpan | None = None
    source_name: str = ""
    path: str = ""
    hint: str = ""
    related: tuple[WireRelated, ...] = ()
    details: tuple[WireDetail, ...] = ()

    @classmethod
    def from_issue(cls, issue: Issue) -> WireIssue:
        """Build the wire form of an issue."""
        return cls(
            severity=issue.severity.label,
            code=issue.code.value,
            message=issue.message,
            span=WireSpan.from_span(issue.span) if issue.has_span() else None,
            source_name=issue.source_name,
            path=issue.path,
            hint=issue.hint,
            related=tuple(WireRelated.from_related(r) for r in issue.related),
            details=tuple(WireDetail.from_detail(d) for d in issue.details),
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this issue, omitting unset optional fields."""
        out: dict[str, object] = {}
        if self.span is not None:
            out["span"] = self.span.to_dict()
        if self.source_name:
            out["sourceName"] = self.source_name
        if self.path:
            out["path"] = self.path
        out["severity"] = self.severity
        out["code"] = self.code
        out["message"] = self.message
        if self.hint:
            out["hint"] = self.hint
        if self.related:
            out["related"] = [r.to_dict() for r in self.related]
        if self.details:
            out["details"] = [d.to_dict() for d in self.details]
        return out


@dataclass(frozen=True, slots=True)
class WireResult:
    """Wire form of a `Result`.

    Limit bookkeeping is only emitted when the limit was actually reached.
    """

    issues: tuple[WireIssue, ...] = ()
    limit: int = 0
    limit_reached: bool = False
    dropped_count: int = 0

    @classmethod
    def from_result(cls, result: Result) -> WireResult:
        """Build the wire form of a result."""
        issues = tuple(WireIssue.from_issue(i) for i in result.issues())
        if not result.limit_reached:
            return cls(issues=issues)
        return cls(
            issues=issues,
            limit=result.limit,
            limit_reached=True,
            dropped_count=result.dropped_count,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict; ``issues`` is always present (possibly empty)."""
        out: dict[str, object] = {"issues": [i.to_dict() for i in self.issues]}
        if self.limit:
            out["limit"] = self.limit
        if self.limit_reached:
            out["limitReached"] = True
        if self.dropped_count:
            out["droppedCount"] = self.dropped_count
        return out
