# topmark:header:start
#
#   project      : DiagKit
#   file         : test_lsp.py
#   file_relpath : tests/rendering/test_lsp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for LSP diagnostic conversion and UTF-16 positions."""

from __future__ import annotations

import json

from diagkit.config.model import RendererConfig
from diagkit.diagnostic.codes import E_DUPLICATE_TYPE
from diagkit.diagnostic.issue import from_issue, new_issue
from diagkit.diagnostic.location import RelatedInfo, SourceId, Span
from diagkit.diagnostic.result import Result
from diagkit.diagnostic.severity import Severity
from diagkit.diagnostic.sources import LineIndexProvider, SourceRegistry
from diagkit.rendering.lsp import (
    LspByteFallback,
    LspConverter,
    LspSeverity,
    severity_to_lsp,
)
from diagkit.rendering.renderer import Renderer
from tests.conftest import SRC, make_issue, parametrize

# Line 2 is "a😀b": 'a' at byte 5, the emoji at 6..9, 'b' at 10.
CONTENT = "abcd\na😀b\n".encode()


class ContentOnlyProvider:
    """Provider without a line index, forcing the scanning path."""

    def __init__(self, content: bytes) -> None:
        self._content = content

    def content(self, span: Span) -> bytes | None:
        return self._content


def _span_2(start_col: int, start_byte: int, end_col: int, end_byte: int) -> Span:
    return Span.range_with_bytes(SRC, (2, start_col, start_byte), (2, end_col, end_byte))


def _renderer(provider: object = None, **kwargs: object) -> Renderer:
    return Renderer(RendererConfig(**kwargs), provider=provider)  # type: ignore[arg-type]


@parametrize(
    "severity, expected",
    [
        (Severity.FATAL, LspSeverity.ERROR),
        (Severity.ERROR, LspSeverity.ERROR),
        (Severity.WARNING, LspSeverity.WARNING),
        (Severity.INFO, LspSeverity.INFORMATION),
        (Severity.HINT, LspSeverity.HINT),
        (42, LspSeverity.ERROR),
    ],
)
def test_severity_mapping(severity: Severity | int, expected: LspSeverity) -> None:
    """Both FATAL and ERROR map to LSP error."""
    assert severity_to_lsp(severity) is expected


def test_registry_is_a_line_index_provider() -> None:
    """The registry takes the indexed path; a content-only provider does not."""
    assert isinstance(SourceRegistry(), LineIndexProvider)
    assert not isinstance(ContentOnlyProvider(b""), LineIndexProvider)


def test_utf16_range_with_registry(registry: SourceRegistry) -> None:
    """The character after an astral-plane emoji is two units further along."""
    registry.register(SRC, CONTENT)
    issue = make_issue("bad", span=_span_2(3, 10, 4, 11))
    diag = _renderer(registry).lsp_diagnostic(issue)
    assert diag is not None
    assert diag.to_dict() == {
        "range": {
            "start": {"line": 1, "character": 3},
            "end": {"line": 1, "character": 4},
        },
        "severity": 1,
        "code": "E_SYNTAX",
        "source": "diagkit",
        "message": "bad",
    }


def test_utf16_scanning_path_matches_indexed_path(registry: SourceRegistry) -> None:
    """Providers without a line index give the same answer."""
    registry.register(SRC, CONTENT)
    span = _span_2(2, 6, 3, 10)
    indexed = LspConverter(registry, fallback=LspByteFallback.OMIT, source_name="x")
    scanned = LspConverter(
        ContentOnlyProvider(CONTENT), fallback=LspByteFallback.OMIT, source_name="x"
    )
    assert indexed.range(span) == scanned.range(span)
    rng = scanned.range(span)
    assert rng is not None
    assert (rng.start.character, rng.end.character) == (1, 3)


def test_byte_inside_character_floors() -> None:
    """An offset inside the emoji resolves to the emoji's start."""
    conv = LspConverter(ContentOnlyProvider(CONTENT), fallback=LspByteFallback.OMIT, source_name="x")
    span = Span.point_with_byte(SRC, 2, 2, 8)
    assert conv.utf16_character(span, span.start) == 1


def test_byte_before_line_start_is_not_converted() -> None:
    """A byte offset that precedes its line falls back."""
    conv = LspConverter(ContentOnlyProvider(CONTENT), fallback=LspByteFallback.OMIT, source_name="x")
    span = Span.point_with_byte(SRC, 2, 1, 1)
    assert conv.utf16_character(span, span.start) is None


def test_omit_drops_issue_without_byte_offsets() -> None:
    """Under omit, a span without offsets yields no diagnostic."""
    issue = make_issue(span=Span.point(SRC, 2, 3))
    assert _renderer().lsp_diagnostic(issue) is None


def test_approximate_uses_column_minus_one() -> None:
    """Under approximate, the rune column stands in for the UTF-16 offset."""
    issue = make_issue(span=Span.range(SRC, 2, 3, 2, 4))
    diag = _renderer(lsp_byte_fallback=LspByteFallback.APPROXIMATE).lsp_diagnostic(issue)
    assert diag is not None
    assert diag.range.start.line == 1
    assert (diag.range.start.character, diag.range.end.character) == (2, 3)


def test_end_falls_back_to_start(registry: SourceRegistry) -> None:
    """An end without offset collapses onto the converted start."""
    registry.register(SRC, CONTENT)
    span = Span.range_with_bytes(SRC, (2, 3, 10), (2, 4, -1))
    issue = make_issue(span=span)
    diag = _renderer(registry).lsp_diagnostic(issue)
    assert diag is not None
    assert diag.range.end == diag.range.start


def test_issues_without_span_are_skipped() -> None:
    """Instance-only issues never become diagnostics; the list is never None."""
    r = _renderer()
    result = Result(items=(make_issue(path="$.a"),))
    assert r.lsp_diagnostic(make_issue(path="$.a")) is None
    assert r.lsp_diagnostics(result) == []
    assert r.format_lsp_json(result) == "[]"
    assert r.format_lsp_json(Result()) == "[]"


def test_related_information(registry: SourceRegistry) -> None:
    """Convertible related entries are kept in order; others are dropped."""
    file_src = SourceId.from_absolute_path("/work/my schema/types.schema")
    registry.register(SRC, CONTENT)
    registry.register(file_src, b"type A {}\n")
    issue = (
        new_issue(Severity.WARNING, E_DUPLICATE_TYPE, "duplicate type A")
        .with_span(Span.point_with_byte(SRC, 1, 1, 0))
        .with_related(RelatedInfo(Span.point_with_byte(file_src, 1, 6, 5), "first here"))
        .with_related(RelatedInfo(message="no location"))
        .with_related(RelatedInfo(Span.point(file_src, 1, 6), "no offset"))
        .build()
    )
    diag = _renderer(registry, lsp_source="schemac").lsp_diagnostic(issue)
    assert diag is not None
    assert diag.source == "schemac"
    assert diag.severity is LspSeverity.WARNING
    assert len(diag.related_information) == 1
    rel = diag.related_information[0].to_dict()
    assert rel == {
        "location": {
            "uri": "file:///work/my%20schema/types.schema",
            "range": {
                "start": {"line": 0, "character": 5},
                "end": {"line": 0, "character": 5},
            },
        },
        "message": "first here",
    }


def test_format_lsp_json(registry: SourceRegistry) -> None:
    """The JSON array holds one object per convertible issue, in result order."""
    registry.register(SRC, CONTENT)
    first = make_issue("one", span=Span.point_with_byte(SRC, 1, 1, 0))
    second = from_issue(first).with_span(Span.point_with_byte(SRC, 2, 1, 5)).build()
    result = Result(items=(first, make_issue("skipped"), second))
    payload = json.loads(_renderer(registry).format_lsp_json(result))
    assert [d["message"] for d in payload] == ["one", "one"]
    assert [d["range"]["start"]["line"] for d in payload] == [0, 1]
    assert "relatedInformation" not in payload[0]
