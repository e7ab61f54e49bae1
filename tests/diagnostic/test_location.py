# topmark:header:start
#
#   project      : DiagKit
#   file         : test_location.py
#   file_relpath : tests/diagnostic/test_location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for source ids, positions, spans and related entries."""

from __future__ import annotations

import pytest

from diagkit.diagnostic.location import (
    Position,
    RelatedInfo,
    SourceId,
    Span,
    canonicalize_absolute_path,
    compare_spans,
)
from tests.conftest import parametrize


@parametrize("identifier", ["", "/abs/path", "C:/x", "C:\\x", "\\\\server\\share"])
def test_synthetic_rejects_empty_and_absolute(identifier: str) -> None:
    """Synthetic ids must not be empty or look like absolute paths."""
    with pytest.raises(ValueError):
        SourceId.synthetic(identifier)


def test_synthetic_accepts_scheme_ids() -> None:
    """Scheme-prefixed labels are fine."""
    src = SourceId.synthetic("test://unit/a.schema")
    assert str(src) == "test://unit/a.schema"
    assert not src.file_backed
    assert src.to_uri() == "test://unit/a.schema"


@parametrize(
    "raw, expected",
    [
        ("/a/b/../c", "/a/c"),
        ("/a//b/./c/", "/a/b/c"),
        ("C:\\work\\x.schema", "C:/work/x.schema"),
    ],
)
def test_canonicalize_absolute_path(raw: str, expected: str) -> None:
    """Canonicalization is lexical and uses forward slashes."""
    assert canonicalize_absolute_path(raw) == expected


def test_canonicalize_rejects_relative_and_unc() -> None:
    """Relative and UNC paths are rejected."""
    with pytest.raises(ValueError):
        canonicalize_absolute_path("rel/path")
    with pytest.raises(ValueError):
        canonicalize_absolute_path("\\\\server\\share\\x")


def test_file_uri_is_percent_encoded() -> None:
    """File-backed sources become file:// URIs."""
    src = SourceId.from_absolute_path("/work/my schema.yammm")
    assert src.file_backed
    assert src.to_uri() == "file:///work/my%20schema.yammm"
    assert SourceId.from_absolute_path("C:/w/a.s").to_uri() == "file:///C:/w/a.s"


def test_position_byte_domain() -> None:
    """Unknown (-1) and zero-position offsets are not genuinely known."""
    assert not Position(1, 1, -1).has_byte()
    assert Position(1, 1, 0).has_byte()
    assert Position(3, 2, 100).has_byte()
    assert not Position(0, 0, 0).has_byte()
    assert not Position().has_byte()
    assert Position.unknown().is_zero()


def test_position_before() -> None:
    """Ordering by line then column; unknown positions never precede."""
    assert Position(1, 5).before(Position(2, 1))
    assert Position(2, 1).before(Position(2, 3))
    assert not Position(2, 3).before(Position(2, 3))
    assert not Position().before(Position(1, 1))


def test_span_constructors() -> None:
    """Point and range spans carry the expected positions."""
    src = SourceId.synthetic("test://s")
    point = Span.point(src, 2, 4)
    assert point.is_point()
    assert point.start == Position(2, 4, -1)
    with_byte = Span.point_with_byte(src, 1, 1, 0)
    assert with_byte.start.has_byte()
    rng = Span.range(src, 1, 2, 1, 5)
    assert not rng.is_point()
    assert rng.is_valid()
    assert str(rng) == "test://s:1:2-1:5"
    assert str(point) == "test://s:2:4"


def test_span_range_rejects_reversed() -> None:
    """An end before the start is a malformed argument."""
    src = SourceId.synthetic("test://s")
    with pytest.raises(ValueError):
        Span.range(src, 2, 1, 1, 9)
    with pytest.raises(ValueError):
        Span.range_with_bytes(src, (1, 5, 4), (1, 1, 0))


def test_zero_span() -> None:
    """The default span is zero and renders a placeholder."""
    assert Span().is_zero()
    assert not Span().is_valid()
    assert str(Span()) == "<no location>"


def test_compare_spans_ignores_bytes() -> None:
    """Spans differing only by byte offset compare equal."""
    src = SourceId.synthetic("test://s")
    a = Span.point_with_byte(src, 1, 1, 0)
    b = Span.point(src, 1, 1)
    assert compare_spans(a, b) == 0
    assert compare_spans(Span.point(src, 1, 1), Span.point(src, 1, 2)) == -1
    other = SourceId.synthetic("test://t")
    assert compare_spans(Span.point(other, 1, 1), Span.point(src, 9, 9)) == 1


def test_related_info_str() -> None:
    """Related entries render span and message."""
    src = SourceId.synthetic("test://s")
    assert str(RelatedInfo(Span.point(src, 1, 2), "declared here")) == "test://s:1:2: declared here"
    assert str(RelatedInfo(message="only text")) == "only text"
    assert RelatedInfo(message="only text").is_valid()
    assert not RelatedInfo().is_valid()
