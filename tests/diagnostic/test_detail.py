# topmark:header:start
#
#   project      : DiagKit
#   file         : test_detail.py
#   file_relpath : tests/diagnostic/test_detail.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for detail helpers."""

from __future__ import annotations

from diagkit.diagnostic.detail import (
    Detail,
    DetailKey,
    expected_got,
    path_relation,
    relation_field,
    type_field,
    type_prop,
    type_relation,
)


def test_helpers_return_ordered_pairs() -> None:
    """Each helper returns its two details in a fixed order."""
    assert expected_got("int", "str") == [
        Detail(DetailKey.EXPECTED, "int"),
        Detail(DetailKey.GOT, "str"),
    ]
    assert [d.key for d in type_prop("T", "p")] == ["type", "property"]
    assert [d.key for d in type_relation("T", "r")] == ["type", "relation"]
    assert [d.key for d in relation_field("r", "f")] == ["relation", "field"]
    assert [d.key for d in type_field("T", "f")] == ["type", "field"]
    assert [d.key for d in path_relation("r", "j")] == ["relation", "json_field"]


def test_helpers_return_fresh_lists() -> None:
    """Callers may mutate the returned list."""
    a: list[Detail] = expected_got("x", "y")
    a.append(Detail("extra", "1"))
    assert len(expected_got("x", "y")) == 2
