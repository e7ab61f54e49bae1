# topmark:header:start
#
#   project      : DiagKit
#   file         : ordering.py
#   file_relpath : src/diagkit/diagnostic/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic total order over issues.

The order depends only on issue content, never on collection order or thread
identity, so collecting the same multiset of issues always yields the same
sequence. Keys, in priority order:

1. span-backed issues before issues without a span;
2. span-backed: source, start (line, column), end (line, column);
   without span: ``source_name``, then ``path``;
3. code, severity ordinal, message, hint, ``source_name``, ``path``
   (for every issue, so hybrid issues sharing a span stay distinct);
4. details element-wise (key, value), then related entries element-wise
   (span, message); a shorter sequence sorts first on a common prefix.

Issues equal under every key compare equal and keep their relative order
(the sort is stable).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from diagkit.diagnostic.location import span_sort_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagkit.diagnostic.issue import Issue

IssueSortKey = tuple[Any, ...]


def issue_sort_key(issue: Issue) -> IssueSortKey:
    """Return the total-order sort key of ``issue``."""
    has_span: bool = issue.has_span()
    primary: tuple[Any, ...] = (
        span_sort_key(issue.span) if has_span else (issue.source_name, issue.path)
    )
    return (
        0 if has_span else 1,
        primary,
        issue.code.value,
        int(issue.severity),
        issue.message,
        issue.hint,
        issue.source_name,
        issue.path,
        tuple((d.key, d.value) for d in issue.details),
        tuple((span_sort_key(r.span), r.message) for r in issue.related),
    )


def compare_issues(a: Issue, b: Issue) -> int:
    """Three-way comparison: negative if ``a`` sorts first, zero if equal, else positive."""
    ka, kb = issue_sort_key(a), issue_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Return a new list of ``issues`` in deterministic order (stable)."""
    return sorted(issues, key=issue_sort_key)
