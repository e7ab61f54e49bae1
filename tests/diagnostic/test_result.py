# topmark:header:start
#
#   project      : DiagKit
#   file         : test_result.py
#   file_relpath : tests/diagnostic/test_result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Result` views, thresholds and owned copies."""

from __future__ import annotations

import pytest

from diagkit.diagnostic.issue import Issue
from diagkit.diagnostic.result import Result, ok_result
from diagkit.diagnostic.severity import Severity
from tests.conftest import make_issue, parametrize


@pytest.fixture
def mixed() -> Result:
    """One issue of every severity, in severity order."""
    return Result(items=tuple(make_issue(s.label, severity=s) for s in Severity))


def test_ok_result() -> None:
    """The empty result is OK and renders as such."""
    res: Result = ok_result()
    assert res.ok()
    assert len(res) == 0
    assert list(res.issues()) == []
    assert str(res) == "OK"


def test_status_and_counts(mixed: Result) -> None:
    """Every has_* query sees its severity."""
    assert not mixed.ok()
    assert mixed.has_fatal() and mixed.has_errors()
    assert mixed.has_warnings() and mixed.has_info() and mixed.has_hints()
    assert mixed.severity_counts().total == 5


def test_views(mixed: Result) -> None:
    """Filtered views select by severity."""
    assert [i.message for i in mixed.errors()] == ["fatal", "error"]
    assert [i.message for i in mixed.warnings()] == ["warning"]
    assert [i.message for i in mixed.by_severity(Severity.INFO)] == ["info"]


@parametrize(
    "threshold, expected",
    [
        (Severity.FATAL, ["fatal"]),
        (Severity.WARNING, ["fatal", "error", "warning"]),
        (Severity.HINT, ["fatal", "error", "warning", "info", "hint"]),
        (7, ["fatal", "error", "warning", "info", "hint"]),
    ],
)
def test_at_least_as_severe_as(mixed: Result, threshold: Severity | int, expected: list[str]) -> None:
    """Thresholds include more severe issues; out-of-range selects everything."""
    assert [i.message for i in mixed.at_least_as_severe_as(threshold)] == expected
    assert [i.message for i in mixed.at_least_as_severe_as_list(threshold)] == expected
    assert mixed.messages_at_or_above(threshold) == expected


def test_issues_view_is_restartable(mixed: Result) -> None:
    """Each call to `issues` starts a fresh iteration; early exit is fine."""
    first = next(mixed.issues())
    assert first.message == "fatal"
    assert len(list(mixed.issues())) == 5
    assert len(list(mixed)) == 5


def test_list_exports_are_owned(mixed: Result) -> None:
    """Mutating an exported list never affects the result."""
    exported: list[Issue] = mixed.issues_list()
    exported.clear()
    assert len(mixed) == 5
    errors: list[Issue] = mixed.errors_list()
    errors.append(make_issue("extra"))
    assert len(mixed.errors_list()) == 2
    assert mixed.warnings_list()[0] == mixed.items[2]
    assert mixed.warnings_list()[0] is not mixed.items[2]
    assert len(mixed.by_severity_list(Severity.HINT)) == 1


def test_messages(mixed: Result) -> None:
    """`messages` returns the failure messages."""
    assert mixed.messages() == ["fatal", "error"]


def test_str_summary() -> None:
    """Failures are summarized with counts and limit information."""
    res = Result(
        items=(
            make_issue("broken", severity=Severity.ERROR),
            make_issue("careful", severity=Severity.WARNING),
        ),
        limit=2,
        limit_reached=True,
        dropped_count=3,
    )
    assert str(res) == (
        "1 error(s), 1 warning(s) [limit reached, 3 dropped]\n  E_SYNTAX: broken\n"
    )


def test_result_is_immutable(mixed: Result) -> None:
    """Results are frozen; items is a tuple."""
    assert isinstance(mixed.items, tuple)
    with pytest.raises(AttributeError):
        mixed.limit = 3  # type: ignore[misc]
