# topmark:header:start
#
#   project      : DiagKit
#   file         : issue.py
#   file_relpath : src/diagkit/diagnostic/issue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable issue records and their fluent builder.

An `Issue` describes one problem: severity, stable code, message, and optional
location (``span``), provenance (``source_name``/``path``), hint, related
locations and key/value details.

Sections:
    * Issue: the frozen record. Sequences are stored as tuples of frozen
      values, so a record can be shared freely once built.
    * IssueBuilder: fluent construction seeded by `new_issue` or
      `from_issue`. Both entry points fail fast with
      `ContractViolationError` on invalid input.

Classification is derived from the fields:
    * schema-only: has a span, no instance path;
    * instance-only: has an instance path, no span;
    * hybrid: has both.

Example:
    ```python
    issue = (
        new_issue(Severity.ERROR, E_TYPE_MISMATCH, "expected integer")
        .with_path("data.json", "$.items[0].id")
        .with_expected_got("integer", "string")
        .build()
    )
    ```
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagkit.config.logging import get_logger
from diagkit.diagnostic.codes import ZERO_CODE, Code
from diagkit.diagnostic.detail import Detail, expected_got
from diagkit.diagnostic.errors import ContractViolationError
from diagkit.diagnostic.location import RelatedInfo, Span
from diagkit.diagnostic.severity import Severity

if TYPE_CHECKING:
    from diagkit.config.logging import DiagkitLogger

logger: DiagkitLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Issue:
    """Immutable diagnostic record.

    Attributes:
        severity: How bad the problem is.
        code: Stable identifier from the code catalog.
        message: Human-readable description; never embeds location text.
        span: Source range in schema/source text (zero span when unknown).
        source_name: Data-provenance label (e.g. a file name or ``"<stdin>"``).
        path: Canonical instance path (e.g. ``"$.items[0].id"``).
        hint: Optional suggestion for fixing the problem.
        related: Secondary locations; order matters when it encodes a chain.
        details: Ordered key/value context for tools.
    """

    severity: Severity = Severity.FATAL
    code: Code = ZERO_CODE
    message: str = ""
    span: Span = field(default_factory=Span)
    source_name: str = ""
    path: str = ""
    hint: str = ""
    related: tuple[RelatedInfo, ...] = ()
    details: tuple[Detail, ...] = ()

    def __post_init__(self) -> None:
        # Accept plain ints and any iterable at construction; store Severity and tuples.
        if not isinstance(self.severity, Severity) and Severity.is_defined(self.severity):
            object.__setattr__(self, "severity", Severity(self.severity))
        if not isinstance(self.related, tuple):
            object.__setattr__(self, "related", tuple(self.related))
        if not isinstance(self.details, tuple):
            object.__setattr__(self, "details", tuple(self.details))

    def has_span(self) -> bool:
        """Return True if the issue carries a non-zero span."""
        return not self.span.is_zero()

    def is_zero(self) -> bool:
        """Return True if the issue has no code, message, span or provenance."""
        return (
            self.code.is_zero()
            and self.message == ""
            and self.span.is_zero()
            and self.source_name == ""
            and self.path == ""
        )

    def is_valid(self) -> bool:
        """Return True if code, message and severity are all set and in range."""
        return (
            not self.code.is_zero() and self.message != "" and Severity.is_defined(self.severity)
        )

    def is_schema_only(self) -> bool:
        """Return True if the issue has a span but no instance path."""
        return self.has_span() and self.path == ""

    def is_instance_only(self) -> bool:
        """Return True if the issue has an instance path but no span."""
        return self.path != "" and not self.has_span()

    def is_hybrid(self) -> bool:
        """Return True if the issue has both a span and an instance path."""
        return self.has_span() and self.path != ""

    def clone(self) -> Issue:
        """Return an independent copy of this issue."""
        return dataclasses.replace(self)


class IssueBuilder:
    """Fluent builder for `Issue` records.

    Obtain one through `new_issue` or `from_issue`. Setters return the builder;
    `with_related` and the detail setters append. `build` snapshots the current
    state, so a builder can be reused without affecting issues built earlier.
    """

    __slots__ = (
        "_code",
        "_details",
        "_hint",
        "_message",
        "_path",
        "_related",
        "_severity",
        "_source_name",
        "_span",
    )

    def __init__(self, severity: Severity, code: Code, message: str) -> None:
        self._severity: Severity = severity
        self._code: Code = code
        self._message: str = message
        self._span: Span = Span()
        self._source_name: str = ""
        self._path: str = ""
        self._hint: str = ""
        self._related: list[RelatedInfo] = []
        self._details: list[Detail] = []

    def with_span(self, span: Span) -> IssueBuilder:
        """Set the source location."""
        self._span = span
        return self

    def with_path(self, source_name: str, path: str) -> IssueBuilder:
        """Set instance provenance: data source label and canonical instance path."""
        self._source_name = source_name
        self._path = path
        return self

    def with_hint(self, hint: str) -> IssueBuilder:
        """Set a suggestion for fixing the problem."""
        self._hint = hint
        return self

    def with_related(self, *related: RelatedInfo) -> IssueBuilder:
        """Append related locations.

        Related entries take part in issue ordering, so add them in a
        consistent order for deterministic output.
        """
        self._related.extend(related)
        return self

    def with_detail(self, key: str, value: str) -> IssueBuilder:
        """Append a single key/value detail."""
        self._details.append(Detail(key, value))
        return self

    def with_details(self, *details: Detail) -> IssueBuilder:
        """Append key/value details."""
        self._details.extend(details)
        return self

    def with_expected_got(self, expected: str, got: str) -> IssueBuilder:
        """Append ``expected``/``got`` details for a mismatch."""
        return self.with_details(*expected_got(expected, got))

    def build(self) -> Issue:
        """Return the issue built so far.

        The returned issue is valid: the seeding entry points already checked
        severity, code and message.
        """
        return Issue(
            severity=self._severity,
            code=self._code,
            message=self._message,
            span=self._span,
            source_name=self._source_name,
            path=self._path,
            hint=self._hint,
            related=tuple(self._related),
            details=tuple(self._details),
        )


def new_issue(severity: Severity | int, code: Code, message: str) -> IssueBuilder:
    """Start building a new issue.

    Args:
        severity (Severity | int): Issue severity (must be a defined severity).
        code (Code): Non-zero issue code.
        message (str): Non-empty message.

    Returns:
        IssueBuilder: A builder seeded with the required fields.

    Raises:
        ContractViolationError: On an undefined severity, a zero code or an empty message.
    """
    if not Severity.is_defined(severity):
        raise ContractViolationError(
            f"new_issue: invalid severity {severity!r} "
            f"(must be {int(Severity.FATAL)}-{int(Severity.HINT)})"
        )
    if code.is_zero():
        raise ContractViolationError("new_issue: zero code (use a catalog code such as E_SYNTAX)")
    if not message:
        raise ContractViolationError("new_issue: empty message")
    return IssueBuilder(Severity(severity), code, message)


def from_issue(issue: Issue) -> IssueBuilder:
    """Start building a new issue seeded with all fields of ``issue``.

    Raises:
        ContractViolationError: If ``issue`` is zero or invalid.
    """
    validate_issue(issue, where="from_issue")
    logger.trace("Augmenting issue %s: %r", issue.code, issue.message)
    builder = IssueBuilder(Severity(issue.severity), issue.code, issue.message)
    builder.with_span(issue.span).with_path(issue.source_name, issue.path).with_hint(issue.hint)
    builder.with_related(*issue.related)
    builder.with_details(*issue.details)
    return builder


def validate_issue(issue: Issue, *, where: str) -> None:
    """Raise `ContractViolationError` if ``issue`` is zero or invalid.

    Args:
        issue (Issue): The issue to check.
        where (str): Name of the calling entry point, used in the error message.
    """
    if issue.is_zero():
        raise ContractViolationError(f"{where}: zero issue")
    if not issue.is_valid():
        raise ContractViolationError(f"{where}: invalid issue (code={issue.code})")

