# topmark:header:start
#
#   project      : DiagKit
#   file         : result.py
#   file_relpath : src/diagkit/diagnostic/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable snapshot of collected issues.

A `Result` holds issues in deterministic order (see
[`diagkit.diagnostic.ordering`][diagkit.diagnostic.ordering]) together with
per-severity counts computed once at construction, the collector limit, and
limit bookkeeping. It never changes after construction and is independent of
the `Collector` that produced it.

Query surface:
    * status: `ok`, `has_fatal`, `has_errors`, `has_warnings`, `has_info`, `has_hints`;
    * lazy, restartable views: `issues`, `errors`, `warnings`, `by_severity`,
      `at_least_as_severe_as` (generators over the owned tuple);
    * owned copies: the matching ``*_list`` methods return fresh lists of cloned issues.

Severity ordinals decrease as severity increases, so "at least as severe as
WARNING" selects FATAL, ERROR and WARNING. A threshold beyond the defined range
(e.g. ``7``) selects everything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagkit.diagnostic.severity import Severity, SeverityCounts

if TYPE_CHECKING:
    from collections.abc import Iterator

    from diagkit.diagnostic.issue import Issue


@dataclass(frozen=True, slots=True)
class Result:
    """Immutable, sorted snapshot of issues with precomputed counts.

    Attributes:
        items: Issues in deterministic order.
        limit: The collector limit in effect (0 = unlimited).
        limit_reached: Whether issues were dropped because of the limit.
        dropped_count: How many issues were dropped.
        counts: Per-severity counts (computed from ``items``).
    """

    items: tuple[Issue, ...] = ()
    limit: int = 0
    limit_reached: bool = False
    dropped_count: int = 0
    counts: SeverityCounts = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(
            self, "counts", SeverityCounts.from_severities(i.severity for i in self.items)
        )

    # ------------------------------------------------------------------ status

    def ok(self) -> bool:
        """Return True if there are no FATAL or ERROR issues.

        Hitting the collection limit does not change this; check `limit_reached`.
        """
        return self.counts.fatal == 0 and self.counts.errors == 0

    def has_fatal(self) -> bool:
        """Return True if any FATAL issue is present."""
        return self.counts.fatal > 0

    def has_errors(self) -> bool:
        """Return True if any FATAL or ERROR issue is present."""
        return not self.ok()

    def has_warnings(self) -> bool:
        """Return True if any WARNING issue is present."""
        return self.counts.warnings > 0

    def has_info(self) -> bool:
        """Return True if any INFO issue is present."""
        return self.counts.info > 0

    def has_hints(self) -> bool:
        """Return True if any HINT issue is present."""
        return self.counts.hints > 0

    def severity_counts(self) -> SeverityCounts:
        """Return the per-severity counts."""
        return self.counts

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self.items)

    # ------------------------------------------------------------ lazy views

    def issues(self) -> Iterator[Issue]:
        """Yield every issue in order."""
        yield from self.items

    def errors(self) -> Iterator[Issue]:
        """Yield FATAL and ERROR issues in order."""
        return (i for i in self.items if i.severity.is_failure())

    def warnings(self) -> Iterator[Issue]:
        """Yield WARNING issues in order."""
        return self.by_severity(Severity.WARNING)

    def by_severity(self, severity: Severity) -> Iterator[Issue]:
        """Yield issues whose severity is exactly ``severity``."""
        return (i for i in self.items if i.severity == severity)

    def at_least_as_severe_as(self, threshold: Severity | int) -> Iterator[Issue]:
        """Yield issues at least as severe as ``threshold``."""
        limit = int(threshold)
        return (i for i in self.items if int(i.severity) <= limit)

    # ----------------------------------------------------------- owned copies

    def issues_list(self) -> list[Issue]:
        """Return a fresh list of cloned issues."""
        return [i.clone() for i in self.items]

    def errors_list(self) -> list[Issue]:
        """Return a fresh list of cloned FATAL and ERROR issues."""
        return [i.clone() for i in self.errors()]

    def warnings_list(self) -> list[Issue]:
        """Return a fresh list of cloned WARNING issues."""
        return [i.clone() for i in self.warnings()]

    def by_severity_list(self, severity: Severity) -> list[Issue]:
        """Return a fresh list of cloned issues with exactly ``severity``."""
        return [i.clone() for i in self.by_severity(severity)]

    def at_least_as_severe_as_list(self, threshold: Severity | int) -> list[Issue]:
        """Return a fresh list of cloned issues at least as severe as ``threshold``."""
        return [i.clone() for i in self.at_least_as_severe_as(threshold)]

    # ------------------------------------------------------------- messages

    def messages(self) -> list[str]:
        """Return the messages of FATAL and ERROR issues, in order."""
        return [i.message for i in self.errors()]

    def messages_at_or_above(self, threshold: Severity | int) -> list[str]:
        """Return the messages of issues at least as severe as ``threshold``."""
        return [i.message for i in self.at_least_as_severe_as(threshold)]

    def __str__(self) -> str:
        """Return ``"OK"`` or a short failure summary (for logs and debugging)."""
        if self.ok():
            return "OK"
        parts: list[str] = [f"{self.counts.fatal + self.counts.errors} error(s)"]
        if self.counts.warnings > 0:
            parts.append(f", {self.counts.warnings} warning(s)")
        if self.limit_reached:
            parts.append(f" [limit reached, {self.dropped_count} dropped]")
        parts.append("\n")
        for issue in self.errors():
            parts.append(f"  {issue.code}: {issue.message}\n")
        return "".join(parts)


def ok_result() -> Result:
    """Return an empty, successful result."""
    return Result()
