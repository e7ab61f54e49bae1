# topmark:header:start
#
#   project      : DiagKit
#   file         : collector.py
#   file_relpath : src/diagkit/diagnostic/collector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Thread-safe issue aggregation.

A `Collector` accepts issues from any number of threads, enforces an optional
size limit, answers status queries in O(1) from counts maintained at
collection time, and produces an immutable `Result` on demand.

Locking:
    * ``collect``, ``collect_all``, ``merge`` and ``result`` take the exclusive
      side of a reader/writer lock (``result`` may write its cache);
    * status queries take the shared side.

Raw issues are validated *before* the lock is taken, so a contract violation
never happens inside the critical section. ``merge`` trusts its input: a
`Result` only ever holds valid issues.

Limit semantics:
    A limit of zero (negative values are normalized to zero) means unlimited.
    Once a positive limit is reached, further issues are dropped and counted.
    Dropping does not change `ok`; callers check `limit_reached` separately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagkit.config.logging import get_logger
from diagkit.constants import NO_LIMIT
from diagkit.diagnostic.issue import validate_issue
from diagkit.diagnostic.ordering import sort_issues
from diagkit.diagnostic.result import Result
from diagkit.diagnostic.severity import SEVERITY_COUNT, Severity
from diagkit.utils.rwlock import ReadWriteLock

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagkit.config.logging import DiagkitLogger
    from diagkit.config.model import CollectorConfig
    from diagkit.diagnostic.issue import Issue

logger: DiagkitLogger = get_logger(__name__)


class Collector:
    """Concurrency-safe aggregator of issues with an optional size limit."""

    def __init__(self, limit: int = NO_LIMIT) -> None:
        """Create a collector.

        Args:
            limit (int): Maximum number of stored issues; ``0`` (or any negative
                value) means unlimited.
        """
        self._lock: ReadWriteLock = ReadWriteLock()
        self._issues: list[Issue] = []
        self._limit: int = max(limit, NO_LIMIT)
        self._limit_reached: bool = False
        self._dropped: int = 0
        self._tally: list[int] = [0] * SEVERITY_COUNT
        self._cached: Result | None = None

    @classmethod
    def from_config(cls, config: CollectorConfig) -> Collector:
        """Create a collector using the limit of a frozen collector configuration."""
        return cls(limit=config.limit)

    def __repr__(self) -> str:
        return f"Collector(limit={self._limit})"

    # ------------------------------------------------------------ mutation

    def collect(self, issue: Issue) -> None:
        """Add one issue, subject to the limit.

        Raises:
            ContractViolationError: If ``issue`` is zero or invalid.
        """
        validate_issue(issue, where="Collector.collect")
        with self._lock.write_locked():
            self._collect_locked(issue)

    def collect_all(self, issues: Iterable[Issue]) -> None:
        """Validate every issue, then add them all in one critical section.

        Nothing is added when any issue fails validation.

        Raises:
            ContractViolationError: If any issue is zero or invalid.
        """
        batch: list[Issue] = list(issues)
        for issue in batch:
            validate_issue(issue, where="Collector.collect_all")
        with self._lock.write_locked():
            for issue in batch:
                self._collect_locked(issue)

    def merge(self, result: Result) -> None:
        """Add every issue of an existing result, subject to the limit (no re-validation)."""
        with self._lock.write_locked():
            for issue in result.items:
                self._collect_locked(issue)

    def _collect_locked(self, issue: Issue) -> None:
        self._cached = None
        if self._limit > 0 and len(self._issues) >= self._limit:
            if not self._limit_reached:
                logger.debug("Collector limit %d reached; dropping further issues", self._limit)
            self._limit_reached = True
            self._dropped += 1
            logger.trace("Dropped %s: %r", issue.code, issue.message)
            return
        self._issues.append(issue)
        self._tally[issue.severity] += 1
        logger.trace("Collected [%s] %s: %r", issue.severity.label, issue.code, issue.message)

    # ------------------------------------------------------------- queries

    def ok(self) -> bool:
        """Return True if no FATAL or ERROR issue has been collected."""
        with self._lock.read_locked():
            return self._tally[Severity.FATAL] == 0 and self._tally[Severity.ERROR] == 0

    def has_errors(self) -> bool:
        """Return True if any FATAL or ERROR issue has been collected."""
        with self._lock.read_locked():
            return self._tally[Severity.FATAL] > 0 or self._tally[Severity.ERROR] > 0

    def has_fatal(self) -> bool:
        """Return True if any FATAL issue has been collected."""
        with self._lock.read_locked():
            return self._tally[Severity.FATAL] > 0

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._issues)

    def limit(self) -> int:
        """Return the configured limit (0 = unlimited)."""
        return self._limit

    def limit_reached(self) -> bool:
        """Return True if at least one issue was dropped because of the limit."""
        with self._lock.read_locked():
            return self._limit_reached

    def dropped_count(self) -> int:
        """Return how many issues were dropped because of the limit."""
        with self._lock.read_locked():
            return self._dropped

    # -------------------------------------------------------------- result

    def result(self) -> Result:
        """Return an immutable, deterministically ordered snapshot.

        The snapshot is cached until the next mutation; later collection never
        affects a result that was already returned.
        """
        with self._lock.write_locked():
            if self._cached is not None:
                return self._cached
            result = Result(
                items=tuple(sort_issues(self._issues)),
                limit=self._limit,
                limit_reached=self._limit_reached,
                dropped_count=self._dropped,
            )
            logger.debug(
                "Built result: %d issue(s), %d dropped", len(result.items), self._dropped
            )
            self._cached = result
            return result
