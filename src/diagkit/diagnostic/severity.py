# topmark:header:start
#
#   project      : DiagKit
#   file         : severity.py
#   file_relpath : src/diagkit/diagnostic/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity levels and per-severity counts.

Severities are ordered by importance with *lower* ordinals being *more* severe:
``FATAL < ERROR < WARNING < INFO < HINT``. The lowercase labels are part of the
JSON wire format and must not change.

Sections:
    * Severity: the closed, ordered severity enumeration.
    * SeverityCounts: immutable per-severity totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from diagkit.core.enum_mixins import enum_from_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class Severity(IntEnum):
    """Ordered severity of an issue; a lower value is more severe."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    HINT = 4

    @property
    def label(self) -> str:
        """Return the stable lowercase label (e.g. ``"warning"``)."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.label

    def is_failure(self) -> bool:
        """Return True for severities that make a run fail (FATAL and ERROR)."""
        return self <= Severity.ERROR

    def is_more_severe_than(self, other: Severity) -> bool:
        """Return True if this severity is strictly more severe than ``other``."""
        return self < other

    def is_at_least_as_severe_as(self, other: Severity) -> bool:
        """Return True if this severity is as severe as ``other`` or more."""
        return self <= other

    @classmethod
    def is_defined(cls, value: object) -> bool:
        """Return True if ``value`` is an integer within the defined ordinal range.

        Booleans are rejected even though they are ``int`` subclasses.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return cls.FATAL <= value <= cls.HINT

    @classmethod
    def from_label(cls, label: str | None) -> Severity | None:
        """Parse a severity label case-insensitively; return None on miss."""
        return enum_from_name(cls, label, case_insensitive=True)


SEVERITY_COUNT: int = len(Severity)


@dataclass(frozen=True, slots=True)
class SeverityCounts:
    """Aggregated counts of issues by severity.

    Attributes:
        fatal: Number of FATAL issues.
        errors: Number of ERROR issues.
        warnings: Number of WARNING issues.
        info: Number of INFO issues.
        hints: Number of HINT issues.
    """

    fatal: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0
    hints: int = 0

    @property
    def total(self) -> int:
        """Return the total count of issues."""
        return self.fatal + self.errors + self.warnings + self.info + self.hints

    @classmethod
    def from_tally(cls, tally: Sequence[int]) -> SeverityCounts:
        """Build counts from a tally indexed by severity ordinal."""
        return cls(
            fatal=tally[Severity.FATAL],
            errors=tally[Severity.ERROR],
            warnings=tally[Severity.WARNING],
            info=tally[Severity.INFO],
            hints=tally[Severity.HINT],
        )

    @classmethod
    def from_severities(cls, severities: Iterable[Severity]) -> SeverityCounts:
        """Count the given severities."""
        tally: list[int] = [0] * SEVERITY_COUNT
        for sev in severities:
            tally[sev] += 1
        return cls.from_tally(tally)

    def of(self, severity: Severity) -> int:
        """Return the count for a single severity."""
        return (self.fatal, self.errors, self.warnings, self.info, self.hints)[severity]
