# topmark:header:start
#
#   project      : DiagKit
#   file         : errors.py
#   file_relpath : src/diagkit/diagnostic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception types raised by DiagKit.

Two taxonomies are kept apart:

- `ContractViolationError` signals a *programmer error* (an invalid issue
  handed to a construction or collection entry point). It is never caught
  inside DiagKit and must not be swallowed by callers either.
- Recoverable conditions (such as `SourceKeyCollisionError`) derive from
  `DiagkitError` only.

Issues themselves are data, not exceptions: a non-OK `Result` is a
successful run that found problems.
"""

from __future__ import annotations


class DiagkitError(Exception):
    """Base class for all DiagKit exceptions."""


class ContractViolationError(DiagkitError, AssertionError):
    """A caller broke a precondition of a DiagKit entry point.

    Also an `AssertionError`: a failed precondition is a bug in the caller.
    """


class SourceKeyCollisionError(DiagkitError):
    """A source was registered twice with different content."""

    def __init__(self, source: str) -> None:
        super().__init__(f"source {source!r} already registered with different content")
        self.source: str = source
