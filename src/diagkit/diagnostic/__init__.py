# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Issue data model, collection and ordering.

Design:
    - Issues are immutable `Issue` records built through `new_issue` /
      `from_issue`.
    - Producers feed a thread-safe `Collector`; `Collector.result` returns an
      immutable, deterministically ordered `Result`.
    - Codes form a closed catalog (see
      [`diagkit.diagnostic.codes`][diagkit.diagnostic.codes]).

Machine output:
    JSON/NDJSON representations live under
    [`diagkit.diagnostic.machine`][diagkit.diagnostic.machine].
"""

from __future__ import annotations

from diagkit.diagnostic.codes import (
    Code,
    CodeCategory,
    all_codes,
    codes_by_category,
    lookup_code,
)
from diagkit.diagnostic.collector import Collector
from diagkit.diagnostic.detail import Detail, DetailKey
from diagkit.diagnostic.errors import (
    ContractViolationError,
    DiagkitError,
    SourceKeyCollisionError,
)
from diagkit.diagnostic.issue import Issue, IssueBuilder, from_issue, new_issue
from diagkit.diagnostic.location import Position, RelatedInfo, SourceId, Span
from diagkit.diagnostic.ordering import compare_issues, issue_sort_key, sort_issues
from diagkit.diagnostic.result import Result, ok_result
from diagkit.diagnostic.severity import Severity, SeverityCounts
from diagkit.diagnostic.sources import LineIndexProvider, SourceProvider, SourceRegistry

__all__ = [
    "Code",
    "CodeCategory",
    "Collector",
    "ContractViolationError",
    "Detail",
    "DetailKey",
    "DiagkitError",
    "Issue",
    "IssueBuilder",
    "LineIndexProvider",
    "Position",
    "RelatedInfo",
    "Result",
    "Severity",
    "SeverityCounts",
    "SourceId",
    "SourceKeyCollisionError",
    "SourceProvider",
    "SourceRegistry",
    "Span",
    "all_codes",
    "codes_by_category",
    "compare_issues",
    "from_issue",
    "issue_sort_key",
    "lookup_code",
    "new_issue",
    "ok_result",
    "sort_issues",
]
