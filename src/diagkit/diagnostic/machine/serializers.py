# topmark:header:start
#
#   project      : DiagKit
#   file         : serializers.py
#   file_relpath : src/diagkit/diagnostic/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON/NDJSON serialization of issues and results.

This module turns domain values into strings via the wire schemas in
[`diagkit.diagnostic.machine.schemas`][diagkit.diagnostic.machine.schemas].
It is side-effect free and never prints.

Conventions:
- JSON output is compact (no whitespace) and keeps wire key order, so equal
  inputs always serialize to identical bytes.
- `json.dumps()` does not append a trailing newline.
- `serialize_issues_ndjson()` returns one issue per line and *does* end with a
  final `\\n` (empty input yields the empty string).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

from diagkit.diagnostic.machine.schemas import WireIssue, WireResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from diagkit.diagnostic.issue import Issue
    from diagkit.diagnostic.result import Result

_SEPARATORS: Final[tuple[str, str]] = (",", ":")


def serialize_json_object(obj: object) -> str:
    """Serialize an already-shaped object to compact JSON (no trailing newline)."""
    return json.dumps(obj, separators=_SEPARATORS, ensure_ascii=False)


def issue_to_wire(issue: Issue) -> dict[str, object]:
    """Return the wire dict of an issue."""
    return WireIssue.from_issue(issue).to_dict()


def result_to_wire(result: Result) -> dict[str, object]:
    """Return the wire dict of a result."""
    return WireResult.from_result(result).to_dict()


def serialize_issue_json(issue: Issue) -> str:
    """Serialize one issue to compact JSON."""
    return serialize_json_object(issue_to_wire(issue))


def serialize_result_json(result: Result) -> str:
    """Serialize a result to compact JSON (``{"issues":[]}`` when empty)."""
    return serialize_json_object(result_to_wire(result))


def iter_issue_ndjson_strings(issues: Iterable[Issue]) -> Iterator[str]:
    """Yield one compact JSON string per issue (no trailing newline)."""
    for issue in issues:
        yield serialize_issue_json(issue)


def serialize_issues_ndjson(issues: Iterable[Issue]) -> str:
    """Serialize issues as newline-delimited JSON."""
    lines: list[str] = list(iter_issue_ndjson_strings(issues))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
