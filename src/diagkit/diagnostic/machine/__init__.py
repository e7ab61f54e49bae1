# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON/NDJSON) representations of issues and results.

Layers:
    * [`schemas`][diagkit.diagnostic.machine.schemas]: typed wire dataclasses.
    * [`serializers`][diagkit.diagnostic.machine.serializers]: string output.
"""

from __future__ import annotations

from diagkit.diagnostic.machine.schemas import (
    WireDetail,
    WireIssue,
    WirePosition,
    WireRelated,
    WireResult,
    WireSpan,
)
from diagkit.diagnostic.machine.serializers import (
    issue_to_wire,
    result_to_wire,
    serialize_issue_json,
    serialize_issues_ndjson,
    serialize_json_object,
    serialize_result_json,
)

__all__ = [
    "WireDetail",
    "WireIssue",
    "WirePosition",
    "WireRelated",
    "WireResult",
    "WireSpan",
    "issue_to_wire",
    "result_to_wire",
    "serialize_issue_json",
    "serialize_issues_ndjson",
    "serialize_json_object",
    "serialize_result_json",
]
