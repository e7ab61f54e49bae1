# topmark:header:start
#
#   project      : DiagKit
#   file         : text.py
#   file_relpath : src/diagkit/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable text blocks for issues.

Block layout (one issue, no trailing newline):

    ```text
    <location>: <severity>[<CODE>]: <message>
      hint: <hint>

       |
    12 | let x = foo(bar)
       |         ^^^
      note: <related message>
        --> <related location>
    ```

Helpers in this module are pure functions over their arguments; `Renderer`
wires them to its configuration and source provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagkit.constants import UNKNOWN_LOCATION_TEXT
from diagkit.rendering.color import severity_label
from diagkit.utils.text import split_lines

if TYPE_CHECKING:
    from diagkit.diagnostic.issue import Issue
    from diagkit.diagnostic.location import Span
    from diagkit.diagnostic.severity import Severity


def relative_source(source: str, module_root: str) -> str:
    """Return ``source`` relative to ``module_root`` when it lies under it.

    A source equal to the root renders as ``"."``; unrelated sources and an
    empty root leave ``source`` unchanged.
    """
    root: str = module_root.removesuffix("/")
    if not root:
        return source
    if source == root:
        return "."
    prefix: str = root + "/"
    if source.startswith(prefix):
        return source[len(prefix) :]
    return source


def format_span_location(span: Span, *, module_root: str = "") -> str:
    """Return ``source:line:column`` (or just ``source`` when the start is unknown)."""
    source: str = relative_source(str(span.source), module_root)
    if span.start.is_known():
        return f"{source}:{span.start.line}:{span.start.column}"
    return source


def format_location(issue: Issue, *, module_root: str = "") -> str:
    """Return the location prefix of an issue block.

    Precedence: span location, then ``source_name path`` (or the bare path),
    then the source name alone, then ``<unknown>``.
    """
    if issue.has_span():
        return format_span_location(issue.span, module_root=module_root)
    if issue.path:
        if issue.source_name:
            return f"{issue.source_name} {issue.path}"
        return issue.path
    if issue.source_name:
        return issue.source_name
    return UNKNOWN_LOCATION_TEXT


def format_severity(
    severity: Severity, *, colors: bool = False, distinguish_fatal: bool = False
) -> str:
    """Return the (optionally colorized) severity label."""
    return severity_label(severity, distinguish_fatal=distinguish_fatal).render(enabled=colors)


def extract_line(content: bytes, line: int) -> bytes:
    """Return 1-based ``line`` of ``content`` without its terminator (empty when out of range)."""
    if line < 1:
        return b""
    lines: list[bytes] = split_lines(content)
    if line > len(lines):
        return b""
    return lines[line - 1]


def format_excerpt(
    span: Span,
    content: bytes,
    *,
    max_columns: int,
    truncation_indicator: str,
) -> str:
    """Return the source excerpt for ``span`` (leading newline included), or ``""``.

    The excerpt is a gutter line, the numbered source line and an underline row
    of carets under the span. Lines longer than ``max_columns`` characters are
    truncated and suffixed with ``truncation_indicator`` (``max_columns <= 0``
    disables truncation). The underline row is omitted when the span starts
    past the displayed text.
    """
    start = span.start
    if not start.is_known():
        return ""
    raw: bytes = extract_line(content, start.line)
    if not raw:
        return ""
    line: str = raw.decode("utf-8", errors="replace")

    display: str = line
    if max_columns > 0 and len(line) > max_columns:
        display = line[:max_columns] + truncation_indicator

    num: str = str(start.line)
    pad: str = " " * len(num)
    parts: list[str] = [f"\n   {pad}|\n", f"{num} | {display}"]

    start_col: int = max(start.column, 1)
    if start_col > len(display):
        return "".join(parts)

    end_col: int = span.end.column
    if span.is_point() or end_col <= start_col:
        end_col = start_col + 1
    end_col = min(end_col, len(line) + 1, len(display) + 1)
    carets: int = max(end_col - start_col, 1)
    parts.append(f"\n   {pad}| {' ' * (start_col - 1)}{'^' * carets}")
    return "".join(parts)


def format_related(issue: Issue, *, module_root: str = "") -> str:
    """Return the ``note:`` lines for the related entries of ``issue``."""
    parts: list[str] = []
    for rel in issue.related:
        parts.append(f"\n  note: {rel.message}")
        if not rel.span.is_zero():
            parts.append(f"\n    --> {format_span_location(rel.span, module_root=module_root)}")
    return "".join(parts)
