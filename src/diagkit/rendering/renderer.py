# topmark:header:start
#
#   project      : DiagKit
#   file         : renderer.py
#   file_relpath : src/diagkit/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render issues and results as text, JSON or LSP diagnostics.

A `Renderer` is configured once with a frozen `RendererConfig` and an optional
`SourceProvider`. It holds no mutable state afterwards, so a single instance
can be shared between threads as long as its provider supports concurrent
reads (`SourceRegistry` does).

Graceful degradation:
    - Without a provider, excerpts are skipped and LSP positions fall back to
      the configured `LspByteFallback`.
    - Issues without a usable span produce no LSP diagnostic.

Example:
    ```python
    registry = SourceRegistry()
    registry.register(src, b"let x = 1\\n")
    renderer = Renderer(RendererConfig(excerpts=True), provider=registry)
    print(renderer.format_result(collector.result()))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagkit.config.logging import get_logger
from diagkit.config.model import RendererConfig
from diagkit.diagnostic.machine.serializers import (
    issue_to_wire,
    result_to_wire,
    serialize_issue_json,
    serialize_issues_ndjson,
    serialize_json_object,
    serialize_result_json,
)
from diagkit.rendering.lsp import LspConverter
from diagkit.rendering.text import (
    format_excerpt,
    format_location,
    format_related,
    format_severity,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagkit.config.logging import DiagkitLogger
    from diagkit.diagnostic.issue import Issue
    from diagkit.diagnostic.result import Result
    from diagkit.diagnostic.sources import SourceProvider
    from diagkit.rendering.lsp import LspDiagnostic

logger: DiagkitLogger = get_logger(__name__)


class Renderer:
    """Stateless formatter for issues and results.

    Args:
        config: Frozen renderer settings; defaults to `RendererConfig()`.
        provider: Optional source content lookup for excerpts and UTF-16 offsets.
    """

    def __init__(
        self,
        config: RendererConfig | None = None,
        *,
        provider: SourceProvider | None = None,
    ) -> None:
        self._config: RendererConfig = config if config is not None else RendererConfig()
        self._provider: SourceProvider | None = provider
        self._lsp: LspConverter = LspConverter(
            provider,
            fallback=self._config.lsp_byte_fallback,
            source_name=self._config.lsp_source,
        )
        if self._config.excerpts and provider is None:
            logger.debug("Excerpts requested without a source provider; they will be skipped")

    @property
    def config(self) -> RendererConfig:
        """The frozen configuration of this renderer."""
        return self._config

    @property
    def provider(self) -> SourceProvider | None:
        """The source content provider, if any."""
        return self._provider

    def __repr__(self) -> str:
        return f"Renderer(config={self._config!r}, provider={self._provider!r})"

    # ---------------------------------------------------------------- text

    def format_issue(self, issue: Issue) -> str:
        """Return the text block of one issue (no trailing newline)."""
        cfg: RendererConfig = self._config
        parts: list[str] = [
            format_location(issue, module_root=cfg.module_root),
            ": ",
            format_severity(
                issue.severity, colors=cfg.colors, distinguish_fatal=cfg.distinguish_fatal
            ),
            f"[{issue.code}]: ",
            issue.message,
        ]
        if issue.hint:
            parts.append(f"\n  hint: {issue.hint}")
        if cfg.excerpts and self._provider is not None and issue.has_span():
            content: bytes | None = self._provider.content(issue.span)
            if content is not None:
                parts.append(
                    format_excerpt(
                        issue.span,
                        content,
                        max_columns=cfg.max_line_columns,
                        truncation_indicator=cfg.truncation_indicator,
                    )
                )
        parts.append(format_related(issue, module_root=cfg.module_root))
        return "".join(parts)

    def format_issues(self, issues: Iterable[Issue]) -> str:
        """Return the text blocks of ``issues`` joined by newlines (``""`` when empty)."""
        return "\n".join(self.format_issue(issue) for issue in issues)

    def format_result(self, result: Result) -> str:
        """Return the text blocks of every issue in ``result``, in result order."""
        return self.format_issues(result.issues())

    # ---------------------------------------------------------------- JSON

    def issue_to_wire(self, issue: Issue) -> dict[str, object]:
        """Return the JSON wire shape of an issue as plain Python values."""
        return issue_to_wire(issue)

    def result_to_wire(self, result: Result) -> dict[str, object]:
        """Return the JSON wire shape of a result as plain Python values."""
        return result_to_wire(result)

    def format_issue_json(self, issue: Issue) -> str:
        """Return the compact JSON text of an issue."""
        return serialize_issue_json(issue)

    def format_result_json(self, result: Result) -> str:
        """Return the compact JSON text of a result."""
        return serialize_result_json(result)

    def format_result_ndjson(self, result: Result) -> str:
        """Return one compact JSON issue per line (``""`` when empty)."""
        return serialize_issues_ndjson(result.issues())

    # ----------------------------------------------------------------- LSP

    def lsp_diagnostic(self, issue: Issue) -> LspDiagnostic | None:
        """Convert an issue to an LSP diagnostic.

        Returns:
            LspDiagnostic | None: None when the issue has no span, its start is
            unknown, or its start cannot be converted under the ``omit`` fallback.
        """
        return self._lsp.diagnostic(issue)

    def lsp_diagnostics(self, result: Result) -> list[LspDiagnostic]:
        """Convert every convertible issue of ``result``; never returns None."""
        out: list[LspDiagnostic] = []
        for issue in result.issues():
            diag: LspDiagnostic | None = self._lsp.diagnostic(issue)
            if diag is not None:
                out.append(diag)
        skipped: int = len(result) - len(out)
        if skipped:
            logger.debug("Skipped %d issue(s) without a convertible span", skipped)
        return out

    def format_lsp_json(self, result: Result) -> str:
        """Return the LSP diagnostics of ``result`` as a compact JSON array."""
        return serialize_json_object([d.to_dict() for d in self.lsp_diagnostics(result)])
