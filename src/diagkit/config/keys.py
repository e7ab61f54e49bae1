# topmark:header:start
#
#   project      : DiagKit
#   file         : keys.py
#   file_relpath : src/diagkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DiagKit configuration.

Keys defined here are external configuration API: renaming or removing one is
a breaking change. They apply to standalone ``diagkit.toml`` documents and to
``[tool.diagkit]`` inside ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DiagKit configuration."""

    # pyproject.toml nesting: [tool.diagkit]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "diagkit"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_EXCERPTS: Final[str] = "excerpts"
    KEY_MAX_LINE_COLUMNS: Final[str] = "max_line_columns"
    KEY_MODULE_ROOT: Final[str] = "module_root"
    KEY_COLORS: Final[str] = "colors"
    KEY_DISTINGUISH_FATAL: Final[str] = "distinguish_fatal"
    KEY_TRUNCATION_INDICATOR: Final[str] = "truncation_indicator"
    KEY_LSP_BYTE_FALLBACK: Final[str] = "lsp_byte_fallback"
    KEY_LSP_SOURCE: Final[str] = "lsp_source"

    # [collect]
    SECTION_COLLECT: Final[str] = "collect"

    KEY_LIMIT: Final[str] = "limit"

    # Allowed top-level keys; anything else is reported as unknown.
    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({SECTION_RENDER, SECTION_COLLECT})

    ALLOWED_RENDER_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_EXCERPTS,
            KEY_MAX_LINE_COLUMNS,
            KEY_MODULE_ROOT,
            KEY_COLORS,
            KEY_DISTINGUISH_FATAL,
            KEY_TRUNCATION_INDICATOR,
            KEY_LSP_BYTE_FALLBACK,
            KEY_LSP_SOURCE,
        }
    )

    ALLOWED_COLLECT_KEYS: Final[frozenset[str]] = frozenset({KEY_LIMIT})
