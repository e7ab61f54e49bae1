# topmark:header:start
#
#   project      : DiagKit
#   file         : model.py
#   file_relpath : src/diagkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for rendering and collection.

This module defines immutable runtime snapshots and their mutable builders:
    - `RendererConfig` / `MutableRendererConfig`: the ``[render]`` table.
    - `CollectorConfig` / `MutableCollectorConfig`: the ``[collect]`` table.
    - `DiagkitConfig` / `MutableDiagkitConfig`: a whole document, plus the
      config files it came from and the warnings raised while parsing it.

Immutability:
    Frozen snapshots are what `Renderer` and `Collector` consume. Use ``thaw()``
    → edit → ``freeze()`` for safe updates. ``freeze()`` sanitizes values
    (negative limits and column counts become ``0``) and resolves the color
    mode against the environment once, so a frozen config never changes
    behavior afterwards.

TOML schema:
    ```toml
    [render]
    excerpts = true
    max_line_columns = 120
    module_root = "/work/project"
    colors = "auto"                # bool or "auto" / "always" / "never"
    distinguish_fatal = false
    truncation_indicator = "..."
    lsp_byte_fallback = "omit"     # or "approximate"
    lsp_source = "diagkit"

    [collect]
    limit = 100                    # 0 = unlimited
    ```

    The same tables are accepted under ``[tool.diagkit]`` in ``pyproject.toml``.
    Ill-typed or unknown values are reported as warnings and defaults are kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from diagkit.config.io import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_keyed_enum_value_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    parse_toml_text,
    unnest_tool_section,
    warn_unknown_keys,
)
from diagkit.config.keys import Toml
from diagkit.config.logging import get_logger
from diagkit.constants import (
    DEFAULT_LSP_SOURCE,
    DEFAULT_MAX_LINE_COLUMNS,
    DEFAULT_TRUNCATION_INDICATOR,
    NO_LIMIT,
)
from diagkit.rendering.color import ColorMode, resolve_color_mode
from diagkit.rendering.lsp import LspByteFallback

if TYPE_CHECKING:
    from pathlib import Path

    from diagkit.config.io import TomlTable
    from diagkit.config.logging import DiagkitLogger

logger: DiagkitLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RendererConfig:
    """Immutable renderer settings.

    Attributes:
        excerpts (bool): Append source excerpts to text blocks (needs a source provider).
        max_line_columns (int): Excerpt lines longer than this many characters are
            truncated; ``0`` disables truncation.
        module_root (str): Sources under this root print relative to it.
        colors (bool): Colorize severity labels with ANSI styles.
        distinguish_fatal (bool): Print FATAL as ``fatal`` instead of ``error``.
        truncation_indicator (str): Suffix appended to truncated excerpt lines.
        lsp_byte_fallback (LspByteFallback): Behavior when an LSP position cannot be
            converted exactly.
        lsp_source (str): Value of the ``source`` field of LSP diagnostics.
    """

    excerpts: bool = False
    max_line_columns: int = DEFAULT_MAX_LINE_COLUMNS
    module_root: str = ""
    colors: bool = False
    distinguish_fatal: bool = False
    truncation_indicator: str = DEFAULT_TRUNCATION_INDICATOR
    lsp_byte_fallback: LspByteFallback = LspByteFallback.OMIT
    lsp_source: str = DEFAULT_LSP_SOURCE

    def thaw(self) -> MutableRendererConfig:
        """Return a mutable copy; the resolved color flag becomes ALWAYS/NEVER."""
        return MutableRendererConfig(
            excerpts=self.excerpts,
            max_line_columns=self.max_line_columns,
            module_root=self.module_root,
            color_mode=ColorMode.ALWAYS if self.colors else ColorMode.NEVER,
            distinguish_fatal=self.distinguish_fatal,
            truncation_indicator=self.truncation_indicator,
            lsp_byte_fallback=self.lsp_byte_fallback,
            lsp_source=self.lsp_source,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the ``[render]`` table for this snapshot."""
        return {
            Toml.KEY_EXCERPTS: self.excerpts,
            Toml.KEY_MAX_LINE_COLUMNS: self.max_line_columns,
            Toml.KEY_MODULE_ROOT: self.module_root,
            Toml.KEY_COLORS: self.colors,
            Toml.KEY_DISTINGUISH_FATAL: self.distinguish_fatal,
            Toml.KEY_TRUNCATION_INDICATOR: self.truncation_indicator,
            Toml.KEY_LSP_BYTE_FALLBACK: self.lsp_byte_fallback.key,
            Toml.KEY_LSP_SOURCE: self.lsp_source,
        }


@dataclass(frozen=True, slots=True)
class CollectorConfig:
    """Immutable collector settings.

    Attributes:
        limit (int): Maximum number of stored issues; ``0`` means unlimited.
    """

    limit: int = NO_LIMIT

    def thaw(self) -> MutableCollectorConfig:
        """Return a mutable copy."""
        return MutableCollectorConfig(limit=self.limit)


@dataclass(frozen=True, slots=True)
class DiagkitConfig:
    """Immutable snapshot of a whole configuration document."""

    render: RendererConfig = field(default_factory=RendererConfig)
    collect: CollectorConfig = field(default_factory=CollectorConfig)
    config_files: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def thaw(self) -> MutableDiagkitConfig:
        """Return a mutable copy."""
        return MutableDiagkitConfig(
            render=self.render.thaw(),
            collect=self.collect.thaw(),
            config_files=list(self.config_files),
            warnings=list(self.warnings),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the document as TOML-serializable tables."""
        return {
            Toml.SECTION_RENDER: self.render.to_toml_dict(),
            Toml.SECTION_COLLECT: {Toml.KEY_LIMIT: self.collect.limit},
        }


# -------------------------- Mutable builders --------------------------


@dataclass
class MutableRendererConfig:
    """Mutable renderer settings; ``color_mode`` is resolved at freeze time."""

    excerpts: bool = False
    max_line_columns: int = DEFAULT_MAX_LINE_COLUMNS
    module_root: str = ""
    color_mode: ColorMode = ColorMode.NEVER
    distinguish_fatal: bool = False
    truncation_indicator: str = DEFAULT_TRUNCATION_INDICATOR
    lsp_byte_fallback: LspByteFallback = LspByteFallback.OMIT
    lsp_source: str = DEFAULT_LSP_SOURCE

    def freeze(self) -> RendererConfig:
        """Sanitize and freeze into a `RendererConfig`."""
        max_cols: int = self.max_line_columns
        if max_cols < 0:
            logger.debug("Negative max_line_columns %d disables truncation", max_cols)
            max_cols = 0
        return RendererConfig(
            excerpts=self.excerpts,
            max_line_columns=max_cols,
            module_root=self.module_root,
            colors=resolve_color_mode(self.color_mode),
            distinguish_fatal=self.distinguish_fatal,
            truncation_indicator=self.truncation_indicator,
            lsp_byte_fallback=self.lsp_byte_fallback,
            lsp_source=self.lsp_source,
        )

    @classmethod
    def from_defaults(cls) -> MutableRendererConfig:
        """Return the default renderer settings."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableRendererConfig:
        """Return the renderer settings of a parsed configuration document."""
        return MutableDiagkitConfig.from_toml_dict(data).render

    @classmethod
    def from_toml_text(cls, text: str) -> MutableRendererConfig:
        """Return the renderer settings of a TOML document."""
        return MutableDiagkitConfig.from_toml_text(text).render

    def apply_toml_table(self, tbl: TomlTable, *, warnings: list[str]) -> None:
        """Overlay the values of a ``[render]`` table onto this builder."""
        where: str = f"[{Toml.SECTION_RENDER}]"
        warn_unknown_keys(tbl, Toml.ALLOWED_RENDER_KEYS, where=where, warnings=warnings)

        excerpts: bool | None = get_bool_value_or_none_checked(
            tbl, Toml.KEY_EXCERPTS, where=where, warnings=warnings
        )
        if excerpts is not None:
            self.excerpts = excerpts

        max_cols: int | None = get_int_value_or_none_checked(
            tbl, Toml.KEY_MAX_LINE_COLUMNS, where=where, warnings=warnings
        )
        if max_cols is not None:
            self.max_line_columns = max_cols

        module_root: str | None = get_string_value_or_none_checked(
            tbl, Toml.KEY_MODULE_ROOT, where=where, warnings=warnings
        )
        if module_root is not None:
            self.module_root = module_root

        # colors accepts either a boolean or a color mode token
        raw_colors: Any | None = tbl.get(Toml.KEY_COLORS)
        if isinstance(raw_colors, bool):
            self.color_mode = ColorMode.ALWAYS if raw_colors else ColorMode.NEVER
        else:
            mode: ColorMode | None = get_keyed_enum_value_checked(
                tbl, Toml.KEY_COLORS, ColorMode, where=where, warnings=warnings
            )
            if mode is not None:
                self.color_mode = mode

        distinguish: bool | None = get_bool_value_or_none_checked(
            tbl, Toml.KEY_DISTINGUISH_FATAL, where=where, warnings=warnings
        )
        if distinguish is not None:
            self.distinguish_fatal = distinguish

        indicator: str | None = get_string_value_or_none_checked(
            tbl, Toml.KEY_TRUNCATION_INDICATOR, where=where, warnings=warnings
        )
        if indicator is not None:
            self.truncation_indicator = indicator

        fallback: LspByteFallback | None = get_keyed_enum_value_checked(
            tbl, Toml.KEY_LSP_BYTE_FALLBACK, LspByteFallback, where=where, warnings=warnings
        )
        if fallback is not None:
            self.lsp_byte_fallback = fallback

        lsp_source: str | None = get_string_value_or_none_checked(
            tbl, Toml.KEY_LSP_SOURCE, where=where, warnings=warnings
        )
        if lsp_source is not None:
            self.lsp_source = lsp_source


@dataclass
class MutableCollectorConfig:
    """Mutable collector settings."""

    limit: int = NO_LIMIT

    def freeze(self) -> CollectorConfig:
        """Sanitize and freeze into a `CollectorConfig` (negative limits become 0)."""
        if self.limit < 0:
            logger.debug("Negative collector limit %d means unlimited", self.limit)
        return CollectorConfig(limit=max(self.limit, NO_LIMIT))

    def apply_toml_table(self, tbl: TomlTable, *, warnings: list[str]) -> None:
        """Overlay the values of a ``[collect]`` table onto this builder."""
        where: str = f"[{Toml.SECTION_COLLECT}]"
        warn_unknown_keys(tbl, Toml.ALLOWED_COLLECT_KEYS, where=where, warnings=warnings)
        limit: int | None = get_int_value_or_none_checked(
            tbl, Toml.KEY_LIMIT, where=where, warnings=warnings
        )
        if limit is not None:
            self.limit = limit


@dataclass
class MutableDiagkitConfig:
    """Mutable builder for a whole configuration document."""

    render: MutableRendererConfig = field(default_factory=MutableRendererConfig)
    collect: MutableCollectorConfig = field(default_factory=MutableCollectorConfig)
    config_files: list[str] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> DiagkitConfig:
        """Freeze into a `DiagkitConfig`."""
        return DiagkitConfig(
            render=self.render.freeze(),
            collect=self.collect.freeze(),
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )

    @classmethod
    def from_defaults(cls) -> MutableDiagkitConfig:
        """Return a builder holding the default settings."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableDiagkitConfig:
        """Create a builder from a parsed TOML document.

        ``[tool.diagkit]`` nesting is unwrapped first. Unknown sections and keys,
        and ill-typed values, are recorded in ``warnings``.
        """
        tool_tbl: TomlTable = unnest_tool_section(data)
        draft: MutableDiagkitConfig = cls()

        top_level: TomlTable = {k: v for k, v in tool_tbl.items() if k != Toml.SECTION_TOOL}
        warn_unknown_keys(
            top_level, Toml.ALLOWED_TOP_LEVEL_KEYS, where="<document>", warnings=draft.warnings
        )

        render_tbl: TomlTable = get_table_value(tool_tbl, Toml.SECTION_RENDER)
        logger.trace("TOML [render]: %s", render_tbl)
        draft.render.apply_toml_table(render_tbl, warnings=draft.warnings)

        collect_tbl: TomlTable = get_table_value(tool_tbl, Toml.SECTION_COLLECT)
        logger.trace("TOML [collect]: %s", collect_tbl)
        draft.collect.apply_toml_table(collect_tbl, warnings=draft.warnings)

        return draft

    @classmethod
    def from_toml_text(cls, text: str) -> MutableDiagkitConfig:
        """Create a builder from TOML text (invalid TOML yields the defaults)."""
        return cls.from_toml_dict(parse_toml_text(text))

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableDiagkitConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.diagkit]`` section is required.

        Returns:
            MutableDiagkitConfig | None: The builder, or None when a pyproject file
                has no ``[tool.diagkit]`` section.
        """
        logger.debug("Creating MutableDiagkitConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == "pyproject.toml":
            tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
            if not get_table_value(tool_tbl, Toml.SECTION_TOOL_NAME):
                logger.warning(
                    "[tool.%s] section missing or malformed in %s", Toml.SECTION_TOOL_NAME, path
                )
                return None
        draft: MutableDiagkitConfig = cls.from_toml_dict(data)
        draft.config_files = [str(path)]
        logger.debug("Generated MutableDiagkitConfig: %s", draft)
        return draft
