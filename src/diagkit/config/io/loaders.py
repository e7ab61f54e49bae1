# topmark:header:start
#
#   project      : DiagKit
#   file         : loaders.py
#   file_relpath : src/diagkit/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures. This
is the only place in DiagKit that touches the filesystem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diagkit.config.keys import Toml
from diagkit.config.logging import get_logger

from .guards import get_table_value

if TYPE_CHECKING:
    from pathlib import Path

    from diagkit.config.logging import DiagkitLogger

    from .types import TomlTable

logger: DiagkitLogger = get_logger(__name__)


def parse_toml_text(text: str, *, origin: str = "<string>") -> TomlTable:
    """Parse a TOML document into a plain dict.

    Args:
        text: TOML document text.
        origin: Label used in log messages.

    Returns:
        The parsed content, or an empty dict when the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", origin, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", origin, e)
        return {}
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``diagkit.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    return parse_toml_text(text, origin=str(path))


def unnest_tool_section(data: TomlTable) -> TomlTable:
    """Return the ``[tool.diagkit]`` table when present, else ``data`` unchanged."""
    tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
    nested: TomlTable = get_table_value(tool_tbl, Toml.SECTION_TOOL_NAME)
    if nested:
        logger.trace("Using [tool.%s] section", Toml.SECTION_TOOL_NAME)
        return nested
    return data
