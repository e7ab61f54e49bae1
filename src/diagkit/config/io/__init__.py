# topmark:header:start
#
#   project      : DiagKit
#   file         : __init__.py
#   file_relpath : src/diagkit/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for DiagKit configuration.

DiagKit uses `tomlkit` for parsing. Helpers here never mutate configuration
objects; `diagkit.config.model` consumes the plain dicts they return.

Typical flow:
    1. Load a TOML file (``load_toml_dict``) or text (``parse_toml_text``).
    2. Select ``[tool.diagkit]`` for pyproject documents (``unnest_tool_section``).
    3. Read values with the checked getters.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_keyed_enum_value_checked,
    get_string_value_or_none_checked,
    warn_unknown_keys,
)
from .guards import get_table_value, is_toml_table
from .loaders import load_toml_dict, parse_toml_text, unnest_tool_section
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value_or_none_checked",
    "get_int_value_or_none_checked",
    "get_keyed_enum_value_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_toml_table",
    "load_toml_dict",
    "parse_toml_text",
    "unnest_tool_section",
    "warn_unknown_keys",
]
