# topmark:header:start
#
#   project      : DiagKit
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading helpers and checked getters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagkit.config.io import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_keyed_enum_value_checked,
    get_string_value_or_none_checked,
    get_table_value,
    is_toml_table,
    load_toml_dict,
    parse_toml_text,
    unnest_tool_section,
    warn_unknown_keys,
)
from diagkit.rendering.lsp import LspByteFallback
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_toml_text_returns_plain_dicts() -> None:
    """Parsed documents are plain Python containers."""
    data = parse_toml_text('[render]\nexcerpts = true\nmodule_root = "/x"\n')
    assert data == {"render": {"excerpts": True, "module_root": "/x"}}
    assert type(data["render"]) is dict


def test_parse_invalid_toml_yields_empty_dict() -> None:
    """Invalid TOML is logged and treated as empty."""
    assert parse_toml_text("[render\nexcerpts = ") == {}


def test_load_missing_file(tmp_path: Path) -> None:
    """A missing file is an empty document."""
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_load_file(tmp_path: Path) -> None:
    """Files are read as UTF-8."""
    path = tmp_path / "diagkit.toml"
    path.write_text('[render]\ntruncation_indicator = "…"\n', encoding="utf-8")
    assert load_toml_dict(path) == {"render": {"truncation_indicator": "…"}}


def test_unnest_tool_section() -> None:
    """Only a non-empty [tool.diagkit] table is unwrapped."""
    nested = {"tool": {"diagkit": {"collect": {"limit": 3}}}, "project": {}}
    assert unnest_tool_section(nested) == {"collect": {"limit": 3}}
    plain = {"collect": {"limit": 3}}
    assert unnest_tool_section(plain) is plain
    other_tool = {"tool": {"ruff": {}}}
    assert unnest_tool_section(other_tool) is other_tool


def test_table_guards() -> None:
    """Non-table values read as empty tables."""
    assert is_toml_table({"a": 1})
    assert not is_toml_table([1])
    assert get_table_value({"render": 3}, "render") == {}
    assert get_table_value({}, "render") == {}


@parametrize(
    "value, expected, message",
    [
        (True, True, None),
        (None, None, None),
        (1, None, "Expected bool in [render].excerpts, got int: 1"),
        ("yes", None, "Expected bool in [render].excerpts, got str: 'yes'"),
    ],
)
def test_bool_getter(value: object, expected: bool | None, message: str | None) -> None:
    """Booleans are never coerced."""
    warnings: list[str] = []
    tbl = {} if value is None else {"excerpts": value}
    got = get_bool_value_or_none_checked(tbl, "excerpts", where="[render]", warnings=warnings)
    assert got is expected
    assert warnings == ([] if message is None else [message])


def test_int_getter_rejects_bool() -> None:
    """``true`` is not an integer limit."""
    warnings: list[str] = []
    assert get_int_value_or_none_checked(
        {"limit": True}, "limit", where="[collect]", warnings=warnings
    ) is None
    assert warnings == ["Expected int in [collect].limit, got bool: True"]
    assert get_int_value_or_none_checked({"limit": 7}, "limit", where="x", warnings=warnings) == 7


def test_string_getter() -> None:
    """Strings pass; other types warn."""
    warnings: list[str] = []
    assert get_string_value_or_none_checked({"k": "v"}, "k", where="[t]", warnings=warnings) == "v"
    assert get_string_value_or_none_checked({"k": 2}, "k", where="[t]", warnings=warnings) is None
    assert warnings == ["Expected string in [t].k, got int: 2"]


@parametrize(
    "token, expected",
    [
        ("omit", LspByteFallback.OMIT),
        ("APPROXIMATE", LspByteFallback.APPROXIMATE),
        ("approx", LspByteFallback.APPROXIMATE),
    ],
)
def test_enum_getter(token: str, expected: LspByteFallback) -> None:
    """Keys, names and aliases are accepted."""
    warnings: list[str] = []
    got = get_keyed_enum_value_checked(
        {"lsp_byte_fallback": token},
        "lsp_byte_fallback",
        LspByteFallback,
        where="[render]",
        warnings=warnings,
    )
    assert got is expected
    assert warnings == []


def test_enum_getter_lists_allowed_keys() -> None:
    """Unknown tokens name the accepted keys."""
    warnings: list[str] = []
    got = get_keyed_enum_value_checked(
        {"lsp_byte_fallback": "x"},
        "lsp_byte_fallback",
        LspByteFallback,
        where="[render]",
        warnings=warnings,
    )
    assert got is None
    assert warnings == ["Invalid value for [render].lsp_byte_fallback: 'x' (allowed: omit, approximate)"]


def test_warn_unknown_keys_sorted() -> None:
    """Unknown keys are reported in sorted order."""
    warnings: list[str] = []
    warn_unknown_keys({"b": 1, "a": 2, "ok": 3}, frozenset({"ok"}), where="[render]", warnings=warnings)
    assert warnings == ["Unknown key in [render]: 'a'", "Unknown key in [render]: 'b'"]
