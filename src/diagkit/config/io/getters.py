# topmark:header:start
#
#   project      : DiagKit
#   file         : getters.py
#   file_relpath : src/diagkit/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of one value. A missing key yields
``None``; a present but ill-typed value logs a warning, appends a message to
``warnings`` and also yields ``None``, so callers keep their default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar

from diagkit.config.logging import get_logger
from diagkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from diagkit.config.logging import DiagkitLogger

    from .types import TomlTable

logger: DiagkitLogger = get_logger(__name__)

KS = TypeVar("KS", bound=KeyedStrEnum)


def _warn(warnings: list[str], message: str) -> None:
    logger.warning("%s", message)
    warnings.append(message)


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are not coerced.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    _warn(warnings, f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # bool is a subclass of int; exclude it.
    if isinstance(value, bool):
        _warn(warnings, f"Expected int in {loc}, got bool: {value!r}")
        return None
    if isinstance(value, int):
        return value

    _warn(warnings, f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    _warn(warnings, f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_keyed_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[KS],
    *,
    where: str,
    warnings: list[str],
) -> KS | None:
    """Parse a `KeyedStrEnum` value (key, member name or alias) from TOML.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown token -> warning + None
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, warnings=warnings
    )
    if raw is None:
        return None
    member: KS | None = enum_cls.parse(raw)
    if member is None:
        allowed: str = ", ".join(enum_cls.keys())
        _warn(warnings, f"Invalid value for {where}.{key}: {raw!r} (allowed: {allowed})")
    return member


def warn_unknown_keys(
    table: TomlTable,
    allowed: frozenset[str],
    *,
    where: str,
    warnings: list[str],
) -> None:
    """Warn about every key of ``table`` not in ``allowed`` (sorted for stable output)."""
    for key in sorted(set(table) - allowed):
        _warn(warnings, f"Unknown key in {where}: {key!r}")
