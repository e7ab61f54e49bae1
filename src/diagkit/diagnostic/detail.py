# topmark:header:start
#
#   project      : DiagKit
#   file         : detail.py
#   file_relpath : src/diagkit/diagnostic/detail.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured key/value context attached to issues.

Details let tools inspect an issue without parsing its message. Keys are
plain strings; `DetailKey` lists the standard ones so that producers agree on
spelling. Renaming a standard key is a breaking change for machine consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Detail:
    """A single key/value pair of structured issue context."""

    key: str
    value: str


class DetailKey:
    """Standard detail keys shared by all issue producers."""

    EXPECTED: Final[str] = "expected"
    GOT: Final[str] = "got"
    TYPE_NAME: Final[str] = "type"
    PROPERTY_NAME: Final[str] = "property"
    PREFIX: Final[str] = "prefix"
    RELATION_NAME: Final[str] = "relation"
    PRIMARY_KEY: Final[str] = "pk"
    REASON: Final[str] = "reason"
    FIELD: Final[str] = "field"
    JSON_FIELD: Final[str] = "json_field"
    DETAIL: Final[str] = "detail"
    FORMAT: Final[str] = "format"
    TARGET_TYPE: Final[str] = "target_type"
    TARGET_PK: Final[str] = "target_pk"
    IMPORT_PATH: Final[str] = "path"
    ALIAS: Final[str] = "alias"
    CYCLE: Final[str] = "cycle"
    NAME: Final[str] = "name"
    CONTEXT: Final[str] = "context"
    ID: Final[str] = "id"
    FUNCTION: Final[str] = "function"
    TYPE_SCHEMA: Final[str] = "type_schema"
    IMPORTED_VIA: Final[str] = "imported_via"
    FIRST_ALIAS: Final[str] = "first_alias"
    FIRST_LINE: Final[str] = "first_line"
    DUPLICATE_ALIAS: Final[str] = "duplicate_alias"
    DUPLICATE_LINE: Final[str] = "duplicate_line"
    IMPORT_COUNT: Final[str] = "import_count"


def expected_got(expected: str, got: str) -> list[Detail]:
    """Return ``expected``/``got`` details for a mismatch."""
    return [Detail(DetailKey.EXPECTED, expected), Detail(DetailKey.GOT, got)]


def type_prop(type_name: str, prop_name: str) -> list[Detail]:
    """Return ``type``/``property`` details."""
    return [Detail(DetailKey.TYPE_NAME, type_name), Detail(DetailKey.PROPERTY_NAME, prop_name)]


def type_relation(type_name: str, relation_name: str) -> list[Detail]:
    """Return ``type``/``relation`` details."""
    return [
        Detail(DetailKey.TYPE_NAME, type_name),
        Detail(DetailKey.RELATION_NAME, relation_name),
    ]


def relation_field(relation_name: str, field_name: str) -> list[Detail]:
    """Return ``relation``/``field`` details (edge property problems)."""
    return [Detail(DetailKey.RELATION_NAME, relation_name), Detail(DetailKey.FIELD, field_name)]


def type_field(type_name: str, field_name: str) -> list[Detail]:
    """Return ``type``/``field`` details (instance field problems)."""
    return [Detail(DetailKey.TYPE_NAME, type_name), Detail(DetailKey.FIELD, field_name)]


def path_relation(relation_name: str, json_field_name: str) -> list[Detail]:
    """Return ``relation``/``json_field`` details (path-based relation lookups)."""
    return [
        Detail(DetailKey.RELATION_NAME, relation_name),
        Detail(DetailKey.JSON_FIELD, json_field_name),
    ]
