# topmark:header:start
#
#   project      : DiagKit
#   file         : codes.py
#   file_relpath : src/diagkit/diagnostic/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed catalog of stable issue codes.

Codes are stable identifiers that tools can match on even when message text
changes. Every code carries a `CodeCategory` describing the semantic domain of
the problem (not necessarily the layer that emits it). Code values are globally
unique across categories.

Only the codes defined in this module form the catalog; `Code` instances built
elsewhere are accepted by the data model but are not returned by `lookup_code`.
The lookup tables are built once, at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class CodeCategory(str, Enum):
    """Semantic domain of an issue code."""

    SENTINEL = "sentinel"
    SCHEMA = "schema"
    SYNTAX = "syntax"
    IMPORT = "import"
    INSTANCE = "instance"
    GRAPH = "graph"
    ADAPTER = "adapter"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Code:
    """Stable programmatic identifier for an issue.

    Attributes:
        value: The code string (e.g. ``"E_TYPE_COLLISION"``); empty for the zero code.
        category: Informational category used for filtering and grouping.
    """

    value: str = ""
    category: CodeCategory = CodeCategory.SENTINEL

    def __str__(self) -> str:
        return self.value

    def is_zero(self) -> bool:
        """Return True if the code is unset."""
        return self.value == ""


ZERO_CODE: Final[Code] = Code()

_CATALOG: list[Code] = []


def _code(value: str, category: CodeCategory) -> Code:
    c = Code(value, category)
    _CATALOG.append(c)
    return c


# Sentinel codes
E_LIMIT_REACHED: Final[Code] = _code("E_LIMIT_REACHED", CodeCategory.SENTINEL)
E_INTERNAL: Final[Code] = _code("E_INTERNAL", CodeCategory.SENTINEL)

# Schema compilation
E_TYPE_COLLISION: Final[Code] = _code("E_TYPE_COLLISION", CodeCategory.SCHEMA)
E_INHERIT_CYCLE: Final[Code] = _code("E_INHERIT_CYCLE", CodeCategory.SCHEMA)
E_SCHEMA_TYPE_NOT_FOUND: Final[Code] = _code("E_SCHEMA_TYPE_NOT_FOUND", CodeCategory.SCHEMA)
E_UNKNOWN_PROPERTY: Final[Code] = _code("E_UNKNOWN_PROPERTY", CodeCategory.SCHEMA)
E_DUPLICATE_PROPERTY: Final[Code] = _code("E_DUPLICATE_PROPERTY", CodeCategory.SCHEMA)
E_DUPLICATE_RELATION: Final[Code] = _code("E_DUPLICATE_RELATION", CodeCategory.SCHEMA)
E_CASE_COLLISION: Final[Code] = _code("E_CASE_COLLISION", CodeCategory.SCHEMA)
E_PROPERTY_RELATION_COLLISION: Final[Code] = _code(
    "E_PROPERTY_RELATION_COLLISION", CodeCategory.SCHEMA
)
E_RELATION_NORMALIZATION_COLLISION: Final[Code] = _code(
    "E_RELATION_NORMALIZATION_COLLISION", CodeCategory.SCHEMA
)
E_RESERVED_PREFIX: Final[Code] = _code("E_RESERVED_PREFIX", CodeCategory.SCHEMA)
E_INVALID_RELATION: Final[Code] = _code("E_INVALID_RELATION", CodeCategory.SCHEMA)
E_INVALID_ASSOCIATION_TARGET: Final[Code] = _code(
    "E_INVALID_ASSOCIATION_TARGET", CodeCategory.SCHEMA
)
E_INVALID_COMPOSITION_TARGET: Final[Code] = _code(
    "E_INVALID_COMPOSITION_TARGET", CodeCategory.SCHEMA
)
E_INVALID_CONSTRAINT: Final[Code] = _code("E_INVALID_CONSTRAINT", CodeCategory.SCHEMA)
E_INVALID_INVARIANT: Final[Code] = _code("E_INVALID_INVARIANT", CodeCategory.SCHEMA)
E_INVALID_NAME: Final[Code] = _code("E_INVALID_NAME", CodeCategory.SCHEMA)
E_UPSTREAM_FAIL: Final[Code] = _code("E_UPSTREAM_FAIL", CodeCategory.SCHEMA)
E_PROPERTY_CONFLICT: Final[Code] = _code("E_PROPERTY_CONFLICT", CodeCategory.SCHEMA)
E_UNKNOWN_TYPE: Final[Code] = _code("E_UNKNOWN_TYPE", CodeCategory.SCHEMA)
E_DUPLICATE_TYPE: Final[Code] = _code("E_DUPLICATE_TYPE", CodeCategory.SCHEMA)
E_RELATION_COLLISION: Final[Code] = _code("E_RELATION_COLLISION", CodeCategory.SCHEMA)
E_MISSING_SOURCE_ID: Final[Code] = _code("E_MISSING_SOURCE_ID", CodeCategory.SCHEMA)
E_INVALID_SYNTHETIC_ID: Final[Code] = _code("E_INVALID_SYNTHETIC_ID", CodeCategory.SCHEMA)

# Lexer / parser
E_SYNTAX: Final[Code] = _code("E_SYNTAX", CodeCategory.SYNTAX)

# Import resolution
E_IMPORT_RESOLVE: Final[Code] = _code("E_IMPORT_RESOLVE", CodeCategory.IMPORT)
E_IMPORT_CYCLE: Final[Code] = _code("E_IMPORT_CYCLE", CodeCategory.IMPORT)
E_INVALID_ALIAS: Final[Code] = _code("E_INVALID_ALIAS", CodeCategory.IMPORT)
E_PATH_ESCAPE: Final[Code] = _code("E_PATH_ESCAPE", CodeCategory.IMPORT)
E_IMPORT_NOT_ALLOWED: Final[Code] = _code("E_IMPORT_NOT_ALLOWED", CodeCategory.IMPORT)
E_DUPLICATE_IMPORT: Final[Code] = _code("E_DUPLICATE_IMPORT", CodeCategory.IMPORT)
E_IMPORT_ALIAS_COLLISION: Final[Code] = _code("E_IMPORT_ALIAS_COLLISION", CodeCategory.IMPORT)

# Instance validation
E_INSTANCE_TYPE_NOT_FOUND: Final[Code] = _code("E_INSTANCE_TYPE_NOT_FOUND", CodeCategory.INSTANCE)
E_ABSTRACT_TYPE: Final[Code] = _code("E_ABSTRACT_TYPE", CodeCategory.INSTANCE)
E_PART_TYPE_DIRECT: Final[Code] = _code("E_PART_TYPE_DIRECT", CodeCategory.INSTANCE)
E_TYPE_MISMATCH: Final[Code] = _code("E_TYPE_MISMATCH", CodeCategory.INSTANCE)
E_MISSING_REQUIRED: Final[Code] = _code("E_MISSING_REQUIRED", CodeCategory.INSTANCE)
E_MISSING_PRIMARY_KEY: Final[Code] = _code("E_MISSING_PRIMARY_KEY", CodeCategory.INSTANCE)
E_UNKNOWN_FIELD: Final[Code] = _code("E_UNKNOWN_FIELD", CodeCategory.INSTANCE)
E_CONSTRAINT_FAIL: Final[Code] = _code("E_CONSTRAINT_FAIL", CodeCategory.INSTANCE)
E_INVARIANT_FAIL: Final[Code] = _code("E_INVARIANT_FAIL", CodeCategory.INSTANCE)
E_EVAL_ERROR: Final[Code] = _code("E_EVAL_ERROR", CodeCategory.INSTANCE)
E_UNKNOWN_BUILTIN: Final[Code] = _code("E_UNKNOWN_BUILTIN", CodeCategory.INSTANCE)
E_MISSING_FK_TARGET: Final[Code] = _code("E_MISSING_FK_TARGET", CodeCategory.INSTANCE)
E_PARTIAL_COMPOSITE_FK: Final[Code] = _code("E_PARTIAL_COMPOSITE_FK", CodeCategory.INSTANCE)
E_UNKNOWN_EDGE_FIELD: Final[Code] = _code("E_UNKNOWN_EDGE_FIELD", CodeCategory.INSTANCE)
E_EDGE_SHAPE_MISMATCH: Final[Code] = _code("E_EDGE_SHAPE_MISMATCH", CodeCategory.INSTANCE)
E_UNRESOLVED_REQUIRED_COMPOSITION: Final[Code] = _code(
    "E_UNRESOLVED_REQUIRED_COMPOSITION", CodeCategory.INSTANCE
)
E_COMPOSITION_NOT_FOUND: Final[Code] = _code("E_COMPOSITION_NOT_FOUND", CodeCategory.INSTANCE)
E_MISSING_TYPE_TAG: Final[Code] = _code("E_MISSING_TYPE_TAG", CodeCategory.INSTANCE)
E_INVALID_TYPE_TAG: Final[Code] = _code("E_INVALID_TYPE_TAG", CodeCategory.INSTANCE)
E_CASE_FOLD_COLLISION: Final[Code] = _code("E_CASE_FOLD_COLLISION", CodeCategory.INSTANCE)

# Format adapters
E_ADAPTER_PARSE: Final[Code] = _code("E_ADAPTER_PARSE", CodeCategory.ADAPTER)

# Instance graph
E_DUPLICATE_PK: Final[Code] = _code("E_DUPLICATE_PK", CodeCategory.GRAPH)
E_DUPLICATE_COMPOSED_PK: Final[Code] = _code("E_DUPLICATE_COMPOSED_PK", CodeCategory.GRAPH)
E_UNRESOLVED_REQUIRED: Final[Code] = _code("E_UNRESOLVED_REQUIRED", CodeCategory.GRAPH)
E_GRAPH_TYPE_NOT_FOUND: Final[Code] = _code("E_GRAPH_TYPE_NOT_FOUND", CodeCategory.GRAPH)
E_GRAPH_PARENT_NOT_FOUND: Final[Code] = _code("E_GRAPH_PARENT_NOT_FOUND", CodeCategory.GRAPH)
E_GRAPH_INVALID_COMPOSITION: Final[Code] = _code(
    "E_GRAPH_INVALID_COMPOSITION", CodeCategory.GRAPH
)
E_GRAPH_MISSING_PK: Final[Code] = _code("E_GRAPH_MISSING_PK", CodeCategory.GRAPH)


_ALL_CODES: Final[tuple[Code, ...]] = tuple(_CATALOG)
del _CATALOG

_BY_VALUE: Final[dict[str, Code]] = {c.value: c for c in _ALL_CODES}

_BY_CATEGORY: Final[dict[CodeCategory, tuple[Code, ...]]] = {
    cat: tuple(c for c in _ALL_CODES if c.category is cat) for cat in CodeCategory
}


def all_codes() -> list[Code]:
    """Return every catalog code, in declaration order (fresh list)."""
    return list(_ALL_CODES)


def codes_by_category(category: CodeCategory) -> list[Code]:
    """Return the catalog codes of ``category``, in declaration order (fresh list)."""
    return list(_BY_CATEGORY.get(category, ()))


def lookup_code(value: str) -> Code | None:
    """Return the catalog code whose value is ``value``, or None."""
    return _BY_VALUE.get(value)
