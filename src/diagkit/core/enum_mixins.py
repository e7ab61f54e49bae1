# topmark:header:start
#
#   project      : DiagKit
#   file         : enum_mixins.py
#   file_relpath : src/diagkit/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum helpers behind DiagKit's configurable choices.

Two things live here:
    - `enum_from_name`: member lookup by name, used by `Severity.from_label`
      so that ``"warning"`` and ``"WARNING"`` both resolve.
    - `KeyedStrEnum`: the base of every choice a user can spell in TOML
      (`ColorMode`, `LspByteFallback`). Its ``.value`` is the key written to
      and read from configuration; ``label`` describes the choice and
      ``aliases`` lists accepted spellings such as ``"approx"`` or ``"off"``.

Rendering concerns (styles, colors) stay in `diagkit.rendering`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

_E = TypeVar("_E", bound=Enum)
_KS = TypeVar("_KS", bound="KeyedStrEnum")


def enum_from_name(
    enum_cls: type[_E],
    name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the member of ``enum_cls`` called ``name``, or None.

    Args:
        enum_cls (type[_E]): Enum class to search.
        name (str | None): Member name, e.g. ``"ERROR"``.
        case_insensitive (bool): Strip and upper-case ``name`` before the lookup.

    Returns:
        _E | None: The member, or None for a missing or unknown name.
    """
    if name is None:
        return None
    target: str = name.strip().upper() if case_insensitive else name
    member: Any | None = enum_cls.__members__.get(target)
    return cast("_E | None", member)


def _token(s: str) -> str:
    # "Approximate", " approximate " and "APPROX-IMATE" compare alike
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum whose value is a configuration key.

    Attributes:
        label (str): One-line description of the choice.
        aliases (tuple[str, ...]): Extra spellings accepted by `parse`.

    Example:
        ```python
        class LspByteFallback(KeyedStrEnum):
            OMIT = ("omit", "Drop the diagnostic")
            APPROXIMATE = ("approximate", "Use column - 1", ("approx",))

        LspByteFallback.parse("Approx")  # LspByteFallback.APPROXIMATE
        ```
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a member from its configuration key, label and aliases."""
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """The configuration key (same as ``.value``)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> list[str]:
        """Return the configuration keys in declaration order."""
        return [m.key for m in cls]

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Resolve a user-supplied token to a member.

        The key, the member name and every alias are accepted, ignoring case
        and treating ``-`` and spaces like ``_``. Unknown tokens give None.
        """
        if raw is None:
            return None
        token: str = _token(raw)
        for member in cls:
            spellings = (member.key, member.name, *member.aliases)
            if any(token == _token(s) for s in spellings):
                return member
        return None
