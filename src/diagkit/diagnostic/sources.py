# topmark:header:start
#
#   project      : DiagKit
#   file         : sources.py
#   file_relpath : src/diagkit/diagnostic/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source-content lookup used by the renderer.

The renderer never reads files. It asks a `SourceProvider` for the content of
the source a span points into, and, when the provider also implements
`LineIndexProvider`, for precomputed line-start offsets.

`SourceRegistry` is an in-memory implementation of both protocols. Content is
registered once per `SourceId`; re-registering identical content is a no-op,
while different content raises `SourceKeyCollisionError`. Reads take the
shared side of a reader/writer lock, so the registry is safe to share between
concurrently rendering threads.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from diagkit.config.logging import get_logger
from diagkit.diagnostic.errors import SourceKeyCollisionError
from diagkit.diagnostic.location import Position
from diagkit.utils.rwlock import ReadWriteLock
from diagkit.utils.text import line_start_offsets, rune_offsets

if TYPE_CHECKING:
    from diagkit.config.logging import DiagkitLogger
    from diagkit.diagnostic.location import SourceId, Span

logger: DiagkitLogger = get_logger(__name__)


@runtime_checkable
class SourceProvider(Protocol):
    """Lookup of source content by span."""

    def content(self, span: Span) -> bytes | None:
        """Return the full content of the source ``span`` refers to, or None if unknown."""
        ...


@runtime_checkable
class LineIndexProvider(Protocol):
    """Optional acceleration: precomputed line-start byte offsets."""

    def line_start_byte(self, source: SourceId, line: int) -> int | None:
        """Return the byte offset where 1-based ``line`` starts, or None if unknown."""
        ...


@dataclass(frozen=True, slots=True)
class _SourceEntry:
    content: bytes
    line_offsets: tuple[int, ...]
    rune_offsets: tuple[int, ...]


class SourceRegistry:
    """Thread-safe, in-memory store of source content keyed by `SourceId`."""

    def __init__(self) -> None:
        self._lock: ReadWriteLock = ReadWriteLock()
        self._entries: dict[SourceId, _SourceEntry] = {}

    def register(self, source: SourceId, content: bytes | bytearray | memoryview) -> None:
        """Store ``content`` for ``source``.

        The bytes are copied and indexed outside the lock.

        Raises:
            SourceKeyCollisionError: If ``source`` is already registered with
                different content.
        """
        data: bytes = bytes(content)
        entry = _SourceEntry(
            content=data,
            line_offsets=tuple(line_start_offsets(data)),
            rune_offsets=tuple(rune_offsets(data)),
        )
        with self._lock.write_locked():
            existing: _SourceEntry | None = self._entries.get(source)
            if existing is not None:
                if existing.content == data:
                    return
                raise SourceKeyCollisionError(str(source))
            self._entries[source] = entry
        logger.debug(
            "Registered source %s (%d bytes, %d lines)", source, len(data), len(entry.line_offsets)
        )

    def content_by_source(self, source: SourceId) -> bytes | None:
        """Return the content registered for ``source``, or None."""
        with self._lock.read_locked():
            entry = self._entries.get(source)
        return None if entry is None else entry.content

    def content(self, span: Span) -> bytes | None:
        """Return the content of the source ``span`` refers to, or None."""
        return self.content_by_source(span.source)

    def line_start_byte(self, source: SourceId, line: int) -> int | None:
        """Return the byte offset where 1-based ``line`` starts, or None."""
        with self._lock.read_locked():
            entry = self._entries.get(source)
        if entry is None or line < 1 or line > len(entry.line_offsets):
            return None
        return entry.line_offsets[line - 1]

    def position_at(self, source: SourceId, byte_offset: int) -> Position:
        """Convert a byte offset into a full `Position` (line, column, byte).

        Returns `Position.unknown` when the source is not registered or the
        offset lies outside ``[0, len(content)]``. An offset inside a multi-byte
        character resolves to that character's column.
        """
        with self._lock.read_locked():
            entry = self._entries.get(source)
        if entry is None or byte_offset < 0 or byte_offset > len(entry.content):
            return Position.unknown()
        line: int = bisect_right(entry.line_offsets, byte_offset)
        line_start: int = entry.line_offsets[line - 1]
        if byte_offset <= line_start:
            return Position(line, 1, byte_offset)
        start_rune: int = bisect_left(entry.rune_offsets, line_start)
        if byte_offset >= len(entry.content):
            target_rune = len(entry.rune_offsets)
        else:
            target_rune = bisect_right(entry.rune_offsets, byte_offset) - 1
        return Position(line, target_rune - start_rune + 1, byte_offset)

    def has(self, source: SourceId) -> bool:
        """Return True if ``source`` is registered."""
        with self._lock.read_locked():
            return source in self._entries

    def keys(self) -> list[SourceId]:
        """Return the registered sources sorted by identifier."""
        with self._lock.read_locked():
            keys = list(self._entries)
        return sorted(keys, key=lambda s: s.identifier)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def clear(self) -> None:
        """Remove every registered source."""
        with self._lock.write_locked():
            self._entries.clear()
