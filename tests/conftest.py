# topmark:header:start
#
#   project      : DiagKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DiagKit test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build renderer settings with `RendererConfig(...)` directly, or through
      `MutableRendererConfig` and ``freeze()``.
    - Do **not** mutate a frozen config. Call ``thaw()``, edit, then ``freeze()``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from diagkit.config import logging
from diagkit.diagnostic.codes import E_SYNTAX
from diagkit.diagnostic.issue import Issue, new_issue
from diagkit.diagnostic.location import SourceId, Span
from diagkit.diagnostic.severity import Severity
from diagkit.diagnostic.sources import SourceRegistry

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.concurrency`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_concurrency: DecoratorType[Any] = as_typed_mark(pytest.mark.concurrency)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_diagkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DiagKit's runtime log level is not forced via env during tests.

    Also clears the color environment variables so color-mode resolution only
    sees what a test sets explicitly.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("DIAGKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Shared builders ---

SRC: SourceId = SourceId.synthetic("test://unit/main.schema")


def make_issue(
    message: str = "boom",
    *,
    severity: Severity = Severity.ERROR,
    span: Span | None = None,
    source_name: str = "",
    path: str = "",
    hint: str = "",
) -> Issue:
    """Build a valid `E_SYNTAX` issue with the given optional fields."""
    builder = new_issue(severity, E_SYNTAX, message)
    if span is not None:
        builder.with_span(span)
    if source_name or path:
        builder.with_path(source_name, path)
    if hint:
        builder.with_hint(hint)
    return builder.build()


@pytest.fixture
def src() -> SourceId:
    """A synthetic source id shared by rendering tests."""
    return SRC


@pytest.fixture
def registry() -> SourceRegistry:
    """An empty source registry."""
    return SourceRegistry()
