# topmark:header:start
#
#   project      : DiagKit
#   file         : color.py
#   file_relpath : src/diagkit/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity styling and color-mode resolution.

- `SeverityLabel` maps every displayed severity label to its yachalk style.
- `severity_label` picks the label for an issue severity (FATAL is shown as
  ``error`` unless asked to stay distinct).
- `ColorMode` / `resolve_color_mode` turn user intent plus the environment
  (``FORCE_COLOR``, ``NO_COLOR``, TTY detection) into a plain boolean.

Only the severity label is ever colored; locations, codes and messages stay plain.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from yachalk import ChalkFactory
from yachalk import ColorMode as ChalkColorMode

from diagkit.config.logging import get_logger
from diagkit.core.enum_mixins import KeyedStrEnum
from diagkit.diagnostic.severity import Severity
from diagkit.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from diagkit.config.logging import DiagkitLogger

logger: DiagkitLogger = get_logger(__name__)

# Fixed-mode styler: whether to style at all is decided per call by `maybe_colorize`.
_chalk = ChalkFactory(ChalkColorMode.Basic16)


class SeverityLabel(ColoredStrEnum):
    """Displayed severity labels with their terminal styles."""

    FATAL = ("fatal", _chalk.bold.red)
    ERROR = ("error", _chalk.bold.red)
    WARNING = ("warning", _chalk.bold.yellow)
    INFO = ("info", _chalk.bold.cyan)
    HINT = ("hint", _chalk.bold.green)


_LABELS: dict[Severity, SeverityLabel] = {
    Severity.FATAL: SeverityLabel.FATAL,
    Severity.ERROR: SeverityLabel.ERROR,
    Severity.WARNING: SeverityLabel.WARNING,
    Severity.INFO: SeverityLabel.INFO,
    Severity.HINT: SeverityLabel.HINT,
}


def severity_label(severity: Severity, *, distinguish_fatal: bool = False) -> SeverityLabel:
    """Return the displayed label for ``severity``.

    FATAL renders as ``error`` unless ``distinguish_fatal`` is set; both are styled alike.
    """
    if severity == Severity.FATAL and not distinguish_fatal:
        return SeverityLabel.ERROR
    return _LABELS[severity]


class ColorMode(KeyedStrEnum):
    """User intent for colorized text output."""

    AUTO = ("auto", "Color when stdout is a terminal")
    ALWAYS = ("always", "Always color", ("on", "true", "yes"))
    NEVER = ("never", "Never color", ("off", "false", "no"))


def resolve_color_mode(
    mode: ColorMode | None,
    *,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether severity labels should be colored.

    Decision precedence:
        1. ``ALWAYS`` → True; ``NEVER`` → False.
        2. Environment: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. Auto: ``stdout.isatty()``.

    Args:
        mode: Requested color mode; None behaves like ``AUTO``.
        stdout_isatty: Optional override for TTY detection. When None,
            ``sys.stdout.isatty()`` is called (False on error).

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color mode auto-detected: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
