# topmark:header:start
#
#   project      : DiagKit
#   file         : colored_enum.py
#   file_relpath : src/diagkit/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the member's text value and a
      colorizer. `.value` stays a plain string; the colorizer is exposed via `.color`.
    - `maybe_colorize`: apply a colorizer only when styling is enabled.

Example:
    ```python
    from yachalk import chalk

    class Status(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    print(Status.OK.value)            # 'ok'
    print(Status.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword. DiagKit calls colorizers with a
    single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the given arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, enabled: bool) -> str:
        """Return the member's text, colorized when ``enabled``."""
        return maybe_colorize(self._color, self._value_, enabled=enabled)


def maybe_colorize(styler: Colorizer, text: str, *, enabled: bool) -> str:
    """Conditionally apply a styling function.

    Args:
        styler: Callable that applies styling to a string (for example, a `chalk.*` function).
        text: Input text to render.
        enabled: When False, return `text` unchanged.

    Returns:
        Styled text when enabled; otherwise the original `text`.
    """
    return styler(text) if enabled else text
