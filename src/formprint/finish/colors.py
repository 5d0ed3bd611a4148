# topmark:header:start
#
#   project      : FormPrint
#   file         : colors.py
#   file_relpath : src/formprint/finish/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for terminal output.

This module provides a small string enum that stores the textual color name
while attaching a colorizer (callable that decorates strings). It keeps the
rest of the system decoupled from the color library.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the
      colorizer is exposed via `.color`.
    - `DisplayColor`: the display colors usable in a ``color_map``.

Example:
    ```python
    DisplayColor.GREEN.value            # 'green'
    DisplayColor.GREEN.color("(defn")   # green "(defn"
    DisplayColor.NONE.color("x")        # 'x', unchanged
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


def _no_color(*args: object, sep: str = " ") -> str:
    """Identity colorizer: join the arguments without decoration."""
    return sep.join(str(a) for a in args)


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

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


class DisplayColor(ColoredStrEnum):
    """Display colors accepted in the ``color_map`` option."""

    BLACK = ("black", chalk.black)
    RED = ("red", chalk.red)
    GREEN = ("green", chalk.green)
    YELLOW = ("yellow", chalk.yellow)
    BLUE = ("blue", chalk.blue)
    MAGENTA = ("magenta", chalk.magenta)
    CYAN = ("cyan", chalk.cyan)
    WHITE = ("white", chalk.white)
    GRAY = ("gray", chalk.gray)
    NONE = ("none", _no_color)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the accepted color names in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def from_name(cls, name: str | None) -> DisplayColor:
        """Return the member for ``name``; ``None`` maps to `NONE`.

        Raises:
            ValueError: If ``name`` is not a known color.
        """
        if name is None:
            return cls.NONE
        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unknown display color: {name!r}")
