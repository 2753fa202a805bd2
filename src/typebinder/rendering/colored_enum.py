# topmark:header:start
#
#   project      : TypeBinder
#   file         : colored_enum.py
#   file_relpath : src/typebinder/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a terminal colorizer.

Used for item colors in the demo surface: the enum ``.value`` is the plain
name found in TOML documents and JSON output, while ``.color`` is the yachalk
style applied when rows are painted for a color-capable terminal.

Example:
    ```python
    from yachalk import chalk

    class Tint(ColoredStrEnum):
        RED = ("red", chalk.red)

    Tint("red").paint("hello", enabled=True)  # red "hello"
    Tint.RED.paint("hello", enabled=False)    # "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join the provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The colorizer is stored on the member, not in ``_value_``, so lookups by
    value (``MyEnum("red")``), hashing and ``repr`` behave like a plain
    string enum.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member.
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

    def paint(self, text: str, *, enabled: bool = True) -> str:
        """Return ``text`` colorized with this member's style.

        Args:
            text (str): Text to decorate.
            enabled (bool): When False, ``text`` is returned unchanged.

        Returns:
            str: The decorated (or plain) text.
        """
        if not enabled:
            return text
        return self._color(text)

    @classmethod
    def names(cls) -> list[str]:
        """Return the textual values of all members, in definition order."""
        return [m.value for m in cls]
