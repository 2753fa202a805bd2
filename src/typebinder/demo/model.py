# topmark:header:start
#
#   project      : TypeBinder
#   file         : model.py
#   file_relpath : src/typebinder/demo/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""List item types rendered by the demo surface.

`ListItem` is the base data type of the demo list; `ColoredItem` is a subclass
that the demo registry binds to a dedicated row before the generic fallbacks.
"""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from typebinder.rendering.colored_enum import ColoredStrEnum


class ItemColor(ColoredStrEnum):
    """Text colors available to `ColoredItem`."""

    RED = ("red", chalk.red)
    GREEN = ("green", chalk.green)
    BLUE = ("blue", chalk.blue)
    YELLOW = ("yellow", chalk.yellow)
    MAGENTA = ("magenta", chalk.magenta)
    CYAN = ("cyan", chalk.cyan)


@dataclass(frozen=True)
class ListItem:
    """Base list item.

    Attributes:
        name (str): Display name.
        headline (bool): Render with the headline layout.
        image (str | None): Name of an image to show instead of text.
    """

    name: str
    headline: bool = False
    image: str | None = None

    @property
    def kind(self) -> str:
        """Short item kind label used in reports."""
        return "item"


@dataclass(frozen=True)
class ColoredItem(ListItem):
    """List item whose text is painted in a color.

    Attributes:
        color (ItemColor): Text color.
    """

    color: ItemColor = ItemColor.RED

    @property
    def kind(self) -> str:
        """Short item kind label used in reports."""
        return "colored"
