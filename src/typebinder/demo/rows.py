# topmark:header:start
#
#   project      : TypeBinder
#   file         : rows.py
#   file_relpath : src/typebinder/demo/rows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render objects ("rows") and their construction context for the demo surface.

Rows are mutable: a binding's constructor builds an empty row attached to a
[`RowContainer`][typebinder.demo.rows.RowContainer], and its populator fills the
row from an item. The surface may populate the same row many times.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from typebinder.demo.model import ItemColor

ELLIPSIS = "…"


class RowLayout(str, Enum):
    """Layouts a `TextRow` can be built with."""

    DEFAULT = "default"
    HEADLINE = "headline"


def fit(text: str, width: int) -> str:
    """Truncate ``text`` to at most ``width`` characters, marking the cut.

    Args:
        text (str): Text to fit.
        width (int): Maximum length; values below 1 disable truncation.

    Returns:
        str: ``text`` or a truncated copy ending with an ellipsis.
    """
    if width < 1 or len(text) <= width:
        return text
    return text[: width - 1] + ELLIPSIS


@dataclass
class RowContainer:
    """Construction context handed to row constructors.

    Plays the role of the parent view of a list: it fixes the row width and
    whether rows may emit ANSI colors, and it keeps track of the rows built
    inside it.

    Attributes:
        width (int): Row width in characters.
        colorize (bool): Whether rows may use ANSI styling.
        children (list[Row]): Rows attached to this container, in creation order.
    """

    width: int = 48
    colorize: bool = False
    children: list[Row] = field(default_factory=list)

    def attach(self, row: Row) -> None:
        """Record ``row`` as a child of this container."""
        self.children.append(row)


class Row:
    """Base render object of the demo list."""

    def __init__(self, container: RowContainer) -> None:
        self.container: RowContainer = container
        container.attach(self)

    def render(self) -> str:
        """Return the row as a single display line."""
        raise NotImplementedError


class TextRow(Row):
    """Row showing a line of text, optionally colored.

    Args:
        container (RowContainer): Parent container.
        layout (RowLayout): Layout this row was built with.
    """

    def __init__(self, container: RowContainer, layout: RowLayout = RowLayout.DEFAULT) -> None:
        super().__init__(container)
        self.layout: RowLayout = layout
        self.text: str = ""
        self.color: ItemColor | None = None

    def set_text(self, text: str, *, color: ItemColor | None = None) -> None:
        """Replace the row's text and color."""
        self.text = text
        self.color = color

    def render(self) -> str:
        """Return the text fitted to the container width, styled per layout."""
        colorize = self.container.colorize
        if self.layout is RowLayout.HEADLINE:
            line = fit(self.text.upper(), self.container.width)
            return chalk.bold(line) if colorize else line
        line = fit(self.text, self.container.width)
        if self.color is not None:
            return self.color.paint(line, enabled=colorize)
        return line


class ImageRow(Row):
    """Row showing an image placeholder."""

    def __init__(self, container: RowContainer) -> None:
        super().__init__(container)
        self.image: str | None = None

    def set_image(self, image: str) -> None:
        """Replace the image shown by this row."""
        self.image = image

    def render(self) -> str:
        """Return a framed placeholder naming the image."""
        line = fit(f"[image: {self.image or '?'}]", self.container.width)
        return chalk.dim(line) if self.container.colorize else line
