# topmark:header:start
#
#   project      : TypeBinder
#   file         : bindings.py
#   file_relpath : src/typebinder/demo/bindings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The demo registry: four bindings covering every `ListItem` shape.

Precedence (first match wins):

0. any item with an image → `ImageRow`
1. `ColoredItem` → `TextRow` painted in the item's color
2. any item flagged as headline → headline `TextRow`
3. any other item → default `TextRow` (fallback)

Image items are tested first so that a colored item carrying an image still
renders as an image.
"""

from __future__ import annotations

from typebinder.binding import Binding
from typebinder.demo.model import ColoredItem, ListItem
from typebinder.demo.rows import ImageRow, Row, RowLayout, TextRow
from typebinder.registry import Registry


def _populate_image(item: ListItem, row: ImageRow) -> None:
    assert item.image is not None
    row.set_image(item.image)


def _populate_colored(item: ColoredItem, row: TextRow) -> None:
    row.set_text(f"{item.name} set by color binding", color=item.color)


def _populate_headline(item: ListItem, row: TextRow) -> None:
    row.set_text(f"{item.name} set by headline binding")


def _populate_default(item: ListItem, row: TextRow) -> None:
    row.set_text(f"{item.name} set by default binding")


def build_demo_registry() -> Registry[ListItem, Row]:
    """Return a new registry holding the demo bindings in precedence order."""
    return (
        Registry[ListItem, Row]()
        .add(
            Binding(ListItem, ImageRow, name="image")
            .configure_predicate(lambda item: item.image is not None)
            .configure_constructor(ImageRow)
            .configure_populator(_populate_image)
        )
        .add(
            Binding(ColoredItem, TextRow, name="colored")
            .configure_constructor(TextRow)
            .configure_populator(_populate_colored)
        )
        .add(
            Binding(ListItem, TextRow, name="headline")
            .configure_predicate(lambda item: item.headline)
            .configure_constructor(lambda container: TextRow(container, RowLayout.HEADLINE))
            .configure_populator(_populate_headline)
        )
        .add(
            Binding(ListItem, TextRow, name="default")
            .configure_constructor(TextRow)
            .configure_populator(_populate_default)
        )
    )
