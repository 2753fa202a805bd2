# topmark:header:start
#
#   project      : TypeBinder
#   file         : surface.py
#   file_relpath : src/typebinder/demo/surface.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A minimal list-rendering surface driving a `Registry`.

`ListSurface` follows the contract of a list adapter: the view type of a
position is queried first, a row is created only when the surface has none for
that view type, and the row is populated every time a position is displayed.
The view-type index returned by `Registry.classify` joins these calls.

Recycling is the surface's own business: it keeps one row per view type and
reuses it for every position of that type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from typebinder.config.logging import get_logger
from typebinder.constants import NO_MATCH
from typebinder.errors import BindingIndexError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typebinder.config.logging import TypeBinderLogger
    from typebinder.demo.model import ListItem
    from typebinder.demo.rows import Row, RowContainer
    from typebinder.registry import Registry

logger: TypeBinderLogger = get_logger(__name__)


@dataclass(frozen=True)
class RenderedRow:
    """One displayed position of the list.

    Attributes:
        position (int): Position of the item in the list.
        item (ListItem): The displayed item.
        view_type (int): Index of the binding that rendered the item.
        binding (str): Name of that binding.
        text (str): The rendered line.
    """

    position: int
    item: ListItem
    view_type: int
    binding: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict view of this row."""
        return {
            "position": self.position,
            "name": self.item.name,
            "kind": self.item.kind,
            "view_type": self.view_type,
            "binding": self.binding,
            "text": self.text,
        }


class ListSurface:
    """Render a sequence of items through a registry.

    Args:
        items (Sequence[ListItem]): The items to display, in order.
        registry (Registry[ListItem, Row]): Registry used to pick, create and
            populate rows.
        container (RowContainer): Construction context for new rows.
    """

    def __init__(
        self,
        items: Sequence[ListItem],
        registry: Registry[ListItem, Row],
        container: RowContainer,
    ) -> None:
        self._items: Sequence[ListItem] = items
        self._registry: Registry[ListItem, Row] = registry
        self._container: RowContainer = container
        self._pool: dict[int, Row] = {}

    def __len__(self) -> int:
        """Return the number of items."""
        return len(self._items)

    @property
    def container(self) -> RowContainer:
        """The construction context handed to row constructors."""
        return self._container

    def item_view_type(self, position: int) -> int:
        """Return the view-type index of the item at ``position``.

        Returns:
            int: A binding index, or ``NO_MATCH`` if no binding handles the item.
        """
        return self._registry.classify(self._items[position])

    def create_row(self, view_type: int) -> Row:
        """Build a new row for ``view_type``.

        Raises:
            BindingIndexError: If ``view_type`` does not address a binding.
        """
        return self._registry.create_at(view_type, self._container)

    def bind_row(self, row: Row, position: int) -> None:
        """Populate ``row`` with the item at ``position`` (reclassifying it)."""
        self._registry.populate(self._items[position], row)

    def row_for(self, view_type: int) -> Row:
        """Return the pooled row for ``view_type``, creating it on first use."""
        row = self._pool.get(view_type)
        if row is None:
            row = self.create_row(view_type)
            self._pool[view_type] = row
            logger.debug("Created row %s for view type %d", type(row).__name__, view_type)
        return row

    def render(self) -> list[RenderedRow]:
        """Display every position in order.

        Returns:
            list[RenderedRow]: One entry per item.

        Raises:
            BindingIndexError: If an item is not matched by any binding.
        """
        rendered: list[RenderedRow] = []
        bindings = self._registry.bindings
        for position, item in enumerate(self._items):
            view_type = self.item_view_type(position)
            if view_type == NO_MATCH:
                raise BindingIndexError(view_type, len(bindings))
            row = self.row_for(view_type)
            self._registry.populate_at(item, view_type, row)
            rendered.append(
                RenderedRow(
                    position=position,
                    item=item,
                    view_type=view_type,
                    binding=bindings[view_type].name,
                    text=row.render(),
                )
            )
        return rendered
