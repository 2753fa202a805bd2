# topmark:header:start
#
#   project      : TypeBinder
#   file         : document.py
#   file_relpath : src/typebinder/demo/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load demo list documents (TOML).

A demo document holds the items rendered by the demo surface plus a few render
settings. The bundled default (``typebinder-demo.toml``) reproduces the sample
list of five items; users can point the CLI at their own file.

Parsing is done with `tomlkit` and validated strictly: unknown keys, wrong
value types and unknown colors raise
[`DemoDocumentError`][typebinder.errors.DemoDocumentError].
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from typebinder.config.logging import get_logger
from typebinder.constants import DEFAULT_DEMO_DOCUMENT_NAME, DEFAULT_DEMO_DOCUMENT_PACKAGE
from typebinder.demo.model import ColoredItem, ItemColor, ListItem
from typebinder.errors import DemoDocumentError

if TYPE_CHECKING:
    from pathlib import Path

    from typebinder.config.logging import TypeBinderLogger

logger: TypeBinderLogger = get_logger(__name__)

DEFAULT_WIDTH: Final[int] = 48

_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({"render", "items"})
_RENDER_KEYS: Final[frozenset[str]] = frozenset({"width", "show_index"})
_ITEM_KEYS: Final[frozenset[str]] = frozenset({"name", "headline", "image", "color"})


@dataclass(frozen=True)
class DemoDocument:
    """Validated content of a demo document.

    Attributes:
        items (tuple[ListItem, ...]): Items in display order.
        width (int): Row width in characters.
        show_index (bool): Prefix rows with their view-type index.
        source (str): Where the document was read from.
    """

    items: tuple[ListItem, ...]
    width: int = DEFAULT_WIDTH
    show_index: bool = False
    source: str = "<memory>"


def _check_keys(table: dict[str, Any], allowed: frozenset[str], where: str, source: str) -> None:
    unknown = sorted(set(table) - allowed)
    if unknown:
        raise DemoDocumentError(
            f"unknown key(s) in {where}: {', '.join(unknown)}",
            source=source,
        )


def _parse_item(entry: Any, position: int, source: str) -> ListItem:
    where = f"items[{position}]"
    if not isinstance(entry, dict):
        raise DemoDocumentError(f"{where} must be a table", source=source)
    _check_keys(entry, _ITEM_KEYS, where, source)

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DemoDocumentError(f"{where}.name must be a non-empty string", source=source)

    headline = entry.get("headline", False)
    if not isinstance(headline, bool):
        raise DemoDocumentError(f"{where}.headline must be a boolean", source=source)

    image = entry.get("image")
    if image is not None and not isinstance(image, str):
        raise DemoDocumentError(f"{where}.image must be a string", source=source)

    color = entry.get("color")
    if color is None:
        return ListItem(name=name, headline=headline, image=image)
    if not isinstance(color, str):
        raise DemoDocumentError(f"{where}.color must be a string", source=source)
    try:
        item_color = ItemColor(color.strip().lower())
    except ValueError:
        raise DemoDocumentError(
            f"{where}.color '{color}' is not one of: {', '.join(ItemColor.names())}",
            source=source,
        ) from None
    return ColoredItem(name=name, headline=headline, image=image, color=item_color)


def parse_document(text: str, *, source: str = "<memory>") -> DemoDocument:
    """Parse and validate demo document text.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages.

    Returns:
        DemoDocument: The validated document.

    Raises:
        DemoDocumentError: If the text is not valid TOML or fails validation.
    """
    try:
        data: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise DemoDocumentError(f"invalid TOML: {exc}", source=source) from exc

    _check_keys(data, _TOP_LEVEL_KEYS, "document", source)

    render: Any = data.get("render", {})
    if not isinstance(render, dict):
        raise DemoDocumentError("[render] must be a table", source=source)
    _check_keys(render, _RENDER_KEYS, "[render]", source)

    width: Any = render.get("width", DEFAULT_WIDTH)
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise DemoDocumentError("[render].width must be a positive integer", source=source)

    show_index: Any = render.get("show_index", False)
    if not isinstance(show_index, bool):
        raise DemoDocumentError("[render].show_index must be a boolean", source=source)

    entries: Any = data.get("items", [])
    if not isinstance(entries, list):
        raise DemoDocumentError("items must be an array of tables", source=source)
    items = tuple(_parse_item(entry, i, source) for i, entry in enumerate(entries))

    logger.debug("Loaded %d item(s) from %s", len(items), source)
    return DemoDocument(items=items, width=width, show_index=show_index, source=source)


def load_default_document_text() -> str:
    """Return the bundled default demo document as text."""
    resource = files(DEFAULT_DEMO_DOCUMENT_PACKAGE).joinpath(DEFAULT_DEMO_DOCUMENT_NAME)
    return resource.read_text(encoding="utf-8")


def load_document(path: Path | None = None) -> DemoDocument:
    """Load a demo document from ``path``, or the bundled default.

    Args:
        path (Path | None): TOML file to read; ``None`` selects the bundled default.

    Returns:
        DemoDocument: The validated document.

    Raises:
        DemoDocumentError: If the file cannot be read or is invalid.
    """
    if path is None:
        return parse_document(load_default_document_text(), source=DEFAULT_DEMO_DOCUMENT_NAME)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DemoDocumentError(f"cannot read file: {exc.strerror or exc}", source=str(path)) from exc
    return parse_document(text, source=str(path))
