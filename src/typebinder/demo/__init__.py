# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/demo/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Demo list surface built on the TypeBinder registry.

A terminal rendition of a list adapter: items of several shapes are classified,
rendered into rows and painted, all through a single
[`Registry`][typebinder.registry.Registry].
"""

from __future__ import annotations

from typebinder.demo.bindings import build_demo_registry
from typebinder.demo.document import DemoDocument, load_document, parse_document
from typebinder.demo.model import ColoredItem, ItemColor, ListItem
from typebinder.demo.rows import ImageRow, Row, RowContainer, RowLayout, TextRow
from typebinder.demo.surface import ListSurface, RenderedRow

__all__ = [
    "ColoredItem",
    "DemoDocument",
    "ImageRow",
    "ItemColor",
    "ListItem",
    "ListSurface",
    "RenderedRow",
    "Row",
    "RowContainer",
    "RowLayout",
    "TextRow",
    "build_demo_registry",
    "load_document",
    "parse_document",
]
