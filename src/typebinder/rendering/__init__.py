# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Presentation helpers shared by the demo surface and the CLI."""

from __future__ import annotations

from typebinder.rendering.colored_enum import ColoredStrEnum, Colorizer

__all__ = ["ColoredStrEnum", "Colorizer"]
