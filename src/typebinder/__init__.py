# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder package.

TypeBinder is a type-dispatch registry for heterogeneous lists. Bindings pair a
data type (plus an optional content predicate) with the construction and
population of a render object; a registry picks the first matching binding for
each item and hands back a stable view-type index.
"""

from __future__ import annotations

from typebinder.binding import Binding, BindingMeta
from typebinder.constants import NO_MATCH
from typebinder.errors import (
    BindingConfigurationError,
    BindingIndexError,
    DemoDocumentError,
    TypeBinderError,
)
from typebinder.registry import Registry

__all__ = [
    "NO_MATCH",
    "Binding",
    "BindingConfigurationError",
    "BindingIndexError",
    "BindingMeta",
    "DemoDocumentError",
    "Registry",
    "TypeBinderError",
]
