# topmark:header:start
#
#   project      : TypeBinder
#   file         : errors.py
#   file_relpath : src/typebinder/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TypeBinder library.

All errors are caller-contract violations: they are raised immediately and are
never logged-and-swallowed by the library. The CLI maps them to exit codes (see
[`typebinder.cli.errors`][typebinder.cli.errors]).
"""

from __future__ import annotations

from typebinder.constants import NO_MATCH


class TypeBinderError(Exception):
    """Base class for all TypeBinder errors."""


class BindingConfigurationError(TypeBinderError):
    """A binding was used before the function it needs was configured.

    Attributes:
        binding_name (str): Label of the offending binding.
        missing (str): Which function is missing (e.g. ``"constructor"``).
    """

    def __init__(self, binding_name: str, missing: str) -> None:
        super().__init__(f"Binding '{binding_name}' has no {missing} configured.")
        self.binding_name: str = binding_name
        self.missing: str = missing


class BindingIndexError(TypeBinderError, IndexError):
    """A view-type index does not address a binding of the registry.

    Raised for any index outside ``0 <= index < size``, including the
    ``NO_MATCH`` sentinel. It usually means the caller passed a stale index or
    did not check the result of `Registry.classify()`.

    Attributes:
        index (int): The rejected index.
        size (int): Number of bindings held by the registry at the time.
    """

    def __init__(self, index: int, size: int) -> None:
        if index == NO_MATCH:
            message = (
                f"Index {index} is the no-match sentinel: no binding matched the item "
                f"(registry holds {size} binding(s))."
            )
        else:
            message = f"Binding index {index} out of range (registry holds {size} binding(s))."
        super().__init__(message)
        self.index: int = index
        self.size: int = size


class DemoDocumentError(TypeBinderError):
    """A demo list document could not be read or holds invalid entries.

    Attributes:
        source (str | None): Where the document came from (path or resource name).
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source: str | None = source
