# topmark:header:start
#
#   project      : TypeBinder
#   file         : cli_types.py
#   file_relpath : src/typebinder/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for TypeBinder commands."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.Choice, Generic[E]):
    """Case-insensitive choice over the string values of an Enum.

    Validation, error messages and shell completion come from `click.Choice`;
    this type only maps the accepted value back to the enum member.

    Args:
        enum_cls (type[E]): Enum with string values (e.g. `OutputFormat`).
    """

    def __init__(self, enum_cls: type[E]) -> None:
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the enum member for ``value`` (members pass through unchanged)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(super().convert(value, param, ctx))

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
