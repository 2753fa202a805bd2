# topmark:header:start
#
#   project      : TypeBinder
#   file         : cmd_common.py
#   file_relpath : src/typebinder/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by multiple CLI commands: reading shared state from the
Click context and translating library errors into CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typebinder.cli.console import ClickConsole
from typebinder.cli.errors import TypeBinderConfigError, TypeBinderFileNotFoundError
from typebinder.config.logging import get_logger
from typebinder.demo.document import load_document
from typebinder.errors import DemoDocumentError

if TYPE_CHECKING:
    from pathlib import Path

    from typebinder.cli.console import ConsoleLike
    from typebinder.config.logging import TypeBinderLogger
    from typebinder.demo.document import DemoDocument

logger: TypeBinderLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context (or a plain one)."""
    obj = ctx.ensure_object(dict)
    console: ConsoleLike | None = obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the CLI group (default 0)."""
    return int(ctx.ensure_object(dict).get("verbosity_level", 0))


def color_enabled(ctx: click.Context) -> bool:
    """Return whether the CLI group enabled colored output."""
    return bool(ctx.ensure_object(dict).get("color_enabled", False))


def load_demo_document(items_path: Path | None) -> DemoDocument:
    """Load the items document selected on the command line.

    Args:
        items_path (Path | None): Value of ``--items``; ``None`` selects the bundled list.

    Returns:
        DemoDocument: The validated document.

    Raises:
        TypeBinderFileNotFoundError: If ``items_path`` does not exist.
        TypeBinderConfigError: If the document cannot be read or is invalid.
    """
    if items_path is not None and not items_path.exists():
        raise TypeBinderFileNotFoundError(f"Items document not found: {items_path}")
    try:
        return load_document(items_path)
    except DemoDocumentError as exc:
        logger.debug("Rejected items document: %s", exc)
        raise TypeBinderConfigError(str(exc)) from exc
