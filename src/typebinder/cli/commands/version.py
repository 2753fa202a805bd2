# topmark:header:start
#
#   project      : TypeBinder
#   file         : version.py
#   file_relpath : src/typebinder/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder `version` command.

Prints the current TypeBinder version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from typebinder.cli.cmd_common import get_console, get_effective_verbosity
from typebinder.cli.options import output_format_option
from typebinder.cli.utils import OutputFormat
from typebinder.constants import TYPEBINDER_VERSION


@click.command(
    name="version",
    help="Show the current version of TypeBinder.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TypeBinder.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt.is_machine:
        console.print(json.dumps({"version": TYPEBINDER_VERSION}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# TypeBinder Version\n")
        console.print(f"**TypeBinder version: {TYPEBINDER_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("TypeBinder version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TYPEBINDER_VERSION, bold=True)}")
    else:
        console.print(console.styled(TYPEBINDER_VERSION, bold=True))
