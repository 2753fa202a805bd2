# topmark:header:start
#
#   project      : TypeBinder
#   file         : main.py
#   file_relpath : src/typebinder/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder Click CLI.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``TYPEBINDER_LOG_LEVEL``; program output
  goes through the console stored in ``ctx.obj["console"]``.
- Subcommands only read the shared state.
"""

from __future__ import annotations

import click

from typebinder.cli.commands.bindings import bindings_command
from typebinder.cli.commands.classify import classify_command
from typebinder.cli.commands.demo import demo_command
from typebinder.cli.commands.version import version_command
from typebinder.cli.console import ClickConsole
from typebinder.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from typebinder.cli.utils import ColorMode, resolve_color_mode
from typebinder.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%s color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TypeBinder CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TypeBinder CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        if ctx.obj["verbosity_level"] >= 0:
            console.print("Hint: use 'typebinder demo' to render the sample list.")
            console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(bindings_command)

cli.add_command(classify_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
