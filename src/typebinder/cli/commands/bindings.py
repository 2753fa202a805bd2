# topmark:header:start
#
#   project      : TypeBinder
#   file         : bindings.py
#   file_relpath : src/typebinder/cli/commands/bindings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder `bindings` command.

Lists the bindings of the demo registry in precedence order, i.e. the order in
which `classify` tries them. The position of a binding is the view-type index
reported by `typebinder classify`.
"""

from __future__ import annotations

import click

from typebinder.cli.cmd_common import get_console, get_effective_verbosity
from typebinder.cli.options import output_format_option
from typebinder.cli.utils import OutputFormat, emit_machine_output, render_markdown_table
from typebinder.constants import TYPEBINDER_VERSION
from typebinder.demo.bindings import build_demo_registry


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


@click.command(
    name="bindings",
    help="List the demo registry's bindings in precedence order.",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show which functions (predicate, constructor, populator) each binding configures.",
)
def bindings_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List demo bindings.

    Args:
        show_details (bool): Show configured functions per binding.
        output_format (OutputFormat | None): Output format to use.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    metas = list(build_demo_registry().iter_meta())

    if fmt.is_machine:
        emit_machine_output(console, [m.to_dict() for m in metas], fmt)
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print("# Demo Bindings\n")
        console.print(
            f"TypeBinder version **{TYPEBINDER_VERSION}** tries these bindings in order:\n"
        )
        headers = ["Index", "Name", "Data type", "Render type"]
        if show_details:
            headers += ["Predicate", "Constructor", "Populator"]
        rows: list[list[str]] = []
        for m in metas:
            row = [str(m.index), f"`{m.name}`", m.data_type, m.render_type]
            if show_details:
                row += [
                    _yes_no(m.has_predicate),
                    _yes_no(m.has_constructor),
                    _yes_no(m.has_populator),
                ]
            rows.append(row)
        console.print(render_markdown_table(headers, rows, align={0: "right"}))
        return

    if vlevel > 0:
        console.print(console.styled("Demo bindings (first match wins):\n", bold=True, underline=True))

    name_width = max((len(m.name) for m in metas), default=1)
    for m in metas:
        types = console.styled(f"{m.data_type} -> {m.render_type}", dim=True)
        console.print(f"{m.index}. {m.name:<{name_width}} {types}")
        if show_details:
            console.print(f"     predicate  : {_yes_no(m.has_predicate)}")
            console.print(f"     constructor: {_yes_no(m.has_constructor)}")
            console.print(f"     populator  : {_yes_no(m.has_populator)}")
