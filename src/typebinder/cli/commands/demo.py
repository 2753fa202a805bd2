# topmark:header:start
#
#   project      : TypeBinder
#   file         : demo.py
#   file_relpath : src/typebinder/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder `demo` command.

Renders an items document through the demo list surface: every item is
classified, a row is created once per view type and populated for every
position. Registry contract violations (e.g. an item that no binding handles)
end the command with ``ExitCode.BINDING_ERROR``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typebinder.cli.cmd_common import (
    color_enabled,
    get_console,
    get_effective_verbosity,
    load_demo_document,
)
from typebinder.cli.errors import TypeBinderBindingError
from typebinder.cli.options import items_document_option, output_format_option
from typebinder.cli.utils import OutputFormat, emit_machine_output, render_markdown_table
from typebinder.demo.bindings import build_demo_registry
from typebinder.demo.rows import RowContainer
from typebinder.demo.surface import ListSurface
from typebinder.errors import TypeBinderError

if TYPE_CHECKING:
    from pathlib import Path

    from typebinder.demo.surface import RenderedRow


@click.command(
    name="demo",
    help="Render an items document through the demo list surface.",
    epilog="""
Without --items, renders the bundled five-item sample list. Use `typebinder bindings`
to see which binding each view-type index refers to.
""",
)
@items_document_option
@output_format_option
def demo_command(
    *,
    items_path: Path | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Render the items document.

    Args:
        items_path (Path | None): Items document; ``None`` selects the bundled list.
        output_format (OutputFormat | None): Output format to use.

    Raises:
        TypeBinderBindingError: If the registry cannot render an item.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    document = load_demo_document(items_path)
    container = RowContainer(
        width=document.width,
        colorize=fmt is OutputFormat.DEFAULT and color_enabled(ctx),
    )
    surface = ListSurface(document.items, build_demo_registry(), container)
    try:
        rendered: list[RenderedRow] = surface.render()
    except TypeBinderError as exc:
        raise TypeBinderBindingError(str(exc)) from exc

    if fmt.is_machine:
        emit_machine_output(console, [r.to_dict() for r in rendered], fmt)
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print(f"# Rendering of `{document.source}`\n")
        headers = ["Position", "View type", "Binding", "Row"]
        rows = [[str(r.position), str(r.view_type), r.binding, r.text] for r in rendered]
        console.print(render_markdown_table(headers, rows, align={0: "right", 1: "right"}))
        return

    if vlevel > 0:
        console.print(
            console.styled(
                f"Rendering {len(surface)} item(s) from {document.source} "
                f"with {len(container.children)} row object(s):\n",
                bold=True,
            )
        )
    for r in rendered:
        prefix = f"[{r.view_type}] " if document.show_index else ""
        suffix = console.styled(f"  ({r.binding})", dim=True) if vlevel > 1 else ""
        console.print(f"{prefix}{r.text}{suffix}")
