# topmark:header:start
#
#   project      : TypeBinder
#   file         : classify.py
#   file_relpath : src/typebinder/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder `classify` command.

Reports the view-type index chosen for each item of an items document, without
creating or populating any row. Items no binding matches are reported with
index ``-1``; classification alone never fails on them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from typebinder.cli.cmd_common import get_console, get_effective_verbosity, load_demo_document
from typebinder.cli.options import items_document_option, output_format_option
from typebinder.cli.utils import OutputFormat, emit_machine_output, render_markdown_table
from typebinder.constants import NO_MATCH
from typebinder.demo.bindings import build_demo_registry

if TYPE_CHECKING:
    from pathlib import Path

NO_MATCH_LABEL = "<no match>"


@click.command(
    name="classify",
    help="Show which binding each item is classified to.",
)
@items_document_option
@output_format_option
def classify_command(
    *,
    items_path: Path | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Classify every item of the items document.

    Args:
        items_path (Path | None): Items document; ``None`` selects the bundled list.
        output_format (OutputFormat | None): Output format to use.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    document = load_demo_document(items_path)
    registry = build_demo_registry()
    bindings = registry.bindings

    records: list[dict[str, Any]] = []
    for position, item in enumerate(document.items):
        view_type = registry.classify(item)
        records.append(
            {
                "position": position,
                "name": item.name,
                "kind": item.kind,
                "view_type": view_type,
                "binding": None if view_type == NO_MATCH else bindings[view_type].name,
            }
        )

    if fmt.is_machine:
        emit_machine_output(console, records, fmt)
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print(f"# Classification of `{document.source}`\n")
        rows = [
            [
                str(r["position"]),
                r["name"],
                r["kind"],
                str(r["view_type"]),
                r["binding"] or NO_MATCH_LABEL,
            ]
            for r in records
        ]
        headers = ["Position", "Name", "Kind", "View type", "Binding"]
        console.print(render_markdown_table(headers, rows, align={0: "right", 3: "right"}))
        return

    if vlevel > 0:
        console.print(
            console.styled(f"Classifying {len(records)} item(s) from {document.source}:\n", bold=True)
        )
    name_width = max((len(r["name"]) for r in records), default=1)
    for r in records:
        if r["binding"] is None:
            target = console.styled(f"#{r['view_type']} {NO_MATCH_LABEL}", fg="yellow")
        else:
            target = f"#{r['view_type']} {r['binding']}"
        kind = console.styled(f"({r['kind']})", dim=True)
        console.print(f"{r['position']:>3}. {r['name']:<{name_width}} {kind} -> {target}")
