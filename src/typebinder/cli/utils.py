# topmark:header:start
#
#   project      : TypeBinder
#   file         : utils.py
#   file_relpath : src/typebinder/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI utility helpers for TypeBinder.

Output format selection, color mode resolution and Markdown table rendering,
shared by all commands. Nothing here depends on Click.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Sequence

if TYPE_CHECKING:
    from typebinder.cli.console import ConsoleLike


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON array of objects (machine-readable).
      NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).
      MARKDOWN: A GitHub-flavoured Markdown document.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"

    @property
    def is_machine(self) -> bool:
        """True for JSON and NDJSON."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Members:
      AUTO: Enable color only when appropriate (typically when stdout is a TTY).
      ALWAYS: Force-enable color regardless of TTY status.
      NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (OutputFormat | None): Selected output format, if known.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format is not None and output_format.is_machine:
        return False
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def escape_markdown_cell(value: object) -> str:
    """Return ``value`` as text safe to place inside a Markdown table cell."""
    text = str(value).replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return text.replace("|", r"\|")


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Cells are escaped first: ``|`` becomes ``\\|`` and line breaks become spaces,
    so that every row keeps exactly one cell per header.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to alignment: ``"left"`` (default),
        ``"right"``, or ``"center"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    header_cells = [escape_markdown_cell(h) for h in headers]
    body = [[escape_markdown_cell(cell) for cell in r] for r in rows]

    widths = [len(h) for h in header_cells]
    for r in body:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    def _sep_for(i: int) -> str:
        style = (align or {}).get(i, "left").lower()
        w = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    header_line = " | ".join(_pad(header_cells[i], widths[i]) for i in range(ncols))
    sep_line = " | ".join(_sep_for(i) for i in range(ncols))
    data_lines = [" | ".join(_pad(r[i], widths[i]) for i in range(ncols)) for r in body]

    lines = [f"| {header_line} |", f"| {sep_line} |"]
    lines.extend(f"| {line} |" for line in data_lines)
    return "\n".join(lines) + "\n"


def emit_machine_output(
    console: ConsoleLike,
    payload: Sequence[Mapping[str, Any]],
    fmt: OutputFormat,
) -> None:
    """Print ``payload`` as a JSON array or as NDJSON lines.

    Args:
        console (ConsoleLike): Console receiving the output.
        payload (Sequence[Mapping[str, Any]]): Records to serialize.
        fmt (OutputFormat): ``JSON`` or ``NDJSON``.
    """
    if fmt is OutputFormat.JSON:
        console.print(json.dumps(list(payload), indent=2))
        return
    for record in payload:
        console.print(json.dumps(record))
