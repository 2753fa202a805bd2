# topmark:header:start
#
#   project      : TypeBinder
#   file         : test_classify_command.py
#   file_relpath : tests/cli/test_classify_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `classify` reports view-type indices without rendering."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_SUCCESS, run_cli, write_items

if TYPE_CHECKING:
    from pathlib import Path


def test_classify_bundled_list_text() -> None:
    """Each item is listed with its index and binding name."""
    result = run_cli(["--no-color", "classify"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 5
    assert lines[0] == "  0. Test Item 1 (item) -> #3 default"
    assert lines[1] == "  1. Test Item 2 (colored) -> #1 colored"
    assert lines[4] == "  4. Test Item 5 (item) -> #0 image"


def test_classify_json_records() -> None:
    """--format json emits position, name, kind, view_type and binding."""
    result = run_cli(["classify", "--format", "json"])

    assert_SUCCESS(result)
    records: list[dict[str, Any]] = json.loads(result.output)
    assert records[2] == {
        "position": 2,
        "name": "Test Item 3",
        "kind": "item",
        "view_type": 2,
        "binding": "headline",
    }


def test_classify_markdown_table() -> None:
    """--format markdown renders a table with one row per item."""
    result = run_cli(["classify", "--format", "markdown"])

    assert_SUCCESS(result)
    table_rows = [ln for ln in result.output.splitlines() if ln.startswith("|")]
    # header + separator + 5 items
    assert len(table_rows) == 7


def test_classify_verbose_banner(tmp_path: Path) -> None:
    """-v prints a banner naming the document."""
    path = write_items(tmp_path, '[[items]]\nname = "solo"\n')

    result = run_cli(["--no-color", "-v", "classify", "--items", str(path)])

    assert_SUCCESS(result)
    assert f"Classifying 1 item(s) from {path}:" in result.output
    assert "solo (item) -> #3 default" in result.output


def test_classify_empty_document(tmp_path: Path) -> None:
    """A document without items produces no output and succeeds."""
    path = write_items(tmp_path, "")

    result = run_cli(["--no-color", "classify", "--items", str(path), "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == []


def test_classify_markdown_escapes_item_names(tmp_path: Path) -> None:
    """Names containing a pipe keep the Markdown table rectangular."""
    path = write_items(tmp_path, '[[items]]\nname = "A | B"\n')

    result = run_cli(["classify", "--items", str(path), "--format", "markdown"])

    assert_SUCCESS(result)
    table_rows = [ln for ln in result.output.splitlines() if ln.startswith("|")]
    assert len(table_rows) == 3
    cell_separators = {len(re.findall(r"(?<!\\)\|", ln)) for ln in table_rows}
    assert cell_separators == {6}
    assert r"A \| B" in table_rows[2]
