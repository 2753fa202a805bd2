# topmark:header:start
#
#   project      : TypeBinder
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TypeBinder.

This module provides small utilities used across CLI tests: invoking the Click
group through `CliRunner`, writing items documents to a temporary directory and
asserting exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from typebinder.cli.exit_codes import ExitCode
from typebinder.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with an empty context object.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["demo"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={})


def write_items(tmp_path: Path, text: str, name: str = "items.toml") -> Path:
    """Write an items document below ``tmp_path`` and return its path.

    Args:
        tmp_path (Path): Pytest-provided temporary directory.
        text (str): TOML document text.
        name (str): File name to use.

    Returns:
        Path: The path of the written file.
    """
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_BINDING_ERROR(result: Result) -> None:
    """Assert that the command exited with BINDING_ERROR (code 70).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.BINDING_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
