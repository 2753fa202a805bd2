# topmark:header:start
#
#   project      : TypeBinder
#   file         : __main__.py
#   file_relpath : src/typebinder/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypeBinder via ``python -m typebinder``.

Delegates to [`typebinder.cli.main.cli`][typebinder.cli.main.cli], the same
entry point as the ``typebinder`` console script.
"""

from __future__ import annotations

from typebinder.cli.main import cli

if __name__ == "__main__":
    cli()
