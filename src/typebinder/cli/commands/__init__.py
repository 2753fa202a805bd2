# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder CLI subcommands."""

from __future__ import annotations
