# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TypeBinder."""

from __future__ import annotations
