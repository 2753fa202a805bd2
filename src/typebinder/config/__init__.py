# topmark:header:start
#
#   project      : TypeBinder
#   file         : __init__.py
#   file_relpath : src/typebinder/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for TypeBinder (logging levels and environment)."""

from __future__ import annotations
