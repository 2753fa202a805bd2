# topmark:header:start
#
#   project      : TypeBinder
#   file         : constants.py
#   file_relpath : src/typebinder/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeBinder Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TYPEBINDER_VERSION: str = get_version("typebinder")

# Index returned by `Registry.classify()` when no binding matches an item.
NO_MATCH: Final[int] = -1

# Name of the bundled demo document inside the package `typebinder.demo`:
DEFAULT_DEMO_DOCUMENT_PACKAGE: str = "typebinder.demo"
DEFAULT_DEMO_DOCUMENT_NAME: str = "typebinder-demo.toml"

# Environment variable consulted by `typebinder.config.logging`.
LOG_LEVEL_ENV_VAR: str = "TYPEBINDER_LOG_LEVEL"

