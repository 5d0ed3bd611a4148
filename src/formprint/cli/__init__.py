# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    formprint = "formprint.cli.main:cli"

All subcommands live in `formprint.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
