# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``formprint`` CLI."""

from __future__ import annotations
