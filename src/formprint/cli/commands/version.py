# topmark:header:start
#
#   project      : FormPrint
#   file         : version.py
#   file_relpath : src/formprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint `version` command.

Prints the current FormPrint version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from formprint.constants import FORMPRINT_VERSION


@click.command(
    name="version",
    help="Show the current version of FormPrint.",
)
def version_command() -> None:
    """Show the current version of FormPrint."""
    click.echo(FORMPRINT_VERSION)
