# topmark:header:start
#
#   project      : FormPrint
#   file         : options.py
#   file_relpath : src/formprint/cli/commands/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint `options` command.

Prints the committed options (defaults merged with the configuration files),
formatted by FormPrint itself.
"""

from __future__ import annotations

import click

from formprint import api
from formprint.cli.errors import cli_error_for
from formprint.core.diagnostics import DiagnosticLevel
from formprint.core.errors import FormprintError


@click.command(
    name="options",
    help="Show the committed options.",
)
@click.option(
    "--explain",
    "explain",
    is_flag=True,
    default=False,
    help="Show only options set outside the defaults, with where each was set.",
)
@click.option(
    "--all",
    "explain_all",
    is_flag=True,
    default=False,
    help="Like --explain, but include options still at their default.",
)
def options_command(*, explain: bool = False, explain_all: bool = False) -> None:
    """Show the committed options.

    Args:
        explain (bool): Annotate options with their origin, omitting defaults.
        explain_all (bool): Annotate every option with its origin.

    Raises:
        FormprintUsageError: If both flags are given.
        FormprintConfigError: If the configuration files are invalid.
    """
    if explain and explain_all:
        raise click.UsageError("--explain and --all are mutually exclusive")

    errors = api.configure_all()
    for error in errors:
        click.echo(DiagnosticLevel.WARNING.color(f"warning: {error}"), err=True)

    try:
        if explain or explain_all:
            subject = api.get_explained_options(include_defaults=explain_all)
        else:
            subject = api.get_options()
        click.echo(api.pformat(subject))
    except FormprintError as exc:
        raise cli_error_for(exc) from exc
