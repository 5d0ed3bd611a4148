# topmark:header:start
#
#   project      : FormPrint
#   file         : main.py
#   file_relpath : src/formprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint command-line interface.

A Click group with one subcommand per task; logging is configured once in the
group callback from ``FORMPRINT_LOG_LEVEL`` (or ``-v``).
"""

from __future__ import annotations

import logging

import click

from formprint.cli.commands.format import format_command
from formprint.cli.commands.options import options_command
from formprint.cli.commands.version import version_command
from formprint.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

_VERBOSITY_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG)


def resolve_log_level(verbose: int) -> int | None:
    """Return the log level for ``-v`` count ``verbose``; the environment wins when set."""
    level_env = resolve_env_log_level()
    if level_env is not None:
        return level_env
    if verbose <= 0:
        return None
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FormPrint CLI",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase log verbosity (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Entry point for the FormPrint CLI."""
    setup_logging(level=resolve_log_level(verbose))

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'formprint format INFILE OUTFILE' to format a file.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(options_command)

cli.add_command(format_command)

if __name__ == "__main__":
    cli()
