# topmark:header:start
#
#   project      : FormPrint
#   file         : format.py
#   file_relpath : src/formprint/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint `format` command.

Formats every top-level form of INFILE and writes the result to OUTFILE
(which may be INFILE itself).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from formprint import api
from formprint.cli.errors import cli_error_for
from formprint.config.keys import Opt
from formprint.config.logging import get_logger
from formprint.config.styles import STYLES
from formprint.core.errors import FormprintError

logger = get_logger(__name__)


@click.command(
    name="format",
    help="Format the forms in INFILE and write them to OUTFILE.",
)
@click.argument(
    "infile",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "outfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
)
@click.option(
    "--width",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum line width (overrides the configured width).",
)
@click.option(
    "--style",
    "style",
    type=click.Choice(sorted(STYLES)),
    default=None,
    help="Apply a named style on top of the configured options.",
)
def format_command(
    *,
    infile: Path,
    outfile: Path,
    width: int | None = None,
    style: str | None = None,
) -> None:
    """Format INFILE into OUTFILE.

    Args:
        infile (Path): File to read.
        outfile (Path): File to write; replaced atomically.
        width (int | None): Optional width override.
        style (str | None): Optional style name.

    Raises:
        FormprintCliError: If configuration, parsing or file access fails.
    """
    options: dict[str, Any] = {}
    if width is not None:
        options[Opt.KEY_WIDTH] = width
    if style is not None:
        options[Opt.KEY_STYLE] = style

    try:
        api.format_file(infile, outfile, options)
    except (FormprintError, OSError, UnicodeDecodeError) as exc:
        logger.debug("format failed: %r", exc)
        raise cli_error_for(exc) from exc
