# topmark:header:start
#
#   project      : FormPrint
#   file         : errors.py
#   file_relpath : src/formprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FormPrint CLI.

Commands translate pipeline exceptions with `cli_error_for`; each class carries
the exit code Click uses when the exception escapes a command.
"""

from __future__ import annotations

from typing import IO, Any

import click
from yachalk import chalk

from formprint.cli.exit_codes import ExitCode
from formprint.core.errors import (
    ConfigurationError,
    InputKindMismatchError,
    ParseError,
    SourceNotFoundError,
)


class FormprintCliError(click.ClickException):
    """Base class for all FormPrint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error on stderr in bright red."""
        click.echo(chalk.red_bright(f"Error: {self.format_message()}"), file=file, err=True)


class FormprintUsageError(FormprintCliError):
    """Error for invalid arguments or input of the wrong kind."""

    exit_code = ExitCode.USAGE_ERROR


class FormprintConfigError(FormprintCliError):
    """Error for invalid options or configuration files."""

    exit_code = ExitCode.CONFIG_ERROR


class FormprintDataError(FormprintCliError):
    """Error for input that cannot be parsed or decoded."""

    exit_code = ExitCode.DATA_ERROR


class FormprintFileNotFoundError(FormprintCliError):
    """Error when an input path or source definition does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FormprintPermissionDeniedError(FormprintCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class FormprintIOError(FormprintCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


def cli_error_for(exc: Exception) -> FormprintCliError:
    """Map a pipeline or OS exception onto the matching CLI error."""
    message = str(exc)
    if isinstance(exc, ConfigurationError):
        return FormprintConfigError(message)
    if isinstance(exc, InputKindMismatchError):
        return FormprintUsageError(message)
    if isinstance(exc, (ParseError, UnicodeDecodeError)):
        return FormprintDataError(message)
    if isinstance(exc, (SourceNotFoundError, FileNotFoundError)):
        return FormprintFileNotFoundError(message)
    if isinstance(exc, PermissionError):
        return FormprintPermissionDeniedError(message)
    if isinstance(exc, OSError):
        return FormprintIOError(message)
    return FormprintCliError(message)
