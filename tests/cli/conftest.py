# topmark:header:start
#
#   project      : FormPrint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FormPrint in a controlled working directory."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from formprint.cli.exit_codes import ExitCode
from formprint.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in-process and return Click's result."""
    return CliRunner().invoke(cli, list(argv))


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory."""
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command succeeded, showing its output otherwise."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: int) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, (result.exit_code, result.output)
