# topmark:header:start
#
#   project      : FormPrint
#   file         : errors.py
#   file_relpath : src/formprint/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FormPrint print pipeline.

All failures are single-attempt and surface to the caller as the terminal
result of the call. File operations raise the builtin `OSError` unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from formprint.core.diagnostics import Diagnostic


class FormprintError(Exception):
    """Base class for all FormPrint pipeline errors."""


class InputKindMismatchError(FormprintError):
    """The declared input kind (``zipper`` / ``parse_string``) does not match the input."""


class ConfigurationError(FormprintError):
    """Aggregated configuration loading, validation and style errors.

    Attributes:
        diagnostics (tuple[Diagnostic, ...]): The individual diagnostics, each
            tagged with its origin (global configuration or this call).
    """

    def __init__(self, message: str, diagnostics: Iterable[Diagnostic] = ()) -> None:
        super().__init__(message)
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)


class ParseError(FormprintError):
    """Malformed source text.

    Attributes:
        line (int): 1-based line of the offending character.
        column (int): 1-based column of the offending character.
    """

    def __init__(self, message: str, *, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class SourceNotFoundError(FormprintError):
    """No source text could be retrieved for a symbol reference."""
