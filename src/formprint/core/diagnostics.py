# topmark:header:start
#
#   project      : FormPrint
#   file         : diagnostics.py
#   file_relpath : src/formprint/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while resolving options for a print call.

Configuration problems are not raised one at a time: loading, validation and
style application each contribute messages, tagged with their origin, and
the resolver turns the combined log into a single `ConfigurationError`.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * DiagnosticOrigin: where a diagnostic came from (global config or this call).
    * Diagnostic: immutable structured diagnostic payload.
    * DiagnosticLog: mutable collection with helpers for adding and rendering.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticOrigin(Enum):
    """Origin of a configuration diagnostic.

    The value is the human-readable prefix used when rendering a combined message.
    """

    GLOBAL = "Global configuration errors"
    CALL = "Option errors in this call"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, origin and message."""

    level: DiagnosticLevel
    origin: DiagnosticOrigin
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for a single resolution."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, origin: DiagnosticOrigin, message: str) -> None:
        """Append a diagnostic."""
        self.items.append(Diagnostic(level=level, origin=origin, message=message))

    def add_errors(self, origin: DiagnosticOrigin, messages: Iterable[str]) -> None:
        """Append one ERROR diagnostic per message."""
        for message in messages:
            self.add(DiagnosticLevel.ERROR, origin, message)

    def errors(self) -> list[Diagnostic]:
        """Return only ERROR-level diagnostics."""
        return [d for d in self.items if d.level == DiagnosticLevel.ERROR]

    def has_errors(self) -> bool:
        """Return True if at least one ERROR-level diagnostic was recorded."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def render(self) -> str:
        """Render the errors as one combined message, grouped by origin.

        Global configuration errors come first, followed by errors local to the
        current call. Returns an empty string when there are no errors.
        """
        parts: list[str] = []
        for origin in (DiagnosticOrigin.GLOBAL, DiagnosticOrigin.CALL):
            messages = [d.message for d in self.errors() if d.origin == origin]
            if messages:
                parts.append(f"{origin.value}: {'; '.join(messages)}")
        return " ".join(parts)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
