# topmark:header:start
#
#   project      : FormPrint
#   file         : terminal.py
#   file_relpath : src/formprint/utils/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal probing helpers."""

from __future__ import annotations

import shutil
import sys

from formprint.config.logging import get_logger

logger = get_logger(__name__)


def detect_terminal_width() -> int | None:
    """Return the width of the terminal attached to stdout.

    Returns:
        int | None: The number of columns, or ``None`` when stdout is not a
            terminal or its size cannot be determined.
    """
    try:
        if not sys.stdout.isatty():
            return None
    except (AttributeError, ValueError, OSError):
        return None
    columns = shutil.get_terminal_size(fallback=(0, 0)).columns
    logger.trace("Detected terminal width: %s", columns)
    return columns if columns > 0 else None
