# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/finish/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token-stream finishing: plain text, style runs and ANSI color."""

from __future__ import annotations

from formprint.finish.colors import DisplayColor
from formprint.finish.finisher import (
    StyleRun,
    colorize,
    colorized_finish,
    compact,
    decompact,
    plain_finish,
    to_display_colors,
)

__all__: list[str] = [
    "DisplayColor",
    "StyleRun",
    "colorize",
    "colorized_finish",
    "compact",
    "decompact",
    "plain_finish",
    "to_display_colors",
]
