# topmark:header:start
#
#   project      : FormPrint
#   file         : styles.py
#   file_relpath : src/formprint/config/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named style presets.

A style is a partial option map applied as an overlay on top of the options
that requested it. Several styles may be requested at once; they are applied
in the order given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formprint.config.keys import ColorTag, Opt
from formprint.config.logging import get_logger
from formprint.config.merge import merge_deep

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formprint.config.logging import FormprintLogger
    from formprint.config.merge import OptionMap

logger: FormprintLogger = get_logger(__name__)

STYLES: dict[str, OptionMap] = {
    "community": {
        Opt.SECTION_LIST: {Opt.KEY_INDENT: 1},
    },
    "justified": {
        Opt.SECTION_MAP: {Opt.KEY_JUSTIFY: True},
    },
    "compact": {
        Opt.SECTION_MAP: {Opt.KEY_COMMA: False},
        Opt.SECTION_VECTOR: {Opt.KEY_WRAP: True},
    },
    "no_color": {
        Opt.SECTION_COLOR_MAP: {tag: "none" for tag in ColorTag.ALL},
    },
}


def style_names(style: Any) -> list[str]:
    """Normalize a ``style`` option value to a list of names."""
    if style is None:
        return []
    if isinstance(style, str):
        return [style]
    if isinstance(style, (list, tuple)):
        return [str(name) for name in style]
    return []


def style_overlay(style: Any) -> tuple[OptionMap, list[str]]:
    """Return the merged overlay for the requested style(s) and any errors.

    Unknown style names are reported and skipped.
    """
    overlay: OptionMap = {}
    errors: list[str] = []
    for name in style_names(style):
        preset = STYLES.get(name)
        if preset is None:
            errors.append(f"unknown style {name!r} (known styles: {', '.join(sorted(STYLES))})")
            continue
        logger.debug("Applying style %r", name)
        overlay = merge_deep(overlay, preset)
    return overlay, errors


def apply_style(
    base: Mapping[str, Any], options: Mapping[str, Any]
) -> tuple[OptionMap, list[str]]:
    """Merge ``options`` over ``base`` and overlay the styles ``options`` requests.

    Args:
        base (Mapping[str, Any]): Lower-precedence options (defaults and committed options).
        options (Mapping[str, Any]): Options that may carry a ``style`` key.

    Returns:
        tuple[OptionMap, list[str]]: The merged map and the style errors.
    """
    overlay, errors = style_overlay(options.get(Opt.KEY_STYLE))
    return merge_deep(base, options, overlay), errors
