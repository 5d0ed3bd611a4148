# topmark:header:start
#
#   project      : FormPrint
#   file         : schema.py
#   file_relpath : src/formprint/config/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation of option maps against the recognized-option schema.

Validation never raises: it returns a list of human-readable error strings,
each naming the dotted key it is about, so callers can aggregate errors from
several sources into one diagnostic.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from formprint.config.keys import ColorTag, Opt
from formprint.config.logging import get_logger
from formprint.config.merge import merge_deep
from formprint.finish.colors import DisplayColor

logger = get_logger(__name__)

# A leaf check returns an error message (without the key) or None.
Check = Callable[[Any], "str | None"]
Schema = Mapping[str, "Check | Schema"]


def _type_name(value: Any) -> str:
    return type(value).__name__


def _bool(value: Any) -> str | None:
    if not isinstance(value, bool):
        return f"expected a boolean, got {_type_name(value)} {value!r}"
    return None


def _int(minimum: int) -> Check:
    def check(value: Any) -> str | None:
        # bool is a subclass of int but never a valid count
        if isinstance(value, bool) or not isinstance(value, int):
            return f"expected an integer, got {_type_name(value)} {value!r}"
        if value < minimum:
            return f"must be at least {minimum}, got {value}"
        return None

    return check


def _str_list(value: Any) -> str | None:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        return f"expected a list of strings, got {value!r}"
    return None


def _style(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return None
    return _str_list(value)


def _color(value: Any) -> str | None:
    if not isinstance(value, str):
        return f"expected a color name, got {_type_name(value)} {value!r}"
    if value not in DisplayColor.names():
        return f"unknown color {value!r} (expected one of: {', '.join(DisplayColor.names())})"
    return None


SCHEMA: Schema = {
    Opt.KEY_WIDTH: _int(1),
    Opt.KEY_AUTO_WIDTH: _bool,
    Opt.KEY_PARSE_STRING: _bool,
    Opt.KEY_ZIPPER: _bool,
    Opt.KEY_STYLE: _style,
    Opt.KEY_CWD_CONFIG: _bool,
    Opt.KEY_SOURCE_PATHS: _str_list,
    Opt.SECTION_TAB: {
        Opt.KEY_EXPAND: _bool,
        Opt.KEY_SIZE: _int(1),
    },
    Opt.SECTION_LIST: {
        Opt.KEY_INDENT: _int(0),
        Opt.KEY_HANG: _bool,
    },
    Opt.SECTION_VECTOR: {
        Opt.KEY_WRAP: _bool,
    },
    Opt.SECTION_MAP: {
        Opt.KEY_JUSTIFY: _bool,
        Opt.KEY_COMMA: _bool,
    },
    Opt.SECTION_COLOR_MAP: {tag: _color for tag in ColorTag.ALL},
}


def validate_options(
    options: Mapping[str, Any] | None, *, base: Mapping[str, Any] | None = None
) -> list[str]:
    """Validate an option map (complete or partial) against `SCHEMA`.

    Args:
        options (Mapping[str, Any] | None): Options to check. Missing keys are fine;
            only the keys present are validated.
        base (Mapping[str, Any] | None): Already-validated options that ``options``
            will be merged over. Rules spanning several keys are checked
            against the merged map, so a conflict between layers is reported.

    Returns:
        list[str]: One message per problem; empty when the options are valid.
    """
    if options is None:
        return []
    if not isinstance(options, Mapping):
        return [f"options must be a map, got {_type_name(options)} {options!r}"]

    errors: list[str] = _validate_section(options, SCHEMA, prefix="")
    merged = merge_deep(base, options) if base is not None else options
    if merged.get(Opt.KEY_PARSE_STRING) is True and merged.get(Opt.KEY_ZIPPER) is True:
        errors.append(f"'{Opt.KEY_PARSE_STRING}' and '{Opt.KEY_ZIPPER}' cannot both be true")
    if errors:
        logger.debug("Option validation found %d error(s): %s", len(errors), errors)
    return errors


def _validate_section(section: Mapping[str, Any], schema: Schema, *, prefix: str) -> list[str]:
    errors: list[str] = []
    for key, value in section.items():
        path = f"{prefix}{key}"
        rule = schema.get(key)
        if rule is None:
            errors.append(f"unknown option '{path}'")
        elif isinstance(rule, Mapping):
            if isinstance(value, Mapping):
                errors.extend(_validate_section(value, rule, prefix=f"{path}."))
            else:
                errors.append(f"'{path}' must be a table, got {_type_name(value)} {value!r}")
        else:
            message = rule(value)
            if message:
                errors.append(f"'{path}' {message}")
    return errors
