# topmark:header:start
#
#   project      : FormPrint
#   file         : defaults.py
#   file_relpath : src/formprint/config/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in default options and help text.

The defaults are defined in code (no I/O) and form the base layer of every
merge. Callers always receive a fresh copy so they can mutate it safely.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from formprint.config.keys import ColorTag, Opt

if TYPE_CHECKING:
    from formprint.config.merge import OptionMap

_DEFAULTS: OptionMap = {
    Opt.KEY_WIDTH: 80,
    Opt.KEY_AUTO_WIDTH: False,
    Opt.KEY_PARSE_STRING: False,
    Opt.KEY_ZIPPER: False,
    Opt.KEY_STYLE: None,
    Opt.KEY_CWD_CONFIG: False,
    Opt.KEY_SOURCE_PATHS: ["src", "."],
    Opt.SECTION_TAB: {
        Opt.KEY_EXPAND: True,
        Opt.KEY_SIZE: 8,
    },
    Opt.SECTION_LIST: {
        Opt.KEY_INDENT: 2,
        Opt.KEY_HANG: True,
    },
    Opt.SECTION_VECTOR: {
        Opt.KEY_WRAP: False,
    },
    Opt.SECTION_MAP: {
        Opt.KEY_JUSTIFY: False,
        Opt.KEY_COMMA: True,
    },
    Opt.SECTION_COLOR_MAP: {
        ColorTag.PAREN: "green",
        ColorTag.BRACKET: "magenta",
        ColorTag.BRACE: "red",
        ColorTag.HASH_BRACE: "red",
        ColorTag.QUOTE: "red",
        ColorTag.STRING: "red",
        ColorTag.COMMENT: "green",
        ColorTag.KEYWORD: "magenta",
        ColorTag.NUMBER: "magenta",
        ColorTag.NIL: "yellow",
        ColorTag.SYMBOL: "none",
        ColorTag.NONE: "none",
    },
}


def get_default_options() -> OptionMap:
    """Return FormPrint's built-in default options as a new nested dict."""
    return copy.deepcopy(_DEFAULTS)


HELP_TEXT: str = """\
FormPrint: pretty-print Lisp-family source and Python values.

  pformat(obj, width_or_options=None, options=None)   -> str
  cpformat(obj, width_or_options=None, options=None)  -> str with ANSI colors
  pprint(obj, ...) / cpprint(obj, ...)                 -> print to stdout
  pformat_source("ns/name", ...)                       -> print a definition
  format_file(in_path, out_path)                       -> format every form in a file

  The second argument may be a width (int), an options map, or one of the
  special flags: "default", "explain", "explain-justified", "explain-all", "help".

  Options are merged in this order: built-in defaults, options committed with
  set_options() or loaded from ~/.formprint.toml, options for this call, then
  any named style ("community", "justified", "compact", "no_color").
"""
