# topmark:header:start
#
#   project      : FormPrint
#   file         : keys.py
#   file_relpath : src/formprint/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical option names for FormPrint configuration.

This module defines the authoritative string constants used when reading,
validating and merging FormPrint options, whether they come from the
built-in defaults, a ``.formprint.toml`` file, `set_options` or a single
print call.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Opt:
    """Option section names and keys.

    Top-level scalar keys come first, followed by the nested sections and
    their keys.
    """

    # Top-level scalars
    KEY_WIDTH: Final[str] = "width"
    KEY_AUTO_WIDTH: Final[str] = "auto_width"
    KEY_PARSE_STRING: Final[str] = "parse_string"
    KEY_ZIPPER: Final[str] = "zipper"
    KEY_STYLE: Final[str] = "style"
    KEY_CWD_CONFIG: Final[str] = "cwd_config"
    KEY_SOURCE_PATHS: Final[str] = "source_paths"

    # [tab]
    SECTION_TAB: Final[str] = "tab"

    KEY_EXPAND: Final[str] = "expand"
    KEY_SIZE: Final[str] = "size"

    # [list]
    SECTION_LIST: Final[str] = "list"

    KEY_INDENT: Final[str] = "indent"
    KEY_HANG: Final[str] = "hang"

    # [vector]
    SECTION_VECTOR: Final[str] = "vector"

    KEY_WRAP: Final[str] = "wrap"

    # [map]
    SECTION_MAP: Final[str] = "map"

    KEY_JUSTIFY: Final[str] = "justify"
    KEY_COMMA: Final[str] = "comma"

    # [color_map]
    SECTION_COLOR_MAP: Final[str] = "color_map"


class ColorTag:
    """Semantic color tags attached to tokens by the renderer."""

    PAREN: Final[str] = "paren"
    BRACKET: Final[str] = "bracket"
    BRACE: Final[str] = "brace"
    HASH_BRACE: Final[str] = "hash_brace"
    QUOTE: Final[str] = "quote"
    STRING: Final[str] = "string"
    COMMENT: Final[str] = "comment"
    KEYWORD: Final[str] = "keyword"
    NUMBER: Final[str] = "number"
    NIL: Final[str] = "nil"
    SYMBOL: Final[str] = "symbol"
    NONE: Final[str] = "none"

    ALL: Final[tuple[str, ...]] = (
        PAREN,
        BRACKET,
        BRACE,
        HASH_BRACE,
        QUOTE,
        STRING,
        COMMENT,
        KEYWORD,
        NUMBER,
        NIL,
        SYMBOL,
        NONE,
    )
