# topmark:header:start
#
#   project      : FormPrint
#   file         : tokens.py
#   file_relpath : src/formprint/render/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token model shared by the renderer and the finisher.

A rendered document is a *token stream*: an ordered, finite, single-pass
iterator of `Token` triples ``(text, color, kind)``. Concatenating every
``text`` in order yields the exact output string; ``color`` is a semantic tag
(see `formprint.config.keys.ColorTag`) resolved to a display color only when
the stream is colorized.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple


class TokenKind(str, Enum):
    """What a token's text represents."""

    WHITESPACE = "whitespace"  # blanks and newlines
    ELEMENT = "element"  # actual output text
    LEFT = "left"  # opening delimiter of a collection
    RIGHT = "right"  # closing delimiter of a collection

    @property
    def is_boundary(self) -> bool:
        """Return True for collection delimiters."""
        return self in (TokenKind.LEFT, TokenKind.RIGHT)


class Token(NamedTuple):
    """One unit of rendered output."""

    text: str
    color: str | None
    kind: TokenKind


TokenStream = Iterator[Token]


def empty_element() -> Token:
    """Return the token that represents an absent (``None``) input."""
    return Token("", None, TokenKind.ELEMENT)
