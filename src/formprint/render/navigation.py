# topmark:header:start
#
#   project      : FormPrint
#   file         : navigation.py
#   file_relpath : src/formprint/render/navigation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Navigation capability sets for the two input representations.

The renderer never inspects its input directly; it asks a `Navigator`.
`DocumentNavigator` walks parsed documents through a `Zipper` and keeps
comments; `ValueNavigator` walks plain Python values by their own shape.
Exactly one navigator is bound per print call, selected by
`navigator_for` from the call's `Representation`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

from formprint.config.keys import ColorTag
from formprint.parse.nodes import DELIMITERS, NodeTag
from formprint.parse.zipper import Zipper


class Representation(str, Enum):
    """How a print call's input is represented."""

    DOCUMENT = "document"  # parsed source, navigated through a Zipper
    VALUE = "value"  # plain in-memory Python value


_DELIMITER_COLORS: dict[NodeTag, str] = {
    NodeTag.LIST: ColorTag.PAREN,
    NodeTag.FN: ColorTag.PAREN,
    NodeTag.VECTOR: ColorTag.BRACKET,
    NodeTag.MAP: ColorTag.BRACE,
    NodeTag.SET: ColorTag.HASH_BRACE,
    NodeTag.PREFIX: ColorTag.QUOTE,
}

_NUMBER_RE = re.compile(r"^[+-]?\d[\w.+/-]*$")
_NIL_TOKENS: frozenset[str] = frozenset({"nil", "true", "false"})


class Navigator(Protocol):
    """Capability set the renderer uses to walk its input.

    Attributes:
        representation (Representation): The representation this set is valid for.
        separator (str): Text between elements of a collection rendered on one line.
        pair_separator (str): Text between a map key and its value.
    """

    representation: Representation
    separator: str
    pair_separator: str

    def accepts(self, item: Any) -> bool:
        """Return True if ``item`` can be walked by this navigator."""
        ...

    def tag_of(self, item: Any) -> NodeTag:
        """Return the syntactic category of ``item``."""
        ...

    def children(self, item: Any) -> list[Any]:
        """Return the children to render (map entries flattened key, value)."""
        ...

    def text_of(self, item: Any) -> str:
        """Return the text of a leaf."""
        ...

    def delimiters(self, item: Any) -> tuple[str, str]:
        """Return the opening and closing text of a collection or prefix."""
        ...

    def color_of(self, item: Any) -> str | None:
        """Return the semantic color tag of a leaf or of a collection's delimiters."""
        ...


class DocumentNavigator:
    """Capability set for parsed documents (zipper representation)."""

    representation = Representation.DOCUMENT
    separator = " "
    pair_separator = " "

    def accepts(self, item: Any) -> bool:
        return isinstance(item, Zipper)

    def tag_of(self, item: Zipper) -> NodeTag:
        return item.tag

    def children(self, item: Zipper) -> list[Zipper]:
        # Top-level whitespace is part of the document's layout; elsewhere the
        # renderer produces its own.
        if item.tag == NodeTag.FORMS:
            return list(item.children())
        return [child for child in item.children() if not child.node.is_trivia]

    def text_of(self, item: Zipper) -> str:
        return item.node.text

    def delimiters(self, item: Zipper) -> tuple[str, str]:
        if item.tag == NodeTag.PREFIX:
            return item.node.text, ""
        return DELIMITERS.get(item.tag, ("", ""))

    def color_of(self, item: Zipper) -> str | None:
        tag = item.tag
        if tag in _DELIMITER_COLORS:
            return _DELIMITER_COLORS[tag]
        if tag == NodeTag.STRING:
            return ColorTag.STRING
        if tag == NodeTag.COMMENT:
            return ColorTag.COMMENT
        if tag != NodeTag.TOKEN:
            return None
        text = item.node.text
        if text.startswith(":"):
            return ColorTag.KEYWORD
        if text in _NIL_TOKENS:
            return ColorTag.NIL
        if _NUMBER_RE.match(text):
            return ColorTag.NUMBER
        return ColorTag.SYMBOL


class ValueNavigator:
    """Capability set for plain Python values (value representation).

    ``dict`` renders as a map, ``list`` as a vector, ``tuple`` as a list and
    ``set``/``frozenset`` as a set, all in Python literal syntax. Any other
    value is a leaf rendered with `repr`.
    """

    representation = Representation.VALUE
    separator = ", "
    pair_separator = ": "

    def accepts(self, item: Any) -> bool:
        return not isinstance(item, Zipper)

    def tag_of(self, item: Any) -> NodeTag:
        if isinstance(item, Mapping):
            return NodeTag.MAP
        if isinstance(item, list):
            return NodeTag.VECTOR
        if isinstance(item, tuple):
            return NodeTag.LIST
        if isinstance(item, (set, frozenset)):
            return NodeTag.SET
        if isinstance(item, str):
            return NodeTag.STRING
        return NodeTag.TOKEN

    def children(self, item: Any) -> list[Any]:
        if isinstance(item, Mapping):
            flat: list[Any] = []
            for key, value in item.items():
                flat.extend((key, value))
            return flat
        if isinstance(item, (set, frozenset)):
            try:
                return sorted(item)
            except TypeError:
                return sorted(item, key=repr)
        if isinstance(item, (list, tuple)):
            return list(item)
        return []

    def text_of(self, item: Any) -> str:
        return repr(item)

    def delimiters(self, item: Any) -> tuple[str, str]:
        if isinstance(item, Mapping):
            return "{", "}"
        if isinstance(item, list):
            return "[", "]"
        if isinstance(item, tuple):
            return ("(", ",)") if len(item) == 1 else ("(", ")")
        if isinstance(item, frozenset):
            return ("frozenset({", "})") if item else ("frozenset(", ")")
        if isinstance(item, set):
            return ("{", "}") if item else ("set(", ")")
        return "", ""

    def color_of(self, item: Any) -> str | None:
        tag = self.tag_of(item)
        if tag in _DELIMITER_COLORS:
            return _DELIMITER_COLORS[tag]
        if tag == NodeTag.STRING:
            return ColorTag.STRING
        if item is None or isinstance(item, bool):
            return ColorTag.NIL
        if isinstance(item, (int, float, complex)):
            return ColorTag.NUMBER
        return ColorTag.SYMBOL


_NAVIGATORS: dict[Representation, Navigator] = {
    Representation.DOCUMENT: DocumentNavigator(),
    Representation.VALUE: ValueNavigator(),
}


def navigator_for(representation: Representation) -> Navigator:
    """Return the capability set bound to ``representation``."""
    return _NAVIGATORS[representation]
