# topmark:header:start
#
#   project      : FormPrint
#   file         : nodes.py
#   file_relpath : src/formprint/parse/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable syntax nodes produced by the reader.

Nodes keep every character of the input: whitespace, newlines and comments
are nodes in their own right, and `Node.source` reproduces the exact text a
node was parsed from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeTag(str, Enum):
    """Syntactic category of a node."""

    FORMS = "forms"  # root of a multi-form parse
    LIST = "list"
    VECTOR = "vector"
    MAP = "map"
    SET = "set"
    FN = "fn"  # anonymous function literal #( )
    PREFIX = "prefix"  # reader macro wrapping one form: ' ` ~ ~@ @ #' #_ ^ #? #?@
    STRING = "string"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    TOKEN = "token"


DELIMITERS: dict[NodeTag, tuple[str, str]] = {
    NodeTag.FORMS: ("", ""),
    NodeTag.LIST: ("(", ")"),
    NodeTag.VECTOR: ("[", "]"),
    NodeTag.MAP: ("{", "}"),
    NodeTag.SET: ("#{", "}"),
    NodeTag.FN: ("#(", ")"),
}

TRIVIA: frozenset[NodeTag] = frozenset({NodeTag.WHITESPACE, NodeTag.NEWLINE})


@dataclass(frozen=True, slots=True)
class Node:
    """A syntax node.

    Attributes:
        tag (NodeTag): Syntactic category.
        text (str): Leaf text; for `PREFIX` nodes, the reader macro itself.
        children (tuple[Node, ...]): Child nodes of collections and prefixes,
            including whitespace and comments.
    """

    tag: NodeTag
    text: str = ""
    children: tuple[Node, ...] = ()

    @property
    def is_collection(self) -> bool:
        """Return True for nodes delimited by a pair of brackets (or the root)."""
        return self.tag in DELIMITERS

    @property
    def is_trivia(self) -> bool:
        """Return True for whitespace and newline nodes."""
        return self.tag in TRIVIA

    def source(self) -> str:
        """Return the exact source text this node was parsed from."""
        if self.tag == NodeTag.PREFIX:
            return self.text + "".join(child.source() for child in self.children)
        if self.is_collection:
            open_, close = DELIMITERS[self.tag]
            return open_ + "".join(child.source() for child in self.children) + close
        return self.text
