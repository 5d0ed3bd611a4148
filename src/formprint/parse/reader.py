# topmark:header:start
#
#   project      : FormPrint
#   file         : reader.py
#   file_relpath : src/formprint/parse/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader for Lisp-family source text.

The reader is lossless: every character of the input ends up in exactly one
node, so ``parse_all(text).source() == text`` for any text it accepts.

Supported syntax:
    - Collections: ``( )``, ``[ ]``, ``{ }``, ``#{ }``, ``#( )``.
    - Reader macros wrapping the next form: ``'``, ````` ``, ``~``, ``~@``,
      ``@``, ``#'``, ``#_``, ``^``, ``#?``, ``#?@``.
    - Strings (``"..."`` and regex literals ``#"..."``), ``;`` comments,
      ``#!`` comment lines, character literals (``\\a``, ``\\newline``).
    - Whitespace (commas count as whitespace) and newlines.
    - Everything else is a token (symbols, keywords, numbers, ``#inst``...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formprint.config.logging import get_logger
from formprint.core.errors import ParseError
from formprint.parse.nodes import DELIMITERS, Node, NodeTag

if TYPE_CHECKING:
    from formprint.config.logging import FormprintLogger

logger: FormprintLogger = get_logger(__name__)

_OPENERS: dict[str, NodeTag] = {
    "#{": NodeTag.SET,
    "#(": NodeTag.FN,
    "(": NodeTag.LIST,
    "[": NodeTag.VECTOR,
    "{": NodeTag.MAP,
}
_CLOSERS: frozenset[str] = frozenset(")]}")

# Longest prefixes first so "~@" wins over "~" and "#?@" over "#?".
_PREFIXES: tuple[str, ...] = ("#?@", "~@", "#'", "#_", "#?", "'", "`", "~", "@", "^")

_INLINE_SPACE: frozenset[str] = frozenset(" \t\f\r,")
_TOKEN_STOP: frozenset[str] = frozenset(" \t\f\r\n,()[]{}\";")


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _location(self, pos: int) -> tuple[int, int]:
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def error(self, message: str, pos: int | None = None) -> ParseError:
        line, column = self._location(self.pos if pos is None else pos)
        return ParseError(message, line=line, column=column)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def read_until(self, closer: str | None, start: int) -> list[Node]:
        """Read nodes until ``closer`` (consumed) or end of input when ``closer`` is None."""
        nodes: list[Node] = []
        while True:
            if self.at_end():
                if closer is None:
                    return nodes
                raise self.error(
                    f"Unexpected end of input: unclosed collection, expected {closer!r}", start
                )
            ch = self.text[self.pos]
            if ch in _CLOSERS:
                if ch != closer:
                    raise self.error(f"Unmatched delimiter {ch!r}")
                self.pos += 1
                return nodes
            nodes.append(self.read_node())

    def read_node(self) -> Node:
        text, pos = self.text, self.pos
        ch = text[pos]

        if ch == "\n" or text.startswith("\r\n", pos):
            end = pos
            while end < len(text) and (text[end] == "\n" or text.startswith("\r\n", end)):
                end += 2 if text[end] == "\r" else 1
            self.pos = end
            return Node(NodeTag.NEWLINE, text[pos:end])

        if ch in _INLINE_SPACE:
            end = pos
            while (
                end < len(text)
                and text[end] in _INLINE_SPACE
                and not text.startswith("\r\n", end)
            ):
                end += 1
            self.pos = end
            return Node(NodeTag.WHITESPACE, text[pos:end])

        if ch == ";" or text.startswith("#!", pos):
            end = text.find("\n", pos)
            end = len(text) if end == -1 else end
            if end > pos and text[end - 1] == "\r":
                end -= 1
            self.pos = end
            return Node(NodeTag.COMMENT, text[pos:end])

        if ch == '"' or text.startswith('#"', pos):
            return self.read_string()

        for opener, tag in _OPENERS.items():
            if text.startswith(opener, pos):
                self.pos += len(opener)
                closer = DELIMITERS[tag][1]
                return Node(tag, children=tuple(self.read_until(closer, pos)))

        for prefix in _PREFIXES:
            if text.startswith(prefix, pos):
                return self.read_prefixed(prefix)

        return self.read_token()

    def read_string(self) -> Node:
        start = self.pos
        self.pos += 2 if self.text[start] == "#" else 1
        while not self.at_end():
            ch = self.text[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if ch == '"':
                return Node(NodeTag.STRING, self.text[start : self.pos])
        raise self.error("Unterminated string literal", start)

    def read_prefixed(self, prefix: str) -> Node:
        start = self.pos
        self.pos += len(prefix)
        children: list[Node] = []
        while True:
            if self.at_end():
                raise self.error(f"Unexpected end of input after reader macro {prefix!r}", start)
            if self.text[self.pos] in _CLOSERS:
                raise self.error(f"Reader macro {prefix!r} is not followed by a form", start)
            node = self.read_node()
            children.append(node)
            if not node.is_trivia and node.tag != NodeTag.COMMENT:
                return Node(NodeTag.PREFIX, prefix, tuple(children))

    def read_token(self) -> Node:
        text, start = self.text, self.pos
        end = start
        if text[end] == "\\":
            # Character literal: the character after the backslash is always part of it.
            end += 2
        while end < len(text) and text[end] not in _TOKEN_STOP:
            end += 1
        end = min(end, len(text))
        self.pos = end
        return Node(NodeTag.TOKEN, text[start:end])


def parse_all(text: str) -> Node:
    """Parse every top-level node of ``text`` into a `FORMS` root.

    Args:
        text (str): Source text.

    Returns:
        Node: A `NodeTag.FORMS` node whose children are all top-level nodes,
            including whitespace, newlines and comments.

    Raises:
        ParseError: If the text is malformed.
    """
    reader = _Reader(text)
    children = reader.read_until(None, 0)
    logger.trace("Parsed %d top-level node(s) from %d character(s)", len(children), len(text))
    return Node(NodeTag.FORMS, children=tuple(children))


def parse_one(text: str) -> Node | None:
    """Parse a text holding a single form.

    Leading and trailing whitespace is ignored.

    Args:
        text (str): Source text.

    Returns:
        Node | None: The form, or ``None`` when the text holds only whitespace.

    Raises:
        ParseError: If the text is malformed or holds more than one form
            (comments count as forms here).
    """
    significant: list[tuple[int, Node]] = []
    offset = 0
    for node in parse_all(text).children:
        if not node.is_trivia:
            significant.append((offset, node))
        offset += len(node.source())
    if not significant:
        return None
    if len(significant) > 1:
        # Point at the first form that should not be there.
        raise _Reader(text).error(
            f"Expected a single form, found {len(significant)}", significant[1][0]
        )
    return significant[0][1]
