# topmark:header:start
#
#   project      : FormPrint
#   file         : engine.py
#   file_relpath : src/formprint/render/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout engine: turn a navigable input into a token stream.

The engine is deliberately simple. A collection is emitted on one line when
it fits in the remaining width and holds no comment; otherwise it is broken
one element per line:

- lists (document mode) keep their head, and with ``list.hang`` their first
  argument, on the opening line and indent the rest by ``list.indent``;
- vectors, sets, tuples and the like align their elements under the first
  one (``vector.wrap`` fills vectors several elements per line);
- maps put one key/value pair per line, optionally justified, with commas
  between pairs in document mode when ``map.comma`` is set.

A comment always ends its line. Whitespace at the top level of a multi-form
document is emitted unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formprint.config.keys import ColorTag
from formprint.config.logging import get_logger
from formprint.parse.nodes import NodeTag
from formprint.render.navigation import Representation
from formprint.render.tokens import Token, TokenKind

if TYPE_CHECKING:
    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions
    from formprint.render.navigation import Navigator
    from formprint.render.tokens import TokenStream

logger: FormprintLogger = get_logger(__name__)

_LEAVES: frozenset[NodeTag] = frozenset(
    {NodeTag.STRING, NodeTag.COMMENT, NodeTag.TOKEN, NodeTag.WHITESPACE, NodeTag.NEWLINE}
)


def _width(tokens: list[Token]) -> int:
    return sum(len(t.text) for t in tokens)


def _newline(column: int) -> Token:
    return Token("\n" + " " * column, None, TokenKind.WHITESPACE)


class _Layout:
    def __init__(self, options: ResolvedOptions, navigator: Navigator) -> None:
        self.options = options
        self.nav = navigator
        self.width = options.width
        self._active: set[int] = set()

    # --- separators ---

    def _sep(self, text: str) -> list[Token]:
        """Split a separator such as ``", "`` into element and whitespace tokens."""
        stripped = text.strip()
        tokens: list[Token] = []
        if stripped:
            tokens.append(Token(stripped, None, TokenKind.ELEMENT))
        if text.endswith(" "):
            tokens.append(Token(" ", None, TokenKind.WHITESPACE))
        return tokens

    def _break_sep(self, column: int) -> list[Token]:
        """Separator between elements placed on different lines."""
        stripped = self.nav.separator.strip()
        tokens = [Token(stripped, None, TokenKind.ELEMENT)] if stripped else []
        tokens.append(_newline(column))
        return tokens

    # --- structure ---

    @property
    def _is_document(self) -> bool:
        return self.nav.representation == Representation.DOCUMENT

    def _is_comment(self, item: Any) -> bool:
        return self.nav.tag_of(item) == NodeTag.COMMENT

    def _is_recursive(self, item: Any) -> bool:
        return self.nav.representation == Representation.VALUE and id(item) in self._active

    def _entries(self, item: Any, tag: NodeTag) -> list[list[Any]]:
        """Group children into layout entries: key/value pairs for maps, else singletons."""
        children = self.nav.children(item)
        if tag != NodeTag.MAP:
            return [[child] for child in children]
        entries: list[list[Any]] = []
        pending: list[Any] = []
        for child in children:
            if self._is_comment(child):
                if pending:
                    entries.append(pending)
                    pending = []
                entries.append([child])
                continue
            pending.append(child)
            if len(pending) == 2:
                entries.append(pending)
                pending = []
        if pending:
            entries.append(pending)
        return entries

    def _leaf(self, item: Any, tag: NodeTag) -> Token:
        trivia = tag in (NodeTag.WHITESPACE, NodeTag.NEWLINE)
        kind = TokenKind.WHITESPACE if trivia else TokenKind.ELEMENT
        return Token(self.nav.text_of(item), self.nav.color_of(item), kind)

    # --- flat layout ---

    def flat(self, item: Any) -> list[Token] | None:
        """Return the one-line rendering of ``item``, or None if it cannot be flat."""
        tag = self.nav.tag_of(item)
        if tag == NodeTag.COMMENT:
            return None
        if tag in _LEAVES:
            return [self._leaf(item, tag)]
        if self._is_recursive(item):
            return [Token("...", ColorTag.NONE, TokenKind.ELEMENT)]

        open_, close = self.nav.delimiters(item)
        color = self.nav.color_of(item)
        if tag == NodeTag.PREFIX:
            children = self.nav.children(item)
            if len(children) != 1:
                return None
            inner = self.flat(children[0])
            if inner is None:
                return None
            return [Token(open_, color, TokenKind.ELEMENT), *inner]

        self._active.add(id(item))
        try:
            tokens: list[Token] = [Token(open_, color, TokenKind.LEFT)]
            for index, entry in enumerate(self._entries(item, tag)):
                if index:
                    tokens.extend(self._sep(self.nav.separator))
                for position, child in enumerate(entry):
                    if position:
                        tokens.extend(self._sep(self.nav.pair_separator))
                    inner = self.flat(child)
                    if inner is None:
                        return None
                    tokens.extend(inner)
            tokens.append(Token(close, color, TokenKind.RIGHT))
            return tokens
        finally:
            self._active.discard(id(item))

    # --- broken layout ---

    def render(self, item: Any, column: int, trailing: int = 0) -> list[Token]:
        """Render ``item`` starting at ``column`` with ``trailing`` characters to follow it."""
        tag = self.nav.tag_of(item)
        if tag == NodeTag.FORMS:
            tokens: list[Token] = []
            for child in self.nav.children(item):
                tokens.extend(self.render(child, 0))
            return tokens
        if tag in _LEAVES:
            return [self._leaf(item, tag)]

        flat = self.flat(item)
        if flat is not None and column + _width(flat) + trailing <= self.width:
            return flat

        open_, close = self.nav.delimiters(item)
        color = self.nav.color_of(item)
        if tag == NodeTag.PREFIX:
            return self._render_prefix(item, column, trailing, open_, color)

        self._active.add(id(item))
        try:
            entries = self._entries(item, tag)
            body_column = column + len(open_)
            if tag == NodeTag.MAP:
                body = self._render_map(entries, body_column, trailing + len(close))
            elif tag in (NodeTag.LIST, NodeTag.FN) and self._is_document:
                body = self._render_list(entries, column, body_column, trailing + len(close))
            else:
                body = self._render_aligned(
                    entries,
                    body_column,
                    trailing + len(close),
                    wrap=tag == NodeTag.VECTOR and self.options.vector_wrap,
                )
        finally:
            self._active.discard(id(item))

        tokens = [Token(open_, color, TokenKind.LEFT), *body]
        if entries and self._is_comment(entries[-1][-1]):
            tokens.append(_newline(body_column))
        tokens.append(Token(close, color, TokenKind.RIGHT))
        return tokens

    def _render_prefix(
        self, item: Any, column: int, trailing: int, prefix: str, color: str | None
    ) -> list[Token]:
        tokens = [Token(prefix, color, TokenKind.ELEMENT)]
        inner_column = column + len(prefix)
        children = self.nav.children(item)
        for index, child in enumerate(children):
            last = index == len(children) - 1
            tokens.extend(self.render(child, inner_column, trailing if last else 0))
            if self._is_comment(child):
                tokens.append(_newline(inner_column))
        return tokens

    def _render_list(
        self, entries: list[list[Any]], column: int, body_column: int, trailing: int
    ) -> list[Token]:
        items = [entry[0] for entry in entries]
        if not items:
            return []
        indent_column = column + self.options.list_indent
        tokens = self.render(items[0], body_column, trailing if len(items) == 1 else 0)
        rest = items[1:]
        head_is_leaf = self.nav.tag_of(items[0]) in _LEAVES and not self._is_comment(items[0])

        if rest and head_is_leaf and self.options.list_hang and not self._is_comment(rest[0]):
            first_arg = self.flat(rest[0])
            hang_column = body_column + _width(tokens) + 1
            last = len(rest) == 1
            if first_arg is not None and hang_column + _width(first_arg) + (
                trailing if last else 0
            ) <= self.width:
                tokens.append(Token(" ", None, TokenKind.WHITESPACE))
                tokens.extend(first_arg)
                rest = rest[1:]

        for index, child in enumerate(rest):
            last = index == len(rest) - 1
            tokens.append(_newline(indent_column))
            tokens.extend(self.render(child, indent_column, trailing if last else 0))
        return tokens

    def _render_aligned(
        self, entries: list[list[Any]], column: int, trailing: int, *, wrap: bool
    ) -> list[Token]:
        tokens: list[Token] = []
        line_width = column
        previous_comment = False
        for index, entry in enumerate(entries):
            child = entry[0]
            last = index == len(entries) - 1
            child_trailing = trailing if last else len(self.nav.separator.strip())
            if index:
                flat = self.flat(child) if wrap and not previous_comment else None
                sep = self._sep(self.nav.separator)
                fits = (
                    flat is not None
                    and line_width + _width(sep) + _width(flat) + child_trailing <= self.width
                )
                if flat is not None and fits:
                    tokens.extend(sep)
                    tokens.extend(flat)
                    line_width += _width(sep) + _width(flat)
                    previous_comment = False
                    continue
                tokens.extend(self._break_sep(column))
                line_width = column
            rendered = self.render(child, line_width, child_trailing)
            tokens.extend(rendered)
            line_width = self._end_column(rendered, line_width)
            previous_comment = self._is_comment(child)
        return tokens

    def _render_map(self, entries: list[list[Any]], column: int, trailing: int) -> list[Token]:
        keys = [self.flat(entry[0]) for entry in entries if len(entry) == 2]
        key_width = 0
        if self.options.map_justify and keys and all(k is not None for k in keys):
            key_width = max(_width(k) for k in keys if k is not None)

        comma = self.options.map_comma and self.nav.representation == Representation.DOCUMENT
        tokens: list[Token] = []
        for index, entry in enumerate(entries):
            last = index == len(entries) - 1
            entry_trailing = trailing if last else 1
            if index:
                previous = entries[index - 1]
                if comma and not self._is_comment(previous[-1]):
                    tokens.append(Token(",", None, TokenKind.ELEMENT))
                tokens.extend(self._break_sep(column))
            key_tokens = self.render(entry[0], column, entry_trailing if len(entry) == 1 else 0)
            tokens.extend(key_tokens)
            if len(entry) == 1:
                continue
            key_end = self._end_column(key_tokens, column)
            pad = max(0, column + key_width - key_end)
            sep = self._sep(self.nav.pair_separator)
            if pad:
                sep.append(Token(" " * pad, None, TokenKind.WHITESPACE))
            tokens.extend(sep)
            tokens.extend(self.render(entry[1], key_end + _width(sep), entry_trailing))
        return tokens

    @staticmethod
    def _end_column(tokens: list[Token], start: int) -> int:
        """Return the column after ``tokens`` when they start at ``start``."""
        text = "".join(t.text for t in tokens)
        newline = text.rfind("\n")
        return start + len(text) if newline == -1 else len(text) - newline - 1


def render(options: ResolvedOptions, depth: int, item: Any) -> TokenStream:
    """Render ``item`` with the navigator bound in ``options``.

    Args:
        options (ResolvedOptions): Resolved options with a bound navigator.
        depth (int): Nesting depth of ``item``; top-level calls pass 0. The
            first line starts at column ``depth * list.indent``.
        item (Any): The input: a `Zipper` in document mode, any value in value mode.

    Returns:
        TokenStream: A single-pass iterator over the rendered tokens.

    Raises:
        TypeError: If no navigator is bound or it does not accept ``item``.
    """
    navigator = options.navigator
    if navigator is None or not navigator.accepts(item):
        raise TypeError(
            f"Renderer called with a navigator for {options.representation} "
            f"that cannot walk {type(item).__name__}"
        )
    column = depth * options.list_indent
    tokens = _Layout(options, navigator).render(item, column)
    logger.trace("Rendered %d token(s) at depth %d", len(tokens), depth)
    return iter(tokens)
