# topmark:header:start
#
#   project      : FormPrint
#   file         : test_engine.py
#   file_relpath : tests/render/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the layout engine in `formprint.render.engine`."""

from __future__ import annotations

from typing import Any

import pytest

from formprint.config.model import ResolvedOptions
from formprint.finish.finisher import plain_finish
from formprint.parse.reader import parse_all, parse_one
from formprint.parse.zipper import Zipper
from formprint.render.engine import render
from formprint.render.navigation import Representation
from formprint.render.tokens import TokenKind
from tests.conftest import parametrize


def _document(text: str, options: dict[str, Any] | None = None) -> str:
    node = parse_one(text)
    assert node is not None
    bound = ResolvedOptions.from_options(options or {}).bind(Representation.DOCUMENT)
    return plain_finish(render(bound, 0, Zipper.of(node)))


def _value(obj: Any, options: dict[str, Any] | None = None) -> str:
    bound = ResolvedOptions.from_options(options or {}).bind(Representation.VALUE)
    return plain_finish(render(bound, 0, obj))


DEFN = "(defn f [x] (+ x 1))"


def test_form_that_fits_stays_on_one_line() -> None:
    """Extra whitespace is normalized when the form fits."""
    assert _document("(defn  f\n [x]   (+ x 1))") == DEFN


def test_broken_list_hangs_first_argument() -> None:
    """The first argument stays on the head line; the rest are indented."""
    assert _document(DEFN, {"width": 12}) == "(defn f\n  [x]\n  (+ x 1))"


def test_broken_list_without_hang() -> None:
    """With ``list.hang`` off every argument gets its own line."""
    assert (
        _document(DEFN, {"width": 12, "list": {"hang": False}})
        == "(defn\n  f\n  [x]\n  (+ x 1))"
    )


def test_list_indent_is_configurable() -> None:
    """``list.indent`` sets the body indent of broken lists."""
    assert _document(DEFN, {"width": 12, "list": {"indent": 1}}) == "(defn f\n [x]\n (+ x 1))"


def test_broken_vector_aligns_elements() -> None:
    """Vector elements line up under the first one."""
    assert _document("[aaa bbb ccc]", {"width": 8}) == "[aaa\n bbb\n ccc]"


def test_wrapped_vector_fills_lines() -> None:
    """``vector.wrap`` puts as many elements on a line as fit."""
    assert _document("[aaa bbb ccc]", {"width": 8, "vector": {"wrap": True}}) == "[aaa bbb\n ccc]"


def test_broken_map_pairs_with_commas() -> None:
    """Broken maps put one pair per line, comma separated in documents."""
    assert _document("{:a 1 :bbb 2}", {"width": 10}) == "{:a 1,\n :bbb 2}"


def test_justified_map_aligns_values() -> None:
    """``map.justify`` pads keys so values line up."""
    assert (
        _document("{:a 1 :bbb 2}", {"width": 10, "map": {"justify": True}})
        == "{:a   1,\n :bbb 2}"
    )


def test_map_without_commas() -> None:
    """``map.comma`` off drops the separators between pairs."""
    assert _document("{:a 1 :bbb 2}", {"width": 10, "map": {"comma": False}}) == "{:a 1\n :bbb 2}"


def test_comments_are_kept_and_end_their_line() -> None:
    """A comment forces the layout to break and is never joined to the next element."""
    assert _document("(a ; c\n b)") == "(a\n  ; c\n  b)"
    assert _document("(a b ; c\n)") == "(a b\n  ; c\n )"


def test_reader_macros_are_kept() -> None:
    """Prefix forms print their reader macro before the form."""
    assert _document("'(a   b)") == "'(a b)"
    assert _document("#(+ %  1)") == "#(+ % 1)"
    assert _document("#{1  2}") == "#{1 2}"


def test_top_level_whitespace_is_preserved() -> None:
    """At the root of a multi-form document, whitespace and comments are emitted as-is."""
    bound = ResolvedOptions.from_options({}).bind(Representation.DOCUMENT)
    root = Zipper.of(parse_all("(a  b)\n\n; note\n[c]\n"))

    assert plain_finish(render(bound, 0, root)) == "(a b)\n\n; note\n[c]\n"


def test_tokens_carry_color_tags_and_kinds() -> None:
    """Leaves are tagged by role; delimiters are boundary tokens."""
    node = parse_one('(a :k 1 nil "s")')
    assert node is not None
    bound = ResolvedOptions.from_options({}).bind(Representation.DOCUMENT)

    tokens = [t for t in render(bound, 0, Zipper.of(node)) if t.kind != TokenKind.WHITESPACE]

    assert [(t.text, t.color, t.kind) for t in tokens] == [
        ("(", "paren", TokenKind.LEFT),
        ("a", "symbol", TokenKind.ELEMENT),
        (":k", "keyword", TokenKind.ELEMENT),
        ("1", "number", TokenKind.ELEMENT),
        ("nil", "nil", TokenKind.ELEMENT),
        ('"s"', "string", TokenKind.ELEMENT),
        (")", "paren", TokenKind.RIGHT),
    ]


@parametrize(
    "obj, expected",
    [
        ([1, 2, 3], "[1, 2, 3]"),
        ({"a": 1, "b": [2]}, "{'a': 1, 'b': [2]}"),
        ((1,), "(1,)"),
        ((), "()"),
        ((1, "x"), "(1, 'x')"),
        (set(), "set()"),
        ({3, 1, 2}, "{1, 2, 3}"),
        (frozenset(), "frozenset()"),
        (frozenset({1}), "frozenset({1})"),
        ("text", "'text'"),
        (None, "None"),
        (1.5, "1.5"),
    ],
)
def test_plain_values_print_as_python_literals(obj: Any, expected: str) -> None:
    """Values that fit print exactly like their Python literal."""
    assert _value(obj) == expected


def test_broken_value_sequence() -> None:
    """Broken sequences put one element per line after a trailing comma."""
    assert _value([100, 200, 300], {"width": 10}) == "[100,\n 200,\n 300]"


def test_broken_value_mapping() -> None:
    """Broken dicts put one pair per line; commas separate pairs."""
    assert _value({"alpha": 1, "beta": 2}, {"width": 10}) == "{'alpha': 1,\n 'beta': 2}"


def test_recursive_value_is_elided() -> None:
    """A container that contains itself prints ``...`` for the cycle."""
    items: list[Any] = [1]
    items.append(items)

    assert _value(items) == "[1, ...]"


def test_depth_sets_the_starting_column() -> None:
    """The first line is laid out as if it started at ``depth * list.indent``."""
    bound = ResolvedOptions.from_options({"width": 12}).bind(Representation.VALUE)

    assert plain_finish(render(bound, 0, [1000, 2000])) == "[1000, 2000]"
    assert plain_finish(render(bound, 1, [1000, 2000])) == "[1000,\n   2000]"


def test_renderer_rejects_a_mismatched_navigator() -> None:
    """Rendering with the wrong (or no) capability set is a programming error."""
    node = parse_one("(a)")
    assert node is not None
    unbound = ResolvedOptions.from_options({})

    with pytest.raises(TypeError):
        render(unbound, 0, [1])
    with pytest.raises(TypeError):
        render(unbound.bind(Representation.VALUE), 0, Zipper.of(node))
    with pytest.raises(TypeError):
        render(unbound.bind(Representation.DOCUMENT), 0, [1])
