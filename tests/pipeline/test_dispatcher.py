# topmark:header:start
#
#   project      : FormPrint
#   file         : test_dispatcher.py
#   file_relpath : tests/pipeline/test_dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `formprint.pipeline.dispatcher.dispatch`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formprint.pipeline.classifier import Classified, classify
from formprint.pipeline.dispatcher import dispatch
from formprint.render.navigation import DocumentNavigator, Representation, ValueNavigator
from formprint.render.tokens import Token, TokenKind, empty_element
from tests.conftest import mark_pipeline, resolved

if TYPE_CHECKING:
    from formprint.config.model import ResolvedOptions
    from formprint.render.tokens import TokenStream


class RecordingRenderer:
    """Renderer double that records its calls and returns a fixed stream."""

    def __init__(self) -> None:
        self.calls: list[tuple[ResolvedOptions, int, Any]] = []

    def __call__(self, options: ResolvedOptions, depth: int, item: Any) -> TokenStream:
        self.calls.append((options, depth, item))
        return iter([Token("out", None, TokenKind.ELEMENT)])


@mark_pipeline
def test_absent_input_bypasses_the_renderer() -> None:
    """``None`` yields one empty element and never reaches the renderer."""
    renderer = RecordingRenderer()
    options = resolved()

    tokens, used = dispatch(Classified(None, None), options, renderer=renderer)

    assert list(tokens) == [empty_element()]
    assert used is options
    assert renderer.calls == []


@mark_pipeline
def test_document_input_is_rendered_with_the_document_navigator() -> None:
    """The navigator bound for the renderer matches the classification."""
    renderer = RecordingRenderer()
    classified = classify("(a)", resolved())

    tokens, used = dispatch(classified, resolved(), renderer=renderer)

    assert [t.text for t in tokens] == ["out"]
    [(options, depth, item)] = renderer.calls
    assert depth == 0
    assert item is classified.input
    assert options is used
    assert options.representation is Representation.DOCUMENT
    assert isinstance(options.navigator, DocumentNavigator)


@mark_pipeline
def test_value_input_is_rendered_with_the_value_navigator() -> None:
    """Plain values get the value navigator."""
    renderer = RecordingRenderer()

    _, used = dispatch(classify({"a": 1}, resolved()), resolved(), renderer=renderer)

    assert used.representation is Representation.VALUE
    assert isinstance(used.navigator, ValueNavigator)


@mark_pipeline
def test_renderer_output_is_passed_through_untouched() -> None:
    """The default renderer's stream is returned as produced."""
    tokens, _ = dispatch(classify([1, 2], resolved()), resolved())

    assert "".join(t.text for t in tokens) == "[1, 2]"
