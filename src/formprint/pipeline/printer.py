# topmark:header:start
#
#   project      : FormPrint
#   file         : printer.py
#   file_relpath : src/formprint/pipeline/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level print pipeline: resolve, classify, dispatch, finish.

`style_tokens` is the one function every public entry point goes through; the
two ``*_internal`` helpers apply the plain or colorized finish to its result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formprint.config.logging import get_logger
from formprint.config.resolver import SpecialRequest, resolve_options
from formprint.config.store import default_store
from formprint.finish.finisher import colorized_finish, plain_finish
from formprint.pipeline.classifier import classify
from formprint.pipeline.dispatcher import dispatch
from formprint.render.tokens import Token, TokenKind, empty_element

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions
    from formprint.config.store import ConfigStore
    from formprint.render.tokens import TokenStream

logger: FormprintLogger = get_logger(__name__)


def _special_tokens(obj: Any, request: SpecialRequest) -> tuple[TokenStream, ResolvedOptions]:
    if request.text is not None:
        token = Token(request.text, None, TokenKind.ELEMENT) if request.text else empty_element()
        return iter([token]), request.options
    subject = obj if request.uses_input else request.subject
    return dispatch(classify(subject, request.options), request.options)


def style_tokens(
    obj: Any,
    internal_options: Mapping[str, Any] | None = None,
    width_or_options: Any = None,
    options: Any = None,
    *,
    store: ConfigStore | None = None,
) -> tuple[TokenStream, ResolvedOptions]:
    """Run ``obj`` through the pipeline up to (not including) the finish.

    Args:
        obj (Any): Source text, a structural document, a plain value or ``None``.
        internal_options (Mapping[str, Any] | None): Options forced by the entry point.
        width_or_options (Any): A width, an options map or a special flag.
        options (Any): An options map when ``width_or_options`` is a width.
        store (ConfigStore | None): Configuration store; defaults to the
            process-wide store.

    Returns:
        tuple[TokenStream, ResolvedOptions]: The token stream and the options
            it was rendered with.

    Raises:
        ConfigurationError: If option resolution failed; nothing is rendered.
        InputKindMismatchError: If the input does not match a declared kind.
        ParseError: If text input is malformed.
    """
    resolved = resolve_options(
        store if store is not None else default_store(),
        internal_options,
        width_or_options,
        options,
    )
    if isinstance(resolved, SpecialRequest):
        return _special_tokens(obj, resolved)
    return dispatch(classify(obj, resolved), resolved)


def format_str_internal(
    obj: Any,
    internal_options: Mapping[str, Any] | None = None,
    width_or_options: Any = None,
    options: Any = None,
    *,
    store: ConfigStore | None = None,
) -> str:
    """Return the plain-text rendering of ``obj``."""
    tokens, _ = style_tokens(obj, internal_options, width_or_options, options, store=store)
    return plain_finish(tokens)


def cformat_str_internal(
    obj: Any,
    internal_options: Mapping[str, Any] | None = None,
    width_or_options: Any = None,
    options: Any = None,
    *,
    store: ConfigStore | None = None,
) -> str:
    """Return the ANSI-colored rendering of ``obj``."""
    tokens, resolved = style_tokens(obj, internal_options, width_or_options, options, store=store)
    return colorized_finish(tokens, resolved)
