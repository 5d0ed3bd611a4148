# topmark:header:start
#
#   project      : FormPrint
#   file         : dispatcher.py
#   file_relpath : src/formprint/pipeline/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bind the navigator for the classified input and invoke the renderer."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from formprint.config.logging import get_logger
from formprint.render.engine import render
from formprint.render.tokens import empty_element

if TYPE_CHECKING:
    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions
    from formprint.pipeline.classifier import Classified
    from formprint.render.tokens import TokenStream

logger: FormprintLogger = get_logger(__name__)

Renderer = Callable[["ResolvedOptions", int, Any], "TokenStream"]


def dispatch(
    classified: Classified,
    options: ResolvedOptions,
    *,
    renderer: Renderer = render,
) -> tuple[TokenStream, ResolvedOptions]:
    """Render classified input with the navigator matching its representation.

    Args:
        classified (Classified): Output of `formprint.pipeline.classifier.classify`.
        options (ResolvedOptions): Resolved (unbound) options.
        renderer (Renderer): The rendering engine, called as
            ``renderer(options, 0, input)``.

    Returns:
        tuple[TokenStream, ResolvedOptions]: The token stream and the options it
            was rendered with (bound to the representation).
    """
    if classified.is_absent or classified.representation is None:
        logger.debug("Absent input; skipping the renderer")
        return iter([empty_element()]), options

    bound = options.bind(classified.representation)
    logger.debug("Dispatching %s input to the renderer", classified.representation.value)
    return renderer(bound, 0, classified.input), bound
