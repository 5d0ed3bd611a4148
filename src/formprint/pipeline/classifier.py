# topmark:header:start
#
#   project      : FormPrint
#   file         : classifier.py
#   file_relpath : src/formprint/pipeline/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide how a print call's input is represented.

Detection is explicit and type-based:

- `Zipper` (or a bare parse `Node`, which is wrapped) is a structural document;
- ``str`` is source text and is parsed into a document;
- ``None`` is absent input and short-circuits to empty output;
- anything else is a plain value.

A ``list`` or ``tuple`` whose first item is a parse `Node` is ambiguous
(a sequence of nodes is not a document) and is rejected as a configuration
error rather than guessed at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from formprint.config.logging import get_logger
from formprint.core.errors import ConfigurationError, InputKindMismatchError
from formprint.parse.nodes import Node
from formprint.parse.reader import parse_one
from formprint.parse.zipper import Zipper
from formprint.render.navigation import Representation

if TYPE_CHECKING:
    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions

logger: FormprintLogger = get_logger(__name__)


@dataclass(frozen=True)
class Classified:
    """Normalized input and its representation.

    Attributes:
        input (Any): A `Zipper` for documents, the value itself for plain
            values, ``None`` for absent input.
        representation (Representation | None): ``None`` only for absent input.
    """

    input: Any
    representation: Representation | None

    @property
    def is_absent(self) -> bool:
        """Return True when there is nothing to render."""
        return self.input is None


def is_document(obj: Any) -> bool:
    """Return True if ``obj`` is a structural document."""
    return isinstance(obj, (Zipper, Node))


def _is_ambiguous(obj: Any) -> bool:
    return isinstance(obj, (list, tuple)) and bool(obj) and isinstance(obj[0], Node)


def _as_document(obj: Zipper | Node) -> Classified:
    zipper = obj if isinstance(obj, Zipper) else Zipper.of(obj)
    return Classified(zipper, Representation.DOCUMENT)


def parse_text(text: str, options: ResolvedOptions) -> Classified:
    """Parse ``text`` into a document, expanding tabs first when configured."""
    if options.tab_expand:
        text = text.expandtabs(options.tab_size)
    node = parse_one(text)
    if node is None:
        logger.debug("Text holds no form; nothing to render")
        return Classified(None, None)
    return Classified(Zipper.of(node), Representation.DOCUMENT)


def classify(obj: Any, options: ResolvedOptions) -> Classified:
    """Normalize ``obj`` and tag its representation.

    Args:
        obj (Any): The caller's input.
        options (ResolvedOptions): Resolved options; ``zipper`` and
            ``parse_string`` declare what the input must be.

    Returns:
        Classified: The normalized input and its representation.

    Raises:
        InputKindMismatchError: If the input does not match a declared kind.
            No parse is attempted in that case.
        ConfigurationError: If the input is ambiguous.
        ParseError: If text input is malformed.
    """
    if options.zipper:
        if not is_document(obj):
            raise InputKindMismatchError(
                f"Input is not a structural document yet 'zipper' was specified "
                f"(got {type(obj).__name__})"
            )
        return _as_document(obj)

    if options.parse_string:
        if not isinstance(obj, str):
            raise InputKindMismatchError(
                f"Input is not a string yet 'parse_string' was specified "
                f"(got {type(obj).__name__})"
            )
        return parse_text(obj, options)

    if obj is None:
        return Classified(None, None)
    if isinstance(obj, str):
        return parse_text(obj, options)
    if is_document(obj):
        return _as_document(obj)
    if _is_ambiguous(obj):
        raise ConfigurationError(
            f"Ambiguous input: a {type(obj).__name__} of parse nodes is not a document; "
            "pass a Zipper or a single Node"
        )
    return Classified(obj, Representation.VALUE)
