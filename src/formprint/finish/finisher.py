# topmark:header:start
#
#   project      : FormPrint
#   file         : finisher.py
#   file_relpath : src/formprint/finish/finisher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn a raw token stream into final output.

Two terminal conversions are provided:

- `plain_finish`: concatenate token texts, byte for byte.
- `colorized_finish`: resolve each token's semantic color tag to a
  `DisplayColor` via the resolved ``color_map``, compact adjacent tokens of
  the same color into `StyleRun`s, and encode the runs with `yachalk`.

Compaction is lossless: `decompact` turns runs back into tokens whose
concatenated text equals the original stream's.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from formprint.config.keys import ColorTag
from formprint.config.logging import get_logger
from formprint.finish.colors import DisplayColor
from formprint.render.tokens import Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions

logger: FormprintLogger = get_logger(__name__)


@dataclass(frozen=True)
class StyleRun:
    """A maximal run of adjacent text sharing one display color.

    Attributes:
        text (str): The concatenated text of the run.
        color (DisplayColor): Display color for the whole run.
        kind (TokenKind): `LEFT`/`RIGHT` for a lone delimiter, otherwise the
            kind of the run's first token.
        size (int): Number of tokens merged into this run.
    """

    text: str
    color: DisplayColor
    kind: TokenKind
    size: int = 1


def plain_finish(tokens: Iterable[Token]) -> str:
    """Concatenate the text of every token in order."""
    return "".join(token.text for token in tokens)


def to_display_colors(
    tokens: Iterable[Token], color_map: Mapping[str, DisplayColor]
) -> Iterator[tuple[Token, DisplayColor]]:
    """Pair each token with its display color.

    Tokens without a semantic tag, or with a tag missing from ``color_map``,
    use the color mapped to ``none`` (itself defaulting to `DisplayColor.NONE`).
    """
    fallback = color_map.get(ColorTag.NONE, DisplayColor.NONE)
    for token in tokens:
        if token.color is None:
            yield token, fallback
        else:
            yield token, color_map.get(token.color, fallback)


def compact(colored: Iterable[tuple[Token, DisplayColor]]) -> list[StyleRun]:
    """Merge adjacent same-color tokens into runs.

    Order is preserved. Collection delimiters (`LEFT`/`RIGHT`) always form a
    run of their own, so no run ever spans a collection boundary.
    """
    runs: list[StyleRun] = []
    for token, color in colored:
        if token.text == "":
            continue
        last = runs[-1] if runs else None
        if (
            last is not None
            and last.color is color
            and not last.kind.is_boundary
            and not token.kind.is_boundary
        ):
            runs[-1] = StyleRun(last.text + token.text, color, last.kind, last.size + 1)
        else:
            runs.append(StyleRun(token.text, color, token.kind))
    return runs


def decompact(runs: Iterable[StyleRun]) -> Iterator[Token]:
    """Expand runs back into tokens (one token per run)."""
    for run in runs:
        yield Token(run.text, run.color.value, run.kind)


def colorize(runs: Iterable[StyleRun]) -> str:
    """Encode runs as ANSI-colored text."""
    return "".join(run.color.color(run.text) for run in runs)


def colorized_finish(tokens: Iterable[Token], options: ResolvedOptions) -> str:
    """Return the ANSI-colored rendering of ``tokens``."""
    runs = compact(to_display_colors(tokens, options.color_map))
    logger.trace("Compacted token stream into %d style run(s)", len(runs))
    return colorize(runs)
