# topmark:header:start
#
#   project      : FormPrint
#   file         : files.py
#   file_relpath : src/formprint/pipeline/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format a whole file of top-level forms."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from formprint.config.keys import Opt
from formprint.config.logging import get_logger
from formprint.config.resolver import SpecialRequest, resolve_options
from formprint.config.store import default_store
from formprint.finish.finisher import plain_finish
from formprint.parse.reader import parse_all
from formprint.parse.zipper import Zipper
from formprint.pipeline.classifier import classify
from formprint.pipeline.dispatcher import dispatch
from formprint.utils.file import write_text_atomic

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from formprint.config.logging import FormprintLogger
    from formprint.config.model import ResolvedOptions
    from formprint.config.store import ConfigStore

logger: FormprintLogger = get_logger(__name__)

_DOCUMENT_OPTIONS: dict[str, bool] = {Opt.KEY_ZIPPER: True}


def read_source(path: Path | str, options: ResolvedOptions) -> str:
    """Read ``path`` with universal newlines, expanding tabs line by line when configured.

    Splitting on ``"\\n"`` and rejoining keeps a trailing newline (the last
    piece is empty) while normalizing ``\\r\\n`` and ``\\r`` line endings.
    """
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if options.tab_expand:
        lines = [line.expandtabs(options.tab_size) for line in lines]
    return "\n".join(lines)


def format_text(text: str, options: ResolvedOptions) -> str:
    """Render every top-level form of ``text`` independently and concatenate the results."""
    root = Zipper.of(parse_all(text))
    parts: list[str] = []
    for child in root.children():
        tokens, _ = dispatch(classify(child, options), options)
        parts.append(plain_finish(tokens))
    logger.debug("Rendered %d top-level node(s)", len(parts))
    return "".join(parts)


def process_file(
    in_path: Path | str,
    out_path: Path | str,
    options: Mapping[str, Any] | None = None,
    *,
    store: ConfigStore | None = None,
) -> None:
    """Format ``in_path`` and write the result to ``out_path``.

    The output file is replaced atomically; on failure it is left untouched.

    Args:
        in_path (Path | str): File to read.
        out_path (Path | str): File to write (may be ``in_path``).
        options (Mapping[str, Any] | None): Call options (e.g. ``width``).
        store (ConfigStore | None): Configuration store; defaults to the
            process-wide store.

    Raises:
        ConfigurationError: If option resolution failed.
        ParseError: If the file is not well formed.
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    resolved = resolve_options(
        store if store is not None else default_store(), _DOCUMENT_OPTIONS, options
    )
    if isinstance(resolved, SpecialRequest):
        raise TypeError(f"options must be a map, got {options!r}")

    logger.info("Formatting %s -> %s", in_path, out_path)
    text = read_source(in_path, resolved)
    write_text_atomic(out_path, format_text(text, resolved))
