# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public FormPrint API (stable surface).

Everything a program needs to pretty-print source text, structural documents
and plain values lives here; internal modules remain private.

Call conventions
----------------
Every print function accepts ``width_or_options`` and ``options``:

- ``pformat(obj)`` uses the committed configuration;
- ``pformat(obj, 40)`` overrides the width;
- ``pformat(obj, {"list": {"indent": 1}})`` or ``pformat(obj, 40, {...})`` passes
  call options, which win over the committed configuration key by key;
- ``pformat(None, "explain")`` (also ``"explain-justified"``, ``"explain-all"``,
  ``"help"``) prints a diagnostic instead of ``obj``.

Input kinds
-----------
``str`` is parsed as source text; a `formprint.parse.Zipper` or
`formprint.parse.Node` is printed as a structural document (comments and
spacing preserved); ``None`` prints as the empty string; anything else is a
plain value printed in Python literal syntax.

```python
from formprint import api

api.pformat("(defn f [x] (+ x 1))", 12)
api.set_options({"map": {"justify": True}})
api.pformat({"a": 1, "bbb": [1, 2, 3]})
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from formprint.config.keys import Opt
from formprint.config.logging import get_logger
from formprint.config.resolver import SpecialRequest, resolve_options
from formprint.config.store import default_store
from formprint.constants import FORMPRINT_VERSION
from formprint.pipeline.files import process_file
from formprint.pipeline.printer import (
    cformat_str_internal,
    format_str_internal,
    style_tokens,
)
from formprint.pipeline.source import get_source

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from formprint.config.logging import FormprintLogger
    from formprint.config.merge import OptionMap

logger: FormprintLogger = get_logger(__name__)

__all__: list[str] = [
    "pformat",
    "cpformat",
    "pprint",
    "cpprint",
    "pformat_source",
    "cpformat_source",
    "pprint_source",
    "format_file",
    "set_options",
    "configure_all",
    "get_options",
    "get_explained_options",
    "get_explained_all_options",
    "style_tokens",
    "version",
]

_SOURCE_OPTIONS: dict[str, bool] = {Opt.KEY_PARSE_STRING: True}


def pformat(obj: Any, width_or_options: Any = None, options: Any = None) -> str:
    """Return the pretty-printed text of ``obj``.

    Source text must hold exactly one form. A comment next to the form counts
    as a second form and is rejected; use `format_file` for text holding
    several forms or comments.

    Raises:
        ConfigurationError: If the options are invalid.
        InputKindMismatchError: If ``obj`` does not match a declared input kind.
        ParseError: If ``obj`` is malformed source text.
    """
    return format_str_internal(obj, None, width_or_options, options)


def cpformat(obj: Any, width_or_options: Any = None, options: Any = None) -> str:
    """Like `pformat`, with ANSI colors from the ``color_map`` option."""
    return cformat_str_internal(obj, None, width_or_options, options)


def pprint(obj: Any, width_or_options: Any = None, options: Any = None) -> None:
    """Print `pformat` output to stdout."""
    click.echo(pformat(obj, width_or_options, options))


def cpprint(obj: Any, width_or_options: Any = None, options: Any = None) -> None:
    """Print `cpformat` output to stdout, keeping the ANSI colors."""
    click.echo(cpformat(obj, width_or_options, options), color=True)


def _source_paths(width_or_options: Any, options: Any) -> list[str]:
    resolved = resolve_options(default_store(), _SOURCE_OPTIONS, width_or_options, options)
    if isinstance(resolved, SpecialRequest):
        resolved = resolved.options
    return list(resolved.get(Opt.KEY_SOURCE_PATHS, []))


def pformat_source(ref: str, width_or_options: Any = None, options: Any = None) -> str:
    """Return the pretty-printed source of the definition named ``ref``.

    Args:
        ref (str): Qualified name, ``"namespace/name"``, looked up under the
            ``source_paths`` roots.
        width_or_options (Any): A width, an options map or a special flag.
        options (Any): An options map when ``width_or_options`` is a width.

    Returns:
        str: The formatted definition.

    Raises:
        ConfigurationError: If option resolution failed; no file is searched.
        SourceNotFoundError: If no definition named ``ref`` can be found.
    """
    text = get_source(ref, _source_paths(width_or_options, options))
    return format_str_internal(text, _SOURCE_OPTIONS, width_or_options, options)


def cpformat_source(ref: str, width_or_options: Any = None, options: Any = None) -> str:
    """Like `pformat_source`, with ANSI colors."""
    text = get_source(ref, _source_paths(width_or_options, options))
    return cformat_str_internal(text, _SOURCE_OPTIONS, width_or_options, options)


def pprint_source(ref: str, width_or_options: Any = None, options: Any = None) -> None:
    """Print `pformat_source` output to stdout."""
    click.echo(pformat_source(ref, width_or_options, options))


def format_file(
    in_path: Path | str, out_path: Path | str, options: Mapping[str, Any] | None = None
) -> None:
    """Format every top-level form of ``in_path`` and write the result to ``out_path``.

    Raises:
        ConfigurationError: If the options are invalid.
        ParseError: If the file is not well formed.
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    process_file(in_path, out_path, options)


def set_options(new_options: Mapping[str, Any], doc: str | None = None) -> None:
    """Validate ``new_options`` and merge them into the committed configuration.

    Args:
        new_options (Mapping[str, Any]): Options to commit.
        doc (str | None): Label recorded as the origin of these options
            (shown by ``"explain"``).

    Raises:
        ConfigurationError: If the options (or the configuration files) are invalid.
    """
    default_store().set_options(new_options, doc)


def configure_all() -> list[str]:
    """Load the configuration files once and return any errors they produced."""
    return default_store().configure_all()


def get_options() -> OptionMap:
    """Return a copy of the committed options."""
    store = default_store()
    store.configure_all()
    return store.get_options()


def get_explained_options(*, include_defaults: bool = False) -> OptionMap:
    """Return the committed options with where each value was set."""
    store = default_store()
    store.configure_all()
    return store.get_explained_options(include_defaults=include_defaults)


def get_explained_all_options() -> OptionMap:
    """Return every committed option, defaults included, with where it was set."""
    store = default_store()
    store.configure_all()
    return store.get_explained_all_options()


def version() -> str:
    """Return the installed FormPrint version."""
    return FORMPRINT_VERSION
