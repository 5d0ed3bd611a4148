# topmark:header:start
#
#   project      : FormPrint
#   file         : source.py
#   file_relpath : src/formprint/pipeline/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the source text of a named definition on the source path.

A reference ``"my-app.core/render"`` names the namespace ``my-app.core`` and
the definition ``render``. The namespace maps to ``my_app/core`` with one of
the `formprint.constants.SOURCE_SUFFIXES` under each source root; the first
top-level list whose head starts with ``def`` and whose name is ``render`` is
returned verbatim (comments and spacing included).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from formprint.config.logging import get_logger
from formprint.constants import SOURCE_SUFFIXES
from formprint.core.errors import ParseError, SourceNotFoundError
from formprint.parse.nodes import NodeTag
from formprint.parse.reader import parse_all

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from formprint.config.logging import FormprintLogger
    from formprint.parse.nodes import Node

logger: FormprintLogger = get_logger(__name__)


def split_reference(ref: str) -> tuple[str, str]:
    """Split ``"namespace/name"`` into its two parts.

    Raises:
        SourceNotFoundError: If ``ref`` is not a qualified name.
    """
    namespace, sep, name = ref.rpartition("/")
    if not sep or not namespace or not name:
        raise SourceNotFoundError(f"Not a qualified name: {ref!r} (expected 'namespace/name')")
    return namespace, name


def namespace_path(namespace: str) -> str:
    """Return the relative path (without suffix) for ``namespace``."""
    return namespace.replace("-", "_").replace(".", "/")


def candidate_files(namespace: str, source_paths: Iterable[str]) -> Iterator[Path]:
    """Yield the existing files that may define ``namespace``, in search order."""
    relative = namespace_path(namespace)
    for root in source_paths:
        for suffix in SOURCE_SUFFIXES:
            candidate = Path(root) / f"{relative}{suffix}"
            if candidate.is_file():
                yield candidate


def _significant(children: Iterable[Node]) -> list[Node]:
    return [
        child
        for child in children
        if not child.is_trivia
        and child.tag != NodeTag.COMMENT
        and not (child.tag == NodeTag.PREFIX and child.text in ("^", "#_"))
    ]


def find_definition(root: Node, name: str) -> Node | None:
    """Return the first top-level ``(def... name ...)`` form in ``root``."""
    for form in root.children:
        if form.tag != NodeTag.LIST:
            continue
        items = _significant(form.children)
        if len(items) < 2:
            continue
        head, target = items[0], items[1]
        if (
            head.tag == NodeTag.TOKEN
            and head.text.startswith("def")
            and target.tag == NodeTag.TOKEN
            and target.text == name
        ):
            return form
    return None


def get_source(ref: str, source_paths: Iterable[str]) -> str:
    """Return the source text of the definition named by ``ref``.

    Files that cannot be read or parsed are skipped.

    Args:
        ref (str): Qualified name, ``"namespace/name"``.
        source_paths (Iterable[str]): Source roots to search, in order.

    Returns:
        str: The definition's exact source text.

    Raises:
        SourceNotFoundError: If no definition can be found.
    """
    namespace, name = split_reference(ref)
    roots = list(source_paths)
    for path in candidate_files(namespace, roots):
        try:
            root = parse_all(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ParseError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue
        found = find_definition(root, name)
        if found is not None:
            logger.debug("Found %s in %s", ref, path)
            return found.source()
    raise SourceNotFoundError(f"No source found for {ref!r} under {roots}")
