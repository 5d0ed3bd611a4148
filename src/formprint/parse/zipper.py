# topmark:header:start
#
#   project      : FormPrint
#   file         : zipper.py
#   file_relpath : src/formprint/parse/zipper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable zipper over a syntax tree.

A `Zipper` is a location in a tree: the node at that location plus the path
back to the root. Navigation never mutates anything; each move returns a new
location, or ``None`` when the move leaves the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from formprint.parse.nodes import Node, NodeTag


@dataclass(frozen=True, slots=True)
class _Path:
    parent: Zipper
    left: tuple[Node, ...]
    right: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Zipper:
    """A navigable, read-only location within a parsed document.

    Attributes:
        node (Node): The node at this location.
        path (_Path | None): How this location was reached; ``None`` at the root.
    """

    node: Node
    path: _Path | None = None

    @classmethod
    def of(cls, node: Node) -> Zipper:
        """Return a zipper positioned at ``node`` as the root."""
        return cls(node)

    @property
    def tag(self) -> NodeTag:
        """Return the tag of the current node."""
        return self.node.tag

    @property
    def is_root(self) -> bool:
        """Return True if this location has no parent."""
        return self.path is None

    def down(self) -> Zipper | None:
        """Move to the first child, if any."""
        children = self.node.children
        if not children:
            return None
        return Zipper(children[0], _Path(self, (), children[1:]))

    def right(self) -> Zipper | None:
        """Move to the next sibling, if any."""
        if self.path is None or not self.path.right:
            return None
        path = self.path
        return Zipper(
            path.right[0],
            _Path(path.parent, (*path.left, self.node), path.right[1:]),
        )

    def left(self) -> Zipper | None:
        """Move to the previous sibling, if any."""
        if self.path is None or not self.path.left:
            return None
        path = self.path
        return Zipper(
            path.left[-1],
            _Path(path.parent, path.left[:-1], (self.node, *path.right)),
        )

    def up(self) -> Zipper | None:
        """Move to the parent, if any."""
        return None if self.path is None else self.path.parent

    def root(self) -> Zipper:
        """Return the root location."""
        loc = self
        while loc.path is not None:
            loc = loc.path.parent
        return loc

    def children(self) -> Iterator[Zipper]:
        """Iterate over every child location, trivia included."""
        loc = self.down()
        while loc is not None:
            yield loc
            loc = loc.right()
