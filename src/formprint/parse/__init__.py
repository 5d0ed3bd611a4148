# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/parse/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless parsing of Lisp-family source into navigable documents."""

from __future__ import annotations

from formprint.parse.nodes import Node, NodeTag
from formprint.parse.reader import parse_all, parse_one
from formprint.parse.zipper import Zipper

__all__: list[str] = [
    "Node",
    "NodeTag",
    "Zipper",
    "parse_all",
    "parse_one",
]
