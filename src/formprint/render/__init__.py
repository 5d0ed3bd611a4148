# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/render/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering: navigation capability sets, the token model and the layout engine."""

from __future__ import annotations

from formprint.render.engine import render
from formprint.render.navigation import (
    DocumentNavigator,
    Navigator,
    Representation,
    ValueNavigator,
    navigator_for,
)
from formprint.render.tokens import Token, TokenKind, TokenStream

__all__: list[str] = [
    "DocumentNavigator",
    "Navigator",
    "Representation",
    "Token",
    "TokenKind",
    "TokenStream",
    "ValueNavigator",
    "navigator_for",
    "render",
]
