# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormPrint package.

FormPrint is a configurable pretty-printer for Lisp-family source code and
for plain Python values. It parses text into comment-preserving documents,
resolves layered options, renders a style-tagged token stream and finishes it
into plain or ANSI-colored text. The stable entry points live in
`formprint.api`.
"""

from __future__ import annotations
