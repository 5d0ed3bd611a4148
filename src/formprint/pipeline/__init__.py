# topmark:header:start
#
#   project      : FormPrint
#   file         : __init__.py
#   file_relpath : src/formprint/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The FormPrint print pipeline.

Input → `classifier` → `formprint.config.resolver` → `dispatcher` → token
stream → `formprint.finish`. `files` and `source` are alternate entry points
that end in the same dispatcher/finisher chain; `printer` wires the steps
together.
"""

from __future__ import annotations
