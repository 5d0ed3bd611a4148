# topmark:header:start
#
#   project      : FormPrint
#   file         : __main__.py
#   file_relpath : src/formprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FormPrint via ``python -m formprint``.

It delegates directly to :func:`formprint.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how FormPrint is launched.

Examples:
    Format a source file::

        python -m formprint format core.clj core.formatted.clj
"""

from __future__ import annotations

from formprint.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
