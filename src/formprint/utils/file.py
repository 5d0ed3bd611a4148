# topmark:header:start
#
#   project      : FormPrint
#   file         : file.py
#   file_relpath : src/formprint/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for FormPrint."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from pathlib import Path

from formprint.config.logging import get_logger

logger = get_logger(__name__)


def write_text_atomic(path: Path | str, text: str, *, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path`` through a temporary file and an atomic rename.

    The temporary file is created in the destination directory so the final
    `os.replace` never crosses file systems. On failure the destination is
    left untouched and the temporary file is removed. Newlines are written
    exactly as given.

    Args:
        path (Path | str): Destination file; replaced if it exists.
        text (str): Content to write.
        encoding (str): Output encoding.

    Raises:
        OSError: If the temporary file cannot be created, written or renamed.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    logger.debug("Wrote %d character(s) to %s", len(text), target)
