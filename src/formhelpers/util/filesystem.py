"""
Filesystem helpers for writing rendered output.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Atomically replace ``path`` with ``content`` while holding a sibling ``.lock`` file.
    """
    target = Path(path).expanduser().resolve()
    ensure_directory(target.parent)
    lock_path = target.with_suffix(f"{target.suffix}.lock")
    with FileLock(str(lock_path)):
        fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding=encoding) as handle:
                handle.write(content)
            os.replace(tmp_path, target)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target
