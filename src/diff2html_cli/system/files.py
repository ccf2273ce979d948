"""Synchronous text file reads and writes."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Return the full contents of a text file.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    logger.debug("Reading %s", path)
    return Path(path).read_text(encoding=encoding)


def write_text(path: str | Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Write *content* to *path*, replacing any existing file.

    Returns:
        The path that was written.

    Raises:
        OSError: If the file cannot be written.
    """
    target = Path(path)
    logger.debug("Writing %d characters to %s", len(content), target)
    target.write_text(content, encoding=encoding)
    return target
