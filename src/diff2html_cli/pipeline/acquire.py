"""Raw diff acquisition from a file or from ``git diff``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from diff2html_cli.git.commands import run_diff
from diff2html_cli.pipeline.config import InputMode
from diff2html_cli.system.files import read_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


def acquire(
    mode: InputMode,
    file_arg: str | None,
    cmd_args: Sequence[str] = (),
    *,
    cwd: Path | None = None,
) -> str:
    """Return the raw diff text for the given input mode.

    Args:
        mode: Read a file, or run ``git diff``.
        file_arg: Path of the diff file in file mode.
        cmd_args: Trailing ``git diff`` arguments in command mode. Empty
            means the default comparison against the previous commit.
        cwd: Working directory for the git command.

    Raises:
        OSError: If the diff file is missing or unreadable.
        CommandError: If ``git diff`` exits non-zero.
    """
    if mode == InputMode.file:
        if not file_arg:
            msg = "No diff file given"
            raise FileNotFoundError(msg)
        logger.debug("Reading diff from file %s", file_arg)
        return read_text(file_arg)

    logger.debug("Reading diff from git with args %s", list(cmd_args))
    return run_diff(cmd_args, cwd=cwd)
