"""Low-level subprocess wrappers.

All subprocess calls use list-form arguments with ``shell=False`` (the
default, but set explicitly for clarity).  User-supplied tokens are passed
through as separate arguments and are never joined into a shell line.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import TYPE_CHECKING

from diff2html_cli.errors import CommandError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


def run_command(
    args: Sequence[str],
    *,
    stdin: str | None = None,
    cwd: Path | None = None,
) -> str:
    """Run a command synchronously and return its standard output.

    Args:
        args: Program and arguments.
        stdin: Optional text piped to the process.
        cwd: Working directory. Defaults to process cwd.

    Returns:
        Captured standard output, decoded as UTF-8.

    Raises:
        CommandError: If the command exits with a non-zero status or
            cannot be started.
    """
    cmd = tuple(args)
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=str(cwd) if cwd is not None else None,
            shell=False,
        )
    except FileNotFoundError as exc:
        raise CommandError(cmd, 127, str(exc)) from exc
    if result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr.strip())
    return result.stdout


def viewer_command(target: str, *, platform: str | None = None) -> list[str]:
    """Build the command that opens *target* in the default viewer."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", target]
    if platform == "win32":
        # start treats the first quoted argument as a window title
        return ["cmd", "/c", "start", "", target]
    return ["xdg-open", target]


def clipboard_command(*, platform: str | None = None) -> list[str]:
    """Build the command that reads the system clipboard from stdin."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["pbcopy"]
    if platform == "win32":
        return ["clip"]
    return ["xclip", "-selection", "clipboard"]


def open_in_viewer(target: str) -> None:
    """Open a file path or URL in the system's default viewer."""
    run_command(viewer_command(target))


def copy_to_clipboard(text: str) -> None:
    """Pipe *text* into the system clipboard."""
    run_command(clipboard_command(), stdin=text)
