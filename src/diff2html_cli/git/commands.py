"""Git diff command construction and execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diff2html_cli.system.process import run_command

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

# Working tree against the previous commit, with rename detection
DEFAULT_DIFF_ARGS: tuple[str, ...] = ("-M", "HEAD~1")


def build_diff_command(args: Sequence[str] = ()) -> list[str]:
    """Return the ``git diff`` argument vector for the given trailing args.

    An empty sequence, or one whose first token is empty, falls back to
    :data:`DEFAULT_DIFF_ARGS`.
    """
    if not args or not args[0]:
        args = DEFAULT_DIFF_ARGS
    return ["git", "diff", *args]


def run_diff(args: Sequence[str] = (), *, cwd: Path | None = None) -> str:
    """Run ``git diff`` and return its unified diff output.

    Raises:
        CommandError: If git exits non-zero, e.g. outside a repository
            or for an unknown revision.
    """
    return run_command(build_diff_command(args), cwd=cwd)
