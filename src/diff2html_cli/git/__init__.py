"""Git integration for diff2html-cli."""

from diff2html_cli.git.commands import DEFAULT_DIFF_ARGS, build_diff_command, run_diff

__all__ = ["DEFAULT_DIFF_ARGS", "build_diff_command", "run_diff"]
