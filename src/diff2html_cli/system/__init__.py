"""Process and file-system access."""

from diff2html_cli.system.files import read_text, write_text
from diff2html_cli.system.process import copy_to_clipboard, open_in_viewer, run_command

__all__ = ["copy_to_clipboard", "open_in_viewer", "read_text", "run_command", "write_text"]
