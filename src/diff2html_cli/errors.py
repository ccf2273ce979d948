"""Error kinds raised along the diff2html pipeline.

File-system failures are reported with the built-in :class:`OSError`
family and are not wrapped.
"""

from __future__ import annotations


class Diff2HtmlError(Exception):
    """Base class for pipeline errors."""


class CommandError(Diff2HtmlError):
    """Raised when an external process exits with a non-zero status."""

    def __init__(self, args: tuple[str, ...], returncode: int, stderr: str = "") -> None:
        self.command = args
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command '{' '.join(args)}' failed with exit code {returncode}"
        if stderr:
            msg = f"{msg}: {stderr}"
        super().__init__(msg)


class TemplateError(Diff2HtmlError):
    """Raised when an HTML packaging asset cannot be loaded."""


class TransportError(Diff2HtmlError):
    """Raised when the upload request fails at the network level."""


class ResponseParseError(Diff2HtmlError):
    """Raised when the upload service answers with an unreadable body."""


class EmptyInputError(Diff2HtmlError):
    """Raised when no diff content was acquired."""
