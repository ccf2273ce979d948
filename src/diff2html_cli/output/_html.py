"""Markup shared by the line-by-line and side-by-side renderers."""

from __future__ import annotations

import hashlib
import html
from typing import TYPE_CHECKING

from diff2html_cli.core.models import LineType

if TYPE_CHECKING:
    from diff2html_cli.core.models import DiffFile

_LINE_CLASS: dict[LineType, str] = {
    LineType.insert: "d2h-ins",
    LineType.delete: "d2h-del",
    LineType.context: "d2h-cntx",
}

EMPTY_CLASS = "d2h-emptyplaceholder"
INFO_CLASS = "d2h-info"


def line_class(line_type: LineType) -> str:
    """Return the CSS class for a line type."""
    return _LINE_CLASS[line_type]


def file_id(diff_file: DiffFile) -> str:
    """Return a stable element id for a file wrapper."""
    digest = hashlib.sha1(
        f"{diff_file.old_name}\0{diff_file.new_name}".encode(), usedforsecurity=False
    )
    return f"d2h-{digest.hexdigest()[:6]}"


def file_header(diff_file: DiffFile) -> str:
    """Render the header bar of a file: name, status tag and line stats."""
    return (
        '<div class="d2h-file-header">'
        f'<span class="d2h-file-name">{html.escape(diff_file.display_name)}</span>'
        f'<span class="d2h-tag d2h-{diff_file.tag.lower()}">{diff_file.tag}</span>'
        '<span class="d2h-file-stats">'
        f'<span class="d2h-lines-added">+{diff_file.added_lines}</span>'
        f'<span class="d2h-lines-deleted">-{diff_file.deleted_lines}</span>'
        "</span>"
        "</div>\n"
    )


def code_line(prefix: str, content_html: str, css_class: str) -> str:
    """Render the code cell contents for one diff line."""
    return (
        f'<div class="d2h-code-line {css_class}">'
        f'<span class="d2h-code-line-prefix">{html.escape(prefix)}</span>'
        f'<span class="d2h-code-line-ctn">{content_html}</span>'
        "</div>"
    )


def empty_file_message(diff_file: DiffFile) -> str:
    """Return the message shown for files without hunks."""
    if diff_file.is_binary:
        return "Binary files differ"
    if diff_file.is_rename:
        return "File renamed without changes"
    return "File without changes"


def number(value: int | None) -> str:
    return "" if value is None else str(value)
