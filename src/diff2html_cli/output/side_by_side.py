"""Two-column HTML renderer."""

from __future__ import annotations

import html
from itertools import zip_longest
from typing import TYPE_CHECKING

from diff2html_cli.core.highlight import HighlightConfig, pair_changes, render_run
from diff2html_cli.output._html import (
    EMPTY_CLASS,
    INFO_CLASS,
    code_line,
    empty_file_message,
    file_header,
    file_id,
    line_class,
    number,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diff2html_cli.core.models import DiffFile, DiffLine


class SideBySideRenderer:
    """Renders each file as two tables: old version left, new version right.

    Deleted lines are aligned row by row with the inserted lines that
    replace them; the shorter side is padded with empty placeholders.
    """

    def __init__(self, config: HighlightConfig | None = None) -> None:
        self._config = config or HighlightConfig()

    def render(self, files: Sequence[DiffFile]) -> str:
        """Render all files into one ``d2h-wrapper`` fragment."""
        body = "".join(self._render_file(diff_file) for diff_file in files)
        return f'<div class="d2h-wrapper">\n{body}</div>\n'

    def _render_file(self, diff_file: DiffFile) -> str:
        left: list[str] = []
        right: list[str] = []
        if not diff_file.blocks:
            message = empty_file_message(diff_file)
            left.append(self._info_row(message))
            right.append(self._info_row(""))

        for block in diff_file.blocks:
            left.append(self._info_row(block.header))
            right.append(self._info_row(""))
            for run in pair_changes(block.lines):
                if run.context is not None:
                    content = html.escape(run.context.content)
                    left.append(self._row(run.context, run.context.old_number, content))
                    right.append(self._row(run.context, run.context.new_number, content))
                    continue
                old_html, new_html = render_run(run.deleted, run.inserted, self._config)
                old_side = zip(run.deleted, old_html)
                new_side = zip(run.inserted, new_html)
                for old, new in zip_longest(old_side, new_side):
                    if old is None:
                        left.append(self._empty_row())
                    else:
                        left.append(self._row(old[0], old[0].old_number, old[1]))
                    if new is None:
                        right.append(self._empty_row())
                    else:
                        right.append(self._row(new[0], new[0].new_number, new[1]))

        return (
            f'<div id="{file_id(diff_file)}" class="d2h-file-wrapper" '
            f'data-lang="{html.escape(diff_file.language)}">\n'
            f"{file_header(diff_file)}"
            '<div class="d2h-files-diff">\n'
            f"{self._side(left)}"
            f"{self._side(right)}"
            "</div>\n"
            "</div>\n"
        )

    @staticmethod
    def _side(rows: list[str]) -> str:
        return (
            '<div class="d2h-file-side-diff"><div class="d2h-code-wrapper">'
            '<table class="d2h-diff-table"><tbody class="d2h-diff-tbody">\n'
            f"{''.join(rows)}"
            "</tbody></table></div></div>\n"
        )

    @staticmethod
    def _info_row(text: str) -> str:
        return (
            f'<tr><td class="d2h-code-side-linenumber {INFO_CLASS}"></td>'
            f'<td class="{INFO_CLASS}"><div class="d2h-code-side-line {INFO_CLASS}">'
            f"{html.escape(text)}</div></td></tr>\n"
        )

    @staticmethod
    def _empty_row() -> str:
        return (
            f'<tr><td class="d2h-code-side-linenumber {EMPTY_CLASS}"></td>'
            f'<td class="{EMPTY_CLASS}"><div class="d2h-code-side-line {EMPTY_CLASS}">'
            "</div></td></tr>\n"
        )

    @staticmethod
    def _row(line: DiffLine, line_number: int | None, content_html: str) -> str:
        css_class = line_class(line.type)
        return (
            f'<tr><td class="d2h-code-side-linenumber {css_class}">{number(line_number)}</td>'
            f'<td class="{css_class}">{code_line(line.prefix, content_html, css_class)}</td>'
            "</tr>\n"
        )
