"""Single-column HTML renderer."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from diff2html_cli.core.highlight import HighlightConfig, pair_changes, render_run
from diff2html_cli.core.models import LineType
from diff2html_cli.output._html import (
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

    from diff2html_cli.core.models import DiffBlock, DiffFile, DiffLine


class LineByLineRenderer:
    """Renders each file as one table with old and new line numbers side by side.

    Paired deleted/inserted lines carry intra-line ``<del>``/``<ins>``
    highlighting at the configured granularity.
    """

    def __init__(self, config: HighlightConfig | None = None) -> None:
        self._config = config or HighlightConfig()

    def render(self, files: Sequence[DiffFile]) -> str:
        """Render all files into one ``d2h-wrapper`` fragment."""
        body = "".join(self._render_file(diff_file) for diff_file in files)
        return f'<div class="d2h-wrapper">\n{body}</div>\n'

    def _render_file(self, diff_file: DiffFile) -> str:
        if diff_file.blocks:
            rows = "".join(self._render_block(block) for block in diff_file.blocks)
        else:
            rows = self._info_row(empty_file_message(diff_file))
        return (
            f'<div id="{file_id(diff_file)}" class="d2h-file-wrapper" '
            f'data-lang="{html.escape(diff_file.language)}">\n'
            f"{file_header(diff_file)}"
            '<div class="d2h-file-diff"><div class="d2h-code-wrapper">'
            '<table class="d2h-diff-table"><tbody class="d2h-diff-tbody">\n'
            f"{rows}"
            "</tbody></table></div></div>\n"
            "</div>\n"
        )

    def _render_block(self, block: DiffBlock) -> str:
        rows = [self._info_row(block.header)]
        for run in pair_changes(block.lines):
            if run.context is not None:
                rows.append(self._row(run.context, html.escape(run.context.content)))
                continue
            old_html, new_html = render_run(run.deleted, run.inserted, self._config)
            rows.extend(self._row(line, ctn) for line, ctn in zip(run.deleted, old_html))
            rows.extend(self._row(line, ctn) for line, ctn in zip(run.inserted, new_html))
        return "".join(rows)

    @staticmethod
    def _info_row(text: str) -> str:
        return (
            f'<tr><td class="d2h-code-linenumber {INFO_CLASS}"></td>'
            f'<td class="{INFO_CLASS}"><div class="d2h-code-line {INFO_CLASS}">'
            f"{html.escape(text)}</div></td></tr>\n"
        )

    @staticmethod
    def _row(line: DiffLine, content_html: str) -> str:
        css_class = line_class(line.type)
        old_number = "" if line.type == LineType.insert else number(line.old_number)
        new_number = "" if line.type == LineType.delete else number(line.new_number)
        return (
            f'<tr><td class="d2h-code-linenumber {css_class}">'
            f'<div class="line-num1">{old_number}</div>'
            f'<div class="line-num2">{new_number}</div></td>'
            f'<td class="{css_class}">{code_line(line.prefix, content_html, css_class)}</td>'
            "</tr>\n"
        )
