"""Tests for diff2html_cli.output.line_by_line."""

from __future__ import annotations

from diff2html_cli.core.highlight import HighlightConfig
from diff2html_cli.core.parser import parse_diff
from diff2html_cli.output.base import Renderer
from diff2html_cli.output.line_by_line import LineByLineRenderer


class TestLineByLineRenderer:
    """Verify single-column HTML output."""

    def test_satisfies_renderer_protocol(self) -> None:
        assert isinstance(LineByLineRenderer(), Renderer)

    def test_wraps_files(self, sample_diff: str) -> None:
        html = LineByLineRenderer().render(parse_diff(sample_diff))
        assert html.startswith('<div class="d2h-wrapper">')
        assert html.count('class="d2h-file-wrapper"') == 1

    def test_file_header(self, sample_diff: str) -> None:
        html = LineByLineRenderer().render(parse_diff(sample_diff))
        assert '<span class="d2h-file-name">sample.txt</span>' in html
        assert "CHANGED" in html
        assert "+1" in html

    def test_rows_carry_line_classes(self, sample_diff: str) -> None:
        html = LineByLineRenderer().render(parse_diff(sample_diff))
        assert 'class="d2h-del"' in html
        assert 'class="d2h-ins"' in html
        assert "@@ -1 +1 @@" in html

    def test_char_highlight(self, sample_diff: str) -> None:
        config = HighlightConfig(word_by_word=False, char_by_char=True)
        html = LineByLineRenderer(config).render(parse_diff(sample_diff))
        assert "test<ins>1</ins>" in html

    def test_word_highlight(self, sample_diff: str) -> None:
        html = LineByLineRenderer().render(parse_diff(sample_diff))
        assert "<del>test</del>" in html
        assert "<ins>test1</ins>" in html

    def test_context_lines_have_both_numbers(self, multi_file_diff: str) -> None:
        html = LineByLineRenderer().render(parse_diff(multi_file_diff)[:1])
        assert '<div class="line-num1">1</div><div class="line-num2">1</div>' in html

    def test_escapes_content(self) -> None:
        diff = "--- a/x.html\n+++ b/x.html\n@@ -1 +1 @@\n-<p>\n+<div>\n"
        html = LineByLineRenderer().render(parse_diff(diff))
        assert "<p>" not in html
        assert "&lt;<ins>div</ins>&gt;" in html

    def test_file_without_blocks_shows_message(self, multi_file_diff: str) -> None:
        renamed = parse_diff(multi_file_diff)[3:]
        html = LineByLineRenderer().render(renamed)
        assert "File renamed without changes" in html
        assert "RENAMED" in html

    def test_empty_input_renders_empty_wrapper(self) -> None:
        assert LineByLineRenderer().render(()) == '<div class="d2h-wrapper">\n</div>\n'
