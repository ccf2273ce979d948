"""Public API for diff2html_cli.output."""

from __future__ import annotations

from diff2html_cli.output.base import Renderer
from diff2html_cli.output.json_output import JsonRenderer
from diff2html_cli.output.line_by_line import LineByLineRenderer
from diff2html_cli.output.side_by_side import SideBySideRenderer
from diff2html_cli.output.template import prepare_html

__all__ = [
    "JsonRenderer",
    "LineByLineRenderer",
    "Renderer",
    "SideBySideRenderer",
    "prepare_html",
]
