"""Public API for diff2html_cli.core."""

from __future__ import annotations

from diff2html_cli.core.highlight import (
    ChangeRun,
    DiffGranularity,
    HighlightConfig,
    highlight_pair,
    pair_changes,
    render_run,
)
from diff2html_cli.core.models import DiffBlock, DiffFile, DiffLine, LineType
from diff2html_cli.core.parser import DiffParser, parse_diff

__all__ = [
    "ChangeRun",
    "DiffBlock",
    "DiffFile",
    "DiffGranularity",
    "DiffLine",
    "DiffParser",
    "HighlightConfig",
    "LineType",
    "highlight_pair",
    "pair_changes",
    "parse_diff",
    "render_run",
]
