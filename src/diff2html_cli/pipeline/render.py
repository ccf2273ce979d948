"""Render dispatch: raw diff to a packaged HTML page or a JSON document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from diff2html_cli.core.highlight import HighlightConfig
from diff2html_cli.core.parser import parse_diff
from diff2html_cli.output.json_output import JsonRenderer
from diff2html_cli.output.line_by_line import LineByLineRenderer
from diff2html_cli.output.side_by_side import SideBySideRenderer
from diff2html_cli.output.template import prepare_html
from diff2html_cli.pipeline.config import Layout, OutputFormat, RenderedArtifact

if TYPE_CHECKING:
    from diff2html_cli.output.base import Renderer
    from diff2html_cli.pipeline.config import RenderConfig

logger = logging.getLogger(__name__)


def _get_renderer(config: RenderConfig) -> Renderer:
    """Get the renderer for the configured format and layout."""
    if config.format == OutputFormat.json:
        return JsonRenderer()

    highlight = HighlightConfig.from_granularity(config.granularity)
    if config.layout == Layout.side:
        return SideBySideRenderer(highlight)
    return LineByLineRenderer(highlight)


def render(raw: str, config: RenderConfig) -> RenderedArtifact:
    """Render *raw* according to *config*.

    HTML output is wrapped in the page template with the stylesheet
    inlined.

    Raises:
        TemplateError: If an HTML asset is missing.
    """
    files = parse_diff(raw)
    logger.debug(
        "Rendering %d file(s) as %s (%s, %s)",
        len(files),
        config.format,
        config.layout,
        config.granularity,
    )
    content = _get_renderer(config).render(files)
    if config.format == OutputFormat.html:
        content = prepare_html(content)
    return RenderedArtifact(content=content, format=config.format)
