"""Packaging of rendered HTML into a standalone page."""

from __future__ import annotations

from pathlib import Path

from diff2html_cli.errors import TemplateError
from diff2html_cli.system.files import read_text

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
TEMPLATE_PATH = ASSETS_DIR / "template.html"
CSS_PATH = ASSETS_DIR / "diff2html.css"

CSS_PLACEHOLDER = "<!--css-->"
DIFF_PLACEHOLDER = "<!--diff-->"


def _load_asset(path: Path) -> str:
    try:
        return read_text(path)
    except OSError as exc:
        msg = f"Could not load HTML asset '{path}': {exc.strerror or exc}"
        raise TemplateError(msg) from exc


def prepare_html(
    fragment: str,
    *,
    template_path: Path = TEMPLATE_PATH,
    css_path: Path = CSS_PATH,
) -> str:
    """Embed an HTML diff fragment and the stylesheet into the page template.

    Raises:
        TemplateError: If the template or the stylesheet is missing.
    """
    template = _load_asset(template_path)
    css = _load_asset(css_path)
    return template.replace(CSS_PLACEHOLDER, f"<style>\n{css}\n</style>", 1).replace(
        DIFF_PLACEHOLDER, fragment, 1
    )
