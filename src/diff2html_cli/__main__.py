"""Allow ``python -m diff2html_cli``."""

from diff2html_cli.cli.app import app

app()
