"""Command-line interface for diff2html-cli."""
