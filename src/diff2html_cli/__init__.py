"""diff2html-cli: render diffs as pretty HTML or JSON."""

from __future__ import annotations

__version__ = "0.1.0"
