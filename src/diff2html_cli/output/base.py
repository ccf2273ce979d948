"""Renderer protocol for diff output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diff2html_cli.core.models import DiffFile


@runtime_checkable
class Renderer(Protocol):
    """Protocol for rendering parsed diffs.

    Implementations take the parsed files and return the rendered text
    (an HTML fragment or a JSON document). Delivery is left to the caller.
    """

    def render(self, files: Sequence[DiffFile]) -> str:
        """Render the parsed files."""
        ...
