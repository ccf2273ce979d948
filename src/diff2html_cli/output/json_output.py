"""JSON export renderer."""

from __future__ import annotations

import dataclasses
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diff2html_cli.core.models import DiffFile


class JsonRenderer:
    """Renders parsed diffs as a JSON array with one object per file.

    Output is compact by default; pass ``indent`` for pretty-printing.
    Line types are StrEnum members and serialize as their string values.
    """

    def __init__(self, *, indent: int | None = None) -> None:
        """Initialize the renderer.

        Args:
            indent: JSON indentation level. Defaults to compact output.
        """
        self._indent = indent

    def render(self, files: Sequence[DiffFile]) -> str:
        """Serialize the parsed files as a JSON document."""
        return json.dumps(self.to_data(files), indent=self._indent)

    @staticmethod
    def to_data(files: Sequence[DiffFile]) -> list[dict[str, object]]:
        """Return the JSON-serializable structure for *files*."""
        return [dataclasses.asdict(diff_file) for diff_file in files]
