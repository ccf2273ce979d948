"""Tests for diff2html_cli.output.json_output."""

from __future__ import annotations

import json

from diff2html_cli.core.parser import parse_diff
from diff2html_cli.output.base import Renderer
from diff2html_cli.output.json_output import JsonRenderer


class TestJsonRenderer:
    """Verify JSON serialization of parsed diffs."""

    def test_satisfies_renderer_protocol(self) -> None:
        assert isinstance(JsonRenderer(), Renderer)

    def test_top_level_is_list_of_files(self, sample_diff: str) -> None:
        data = json.loads(JsonRenderer().render(parse_diff(sample_diff)))
        assert isinstance(data, list)
        assert len(data) == 1
        assert data[0]["new_name"] == "sample.txt"

    def test_enums_serialize_as_strings(self, sample_diff: str) -> None:
        data = json.loads(JsonRenderer().render(parse_diff(sample_diff)))
        types = [line["type"] for line in data[0]["blocks"][0]["lines"]]
        assert types == ["delete", "insert"]

    def test_compact_by_default(self, sample_diff: str) -> None:
        text = JsonRenderer().render(parse_diff(sample_diff))
        assert "\n" not in text

    def test_custom_indent(self, sample_diff: str) -> None:
        text = JsonRenderer(indent=4).render(parse_diff(sample_diff))
        assert '\n    {' in text or '\n    "' in text

    def test_roundtrip_preserves_structure(self, multi_file_diff: str) -> None:
        files = parse_diff(multi_file_diff)
        data = json.loads(JsonRenderer().render(files))
        assert json.loads(json.dumps(data)) == data
        assert len(data) == len(files)
        first_line = data[0]["blocks"][0]["lines"][0]
        assert first_line == {
            "type": "context",
            "content": "import os",
            "old_number": 1,
            "new_number": 1,
        }

    def test_empty_input(self) -> None:
        assert JsonRenderer().render(()) == "[]"
