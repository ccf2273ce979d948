"""Tests for diff2html_cli.core public API re-exports."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, is_dataclass
from enum import StrEnum

import pytest

import diff2html_cli.core as core
from diff2html_cli.core import highlight, models, parser

EXPECTED_NAMES = {
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
}


class TestAllExports:
    """Verify __all__ matches the expected public API surface."""

    def test_all_contains_expected_names(self) -> None:
        assert set(core.__all__) == EXPECTED_NAMES

    def test_all_names_are_importable(self) -> None:
        for name in core.__all__:
            assert hasattr(core, name), f"{name} listed in __all__ but not importable"


class TestReExportIdentity:
    """Verify re-exports are the same objects as the originals."""

    def test_models_are_identical(self) -> None:
        assert core.LineType is models.LineType
        assert core.DiffLine is models.DiffLine
        assert core.DiffBlock is models.DiffBlock
        assert core.DiffFile is models.DiffFile

    def test_parser_is_identical(self) -> None:
        assert core.parse_diff is parser.parse_diff
        assert core.DiffParser is parser.DiffParser

    def test_highlight_is_identical(self) -> None:
        assert core.HighlightConfig is highlight.HighlightConfig
        assert core.DiffGranularity is highlight.DiffGranularity


class TestReExportTypes:
    """Verify re-exported symbols have the expected types."""

    def test_enums_are_str_enums(self) -> None:
        for cls in (core.LineType, core.DiffGranularity):
            assert issubclass(cls, StrEnum), f"{cls.__name__} is not a StrEnum"

    @pytest.mark.parametrize(
        "instance",
        [
            core.DiffLine(core.LineType.context, "x", 1, 1),
            core.DiffBlock("@@ -1 +1 @@", 1, 1, ()),
            core.DiffFile("a", "a", "", 0, 0),
            core.HighlightConfig(),
            core.ChangeRun(),
        ],
    )
    def test_dataclasses_are_frozen(self, instance: object) -> None:
        assert is_dataclass(instance)
        with pytest.raises(FrozenInstanceError):
            instance.__setattr__("content", "changed")
