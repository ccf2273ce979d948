"""Tests for diff2html_cli.system.files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from diff2html_cli.system.files import read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path


class TestFiles:
    """Verify text reads and writes."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        target = write_text(tmp_path / "out.txt", "héllo\n")
        assert target == tmp_path / "out.txt"
        assert read_text(target) == "héllo\n"

    def test_read_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "missing.diff")

    def test_write_into_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_text(tmp_path / "no" / "such" / "dir.txt", "x")
